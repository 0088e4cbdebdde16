"""
Integral representations of numerator and denominator.

Python int is unbounded; numpy signed integers give fixed-width representations.
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral
from typing import Any, ClassVar

import numpy

from .errors import UnsupportedRepresentation, RepresentationOverflow


@dataclass(frozen=True)
class IntegerRepr:
    """
    Signed integral type used to store numerator and denominator.

    Immutable and hashable; one instance per type, see IntegerRepr.of.
    For unbounded types bits, min_value and max_value are None.
    """

    int_type: type
    bits: int | None = None
    min_value: int | None = None
    max_value: int | None = None
    signed: bool = True

    _obj_cache: ClassVar[dict[type, IntegerRepr]] = {}

    @classmethod
    def of(cls, int_type: Any) -> IntegerRepr:
        """
        Get representation for a type, checking that the type is signed integral.

        Accepted: int (and its subclasses except bool), numpy.signedinteger subtypes.
        Raises UnsupportedRepresentation otherwise.
        """
        cache = cls._obj_cache
        if isinstance(int_type, type) and int_type in cache:
            return cache[int_type]

        if not isinstance(int_type, type):
            raise UnsupportedRepresentation(f"Representation must be a type, got {int_type!r}")
        if issubclass(int_type, bool):
            raise UnsupportedRepresentation("bool is not a representation")
        if issubclass(int_type, int):
            rep = cls(int_type)
        elif issubclass(int_type, numpy.signedinteger):
            # abstract numpy.signedinteger and timedelta64 have no fixed width
            try:
                info = numpy.iinfo(int_type)
            except ValueError as exc:
                raise UnsupportedRepresentation(f"{int_type.__name__} is not a fixed-width integer type") from exc
            rep = cls(int_type, bits=info.bits, min_value=int(info.min), max_value=int(info.max))
        elif issubclass(int_type, numpy.integer):
            raise UnsupportedRepresentation(f"{int_type.__name__} is unsigned")
        else:
            raise UnsupportedRepresentation(f"{int_type.__name__} is not a signed integral type")

        cache[int_type] = rep
        return rep

    @property
    def name(self) -> str:
        return self.int_type.__name__

    @property
    def is_unbounded(self) -> bool:
        return self.bits is None

    def coerce(self, value: Any) -> Any:
        """
        Convert an integral value to this representation.

        Fixed-width representations exclude min_value, because it can't be negated.
        """
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise TypeError(f"Integral value expected, got {value!r}")

        if self.is_unbounded:
            return value if type(value) is self.int_type else self.int_type(value)

        ivalue = int(value)
        if not self.min_value < ivalue <= self.max_value:
            raise RepresentationOverflow(
                f"{ivalue} is out of range ({self.min_value}, {self.max_value}] for {self.name}"
            )
        return value if type(value) is self.int_type else self.int_type(ivalue)
