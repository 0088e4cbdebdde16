"""
Exact rational numbers, always kept in canonical form.

Canonical form: denominator > 0, gcd(|numerator|, denominator) = 1, zero is 0/1.
Every instance, including every arithmetic result, is created by the constructor,
which reduces the pair and moves the sign into the numerator.

Numerator and denominator are stored in an integral representation,
Python int by default; use Rational[numpy.int64] and the like for fixed width.
For fixed width it's up to the caller to choose a type wide enough for intermediate products.
"""

from __future__ import annotations
import numbers
import logging
from typing import Any, ClassVar, TypeVar

from quicktions import Fraction  # type: ignore

from .errors import InvalidDenominator, DivisionByZero, ZeroHasNoReciprocal
from .representations import IntegerRepr


logger = logging.getLogger(__name__)


def gcd_of(a, b):
    """
    Greatest common divisor by Euclidean algorithm.

    Works with signed values of any representation; the sign of result is not normalized.
    Result is zero iff both arguments are zero.
    """
    while b:
        a, b = b, a % b
    return a


class Rational:
    """
    Rational number numerator/denominator in canonical form.

    Immutable and hashable.
    Rational[I] is the same type with numerator and denominator of signed integral type I.
    """

    __slots__ = ('_numerator', '_denominator')

    representation: ClassVar[IntegerRepr] = IntegerRepr.of(int)
    _specializations: ClassVar[dict[IntegerRepr, type[Rational]]] = {}

    def __init__(self, numerator: Any = 0, denominator: Any = 1) -> None:
        """
        Create a rational equal to numerator/denominator.

        Raises InvalidDenominator if denominator is zero;
        see IntegerRepr.coerce for accepted values.
        """
        rep = self.representation
        n = rep.coerce(numerator)
        d = rep.coerce(denominator)
        if not d:
            raise InvalidDenominator("Denominator must not be zero!")

        g = gcd_of(n, d)
        n //= g
        d //= g
        if d < 0:
            n = -n
            d = -d

        self._numerator = n
        self._denominator = d

    def __class_getitem__(cls, int_type):
        rep = IntegerRepr.of(int_type)
        if rep == Rational.representation:
            return Rational

        # one class per representation, so that isinstance and operand checks are consistent
        specialized = Rational._specializations.get(rep)
        if specialized is None:
            name = 'Rational[{}]'.format(rep.name)
            specialized = type(name, (Rational,), {'__slots__': (), 'representation': rep, '__module__': __name__})
            Rational._specializations[rep] = specialized
            logger.debug('new specialization %s: %s', name, rep)
        return specialized

    @classmethod
    def from_fraction(cls, value) -> Rational:
        """Convert quicktions/fractions Fraction, or Rational of any representation."""
        if not isinstance(value, (numbers.Rational, Rational)):
            raise TypeError("Can't convert {!r} to {}".format(value, cls.__name__))
        return cls(value.numerator, value.denominator)

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    def as_fraction(self) -> Fraction:
        return Fraction(int(self._numerator), int(self._denominator))

    def _operand(self, other):
        # same representation, or integral value to be converted; None if not supported
        if type(other) is type(self):
            return other
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return type(self)(other)
        return None

    #
    # arithmetic
    #

    def __add__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return type(self)(
            self._numerator * other._denominator + self._denominator * other._numerator,
            self._denominator * other._denominator,
        )

    def __radd__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return other + self

    def __neg__(self):
        return type(self)(-1) * self

    def __pos__(self):
        return self

    def __abs__(self):
        return -self if self._numerator < 0 else self

    def __sub__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return type(self)(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def __rmul__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return other * self

    def __truediv__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        try:
            inverse = reciprocal_of(other)
        except ZeroHasNoReciprocal as exc:
            raise DivisionByZero("Division by zero!") from exc
        return self * inverse

    def __rtruediv__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return other / self

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
            return NotImplemented
        base = self if exponent >= 0 else reciprocal_of(self)
        result = type(self)(1)
        k = abs(int(exponent))
        # binary exponentiation; every step is a normalized product
        while k:
            if k & 1:
                result = result * base
            k >>= 1
            if k:
                base = base * base
        return result

    def inc(self):
        """Next value: self + 1."""
        return self + 1

    def dec(self):
        """Previous value: self - 1."""
        return self - 1

    #
    # comparison and conversion
    #

    def __eq__(self, other):
        # canonical form makes field comparison exact
        if type(other) is type(self):
            return bool(self._numerator == other._numerator and self._denominator == other._denominator)
        if isinstance(other, Rational):
            # other representation: equal values are equal, as they are for integral operands
            return (
                int(self._numerator) == int(other._numerator)
                and int(self._denominator) == int(other._denominator)
            )
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return bool(self._denominator == 1) and int(self._numerator) == int(other)
        return NotImplemented

    def __lt__(self, other):
        # denominators are positive, so cross multiplication keeps the order;
        # products are taken in int to avoid fixed-width overflow
        if type(other) is type(self):
            n, d = other._numerator, other._denominator
        elif isinstance(other, numbers.Integral) and not isinstance(other, bool):
            n, d = other, 1
        else:
            return NotImplemented
        return int(self._numerator) * int(d) < int(self._denominator) * int(n)

    def _is_greater(self, other):
        # other < self
        if type(other) is type(self):
            return other.__lt__(self)
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return int(other) * int(self._denominator) < int(self._numerator)
        return NotImplemented

    def __gt__(self, other):
        return self._is_greater(other)

    def __le__(self, other):
        result = self._is_greater(other)
        return result if result is NotImplemented else not result

    def __ge__(self, other):
        result = self.__lt__(other)
        return result if result is NotImplemented else not result

    def __bool__(self):
        return bool(self._numerator != 0)

    def __float__(self):
        return int(self._numerator) / int(self._denominator)

    def __hash__(self):
        # integral values hash as integers, to be consistent with __eq__
        if self._denominator == 1:
            return hash(int(self._numerator))
        return hash((int(self._numerator), int(self._denominator)))

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__, self._numerator, self._denominator)

    def __reduce__(self):
        return (_restore, (self.representation.int_type, int(self._numerator), int(self._denominator)))


def _restore(int_type, numerator, denominator):
    # unpickling helper: specializations are created on the fly and can't be pickled by name
    return Rational[int_type](numerator, denominator)


R = TypeVar('R', bound=Rational)


def reciprocal_of(value: R) -> R:
    """Multiplicative inverse denominator/numerator; raises ZeroHasNoReciprocal for zero."""
    if not value.numerator:
        raise ZeroHasNoReciprocal("Zero has no reciprocal!")
    return type(value)(value.denominator, value.numerator)
