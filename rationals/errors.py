"""
Errors raised by rational numbers.

Each error derives from the builtin exception one would expect for the same
situation, so callers may catch either.
"""


class InvalidDenominator(ValueError):
    """Rational constructed with zero denominator."""


class DivisionByZero(ZeroDivisionError):
    """Rational divided by zero."""


class ZeroHasNoReciprocal(ZeroDivisionError):
    """Reciprocal of zero requested."""


class UnsupportedRepresentation(TypeError):
    """Type can't hold numerator and denominator: it must be a signed integral type."""


class RepresentationOverflow(OverflowError):
    """Value does not fit into a fixed-width representation."""
