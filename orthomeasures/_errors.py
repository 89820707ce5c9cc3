"""Exceptions raised by measures."""


class MeasureError(Exception):
    """Base class for all errors raised by [`orthomeasures`][]."""


class OutOfBoundsError(MeasureError, IndexError):
    """A discrete measure was indexed outside of `[0, len(measure))`."""


class TypePromotionError(MeasureError, TypeError):
    """Two domain types have no common type, or a point cannot be converted to a
    measure's domain type."""


class UnsupportedOperationError(MeasureError, NotImplementedError):
    """A measure was asked for a capability that it does not implement."""
