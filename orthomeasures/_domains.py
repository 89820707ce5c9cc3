"""Defines the domains which form the supports of measures.

Domains only answer membership queries, `x in domain`, for points which have already
been converted to the domain's [`domain_type`][orthomeasures.AbstractDomain].
"""

import abc

import equinox as eqx
import numpy as np

from ._custom_types import DTypeLike, PointLike
from ._types import (
    DomainType,
    VectorType,
    as_domain_type,
    convert_point,
    domain_type_of,
)

_float64 = np.dtype(np.float64)


class AbstractDomain(eqx.Module):
    """Abstract base class for all domains.

    Attributes:
        domain_type: the type of the points in the domain.
    """

    domain_type: eqx.AbstractVar[DomainType]

    @abc.abstractmethod
    def __contains__(self, x: PointLike) -> bool:
        ...

    @abc.abstractmethod
    def similar(self, domain_type: DTypeLike | VectorType) -> "AbstractDomain":
        """Returns the same domain, with points of type `domain_type`."""
        ...


class FullSpace(AbstractDomain):
    """The space of all points of type `domain_type`."""

    domain_type: DomainType = eqx.field(
        static=True, converter=as_domain_type, default=_float64
    )

    def __contains__(self, x: PointLike) -> bool:
        return True

    def similar(self, domain_type: DTypeLike | VectorType) -> "FullSpace":
        return FullSpace(domain_type)


class AbstractInterval(AbstractDomain):
    r"""Abstract base class for closed intervals $[a, b]$ of the real line."""

    left: eqx.AbstractVar[float]
    right: eqx.AbstractVar[float]

    def __contains__(self, x: PointLike) -> bool:
        if np.ndim(x) != 0 or np.iscomplexobj(x):
            return False
        return bool(self.left <= x <= self.right)


class Interval(AbstractInterval):
    r"""The closed interval $[a, b]$, with $a$ = `left` and $b$ = `right`."""

    left: float
    right: float
    domain_type: DomainType = eqx.field(
        static=True, converter=as_domain_type, default=_float64
    )

    def __check_init__(self):
        if self.left > self.right:
            raise ValueError(
                f"Interval requires left <= right; got [{self.left}, {self.right}]."
            )

    def similar(self, domain_type: DTypeLike | VectorType) -> "Interval":
        return Interval(self.left, self.right, domain_type)


class UnitInterval(AbstractInterval):
    """The unit interval $[0, 1]$."""

    domain_type: DomainType = eqx.field(
        static=True, converter=as_domain_type, default=_float64
    )

    @property
    def left(self) -> float:
        return 0.0

    @property
    def right(self) -> float:
        return 1.0

    def similar(self, domain_type: DTypeLike | VectorType) -> "UnitInterval":
        return UnitInterval(domain_type)


class ChebyshevInterval(AbstractInterval):
    """The interval $[-1, 1]$ of the classical orthogonal polynomials."""

    domain_type: DomainType = eqx.field(
        static=True, converter=as_domain_type, default=_float64
    )

    @property
    def left(self) -> float:
        return -1.0

    @property
    def right(self) -> float:
        return 1.0

    def similar(self, domain_type: DTypeLike | VectorType) -> "ChebyshevInterval":
        return ChebyshevInterval(domain_type)


class HalfLine(AbstractInterval):
    r"""The half line $[0, \infty)$."""

    domain_type: DomainType = eqx.field(
        static=True, converter=as_domain_type, default=_float64
    )

    @property
    def left(self) -> float:
        return 0.0

    @property
    def right(self) -> float:
        return np.inf

    def similar(self, domain_type: DTypeLike | VectorType) -> "HalfLine":
        return HalfLine(domain_type)


class Point(AbstractDomain):
    """The domain consisting of the single `point`.

    Membership is exact (element-wise) equality with `point`.
    """

    point: PointLike
    domain_type: DomainType = eqx.field(static=True)

    def __init__(
        self, point: PointLike, domain_type: DTypeLike | VectorType | None = None
    ):
        """
        Args:
            point: the only element of the domain.
            domain_type: the type of `point`. Inferred from `point` if `None`.
        """
        if domain_type is None:
            domain_type = domain_type_of(point)
        self.domain_type = as_domain_type(domain_type)
        self.point = convert_point(point, self.domain_type)

    def __contains__(self, x: PointLike) -> bool:
        if np.shape(x) != np.shape(self.point):
            return False
        return bool(np.all(np.asarray(x) == self.point))

    def similar(self, domain_type: DTypeLike | VectorType) -> "Point":
        return Point(self.point, domain_type)
