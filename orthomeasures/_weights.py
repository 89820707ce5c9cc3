r"""Defines the continuous measures of the classical orthogonal polynomials.

Each measure only defines its [`support`][orthomeasures.AbstractMeasure.support] and its
weight formula; promotion and support checking are performed by
[`AbstractWeight.weight`][orthomeasures.AbstractWeight.weight].
"""

from typing import Any

import equinox as eqx
import numpy as np

from ._custom_types import DTypeLike, FloatScalarLike, PointLike, WeightValue
from ._domains import (
    AbstractDomain,
    ChebyshevInterval,
    FullSpace,
    HalfLine,
    Interval,
    Point,
    UnitInterval,
)
from ._measures import AbstractWeight
from ._types import (
    DomainType,
    VectorType,
    as_domain_type,
    convert_point,
    domain_type_of,
    one,
    prectype,
    promote_domain_types,
)

_float64 = np.dtype(np.float64)


class AbstractLebesgueMeasure(AbstractWeight):
    r"""Abstract base class for the Lebesgue measure $d\mu = dx$ restricted to a
    support."""

    def unsafe_weight(self, x: PointLike) -> WeightValue:
        return one(self.codomain_type)


class LebesgueMeasure(AbstractLebesgueMeasure):
    """The Lebesgue measure on the full space of `domain_type`."""

    domain_type: DomainType = eqx.field(
        static=True, converter=as_domain_type, default=_float64
    )

    def similar(self, domain_type: DTypeLike | VectorType) -> "LebesgueMeasure":
        return LebesgueMeasure(domain_type)


class UnitLebesgueMeasure(AbstractLebesgueMeasure):
    r"""The Lebesgue measure on the unit interval $[0, 1]$; a probability measure."""

    domain_type: DomainType = eqx.field(
        static=True, converter=as_domain_type, default=_float64
    )

    @property
    def support(self) -> UnitInterval:
        return UnitInterval(self.domain_type)

    @property
    def is_normalized(self) -> bool:
        return True

    def similar(self, domain_type: DTypeLike | VectorType) -> "UnitLebesgueMeasure":
        return UnitLebesgueMeasure(domain_type)


class LegendreMeasure(AbstractLebesgueMeasure):
    r"""The Lebesgue measure on $[-1, 1]$, for which the Legendre polynomials are
    orthogonal."""

    domain_type: DomainType = eqx.field(
        static=True, converter=as_domain_type, default=_float64
    )

    @property
    def support(self) -> ChebyshevInterval:
        return ChebyshevInterval(self.domain_type)

    def similar(self, domain_type: DTypeLike | VectorType) -> "LegendreMeasure":
        return LegendreMeasure(domain_type)


class DomainLebesgueMeasure(AbstractLebesgueMeasure):
    """The Lebesgue measure restricted to an arbitrary `domain`.

    Attributes:
        domain: any object supporting `x in domain`; usually an
            [`AbstractDomain`][orthomeasures.AbstractDomain].
    """

    domain: Any
    domain_type: DomainType = eqx.field(static=True)

    def __init__(self, domain: Any, domain_type: DTypeLike | VectorType | None = None):
        """
        Args:
            domain: the support of the measure.
            domain_type: the type of the points of `domain`. Taken from
                `domain.domain_type` if `None`, and `float64` if `domain` has none.
        """
        if domain_type is None:
            domain_type = getattr(domain, "domain_type", _float64)
        self.domain_type = as_domain_type(domain_type)
        self.domain = domain

    @property
    def support(self) -> Any:
        return self.domain

    def similar(self, domain_type: DTypeLike | VectorType) -> "DomainLebesgueMeasure":
        domain = self.domain
        if isinstance(domain, AbstractDomain):
            domain = domain.similar(domain_type)
        return DomainLebesgueMeasure(domain, domain_type)


def _is_interval(domain: Any, left: float, right: float) -> bool:
    return isinstance(domain, Interval) and (domain.left, domain.right) == (left, right)


def lebesgue_measure(domain: Any) -> AbstractLebesgueMeasure:
    """Returns the Lebesgue measure on `domain`, as the most specific
    [`AbstractLebesgueMeasure`][orthomeasures.AbstractLebesgueMeasure] for its shape.

    Example:
        ```python
        lebesgue_measure(orthomeasures.UnitInterval())
        # UnitLebesgueMeasure(domain_type=dtype('float64'))

        lebesgue_measure(orthomeasures.Interval(-1.0, 1.0))
        # LegendreMeasure(domain_type=dtype('float64'))

        lebesgue_measure(orthomeasures.HalfLine())
        # DomainLebesgueMeasure(domain=HalfLine(...), domain_type=dtype('float64'))
        ```
    """
    domain_type = getattr(domain, "domain_type", _float64)
    if isinstance(domain, UnitInterval) or _is_interval(domain, 0.0, 1.0):
        return UnitLebesgueMeasure(domain_type)
    if isinstance(domain, ChebyshevInterval) or _is_interval(domain, -1.0, 1.0):
        return LegendreMeasure(domain_type)
    if isinstance(domain, FullSpace):
        return LebesgueMeasure(domain_type)
    return DomainLebesgueMeasure(domain, domain_type)


def _parameter_type(*parameters: FloatScalarLike) -> np.dtype:
    parameter_type = domain_type_of(parameters[0])
    for parameter in parameters[1:]:
        parameter_type = promote_domain_types(domain_type_of(parameter), parameter_type)
    return prectype(parameter_type)


class JacobiMeasure(AbstractWeight):
    r"""The Jacobi measure $w(x) = (1+x)^\alpha (1-x)^\beta$ on $[-1, 1]$.

    Attributes:
        alpha: the exponent $\alpha$ of $(1+x)$.
        beta: the exponent $\beta$ of $(1-x)$.
    """

    alpha: FloatScalarLike
    beta: FloatScalarLike
    domain_type: DomainType = eqx.field(static=True)

    def __init__(
        self,
        alpha: FloatScalarLike,
        beta: FloatScalarLike,
        domain_type: DTypeLike | VectorType | None = None,
    ):
        """
        Args:
            alpha: the exponent $\\alpha > -1$.
            beta: the exponent $\\beta > -1$.
            domain_type: the type of the points of the measure. Defaults to the common
                float type of `alpha` and `beta`.
        """
        if domain_type is None:
            domain_type = _parameter_type(alpha, beta)
        self.domain_type = as_domain_type(domain_type)
        self.alpha = convert_point(alpha, prectype(self.domain_type))
        self.beta = convert_point(beta, prectype(self.domain_type))

    @property
    def support(self) -> ChebyshevInterval:
        return ChebyshevInterval(self.domain_type)

    def similar(self, domain_type: DTypeLike | VectorType) -> "JacobiMeasure":
        return JacobiMeasure(self.alpha, self.beta, domain_type)

    def unsafe_weight(self, x: PointLike) -> WeightValue:
        value = (1 + x) ** self.alpha * (1 - x) ** self.beta
        return self.codomain_type.type(value)


def chebyshev_t_measure(
    domain_type: DTypeLike | VectorType = _float64,
) -> JacobiMeasure:
    r"""The measure $w(x) = (1-x^2)^{-1/2}$ of the Chebyshev polynomials of the first
    kind; the [`JacobiMeasure`][orthomeasures.JacobiMeasure] with
    $\alpha = \beta = -1/2$."""
    return JacobiMeasure(-0.5, -0.5, domain_type)


def chebyshev_u_measure(
    domain_type: DTypeLike | VectorType = _float64,
) -> JacobiMeasure:
    r"""The measure $w(x) = (1-x^2)^{1/2}$ of the Chebyshev polynomials of the second
    kind; the [`JacobiMeasure`][orthomeasures.JacobiMeasure] with
    $\alpha = \beta = 1/2$."""
    return JacobiMeasure(0.5, 0.5, domain_type)


class LaguerreMeasure(AbstractWeight):
    r"""The generalized Laguerre measure $w(x) = e^{-x} x^\alpha$ on $[0, \infty)$.

    Attributes:
        alpha: the exponent $\alpha$.
    """

    alpha: FloatScalarLike
    domain_type: DomainType = eqx.field(static=True)

    def __init__(
        self,
        alpha: FloatScalarLike = 0.0,
        domain_type: DTypeLike | VectorType | None = None,
    ):
        """
        Args:
            alpha: the exponent $\\alpha > -1$.
            domain_type: the type of the points of the measure. Defaults to the float
                type of `alpha`.
        """
        if domain_type is None:
            domain_type = _parameter_type(alpha)
        self.domain_type = as_domain_type(domain_type)
        self.alpha = convert_point(alpha, prectype(self.domain_type))

    @property
    def support(self) -> HalfLine:
        return HalfLine(self.domain_type)

    @property
    def is_normalized(self) -> bool:
        return bool(self.alpha == 0)

    def similar(self, domain_type: DTypeLike | VectorType) -> "LaguerreMeasure":
        return LaguerreMeasure(self.alpha, domain_type)

    def unsafe_weight(self, x: PointLike) -> WeightValue:
        return self.codomain_type.type(np.exp(-x) * x**self.alpha)


class HermiteMeasure(AbstractWeight):
    r"""The Hermite measure $w(x) = e^{-\|x\|^2}$ on $\mathbb{R}^d$.

    This is the *"physicist's"* Hermite measure, which is not normalized.
    """

    domain_type: DomainType = eqx.field(
        static=True, converter=as_domain_type, default=_float64
    )

    def similar(self, domain_type: DTypeLike | VectorType) -> "HermiteMeasure":
        return HermiteMeasure(domain_type)

    def unsafe_weight(self, x: PointLike) -> WeightValue:
        return self.codomain_type.type(np.exp(-np.sum(np.abs(x) ** 2)))


class GaussianMeasure(AbstractWeight):
    r"""The Gaussian measure $w(x) = (2\pi)^{-d/2}\exp(-\|x\|^2)$ on $\mathbb{R}^d$.

    The dimension $d$ is the length of the point $x$; one for scalar points.
    """

    domain_type: DomainType = eqx.field(
        static=True, converter=as_domain_type, default=_float64
    )

    @property
    def is_normalized(self) -> bool:
        return True

    def similar(self, domain_type: DTypeLike | VectorType) -> "GaussianMeasure":
        return GaussianMeasure(domain_type)

    def unsafe_weight(self, x: PointLike) -> WeightValue:
        dimension = np.size(x)
        squared_norm = np.sum(np.abs(x) ** 2)
        value = (2 * np.pi) ** (-dimension / 2) * np.exp(-squared_norm)
        return self.codomain_type.type(value)


class DiracMeasure(AbstractWeight):
    r"""The Dirac measure $\delta_p$ with all of its mass at the `point` $p$.

    !!! warning

        $\delta_p$ is not a weight function. Its weight is `inf` at $p$ and zero
        elsewhere; `inf` is a sentinel, not a value to compute with.

    Attributes:
        point: the point $p$.
    """

    point: PointLike
    domain_type: DomainType = eqx.field(static=True)

    def __init__(
        self, point: PointLike, domain_type: DTypeLike | VectorType | None = None
    ):
        """
        Args:
            point: the point $p$.
            domain_type: the type of the points of the measure. Inferred from `point`
                if `None`.
        """
        if domain_type is None:
            domain_type = domain_type_of(point)
        self.domain_type = as_domain_type(domain_type)
        self.point = convert_point(point, self.domain_type)

    @property
    def support(self) -> Point:
        return Point(self.point, self.domain_type)

    @property
    def is_normalized(self) -> bool:
        return True

    def similar(self, domain_type: DTypeLike | VectorType) -> "DiracMeasure":
        return DiracMeasure(self.point, domain_type)

    def unsafe_weight(self, x: PointLike) -> WeightValue:
        return self.codomain_type.type(np.inf)
