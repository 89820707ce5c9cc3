r"""Defines the abstract measures, and the evaluation protocol of continuous measures.

A continuous measure is defined by a weight function, $d\mu = w(x) dx$. Evaluation of
$w$ proceeds in two phases:

1.  The point $x$ and the measure are promoted to a common domain type (see
    [`promote_domain_types`][orthomeasures.promote_domain_types]).
2.  If $x$ lies in the [`support`][orthomeasures.AbstractMeasure.support] of the
    measure, the measure's [`unsafe_weight`][orthomeasures.AbstractWeight.unsafe_weight]
    formula is returned, otherwise zero.

Hence the weight formulae of concrete measures only ever receive points of their own
domain type that lie within their support.
"""

import abc
import logging
from collections.abc import Callable

import equinox as eqx

from ._custom_types import DTypeLike, PointLike, WeightValue
from ._domains import AbstractDomain, FullSpace
from ._errors import UnsupportedOperationError
from ._types import (
    DomainType,
    VectorType,
    as_domain_type,
    convert_point,
    domain_type_of,
    prectype,
    promote_domain_types,
    same_domain_type,
    zero,
)

logger = logging.getLogger(__name__)


class AbstractMeasure(eqx.Module):
    r"""Abstract base class for all measures $\mu$ over points of type
    [`domain_type`][orthomeasures.AbstractMeasure].

    Measures are immutable. A measure with a different domain type is obtained with
    [`similar`][orthomeasures.AbstractMeasure.similar].

    Attributes:
        domain_type: the type $T$ of the points the measure accepts.
    """

    domain_type: eqx.AbstractVar[DomainType]

    @property
    def codomain_type(self):
        """The scalar type of the weights of the measure; the
        [`prectype`][orthomeasures.prectype] of the domain type."""
        return prectype(self.domain_type)

    @property
    def support(self) -> AbstractDomain:
        """The domain outside of which the measure vanishes. Defaults to the full
        space."""
        return FullSpace(self.domain_type)

    @property
    def is_normalized(self) -> bool:
        """If the measure of the entire domain is one."""
        return False

    @property
    @abc.abstractmethod
    def is_discrete(self) -> bool:
        ...

    @property
    @abc.abstractmethod
    def is_continuous(self) -> bool:
        ...

    @abc.abstractmethod
    def similar(self, domain_type: DTypeLike | VectorType) -> "AbstractMeasure":
        """Returns an equivalent measure over points of type `domain_type`."""
        ...

    def convert(self, domain_type: DTypeLike | VectorType) -> "AbstractMeasure":
        """Returns `self` if its domain type is `domain_type`, and an equivalent
        measure over points of type `domain_type` otherwise."""
        domain_type = as_domain_type(domain_type)
        if same_domain_type(self.domain_type, domain_type):
            return self
        return self.similar(domain_type)


class AbstractWeight(AbstractMeasure):
    r"""Abstract base class for continuous measures defined by a weight function,
    $d\mu = w(x) dx$.

    Example:
        ```python
        class Measure(AbstractWeight):
            domain_type: np.dtype = eqx.field(static=True, default=np.dtype(float))

            @property
            def support(self):
                return orthomeasures.UnitInterval(self.domain_type)

            def similar(self, domain_type):
                return Measure(domain_type)

            def unsafe_weight(self, x):
                return 2 * x

        measure = Measure()
        measure.weight(0.5)
        # 1.0
        measure.weight(2)
        # 0.0
        ```
    """

    @property
    def is_discrete(self) -> bool:
        return False

    @property
    def is_continuous(self) -> bool:
        return True

    def weight(self, x: PointLike) -> WeightValue:
        """Evaluates the weight function $w(x)$.

        Args:
            x: a scalar or vector point, of any numeric type that can be promoted to
                a common type with the measure's domain type.

        Returns:
            $w(x)$ as a scalar of the (promoted) codomain type; zero if $x$ is not in
                the support of the measure.

        Raises:
            TypePromotionError: `x` has no common type with the measure's domain type.
        """
        domain_type = self.domain_type
        if isinstance(domain_type, VectorType) and domain_type.dimension is not None:
            # Fixed size vectors are taken to already have a matching element type.
            return self._gated_weight(convert_point(x, domain_type))
        point_type = domain_type_of(x)
        if same_domain_type(point_type, domain_type):
            return self._gated_weight(convert_point(x, domain_type))
        promoted_type = promote_domain_types(point_type, domain_type)
        logger.debug(
            "Evaluating %s at a point of type %s as type %s.",
            type(self).__name__,
            point_type,
            promoted_type,
        )
        measure = self.convert(promoted_type)
        return measure.weight(convert_point(x, promoted_type))

    def _gated_weight(self, x: PointLike) -> WeightValue:
        if x in self.support:
            return self.unsafe_weight(x)
        return zero(self.codomain_type)

    def unsafe_weight(self, x: PointLike) -> WeightValue:
        """The weight formula $w(x)$, valid only for points `x` of the measure's domain
        type within its support.

        Raises:
            UnsupportedOperationError: the measure does not define a weight formula.
        """
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not define a weight function."
        )

    def weight_function(self) -> Callable[[PointLike], WeightValue]:
        r"""Returns the function $x \mapsto w(x)$, see
        [`weight`][orthomeasures.AbstractWeight.weight]."""
        return lambda x: self.weight(x)

    def unsafe_weight_function(self) -> Callable[[PointLike], WeightValue]:
        r"""Returns the function $x \mapsto$
        [`unsafe_weight`][orthomeasures.AbstractWeight.unsafe_weight]$(x)$."""
        return lambda x: self.unsafe_weight(x)


def weight_function(measure: AbstractWeight) -> Callable[[PointLike], WeightValue]:
    """Returns the safe weight function of a continuous `measure`.

    Example:
        ```python
        w = weight_function(orthomeasures.HermiteMeasure())
        w(0.0)
        # 1.0
        ```
    """
    return measure.weight_function()
