r"""Defines discrete measures $\mu = \sum_{j=1}^{n} \lambda_j \delta_{x_j}$, given by
points $x_j$ and weights $\lambda_j$.
"""

import operator
from typing import Any

import equinox as eqx
import numpy as np

from ._custom_types import DTypeLike, PointsLike, WeightsLike, WeightValue
from ._domains import AbstractDomain, FullSpace
from ._errors import OutOfBoundsError
from ._measures import AbstractMeasure
from ._types import DomainType, VectorType, as_domain_type, prectype


class AbstractDiscreteMeasure(AbstractMeasure):
    r"""Abstract base class for discrete measures.

    The support of a discrete measure may be a continuous domain that includes all of
    its points.

    Weights are accessed by 0-based index with
    [`weight`][orthomeasures.AbstractDiscreteMeasure.weight], which checks the index
    before calling
    [`unsafe_weight`][orthomeasures.AbstractDiscreteMeasure.unsafe_weight].
    Concrete measures may override the latter to compute weights on the fly.
    """

    points: eqx.AbstractVar[PointsLike]
    weights: eqx.AbstractVar[WeightsLike]

    @property
    def is_discrete(self) -> bool:
        return True

    @property
    def is_continuous(self) -> bool:
        return False

    @property
    def is_normalized(self) -> bool:
        """If the weights sum to one, up to floating point tolerance."""
        return bool(np.isclose(np.sum(self.weights), 1))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def shape(self) -> tuple[int, ...]:
        return np.shape(self.points)

    def check_bounds(self, index: int) -> int:
        """Returns `index` as an `int`.

        Raises:
            OutOfBoundsError: `index` is not in `[0, len(self))`.
            TypeError: `index` is not an integer.
        """
        index = operator.index(index)
        if not 0 <= index < len(self):
            raise OutOfBoundsError(
                f"Index {index} is out of bounds for {type(self).__name__} with "
                f"{len(self)} points."
            )
        return index

    def weight(self, index: int) -> WeightValue:
        """The weight $\\lambda_j$ of the point with the given `index`.

        Raises:
            OutOfBoundsError: `index` is not in `[0, len(self))`.
        """
        return self.unsafe_weight(self.check_bounds(index))

    def unsafe_weight(self, index: int) -> WeightValue:
        """The weight at `index`, without checking that `index` is valid."""
        return self.weights[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AbstractDiscreteMeasure):
            return NotImplemented
        return (
            len(self) == len(other)
            and np.array_equal(self.points, other.points)
            and np.array_equal(self.weights, other.weights)
        )

    def approx_equal(
        self, other: "AbstractDiscreteMeasure", rtol: float = 1e-5, atol: float = 1e-8
    ) -> bool:
        """If the points and weights of `self` and `other` are element-wise equal, up to
        the tolerances of [`numpy.allclose`][]."""
        if not isinstance(other, AbstractDiscreteMeasure):
            return False
        if len(self) != len(other) or np.shape(self.points) != np.shape(other.points):
            return False
        return bool(
            np.allclose(self.points, other.points, rtol=rtol, atol=atol)
            and np.allclose(self.weights, other.weights, rtol=rtol, atol=atol)
        )


def _points_domain_type(points: np.ndarray) -> DomainType:
    if points.ndim == 1:
        return as_domain_type(points.dtype)
    return VectorType(as_domain_type(points.dtype), points.shape[1])


class GenericDiscreteMeasure(AbstractDiscreteMeasure):
    """A discrete measure that stores its points, weights and support.

    Example:
        ```python
        measure = GenericDiscreteMeasure([0, 1, 2], [0.2, 0.3, 0.5])
        measure.weight(1)
        # 0.3
        measure.is_normalized
        # True
        ```

    Attributes:
        points: an array of scalar points, or a matrix whose rows are vector points.
        weights: a vector with a weight for each point.
        domain: the support of the measure.
    """

    points: np.ndarray
    weights: np.ndarray
    domain: Any
    domain_type: DomainType = eqx.field(static=True)

    def __init__(
        self,
        points: PointsLike,
        weights: WeightsLike,
        domain: Any | None = None,
    ):
        """
        Args:
            points: the points of the measure.
            weights: the weights of the measure.
            domain: the support of the measure. Defaults to the full space of the
                points.
        """
        self.points = np.asarray(points)
        if self.points.ndim not in (1, 2):
            raise ValueError(
                "Points must be a vector of scalars or a matrix of vectors; got an "
                f"array of shape {self.points.shape}."
            )
        self.domain_type = _points_domain_type(self.points)
        self.weights = np.asarray(weights, dtype=prectype(self.domain_type))
        self.domain = FullSpace(self.domain_type) if domain is None else domain

    def __check_init__(self):
        if self.weights.ndim != 1 or len(self.points) != len(self.weights):
            raise ValueError(
                f"Expected a weight for each of the {len(self.points)} points; got "
                f"weights of shape {self.weights.shape}."
            )

    @property
    def support(self) -> Any:
        return self.domain

    def similar(self, domain_type: DTypeLike | VectorType) -> "GenericDiscreteMeasure":
        domain_type = as_domain_type(domain_type)
        if isinstance(domain_type, VectorType):
            points = self.points.astype(domain_type.dtype)
        else:
            points = self.points.astype(domain_type)
        domain = self.domain
        if isinstance(domain, AbstractDomain):
            domain = domain.similar(domain_type)
        return GenericDiscreteMeasure(points, self.weights, domain)
