r"""Defines the domain types of measures, and the numeric promotion rules between them.

A measure $\mu$ is parametrised by the type $T$ of the points it accepts. Here $T$ is
either a scalar [`numpy.dtype`][] or a [`VectorType`][orthomeasures.VectorType]. The
scalar precision of the weights a measure returns, its *codomain type*, is always the
[`prectype`][orthomeasures.prectype] of $T$.
"""

import equinox as eqx
import numpy as np

from ._custom_types import DTypeLike, PointLike
from ._errors import TypePromotionError

_numeric_kinds = frozenset("biufc")


class VectorType(eqx.Module):
    r"""Domain type of vector valued points $x \in \mathbb{F}^d$.

    Example:
        ```python
        VectorType(np.float64)
        # VectorType(dtype=dtype('float64'), dimension=None)

        VectorType(np.float32, 3)
        # VectorType(dtype=dtype('float32'), dimension=3)
        ```

    Attributes:
        dtype: the element type of the vectors.
        dimension: the fixed dimension $d$ of the vectors, or `None` for vectors of any
            dimension.
    """

    dtype: np.dtype = eqx.field(static=True, converter=np.dtype)
    dimension: int | None = eqx.field(static=True, default=None)

    def __check_init__(self):
        if self.dtype.kind not in _numeric_kinds:
            raise ValueError(f"VectorType requires a numeric dtype; got {self.dtype}.")
        if self.dimension is not None and self.dimension < 1:
            raise ValueError(
                f"VectorType dimension must be positive; got {self.dimension}."
            )


DomainType = np.dtype | VectorType
"""A scalar [`numpy.dtype`][] or a [`VectorType`][orthomeasures.VectorType]."""


def as_domain_type(domain_type: DTypeLike | VectorType) -> DomainType:
    """Normalizes a dtype-like object, or a [`VectorType`][orthomeasures.VectorType],
    into a domain type.

    Example:
        ```python
        as_domain_type(float)
        # dtype('float64')
        ```

    Raises:
        TypePromotionError: `domain_type` is not a numeric type.
    """
    if isinstance(domain_type, VectorType):
        return domain_type
    try:
        dtype = np.dtype(domain_type)
    except TypeError as e:
        raise TypePromotionError(f"{domain_type!r} is not a numeric type.") from e
    if dtype.kind not in _numeric_kinds:
        raise TypePromotionError(f"{dtype} is not a numeric type.")
    return dtype


def same_domain_type(s: DomainType, t: DomainType) -> bool:
    """Exact equality of two domain types; a scalar type never equals a vector type."""
    return type(s) is type(t) and bool(s == t)


def domain_type_of(x: PointLike) -> DomainType:
    """Returns the domain type of a point.

    Scalars (Python, numpy or 0-d arrays) have their [`numpy.dtype`][] as domain type.
    One dimensional arrays, including jax arrays and lists, have a
    [`VectorType`][orthomeasures.VectorType] of unspecified dimension.

    Raises:
        TypePromotionError: `x` is neither a scalar nor a vector of numbers.
    """
    array = np.asarray(x)
    if array.ndim == 0:
        return as_domain_type(array.dtype)
    if array.ndim == 1:
        return VectorType(as_domain_type(array.dtype))
    raise TypePromotionError(
        f"Points must be scalars or vectors; got an array of shape {array.shape}."
    )


def prectype(domain_type: DTypeLike | VectorType) -> np.dtype:
    """Returns the scalar float precision underlying a domain type.

    Example:
        ```python
        prectype(np.int32)
        # dtype('float64')

        prectype(VectorType(np.complex64, 2))
        # dtype('float32')
        ```
    """
    domain_type = as_domain_type(domain_type)
    if isinstance(domain_type, VectorType):
        return prectype(domain_type.dtype)
    if domain_type.kind == "f":
        return domain_type
    if domain_type.kind == "c":
        return np.finfo(domain_type).dtype
    return np.dtype(np.float64)


def promote_domain_types(
    s: DTypeLike | VectorType, t: DTypeLike | VectorType
) -> DomainType:
    """Returns the smallest domain type to which both `s` and `t` convert losslessly.

    Scalar types follow the numpy numeric tower (`int -> float`,
    `float32 -> float64`, `float -> complex`). Vector types promote element-wise and
    keep the dimension of `t`.

    Example:
        ```python
        promote_domain_types(np.int64, np.float32)
        # dtype('float64')

        promote_domain_types(VectorType(np.float32), VectorType(np.float64, 3))
        # VectorType(dtype=dtype('float64'), dimension=3)
        ```

    Raises:
        TypePromotionError: there is no common numeric type.
    """
    s, t = as_domain_type(s), as_domain_type(t)
    if isinstance(s, VectorType) and isinstance(t, VectorType):
        return VectorType(np.promote_types(s.dtype, t.dtype), t.dimension)
    if isinstance(s, VectorType) or isinstance(t, VectorType):
        raise TypePromotionError(
            f"A scalar and a vector type have no common type; got {s} and {t}."
        )
    return np.promote_types(s, t)


def convert_point(x: PointLike, domain_type: DTypeLike | VectorType) -> PointLike:
    """Converts a point to a domain type.

    Returns:
        A numpy scalar of a scalar `domain_type`, or a numpy vector with the element
            type of a [`VectorType`][orthomeasures.VectorType].

    Raises:
        TypePromotionError: `x` does not have the shape of `domain_type`.
    """
    domain_type = as_domain_type(domain_type)
    if isinstance(domain_type, VectorType):
        vector = np.asarray(x, dtype=domain_type.dtype)
        if vector.ndim != 1:
            raise TypePromotionError(
                f"Expected a vector point; got an array of shape {vector.shape}."
            )
        dimension = domain_type.dimension
        if dimension is not None and vector.shape[0] != dimension:
            raise TypePromotionError(
                f"Expected a vector of dimension {dimension}; got {vector.shape[0]}."
            )
        return vector
    scalar = np.asarray(x)
    if scalar.ndim != 0:
        raise TypePromotionError(
            f"Expected a scalar point; got an array of shape {scalar.shape}."
        )
    return scalar.astype(domain_type)[()]


def zero(dtype: DTypeLike):
    """Additive identity of a scalar type."""
    return np.dtype(dtype).type(0)


def one(dtype: DTypeLike):
    """Multiplicative identity of a scalar type."""
    return np.dtype(dtype).type(1)
