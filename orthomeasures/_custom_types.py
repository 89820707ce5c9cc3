"""Defines custom types that are used throughout the package. The following symbols
are used in the definitions of the custom types:

-   **d**: the dimensionality of a (vector) point.
-   **n**: the number of points of a discrete measure.
"""

from typing import TYPE_CHECKING, Any

import numpy as np
import numpy.typing as npt
from jaxtyping import Array, ArrayLike, Float, Shaped

# Identical to the definition in diffrax.
if TYPE_CHECKING:
    FloatScalarLike = float | Array | npt.NDArray[np.floating]
else:
    FloatScalarLike = Float[ArrayLike, ""]
    """A value which can be considered as a float scalar value."""

DTypeLike = npt.DTypeLike
"""Anything [`numpy.dtype`][] accepts, e.g. `float`, `np.float32` or `"float32"`."""

PointLike = Shaped[ArrayLike, "*d"]
"""A scalar, or a vector of dimension `d`, at which a measure is evaluated."""

PointsLike = Shaped[ArrayLike, "n *d"]
"""An array of `n` scalar or `d` dimensional vector points of a discrete measure."""

WeightsLike = Shaped[ArrayLike, " n"]
"""An array of `n` weights, one for each point of a discrete measure."""

WeightValue = Any
"""A numpy scalar of a measure's codomain type."""


del Array, ArrayLike, Float, Shaped
