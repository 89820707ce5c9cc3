import importlib.metadata

# Discrete measures
from ._discrete import (
    AbstractDiscreteMeasure as AbstractDiscreteMeasure,
    GenericDiscreteMeasure as GenericDiscreteMeasure,
)

# Domains
from ._domains import (
    AbstractDomain as AbstractDomain,
    AbstractInterval as AbstractInterval,
    ChebyshevInterval as ChebyshevInterval,
    FullSpace as FullSpace,
    HalfLine as HalfLine,
    Interval as Interval,
    Point as Point,
    UnitInterval as UnitInterval,
)

# Errors
from ._errors import (
    MeasureError as MeasureError,
    OutOfBoundsError as OutOfBoundsError,
    TypePromotionError as TypePromotionError,
    UnsupportedOperationError as UnsupportedOperationError,
)

# Measure protocol
from ._measures import (
    AbstractMeasure as AbstractMeasure,
    AbstractWeight as AbstractWeight,
    weight_function as weight_function,
)

# Domain types and promotion
from ._types import (
    as_domain_type as as_domain_type,
    convert_point as convert_point,
    domain_type_of as domain_type_of,
    prectype as prectype,
    promote_domain_types as promote_domain_types,
    VectorType as VectorType,
)

# Continuous measures
from ._weights import (
    AbstractLebesgueMeasure as AbstractLebesgueMeasure,
    chebyshev_t_measure as chebyshev_t_measure,
    chebyshev_u_measure as chebyshev_u_measure,
    DiracMeasure as DiracMeasure,
    DomainLebesgueMeasure as DomainLebesgueMeasure,
    GaussianMeasure as GaussianMeasure,
    HermiteMeasure as HermiteMeasure,
    JacobiMeasure as JacobiMeasure,
    LaguerreMeasure as LaguerreMeasure,
    lebesgue_measure as lebesgue_measure,
    LebesgueMeasure as LebesgueMeasure,
    LegendreMeasure as LegendreMeasure,
    UnitLebesgueMeasure as UnitLebesgueMeasure,
)

__version__ = importlib.metadata.version("orthomeasures")
