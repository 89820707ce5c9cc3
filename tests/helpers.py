import numpy as np

import orthomeasures


# (measure, points in its support, points outside of its support)
continuous_measures = [
    (orthomeasures.LebesgueMeasure(), [-3.0, 0.0, 1e6], []),
    (orthomeasures.UnitLebesgueMeasure(), [0.0, 0.5, 1.0], [-0.1, 1.5]),
    (
        orthomeasures.DomainLebesgueMeasure(orthomeasures.Interval(2.0, 3.0)),
        [2.0, 2.5, 3.0],
        [0.0, 3.5],
    ),
    (orthomeasures.LegendreMeasure(), [-1.0, 0.0, 1.0], [-1.5, 2.0]),
    (orthomeasures.JacobiMeasure(1.0, 2.0), [-0.5, 0.0, 0.5], [-2.0, 2.0]),
    (orthomeasures.chebyshev_t_measure(), [-0.5, 0.0, 0.5], [-1.5, 1.5]),
    (orthomeasures.chebyshev_u_measure(), [-1.0, 0.0, 1.0], [-1.5, 1.5]),
    (orthomeasures.LaguerreMeasure(1.0), [0.0, 1.0, 10.0], [-1.0, -1e-3]),
    (orthomeasures.HermiteMeasure(), [-2.0, 0.0, 2.0], []),
    (orthomeasures.GaussianMeasure(), [-2.0, 0.0, 2.0], []),
    (orthomeasures.DiracMeasure(3.0), [3.0], [0.0, 3.0000001]),
]

continuous_measure_ids = [type(m).__name__ for m, _, _ in continuous_measures]


def gaussian_weight(x):
    x = np.atleast_1d(x)
    return (2 * np.pi) ** (-x.size / 2) * np.exp(-np.sum(x**2))
