import numpy as np
import pytest

import orthomeasures
from orthomeasures import VectorType


@pytest.mark.parametrize(
    "domain, inside, outside",
    [
        pytest.param(orthomeasures.FullSpace(), [-1e300, 0.0, np.inf], [], id="full"),
        pytest.param(
            orthomeasures.Interval(-2.0, 3.0),
            [-2.0, 0.0, 3.0],
            [-2.1, 3.5],
            id="[a, b]",
        ),
        pytest.param(
            orthomeasures.UnitInterval(), [0.0, 0.5, 1.0], [-1e-9, 1.1], id="unit"
        ),
        pytest.param(
            orthomeasures.ChebyshevInterval(),
            [-1.0, 0.0, 1.0],
            [-1.01, 1.01],
            id="chebyshev",
        ),
        pytest.param(
            orthomeasures.HalfLine(), [0.0, 1.0, np.inf], [-1.0, -np.inf], id="half"
        ),
        pytest.param(orthomeasures.Point(2.0), [2.0], [2.0000001, 0.0], id="point"),
    ],
)
def test_membership(domain, inside, outside):
    for x in inside:
        assert x in domain
    for x in outside:
        assert x not in domain


def test_intervals_contain_only_real_scalars():
    domain = orthomeasures.UnitInterval()
    assert [0.5, 0.5] not in domain
    assert np.asarray([0.5]) not in domain
    assert complex(0.5, 0.0) not in domain


def test_vector_point():
    domain = orthomeasures.Point([1.0, 2.0])
    assert domain.domain_type == VectorType(np.float64)
    assert np.array([1.0, 2.0]) in domain
    assert np.array([1.0, 2.0, 3.0]) not in domain
    assert 1.0 not in domain


def test_interval_validation():
    with pytest.raises(ValueError, match="left <= right"):
        orthomeasures.Interval(1.0, 0.0)
    assert 0.0 in orthomeasures.Interval(0.0, 0.0)


@pytest.mark.parametrize(
    "domain",
    [
        pytest.param(orthomeasures.FullSpace(), id="full"),
        pytest.param(orthomeasures.Interval(0.0, 2.0), id="[a, b]"),
        pytest.param(orthomeasures.UnitInterval(), id="unit"),
        pytest.param(orthomeasures.ChebyshevInterval(), id="chebyshev"),
        pytest.param(orthomeasures.HalfLine(), id="half"),
        pytest.param(orthomeasures.Point(1), id="point"),
    ],
)
def test_similar(domain):
    similar = domain.similar(np.float32)
    assert type(similar) is type(domain)
    assert similar.domain_type == np.float32
    assert similar.similar(domain.domain_type) == domain
