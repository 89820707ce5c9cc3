import jax.numpy as jnp
import numpy as np
import pytest

import orthomeasures
from orthomeasures import TypePromotionError, VectorType
from orthomeasures._types import one, same_domain_type, zero


@pytest.mark.parametrize(
    "s, t, expected",
    [
        pytest.param(np.int64, np.float64, np.float64, id="int->float"),
        pytest.param(np.int64, np.float32, np.float64, id="int64+float32"),
        pytest.param(np.float32, np.float64, np.float64, id="float32->float64"),
        pytest.param(np.float32, np.float32, np.float32, id="identity"),
        pytest.param(np.int32, np.int64, np.int64, id="int32->int64"),
        pytest.param(np.bool_, np.float32, np.float32, id="bool->float"),
        pytest.param(np.float64, np.complex64, np.complex128, id="float->complex"),
        pytest.param(float, "float32", np.float64, id="dtype-like"),
    ],
)
def test_promote_scalar_types(s, t, expected):
    result = orthomeasures.promote_domain_types(s, t)
    assert result == np.dtype(expected)
    assert orthomeasures.promote_domain_types(t, s) == result


def test_promote_vector_types():
    s = VectorType(np.float32)
    t = VectorType(np.float64, 3)
    assert orthomeasures.promote_domain_types(s, t) == VectorType(np.float64, 3)
    assert orthomeasures.promote_domain_types(t, s) == VectorType(np.float64)
    result = orthomeasures.promote_domain_types(VectorType(np.int32), s)
    assert result == VectorType(np.float64)


@pytest.mark.parametrize(
    "s, t",
    [
        pytest.param(np.float64, VectorType(np.float64), id="scalar+vector"),
        pytest.param(VectorType(np.float64), np.float64, id="vector+scalar"),
        pytest.param(np.str_, np.float64, id="str"),
        pytest.param(np.float64, "datetime64[s]", id="datetime"),
        pytest.param(object, np.float64, id="object"),
    ],
)
def test_promote_failure(s, t):
    with pytest.raises(TypePromotionError):
        orthomeasures.promote_domain_types(s, t)


def test_type_promotion_error_is_type_error():
    with pytest.raises(TypeError):
        orthomeasures.promote_domain_types(np.float64, VectorType(np.float64))


@pytest.mark.parametrize(
    "domain_type, expected",
    [
        pytest.param(np.float64, np.float64, id="float64"),
        pytest.param(np.float32, np.float32, id="float32"),
        pytest.param(np.float16, np.float16, id="float16"),
        pytest.param(np.int32, np.float64, id="int32"),
        pytest.param(np.bool_, np.float64, id="bool"),
        pytest.param(np.complex64, np.float32, id="complex64"),
        pytest.param(VectorType(np.complex128, 2), np.float64, id="vector complex128"),
        pytest.param(VectorType(np.float32), np.float32, id="vector float32"),
    ],
)
def test_prectype(domain_type, expected):
    assert orthomeasures.prectype(domain_type) == np.dtype(expected)


@pytest.mark.parametrize(
    "x, expected",
    [
        pytest.param(0.5, np.dtype(np.float64), id="float"),
        pytest.param(np.float32(1.0), np.dtype(np.float32), id="np.float32"),
        pytest.param(np.asarray(2, dtype=np.int16), np.dtype(np.int16), id="0-d"),
        pytest.param(True, np.dtype(np.bool_), id="bool"),
        pytest.param([1.0, 2.0], VectorType(np.float64), id="list"),
        pytest.param(np.ones(3, np.float32), VectorType(np.float32), id="vector"),
        pytest.param(jnp.zeros(2, jnp.float32), VectorType(np.float32), id="jax"),
    ],
)
def test_domain_type_of(x, expected):
    assert same_domain_type(orthomeasures.domain_type_of(x), expected)


@pytest.mark.parametrize(
    "x",
    [
        pytest.param(np.ones((2, 2)), id="matrix"),
        pytest.param("a", id="str"),
        pytest.param(object(), id="object"),
    ],
)
def test_domain_type_of_failure(x):
    with pytest.raises(TypePromotionError):
        orthomeasures.domain_type_of(x)


def test_same_domain_type():
    assert same_domain_type(np.dtype(np.float64), np.dtype(np.float64))
    assert not same_domain_type(np.dtype(np.float64), np.dtype(np.float32))
    assert not same_domain_type(np.dtype(np.float64), VectorType(np.float64))
    assert same_domain_type(VectorType(np.float64, 2), VectorType(np.float64, 2))
    assert not same_domain_type(VectorType(np.float64, 2), VectorType(np.float64))


def test_convert_point():
    x = orthomeasures.convert_point(1, np.float32)
    assert isinstance(x, np.float32)
    assert x == 1.0

    v = orthomeasures.convert_point([1, 2], VectorType(np.float64, 2))
    assert v.dtype == np.float64
    assert np.array_equal(v, [1.0, 2.0])

    with pytest.raises(TypePromotionError, match="dimension 3"):
        orthomeasures.convert_point([1, 2], VectorType(np.float64, 3))
    with pytest.raises(TypePromotionError, match="scalar"):
        orthomeasures.convert_point([1, 2], np.float64)
    with pytest.raises(TypePromotionError, match="vector"):
        orthomeasures.convert_point(1.0, VectorType(np.float64))


def test_vector_type_validation():
    with pytest.raises(ValueError, match="numeric dtype"):
        VectorType(np.str_)
    with pytest.raises(ValueError, match="positive"):
        VectorType(np.float64, 0)


def test_identities():
    assert zero(np.float32) == 0 and isinstance(zero(np.float32), np.float32)
    assert one(np.float64) == 1 and isinstance(one(np.float64), np.float64)
