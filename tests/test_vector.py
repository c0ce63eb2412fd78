"""
Tests for the Vector value type and its elementary operations.
"""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from pysimplex.vector import (
    Vector,
    DimensionMismatchError,
    add,
    subtract,
    scale,
    distance,
    centroid,
    as_vector,
)


@pytest.fixture
def a():
    return Vector(1.0, 2.0, 3.0)


@pytest.fixture
def b():
    return Vector(-1.0, 0.5, 4.0)


class TestConstruction:

    def test_from_coordinates(self):
        v = Vector(1, 2)
        assert v.dimension == 2
        assert len(v) == 2
        assert list(v) == [1.0, 2.0]

    def test_from_array_like(self):
        v = Vector(np.array([0.5, -1.5, 2.0]))
        assert v.dimension == 3
        assert v[1] == -1.5
        assert Vector([0.5, -1.5, 2.0]) == v

    def test_single_coordinate(self):
        v = Vector(4.0)
        assert v.dimension == 1
        assert v[0] == 4.0

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            Vector()
        with pytest.raises(ValueError):
            Vector([])

    def test_matrix_input_raises(self):
        with pytest.raises(ValueError):
            Vector(np.zeros((2, 2)))

    def test_components_are_read_only(self, a):
        with pytest.raises(ValueError):
            a.components[0] = 10.0
        assert a[0] == 1.0

    def test_input_array_is_copied(self):
        data = np.array([1.0, 2.0])
        v = Vector(data)
        data[0] = 100.0
        assert v[0] == 1.0

    def test_as_array(self, a):
        c = np.asarray(a)
        assert_allclose(c, [1.0, 2.0, 3.0])
        c[0] = 5.0
        assert a[0] == 1.0

    def test_as_array_without_copy(self, a):
        c = a.__array__(copy=False)
        assert c is a.components
        assert not c.flags.writeable
        with pytest.raises(ValueError):
            a.__array__(dtype=np.float32, copy=False)

    def test_as_array_with_dtype(self, a):
        c = np.asarray(a, dtype=np.float32)
        assert c.dtype == np.float32
        assert_allclose(c, [1.0, 2.0, 3.0])

    def test_as_vector(self, a):
        assert as_vector(a) is a
        assert as_vector([1.0, 2.0, 3.0]) == a


class TestValueSemantics:

    def test_equality_by_value(self, a):
        assert a == Vector(1.0, 2.0, 3.0)
        assert a != Vector(1.0, 2.0)
        assert a != Vector(1.0, 2.0, 3.5)

    def test_hash_consistent_with_equality(self, a):
        assert hash(a) == hash(Vector([1.0, 2.0, 3.0]))
        assert len({a, Vector(1.0, 2.0, 3.0)}) == 1

    def test_str_uses_four_decimals(self):
        assert str(Vector(1.0, -0.123456)) == "[1.0000, -0.1235]"

    def test_repr_round_trips(self, a):
        assert eval(repr(a), {"Vector": Vector}) == a


class TestArithmetic:

    def test_add(self, a, b):
        assert_allclose(add(a, b).components, [0.0, 2.5, 7.0])
        assert a + b == add(a, b)

    def test_subtract(self, a, b):
        assert_allclose(subtract(a, b).components, [2.0, 1.5, -1.0])
        assert a - b == subtract(a, b)

    def test_scale(self, a):
        assert_allclose(scale(a, 0.5).components, [0.5, 1.0, 1.5])
        assert a * 2.0 == 2.0 * a == scale(a, 2)
        assert -a == scale(a, -1)

    def test_operations_do_not_modify_operands(self, a, b):
        _ = a + b
        _ = a * 3.0
        assert a == Vector(1.0, 2.0, 3.0)
        assert b == Vector(-1.0, 0.5, 4.0)

    def test_distance(self):
        assert distance(Vector(0.0, 0.0), Vector(3.0, 4.0)) == pytest.approx(5.0)
        assert distance(Vector(1.0, 1.0), Vector(1.0, 1.0)) == 0.0

    @pytest.mark.parametrize(
        "operation", [add, subtract, distance], ids=["add", "subtract", "distance"]
    )
    def test_dimension_mismatch(self, operation, a):
        with pytest.raises(DimensionMismatchError):
            operation(a, Vector(1.0, 2.0))

    def test_mismatch_through_operators(self, a):
        with pytest.raises(DimensionMismatchError):
            a + Vector(1.0)
        with pytest.raises(DimensionMismatchError):
            a - Vector(1.0)

    def test_dimension_mismatch_is_value_error(self, a):
        with pytest.raises(ValueError):
            add(a, Vector(1.0))

    def test_unsupported_operand(self, a):
        with pytest.raises(TypeError):
            a + 1.0
        with pytest.raises(TypeError):
            a * a

    def test_numpy_scalar_multiplication(self, a):
        k = np.float64(2.0)
        for product in (k * a, a * k):
            assert isinstance(product, Vector)
            assert product == scale(a, 2.0)
        assert isinstance(np.float32(0.5) * a, Vector)

    def test_comparison_with_array_is_not_elementwise(self, a):
        assert (a == np.array([1.0, 2.0, 3.0])) is False
        assert (np.array([1.0, 2.0, 3.0]) == a) is False

    def test_numpy_array_operand_rejected(self, a):
        with pytest.raises(TypeError):
            np.array([1.0, 1.0, 1.0]) + a


class TestCentroid:

    def test_triangle(self):
        c = centroid([Vector(0.0, 0.0), Vector(3.0, 0.0), Vector(0.0, 3.0)])
        assert_allclose(c.components, [1.0, 1.0])

    def test_single_point(self, a):
        assert centroid([a]) == a

    def test_accepts_iterables(self, a, b):
        c = centroid(v for v in (a, b))
        assert_allclose(c.components, [0.0, 1.25, 3.5])

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            centroid([])

    def test_mixed_dimensions_raise(self, a):
        with pytest.raises(DimensionMismatchError):
            centroid([a, Vector(1.0, 2.0)])
