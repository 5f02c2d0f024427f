import math

import pytest

from py_ballistics_engine import Vector


class TestVector:

    def test_magnitude_available(self):
        unit_vector = Vector(1, 0, 0)
        assert unit_vector.magnitude() == 1
        assert Vector(3, 4, 12).magnitude() == pytest.approx(13)

    def test_mul_by_constant(self):
        vector = Vector(-1, -2, -3)
        assert vector.mul_by_const(2) == Vector(-2, -4, -6)
        assert vector * 0.5 == Vector(-0.5, -1.0, -1.5)

    def test_mul_by_vector(self):
        vector = Vector(-1, -2, -3)
        assert vector.mul_by_vector(Vector(4, 5, 6)) == -32
        assert vector * Vector(4, 5, 6) == -32

    def test_add_subtract(self):
        vector = Vector(-1, -2, -3)
        assert vector + Vector(4, 6, 8) == Vector(3, 4, 5)
        assert vector - Vector(4, 5, 6) == Vector(-5, -7, -9)

    def test_is_finite(self):
        assert Vector(1.0, -2.0, 0.0).is_finite()
        assert not Vector(math.nan, 0.0, 0.0).is_finite()
        assert not Vector(0.0, math.inf, 0.0).is_finite()
        assert not Vector(0.0, 0.0, -math.inf).is_finite()

    def test_vector_mul_type_error(self):
        with pytest.raises(TypeError):
            _ = Vector(1.0, 2.0, 3.0) * "x"  # type: ignore[operator]

    def test_right_ops(self):
        v1 = Vector(1.0, 2.0, 3.0)
        assert 2 * v1 == Vector(2.0, 4.0, 6.0)
        v2 = v1
        v2 += Vector(1.0, 1.0, 1.0)
        assert v2 == Vector(2.0, 3.0, 4.0)
        assert v1 == Vector(1.0, 2.0, 3.0)
