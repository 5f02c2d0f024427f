import math

import pytest

from py_ballistics_engine import ValidationError, Vector, WindConditions, components


class TestWindComponents:

    def test_no_wind(self):
        assert WindConditions().components() == (0.0, 0.0)
        assert WindConditions(0, 1.2).components(0.3) == (0.0, 0.0)
        assert WindConditions().vector() == Vector(0.0, 0.0, 0.0)

    def test_headwind(self):
        range_component, cross_component = WindConditions(5, 0).components()
        assert range_component == pytest.approx(-5)
        assert cross_component == pytest.approx(0, abs=1e-12)

    def test_tailwind(self):
        range_component, cross_component = WindConditions(5, math.pi).components()
        assert range_component == pytest.approx(5)
        assert cross_component == pytest.approx(0, abs=1e-12)

    def test_wind_from_right(self):
        range_component, cross_component = WindConditions(4, math.pi / 2).components()
        assert range_component == pytest.approx(0, abs=1e-12)
        assert cross_component == pytest.approx(-4)

    def test_wind_from_left(self):
        _, cross_component = WindConditions(4, -math.pi / 2).components()
        assert cross_component == pytest.approx(4)

    def test_shot_bearing(self):
        # Wind from the north, shooting due east: the wind comes from the shooter's left
        range_component, cross_component = components(WindConditions(3, 0), shot_bearing=math.pi / 2)
        assert range_component == pytest.approx(0, abs=1e-12)
        assert cross_component == pytest.approx(3)

    def test_magnitude_preserved(self):
        wind = WindConditions(7, 0.7)
        assert math.hypot(*wind.components(0.2)) == pytest.approx(7)

    def test_vector_axes(self):
        wind = WindConditions(6, math.radians(30))
        range_component, cross_component = wind.components()
        assert wind.vector() == Vector(range_component, 0.0, cross_component)

    @pytest.mark.parametrize("kwargs", [
        dict(speed=-1),
        dict(speed=math.nan),
        dict(direction=math.inf),
        dict(speed=None),
        dict(direction='north'),
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValidationError):
            WindConditions(**kwargs)

    def test_invalid_from_mapping(self):
        with pytest.raises(ValidationError):
            WindConditions(**{'speed': '5', 'direction': 0.0})
