import math

import pytest

from py_ballistics_engine import (AtmosphericConditions, DragModel, InvalidDragModel, LaunchConditions,
                                  ProjectileSpec, Shot, ShotProps, ValidationError, WindConditions)
from py_ballistics_engine.constants import cDefaultTwistRateMeters
from tests.fixtures_and_helpers import create_7_62_mm_shot


def _bullet(**overrides):
    fields = dict(drag_model=DragModel.G7, bc=0.3, mass=0.01, diameter=0.00762, length=0.032)
    fields.update(overrides)
    return ProjectileSpec(**fields)


class TestProjectileSpec:

    def test_defaults(self):
        bullet = _bullet()
        assert bullet.twist_rate == pytest.approx(cDefaultTwistRateMeters)
        assert bullet.right_twist
        assert bullet.has_spin

    def test_string_drag_model(self):
        assert _bullet(drag_model="g1").drag_model is DragModel.G1
        with pytest.raises(InvalidDragModel):
            _bullet(drag_model="G2")

    def test_metric_bc(self):
        assert _bullet(bc=1.0).bc_metric == pytest.approx(703.06958)

    def test_sectional_density_and_form_factor(self):
        bullet = _bullet()
        assert bullet.sectional_density == pytest.approx(0.01 / 0.00762 ** 2)
        assert bullet.form_factor == pytest.approx(bullet.sectional_density / bullet.bc_metric)

    @pytest.mark.parametrize("field, value", [
        ("bc", 0),
        ("bc", -0.3),
        ("mass", 0),
        ("diameter", -1),
        ("length", math.nan),
        ("mass", math.inf),
        ("bc", "0.3"),
        ("mass", True),
        ("twist_rate", -0.2),
        ("twist_rate", math.nan),
    ])
    def test_invalid(self, field, value):
        with pytest.raises(ValidationError):
            _bullet(**{field: value})

    def test_zero_twist_disables_spin(self):
        assert not _bullet(twist_rate=0).has_spin


class TestLaunchConditions:

    def test_valid(self):
        launch = LaunchConditions(800, 0.05, 100, math.radians(5))
        assert launch.shooting_angle == pytest.approx(math.radians(5))

    def test_negative_sight_height_allowed(self):
        assert LaunchConditions(800, -0.01, 100).sight_height == -0.01

    @pytest.mark.parametrize("kwargs", [
        dict(muzzle_velocity=0, sight_height=0.05, zero_distance=100),
        dict(muzzle_velocity=800, sight_height=0.05, zero_distance=0),
        dict(muzzle_velocity=800, sight_height=0.05, zero_distance=-100),
        dict(muzzle_velocity=800, sight_height=math.nan, zero_distance=100),
        dict(muzzle_velocity=800, sight_height=0.05, zero_distance=100, shooting_angle=math.pi / 2),
        dict(muzzle_velocity=800, sight_height=0.05, zero_distance=100, shooting_angle=-2.0),
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValidationError):
            LaunchConditions(**kwargs)


class TestShot:

    def test_create_defaults(self):
        shot = create_7_62_mm_shot()
        assert shot.atmosphere == AtmosphericConditions.icao()
        assert shot.wind == WindConditions()
        assert shot.launch.shooting_angle == 0
        assert shot.projectile.drag_model is DragModel.G7

    def test_create_missing_fields(self):
        with pytest.raises(ValidationError, match="bc, mass"):
            Shot.create(muzzle_velocity=800, sight_height=0.05, zero_distance=100,
                        diameter=0.00762, length=0.032)

    def test_create_from_mappings(self):
        shot = create_7_62_mm_shot(wind={'speed': 3, 'direction': 1.0},
                                   atmosphere={'temperature': 25, 'pressure': 95000, 'humidity': 10})
        assert shot.wind == WindConditions(3, 1.0)
        assert shot.atmosphere.temperature == 25
        assert shot.atmosphere.altitude == 0

    def test_create_bad_mapping(self):
        with pytest.raises(ValidationError):
            create_7_62_mm_shot(wind={'velocity': 3})
        with pytest.raises(ValidationError):
            create_7_62_mm_shot(atmosphere=42)

    def test_create_invalid_atmosphere(self):
        with pytest.raises(ValidationError):
            create_7_62_mm_shot(atmosphere={'pressure': -1})


class TestShotProps:

    def test_from_shot(self):
        shot = create_7_62_mm_shot(wind=WindConditions(4, math.pi / 2))
        props = ShotProps.from_shot(shot, 0.002)
        assert props.barrel_elevation == 0.002
        assert props.bc_metric == pytest.approx(0.3 * 703.06958)
        assert props.wind_vector.z == pytest.approx(-4)
        assert props.density == pytest.approx(shot.atmosphere.density_and_sound_speed()[0])

    def test_for_zeroing(self):
        shot = create_7_62_mm_shot(wind=WindConditions(4, 0.3), shooting_angle=0.1)
        props = ShotProps.from_shot(shot).for_zeroing()
        assert props.shooting_angle == 0
        assert props.wind_vector.magnitude() == 0
        assert props.with_elevation(0.01).barrel_elevation == 0.01

    def test_stability_coefficient(self):
        props = ShotProps.from_shot(create_7_62_mm_shot())
        assert 1.0 < props.stability_coefficient < 3.0
        assert props.has_spin_drift

    def test_no_twist_no_drift(self):
        props = ShotProps.from_shot(create_7_62_mm_shot(twist_rate=0))
        assert props.stability_coefficient == 0
        assert not props.has_spin_drift
        assert props.spin_drift(1.0) == 0
        assert props.spin_drift_acceleration(1.0) == 0

    def test_spin_drift_direction(self):
        right = ShotProps.from_shot(create_7_62_mm_shot())
        left = ShotProps.from_shot(create_7_62_mm_shot(right_twist=False))
        assert right.spin_drift(0.5) > 0
        assert left.spin_drift(0.5) == pytest.approx(-right.spin_drift(0.5))
        assert right.spin_drift(0) == 0
        assert right.spin_drift_acceleration(0) == 0

    def test_spin_drift_calibration(self):
        shot = create_7_62_mm_shot()
        props = ShotProps.from_shot(shot)
        doubled = ShotProps.from_shot(shot, spin_drift_factor=2 * props.spin_drift_factor)
        for t in (0.1, 0.5, 1.5):
            assert doubled.spin_drift(t) == pytest.approx(2 * props.spin_drift(t))
            assert doubled.spin_drift_acceleration(t) == pytest.approx(2 * props.spin_drift_acceleration(t))
            # Acceleration is the second derivative of k*(Sg+1.2)*t^1.83
            assert props.spin_drift_acceleration(t) == pytest.approx(1.83 * 0.83 * props.spin_drift(t) / t ** 2)
        # Cumulative drift grows with time while its acceleration tapers off
        assert props.spin_drift(1.5) > props.spin_drift(0.5)
        assert props.spin_drift_acceleration(1.5) < props.spin_drift_acceleration(0.5)

    def test_line_of_sight(self):
        props = ShotProps.from_shot(create_7_62_mm_shot(shooting_angle=math.radians(10)))
        assert props.line_of_sight_height(0) == pytest.approx(0.05)
        assert props.line_of_sight_height(100) == pytest.approx(0.05 + 100 * math.tan(math.radians(10)))
