import math
import warnings

import pytest

from py_ballistics_engine import (AtmosphericConditions, InvalidAtmosphere, ValidationError,
                                  density_and_sound_speed)
from py_ballistics_engine.conditions import calculate_air_density, sound_speed


class TestAtmosphere:

    def test_icao_sea_level(self):
        atmo = AtmosphericConditions.icao()
        assert atmo.temperature == pytest.approx(15.0)
        assert atmo.pressure == pytest.approx(101325.0)
        assert atmo.humidity == pytest.approx(50.0)
        density, mach = atmo.density_and_sound_speed()
        assert density == pytest.approx(1.22, abs=0.01)
        assert mach == pytest.approx(340.3, abs=0.1)

    def test_default_is_icao(self):
        assert AtmosphericConditions() == AtmosphericConditions.icao()
        assert AtmosphericConditions.standard(1500) == AtmosphericConditions.icao(1500)

    def test_icao_altitude(self):
        atmo = AtmosphericConditions.icao(1000)
        assert atmo.altitude == 1000
        assert atmo.temperature == pytest.approx(8.5)
        assert atmo.pressure == pytest.approx(89875, rel=1e-3)

    def test_module_function(self):
        atmo = AtmosphericConditions(temperature=30, pressure=95000, humidity=20)
        assert density_and_sound_speed(atmo) == atmo.density_and_sound_speed()

    def test_dry_air_density(self):
        assert calculate_air_density(15, 101325, 0) == pytest.approx(1.225, abs=0.005)

    def test_humidity_lowers_density(self):
        assert calculate_air_density(25, 101325, 100) < calculate_air_density(25, 101325, 0)

    def test_hot_air_is_thinner(self):
        hot, c_hot = AtmosphericConditions(temperature=35).density_and_sound_speed()
        cold, c_cold = AtmosphericConditions(temperature=-10).density_and_sound_speed()
        assert hot < cold
        assert c_hot > c_cold

    def test_station_values_near_station(self):
        atmo = AtmosphericConditions.icao(500)
        assert atmo.density_and_sound_speed_at(5.0) == atmo.density_and_sound_speed()
        assert atmo.density_and_sound_speed_at(-9.9) == atmo.density_and_sound_speed()

    def test_density_decreases_with_height(self):
        atmo = AtmosphericConditions.icao()
        station_density, station_mach = atmo.density_and_sound_speed()
        density, mach = atmo.density_and_sound_speed_at(1000)
        assert density < station_density
        assert mach < station_mach
        lower_density, _ = atmo.density_and_sound_speed_at(-100)
        assert lower_density > station_density

    def test_lapse_matches_icao(self):
        sea_level = AtmosphericConditions.icao()
        upper = AtmosphericConditions.icao(1000)
        assert sea_level.temperature_at_height(1000) == pytest.approx(upper.temperature)
        assert sea_level.pressure_at_height(1000) == pytest.approx(upper.pressure, rel=1e-9)

    def test_temperature_clamped(self):
        atmo = AtmosphericConditions.icao()
        with pytest.warns(RuntimeWarning, match="minimum model limit"):
            assert atmo.temperature_at_height(20000) == pytest.approx(-90.0)

    def test_above_troposphere_warns(self):
        atmo = AtmosphericConditions.icao(10000)
        with pytest.warns(RuntimeWarning, match="troposphere"):
            density, mach = atmo.density_and_sound_speed_at(2000)
        assert math.isfinite(density)
        assert math.isfinite(mach)

    def test_within_troposphere_no_warning(self):
        atmo = AtmosphericConditions.icao()
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            atmo.density_and_sound_speed_at(3000)

    @pytest.mark.parametrize("kwargs", [
        dict(pressure=0),
        dict(pressure=-5),
        dict(temperature=-273.15),
        dict(temperature=-300),
        dict(humidity=-1),
        dict(humidity=100.5),
        dict(temperature=math.nan),
        dict(altitude=math.inf),
        dict(temperature='15'),
        dict(pressure=None),
        dict(humidity=True),
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidAtmosphere):
            AtmosphericConditions(**kwargs)

    def test_invalid_is_validation_error(self):
        with pytest.raises(ValidationError):
            AtmosphericConditions(pressure=0)

    def test_station_values_ignore_altitude(self):
        low = AtmosphericConditions(temperature=10.0, pressure=90000.0, humidity=30.0, altitude=0.0)
        high = AtmosphericConditions(temperature=10.0, pressure=90000.0, humidity=30.0, altitude=1500.0)
        assert low.density_and_sound_speed() == high.density_and_sound_speed()
        assert low.density_and_sound_speed_at(500.0) == pytest.approx(high.density_and_sound_speed_at(500.0))

    def test_sound_speed(self):
        assert sound_speed(288.15) == pytest.approx(20.0467 * math.sqrt(288.15))
        with pytest.raises(InvalidAtmosphere):
            sound_speed(0)

    def test_frozen(self):
        atmo = AtmosphericConditions.icao()
        with pytest.raises(AttributeError):
            atmo.temperature = 20  # type: ignore[misc]
