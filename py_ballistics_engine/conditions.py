"""Environmental conditions used by ballistic engines.

What this module provides
- AtmosphericConditions: station atmosphere (temperature, pressure, humidity, altitude)
    with air density and local speed of sound, plus lapse-rate interpolation for
    heights along the trajectory.
- WindConditions: constant horizontal wind described by speed and the bearing it
    blows from, resolved into range/cross components against the firing line.

Design notes
- Units: every field is SI except temperature (°C) and humidity (%).
- Atmosphere: use AtmosphericConditions.icao(...) for standard atmosphere at an altitude.
    Values are station values, i.e. measured at `altitude`, not reduced to sea level.
- Wind.direction: bearing the wind blows from, clockwise, in the frame of the shot
    bearing. 0 is a headwind, π/2 blows from the shooter's right toward the left.

Examples:
>>> atmo = AtmosphericConditions.icao()
>>> round(atmo.density_and_sound_speed()[1], 1)
340.3
>>> WindConditions(speed=0.0, direction=1.0).components()
(0.0, 0.0)
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass

from typing_extensions import Tuple

from py_ballistics_engine.constants import (
    cDegreesCtoK,
    cLapseRateMetric,
    cLowestTempC,
    cMolarMassDryAir,
    cMolarMassWaterVapor,
    cPressureExponent,
    cSpeedOfSoundMetric,
    cStandardAltitude,
    cStandardHumidity,
    cStandardPressurePa,
    cStandardTemperatureC,
    cTroposphereLimitMeters,
    cUniversalGasConstant,
)
from py_ballistics_engine.exceptions import InvalidAtmosphere, ValidationError
from py_ballistics_engine.vector import Vector, ZERO_VECTOR

__all__ = (
    'AtmosphericConditions',
    'WindConditions',
    'density_and_sound_speed',
    'components',
)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class AtmosphericConditions:
    """Atmospheric state at the firing point.

    Attributes:
        temperature: Ambient air temperature (°C).
        pressure: Station barometric pressure (Pa).
        humidity: Relative humidity (0..100 %).
        altitude: Station altitude above sea level (m).
    """

    temperature: float = cStandardTemperatureC
    pressure: float = cStandardPressurePa
    humidity: float = cStandardHumidity
    altitude: float = cStandardAltitude

    def __post_init__(self) -> None:
        for name in ('temperature', 'pressure', 'humidity', 'altitude'):
            value = getattr(self, name)
            if not _is_number(value):
                raise InvalidAtmosphere(f"Atmosphere {name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidAtmosphere(f"Atmosphere {name} must be finite, got {value!r}")
        if self.pressure <= 0:
            raise InvalidAtmosphere(f"Pressure must be positive, got {self.pressure} Pa")
        if self.temperature + cDegreesCtoK <= 0:
            raise InvalidAtmosphere(f"Absolute temperature must be positive, got {self.temperature}°C")
        if self.humidity < 0 or self.humidity > 100:
            raise InvalidAtmosphere(r"Humidity must be between 0% and 100%.")

    @staticmethod
    def standard_temperature(altitude: float) -> float:
        """ICAO standard temperature (°C) for altitude in meters."""
        return cStandardTemperatureC + altitude * cLapseRateMetric

    @staticmethod
    def standard_pressure(altitude: float) -> float:
        """ICAO standard pressure (Pa) for altitude in meters."""
        return cStandardPressurePa * math.pow(
            1 + cLapseRateMetric * altitude / (cStandardTemperatureC + cDegreesCtoK),
            cPressureExponent,
        )

    @classmethod
    def icao(cls, altitude: float = cStandardAltitude,
             humidity: float = cStandardHumidity) -> AtmosphericConditions:
        """Create a standard ICAO atmosphere at altitude.

        Args:
            altitude: Altitude in meters (defaults to sea level).
            humidity: Relative humidity in percent. Defaults to standard humidity.
        """
        return cls(
            temperature=cls.standard_temperature(altitude),
            pressure=cls.standard_pressure(altitude),
            humidity=humidity,
            altitude=altitude,
        )

    # Synonym for ICAO standard atmosphere
    standard = icao

    def density_and_sound_speed(self) -> Tuple[float, float]:
        """Air density (kg/m³) and speed of sound (m/s) at the station.

        Both follow from the measured temperature, pressure and humidity only.
        `altitude` does not enter them; it anchors the lapse applied along the
        trajectory by `density_and_sound_speed_at`.
        """
        return (
            calculate_air_density(self.temperature, self.pressure, self.humidity),
            sound_speed(self.temperature + cDegreesCtoK),
        )

    def temperature_at_height(self, dh: float) -> float:
        """Temperature (°C) at `dh` meters above the station, bounded by the model lower limit."""
        t = self.temperature + dh * cLapseRateMetric
        if t < cLowestTempC:
            t = cLowestTempC
            warnings.warn(
                f"Temperature interpolated from altitude fell below minimum model limit. Bounded at {cLowestTempC}°C.",
                RuntimeWarning,
            )
        return t

    def pressure_at_height(self, dh: float) -> float:
        """Pressure (Pa) at `dh` meters above the station (barometric formula)."""
        return self.pressure * math.pow(
            1 + cLapseRateMetric * dh / (self.temperature + cDegreesCtoK), cPressureExponent
        )

    def density_and_sound_speed_at(self, dh: float) -> Tuple[float, float]:
        """Air density and speed of sound at `dh` meters above the station.

        Within 10 m of the station the station values are returned.
        """
        density, c = self.density_and_sound_speed()
        if math.fabs(dh) < 10:
            return density, c

        if self.altitude + dh > cTroposphereLimitMeters:
            warnings.warn(
                "Density request for altitude above modeled troposphere. Atmospheric model not valid here.",
                RuntimeWarning,
            )

        t0_k = self.temperature + cDegreesCtoK
        t_k = self.temperature_at_height(dh) + cDegreesCtoK
        p = self.pressure_at_height(dh)
        return density * (t0_k * p) / (self.pressure * t_k), sound_speed(t_k)


@dataclass(frozen=True)
class WindConditions:
    """Constant horizontal wind.

    Attributes:
        speed: Wind speed (m/s, >= 0).
        direction: Bearing the wind blows from (rad). 0 is a headwind,
            π/2 blows from the shooter's right.
    """

    speed: float = 0.0
    direction: float = 0.0

    def __post_init__(self) -> None:
        if not (_is_number(self.speed) and _is_number(self.direction)):
            raise ValidationError(f"Wind speed and direction must be numbers, got {self.speed!r}, {self.direction!r}")
        if not (math.isfinite(self.speed) and math.isfinite(self.direction)):
            raise ValidationError("Wind speed and direction must be finite")
        if self.speed < 0:
            raise ValidationError(f"Wind speed must not be negative, got {self.speed} m/s")

    def components(self, shot_bearing: float = 0.0) -> Tuple[float, float]:
        """Resolve the wind against the firing line.

        Args:
            shot_bearing: Bearing of the shot in the same frame as `direction` (rad).

        Returns:
            (range_component, cross_component) of the wind velocity in m/s.
            Range is positive for a tailwind, cross is positive toward the shooter's right.
        """
        if self.speed == 0:
            return 0.0, 0.0
        relative = self.direction - shot_bearing
        return -self.speed * math.cos(relative), -self.speed * math.sin(relative)

    def vector(self, shot_bearing: float = 0.0) -> Vector:
        """Wind velocity in the engine frame."""
        if self.speed == 0:
            return ZERO_VECTOR
        range_component, cross_component = self.components(shot_bearing)
        return Vector(range_component, 0.0, cross_component)


def density_and_sound_speed(atm: AtmosphericConditions) -> Tuple[float, float]:
    """Air density (kg/m³) and local speed of sound (m/s) for `atm`."""
    return atm.density_and_sound_speed()


def components(wind: WindConditions, shot_bearing: float = 0.0) -> Tuple[float, float]:
    """Range and cross components (m/s) of `wind` relative to the firing line."""
    return wind.components(shot_bearing)


def sound_speed(kelvin: float) -> float:
    """Mach 1 (m/s) for given Kelvin temperature."""
    if kelvin <= 0:
        raise InvalidAtmosphere(f"Absolute temperature must be positive, got {kelvin}K")
    return math.sqrt(kelvin) * cSpeedOfSoundMetric


def calculate_air_density(t: float, p: float, humidity: float) -> float:
    """Air density from temperature (°C), pressure (Pa), and relative humidity (%).

    Returns:
        Air density in kg/m³.

    Notes:
        Source: CIPM-2007 (https://www.nist.gov/system/files/documents/calibrations/CIPM-2007.pdf)
    """

    def saturation_vapor_pressure(T):  # noqa: N802 (retain formula variable naming)
        A = [1.2378847e-5, -1.9121316e-2, 33.93711047, -6.3431645e3]
        return math.exp(A[0] * T**2 + A[1] * T + A[2] + A[3] / T)

    def enhancement_factor(p, t):
        return 1.00062 + 3.14e-8 * p + 5.6e-7 * t**2

    def compressibility_factor(p, T, x_v):  # noqa: N802
        t_l = T - cDegreesCtoK
        return (
            1
            - (p / T) * (1.58123e-6 - 2.9331e-8 * t_l + 1.1043e-10 * t_l**2
                         + (5.707e-6 - 2.051e-8 * t_l) * x_v + (1.9898e-4 - 2.376e-6 * t_l) * x_v**2)
            + (p / T) ** 2 * (1.83e-11 - 0.765e-8 * x_v**2)
        )

    T_K = t + cDegreesCtoK
    p_v = humidity / 100.0 * enhancement_factor(p, t) * saturation_vapor_pressure(T_K)
    x_v = p_v / p  # mole fraction of water vapor
    Z = compressibility_factor(p, T_K, x_v)
    return (p * cMolarMassDryAir) / (Z * cUniversalGasConstant * T_K) * (
        1.0 - x_v * (1.0 - cMolarMassWaterVapor / cMolarMassDryAir)
    )
