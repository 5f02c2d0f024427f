"""Global physical and atmospheric constants for ballistic calculations.

All engine quantities are SI (meters, seconds, kilograms, pascals, kelvin).
A few empirical formulas (Miller stability, Litz spin drift) and the
conventional ballistic coefficient are published in imperial units, so the
conversion factors they need are collected here as well.

Constant Categories:
    - ICAO standard atmosphere at sea level
    - Atmospheric model coefficients
    - Conversion factors
    - Runtime limits

References:
    - ISA: https://www.engineeringtoolbox.com/international-standard-atmosphere-d_985.html
    - CIPM-2007: https://www.nist.gov/system/files/documents/calibrations/CIPM-2007.pdf
"""

# Third-party imports
from typing_extensions import Final

# =============================================================================
# ICAO Standard Atmosphere Constants
# =============================================================================

cStandardTemperatureC: Final[float] = 15.0  # °C
"""Standard temperature at sea level in Celsius (°C)"""

cStandardPressurePa: Final[float] = 101325.0  # Pa
"""Standard atmospheric pressure at sea level (Pa)"""

cStandardHumidity: Final[float] = 50.0  # %
"""Relative humidity used when no atmosphere is supplied (%)"""

cStandardAltitude: Final[float] = 0.0  # m
"""Altitude of the default atmosphere (m)"""

cLapseRateMetric: Final[float] = -6.5e-03  # Lapse Rate, °C/m
"""Temperature lapse rate in the troposphere (°C/m)"""

cPressureExponent: Final[float] = 5.255876  # =g*M/R*L
"""Pressure exponent constant for barometric formula (dimensionless)"""

cTroposphereLimitMeters: Final[float] = 11000.0  # m
"""Upper altitude of the modeled troposphere (m)"""

# =============================================================================
# Atmospheric model coefficients
# =============================================================================

cSpeedOfSoundMetric: Final[float] = 20.0467  # Mach1 in m/s = cSpeedOfSound * sqrt(K)
"""Speed of sound coefficient in metric units (m/s per √K)"""

cUniversalGasConstant: Final[float] = 8.314472  # J/(mol·K)
cMolarMassDryAir: Final[float] = 28.96546e-3  # kg/mol
cMolarMassWaterVapor: Final[float] = 18.01528e-3  # kg/mol

# =============================================================================
# Conversion Factors
# =============================================================================

cDegreesCtoK: Final[float] = 273.15  # K = °C + 273.15
"""Celsius to Kelvin conversion constant (K)"""

cLowestTempC: Final[float] = -90.0  # °C
"""Minimum temperature produced by lapse-rate interpolation (°C)"""

cBallisticCoefficientToMetric: Final[float] = 703.06958  # lb/in^2 to kg/m^2
"""Converts a conventional ballistic coefficient (lb/in²) to kg/m²"""

cMetersPerInch: Final[float] = 0.0254
cMetersPerFoot: Final[float] = 0.3048
cKilogramsPerGrain: Final[float] = 0.00006479891
cPascalsPerInHg: Final[float] = 3386.389

# =============================================================================
# Default projectile parameters
# =============================================================================

cDefaultTwistRateMeters: Final[float] = 10 * cMetersPerInch  # 1:10" twist
"""Barrel twist used when the request does not specify one (m per turn)"""

__all__ = (
    # ICAO constants
    'cStandardTemperatureC',
    'cStandardPressurePa',
    'cStandardHumidity',
    'cStandardAltitude',
    'cLapseRateMetric',
    'cPressureExponent',
    'cTroposphereLimitMeters',
    # Atmospheric model coefficients
    'cSpeedOfSoundMetric',
    'cUniversalGasConstant',
    'cMolarMassDryAir',
    'cMolarMassWaterVapor',
    # Conversion factors
    'cDegreesCtoK',
    'cLowestTempC',
    'cBallisticCoefficientToMetric',
    'cMetersPerInch',
    'cMetersPerFoot',
    'cKilogramsPerGrain',
    'cPascalsPerInHg',
    # Defaults
    'cDefaultTwistRateMeters',
)
