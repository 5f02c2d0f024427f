"""Parameters for computing ballistic trajectories.

Classes:
- Shot: The request aggregate (projectile, launch, wind, atmosphere) with the
    defaults applied for absent optional fields.
- ShotProps: A frozen dataclass translating a Shot into engine-ready SI scalars,
    including the drag factor, station air state, Miller stability and Litz spin drift.

Notes:
- End users typically work with Shot objects; engines construct ShotProps internally
    to avoid repeated lookups inside the integration loop.
- ShotProps is immutable. Zeroing runs derive modified copies with `for_zeroing()`
    and `with_elevation()` instead of mutating shared state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from typing_extensions import Mapping, Optional, Tuple, Union

from py_ballistics_engine.conditions import AtmosphericConditions, WindConditions
from py_ballistics_engine.constants import (
    cDefaultTwistRateMeters,
    cKilogramsPerGrain,
    cMetersPerFoot,
    cMetersPerInch,
    cPascalsPerInHg,
)
from py_ballistics_engine.drag_model import DragModel
from py_ballistics_engine.exceptions import ValidationError
from py_ballistics_engine.munition import LaunchConditions, ProjectileSpec
from py_ballistics_engine.vector import Vector, ZERO_VECTOR

__all__ = ("Shot", "ShotProps")

_REQUIRED_FIELDS = ('bc', 'mass', 'diameter', 'length', 'muzzle_velocity', 'sight_height', 'zero_distance')

WindInput = Union[WindConditions, Mapping[str, float], None]
AtmosphereInput = Union[AtmosphericConditions, Mapping[str, float], None]


@dataclass(frozen=True)
class Shot:
    """All information needed to compute a ballistic trajectory.

    Attributes:
        projectile: What is fired.
        launch: Muzzle velocity and sighting geometry.
        wind: Wind in effect during the shot.
        atmosphere: Atmosphere in effect during the shot.
        shot_bearing: Bearing of the firing line in the frame of `wind.direction` (rad).
    """

    projectile: ProjectileSpec
    launch: LaunchConditions
    wind: WindConditions = field(default_factory=WindConditions)
    atmosphere: AtmosphericConditions = field(default_factory=AtmosphericConditions.icao)
    shot_bearing: float = 0.0

    # pylint: disable=too-many-arguments
    @classmethod
    def create(cls, *,
               drag_model: Union[str, DragModel] = DragModel.G7,
               bc: Optional[float] = None,
               mass: Optional[float] = None,
               diameter: Optional[float] = None,
               length: Optional[float] = None,
               muzzle_velocity: Optional[float] = None,
               sight_height: Optional[float] = None,
               zero_distance: Optional[float] = None,
               shooting_angle: float = 0.0,
               twist_rate: float = cDefaultTwistRateMeters,
               right_twist: bool = True,
               wind: WindInput = None,
               atmosphere: AtmosphereInput = None) -> Shot:
        """Build a Shot from the flat request fields, applying defaults.

        Args:
            drag_model: "G1", "G7" or "G8" (case-insensitive) or a DragModel.
            bc: Ballistic coefficient (lb/in²).
            mass: Projectile mass (kg).
            diameter: Projectile diameter (m).
            length: Projectile length (m).
            muzzle_velocity: Muzzle velocity (m/s).
            sight_height: Sight height above bore (m).
            zero_distance: Zero distance (m).
            shooting_angle: Incline of the line of sight (rad).
            twist_rate: Barrel length per rifling turn (m).
            right_twist: Rifling handedness.
            wind: WindConditions or mapping with `speed` and `direction`. None means no wind.
            atmosphere: AtmosphericConditions or mapping with `temperature`, `pressure`,
                `humidity`, `altitude`. None means the standard ICAO sea-level atmosphere.

        Raises:
            ValidationError: If a required field is missing or any value is out of range.
            InvalidDragModel: If drag_model is not recognized.

        Example:
            ```python
            shot = Shot.create(drag_model="g7", bc=0.3, mass=0.01, diameter=0.00762, length=0.032,
                               muzzle_velocity=800, sight_height=0.05, zero_distance=100)
            ```
        """
        values = dict(bc=bc, mass=mass, diameter=diameter, length=length,
                      muzzle_velocity=muzzle_velocity, sight_height=sight_height, zero_distance=zero_distance)
        missing = [name for name in _REQUIRED_FIELDS if values[name] is None]
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")

        projectile = ProjectileSpec(
            drag_model=DragModel.parse(drag_model),
            bc=bc, mass=mass, diameter=diameter, length=length,  # type: ignore[arg-type]
            twist_rate=twist_rate, right_twist=bool(right_twist),
        )
        launch = LaunchConditions(
            muzzle_velocity=muzzle_velocity, sight_height=sight_height,  # type: ignore[arg-type]
            zero_distance=zero_distance, shooting_angle=shooting_angle,  # type: ignore[arg-type]
        )
        return cls(
            projectile=projectile,
            launch=launch,
            wind=_coerce(wind, WindConditions, WindConditions),
            atmosphere=_coerce(atmosphere, AtmosphericConditions, AtmosphericConditions.icao),
        )


def _coerce(value, kind, default):
    if value is None:
        return default()
    if isinstance(value, kind):
        return value
    if isinstance(value, Mapping):
        try:
            return kind(**value)
        except TypeError as exc:
            raise ValidationError(f"Invalid {kind.__name__} fields: {sorted(value)}") from exc
    raise ValidationError(f"Expected {kind.__name__} or mapping, got {type(value).__name__}")


@dataclass(frozen=True)
class ShotProps:
    """Shot parameters converted to engine-ready SI scalars.

    Pre-computes the station air state, drag scaling and Miller stability once so the
    integration loop only performs arithmetic.

    Examples:
        ```python
        props = ShotProps.from_shot(shot)
        drag = props.drag_by_mach(2.3)       # multiply by density * speed^2 for m/s^2
        drift = props.spin_drift(1.2)        # meters after 1.2 s
        density, c = props.density_and_sound_speed_at(15.0)
        ```

    Notes:
        This class is designed for internal use by ballistic calculation engines.
    """

    shot: Shot = field(repr=False)
    drag_model: DragModel
    bc_metric: float  # kg/m^2
    mass: float  # kg
    diameter: float  # m
    length: float  # m
    twist_rate: float  # m per turn, 0 disables spin drift
    right_twist: bool
    muzzle_velocity: float  # m/s
    sight_height: float  # m
    zero_distance: float  # m
    shooting_angle: float  # rad, incline of the line of sight
    barrel_elevation: float  # rad, from horizontal
    wind_vector: Vector  # m/s
    spin_drift_factor: float = 1.25  # Litz coefficient, inches
    density: float = field(init=False)  # kg/m^3 at the station
    sound_speed: float = field(init=False)  # m/s at the station
    stability_coefficient: float = field(init=False)  # Miller stability coefficient

    def __post_init__(self) -> None:
        density, sound_speed = self.shot.atmosphere.density_and_sound_speed()
        object.__setattr__(self, 'density', density)
        object.__setattr__(self, 'sound_speed', sound_speed)
        object.__setattr__(self, 'stability_coefficient', self._calc_stability_coefficient())

    @classmethod
    def from_shot(cls, shot: Shot, barrel_elevation: float = 0.0, spin_drift_factor: float = 1.25) -> ShotProps:
        """Initialize a ShotProps instance from a Shot instance."""
        projectile = shot.projectile
        launch = shot.launch
        return cls(
            shot=shot,
            drag_model=projectile.drag_model,
            bc_metric=projectile.bc_metric,
            mass=projectile.mass,
            diameter=projectile.diameter,
            length=projectile.length,
            twist_rate=projectile.twist_rate,
            right_twist=projectile.right_twist,
            muzzle_velocity=launch.muzzle_velocity,
            sight_height=launch.sight_height,
            zero_distance=launch.zero_distance,
            shooting_angle=launch.shooting_angle,
            barrel_elevation=barrel_elevation,
            wind_vector=shot.wind.vector(shot.shot_bearing),
            spin_drift_factor=spin_drift_factor,
        )

    def with_elevation(self, barrel_elevation: float) -> ShotProps:
        """Copy with a different barrel elevation (rad)."""
        return replace(self, barrel_elevation=barrel_elevation)

    def for_zeroing(self) -> ShotProps:
        """Copy used by zeroing runs: level line of sight and no wind."""
        return replace(self, shooting_angle=0.0, wind_vector=ZERO_VECTOR)

    def density_and_sound_speed_at(self, dh: float) -> Tuple[float, float]:
        """Air density (kg/m³) and speed of sound (m/s) `dh` meters above the station."""
        if math.fabs(dh) < 10:
            return self.density, self.sound_speed
        return self.shot.atmosphere.density_and_sound_speed_at(dh)

    def drag_by_mach(self, mach: float) -> float:
        """Drag factor for the given Mach number.
        ```
        Formula:
            Drag deceleration = rho * V^2 * Cd * S / 2m
                              = rho * V^2 * drag_by_mach
        Where:
            - S is cross-section = d^2 pi/4
            - m/d^2 is sectional density = form_factor * BC (kg/m^2)
        Thus:
            - drag_by_mach = Cd * pi / (8 * BC)
        ```
        """
        return self.drag_model.retardation(mach) * math.pi / (8.0 * self.bc_metric)

    def line_of_sight_height(self, x: float) -> float:
        """Height (m) of the line of sight above the bore origin at downrange `x`."""
        return self.sight_height + x * math.tan(self.shooting_angle)

    @property
    def has_spin_drift(self) -> bool:
        return self.twist_rate > 0 and self.stability_coefficient > 0

    def spin_drift(self, time: float) -> float:
        """Litz spin-drift approximation.

        Args:
            time: Time of flight (s)

        Returns:
            Windage due to spin drift (m), positive to the right for right-hand twist.
        """
        if not self.has_spin_drift or time <= 0:
            return 0.0
        sign = 1 if self.right_twist else -1
        inches = self.spin_drift_factor * (self.stability_coefficient + 1.2) * math.pow(time, 1.83)
        return sign * inches * cMetersPerInch

    def spin_drift_acceleration(self, time: float) -> float:
        """Lateral acceleration (m/s²) whose double integral is `spin_drift(time)`."""
        if not self.has_spin_drift or time <= 0:
            return 0.0
        sign = 1 if self.right_twist else -1
        k = self.spin_drift_factor * (self.stability_coefficient + 1.2) * cMetersPerInch
        return sign * k * 1.83 * 0.83 * math.pow(time, -0.17)

    def _calc_stability_coefficient(self) -> float:
        """Calculate the Miller stability coefficient.

        The formula is empirical in grains, inches, fps, °F and inHg.
        """
        atmosphere = self.shot.atmosphere
        if self.twist_rate and self.length and self.diameter and atmosphere.pressure:
            weight_grains = self.mass / cKilogramsPerGrain
            diameter_inch = self.diameter / cMetersPerInch
            twist_rate = math.fabs(self.twist_rate) / self.diameter
            length = self.length / self.diameter
            # Miller stability formula
            sd = (
                30
                * weight_grains
                / (math.pow(twist_rate, 2) * math.pow(diameter_inch, 3) * length * (1 + math.pow(length, 2)))
            )
            # Velocity correction factor
            fv = math.pow(self.muzzle_velocity / cMetersPerFoot / 2800, 1.0 / 3.0)
            # Atmospheric correction
            ft = atmosphere.temperature * 9 / 5 + 32
            pt = atmosphere.pressure / cPascalsPerInHg
            ftp = ((ft + 460) / (59 + 460)) * (29.92 / pt)
            return sd * fv * ftp
        return 0.0
