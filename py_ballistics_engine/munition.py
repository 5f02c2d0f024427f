"""Projectile and launch definitions for ballistic calculations.

This module provides the value types describing what is fired and how:

- ProjectileSpec: drag model, ballistic coefficient, mass, geometry and barrel twist
- LaunchConditions: muzzle velocity, sight height, zero distance and shooting angle

All values are SI (kg, m, m/s, rad). Both types are frozen and validated on
construction, so invalid inputs are rejected before any integration begins.

Example:
    ```python
    from py_ballistics_engine import DragModel, ProjectileSpec, LaunchConditions

    bullet = ProjectileSpec(DragModel.G7, bc=0.300, mass=0.010, diameter=0.00762, length=0.032)
    launch = LaunchConditions(muzzle_velocity=800.0, sight_height=0.05, zero_distance=100.0)
    ```
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from py_ballistics_engine.constants import cBallisticCoefficientToMetric, cDefaultTwistRateMeters
from py_ballistics_engine.drag_model import DragModel, form_factor, sectional_density
from py_ballistics_engine.exceptions import ValidationError

__all__ = ('ProjectileSpec', 'LaunchConditions')


def _require_finite(owner: object, *names: str) -> None:
    for name in names:
        value = getattr(owner, name)
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ValidationError(f"{type(owner).__name__}.{name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValidationError(f"{type(owner).__name__}.{name} must be finite, got {value!r}")


def _require_positive(owner: object, *names: str) -> None:
    _require_finite(owner, *names)
    for name in names:
        if getattr(owner, name) <= 0:
            raise ValidationError(f"{type(owner).__name__}.{name} must be positive, got {getattr(owner, name)!r}")


@dataclass(frozen=True)
class ProjectileSpec:
    """Physical and aerodynamic properties of a projectile.

    Attributes:
        drag_model: Standard drag model the ballistic coefficient refers to.
        bc: Ballistic coefficient (lb/in²).
        mass: Projectile mass (kg).
        diameter: Projectile diameter (m).
        length: Projectile length (m).
        twist_rate: Barrel length per full rifling turn (m). 0 disables spin drift.
        right_twist: True for right-hand rifling.
    """

    drag_model: DragModel
    bc: float
    mass: float
    diameter: float
    length: float
    twist_rate: float = cDefaultTwistRateMeters
    right_twist: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.drag_model, DragModel):
            object.__setattr__(self, 'drag_model', DragModel.parse(self.drag_model))
        _require_positive(self, 'bc', 'mass', 'diameter', 'length')
        _require_finite(self, 'twist_rate')
        if self.twist_rate < 0:
            raise ValidationError(
                f"ProjectileSpec.twist_rate must not be negative, got {self.twist_rate!r}; "
                "use right_twist=False for left-hand rifling"
            )

    @property
    def bc_metric(self) -> float:
        """Ballistic coefficient in kg/m²."""
        return self.bc * cBallisticCoefficientToMetric

    @property
    def sectional_density(self) -> float:
        """Sectional density in kg/m²."""
        return sectional_density(self.mass, self.diameter)

    @property
    def form_factor(self) -> float:
        """Form factor relative to the drag model (dimensionless)."""
        return form_factor(self.mass, self.diameter, self.bc)

    @property
    def has_spin(self) -> bool:
        return self.twist_rate > 0


@dataclass(frozen=True)
class LaunchConditions:
    """Muzzle state and sighting geometry.

    Attributes:
        muzzle_velocity: Muzzle velocity (m/s).
        sight_height: Height of the line of sight above the bore at the muzzle (m).
        zero_distance: Downrange distance at which the sight and bore lines intersect (m).
        shooting_angle: Incline of the line of sight from horizontal (rad).
    """

    muzzle_velocity: float
    sight_height: float
    zero_distance: float
    shooting_angle: float = 0.0

    def __post_init__(self) -> None:
        _require_positive(self, 'muzzle_velocity', 'zero_distance')
        _require_finite(self, 'sight_height', 'shooting_angle')
        if math.fabs(self.shooting_angle) >= math.pi / 2:
            raise ValidationError(
                f"LaunchConditions.shooting_angle must be within (-pi/2, pi/2), got {self.shooting_angle!r}"
            )
