"""py_ballistics_engine exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── ValueError
│   └── ValidationError
│       ├── InvalidDragModel
│       └── InvalidAtmosphere
└── RuntimeError
    └── SolverRuntimeError
        ├── ZeroNotFound
        ├── SubsonicBreakdown
        └── NumericalInstability

Input-Related Exceptions:

- ValidationError: A request field is missing, non-finite or out of range.
  Raised before any simulation work begins.

- InvalidDragModel: The drag-model token is not one of G1, G7, G8.

- InvalidAtmosphere: Non-physical atmosphere (non-positive pressure or absolute
  temperature, humidity outside 0-100 %).

Solver-Related Exceptions:

- SolverRuntimeError: Base class for all solver-related runtime errors.
  Not raised directly.

- ZeroNotFound: The zero-angle search has no solution or did not converge. Contains:
  - zero_finding_error: Last vertical error at the zero distance (m)
  - iterations_count: Number of iterations performed
  - last_barrel_elevation: Last barrel elevation tried (rad)
  - reason: Human-readable cause

- SubsonicBreakdown: Projectile fell below the minimum velocity before any usable
  impact point was found. Contains:
  - last_distance: Downrange distance reached (m)
  - velocity: Speed at breakdown (m/s)

- NumericalInstability: A trajectory state became non-finite. Contains:
  - time: Time of flight at which it was detected (s)
"""
from __future__ import annotations

from typing import Optional

__all__ = (
    'ValidationError',
    'InvalidDragModel',
    'InvalidAtmosphere',
    'SolverRuntimeError',
    'ZeroNotFound',
    'SubsonicBreakdown',
    'NumericalInstability',
)


class ValidationError(ValueError):
    """Invalid or missing input field."""


class InvalidDragModel(ValidationError):
    """Unrecognized drag model token."""

    def __init__(self, token: object):
        self.token = token
        super().__init__(f"Invalid drag_model {token!r}, must be G1, G7, or G8")


class InvalidAtmosphere(ValidationError):
    """Non-physical atmospheric conditions."""


class SolverRuntimeError(RuntimeError):
    """Solver error."""


class ZeroNotFound(SolverRuntimeError):
    """Exception for zero-finding issues.

    Contains:
    - Zero finding error magnitude
    - Iteration count
    - Last barrel elevation (radians)
    """

    NO_SIGN_CHANGE = "No sign change in elevation bracket"
    OUT_OF_REACH = "Zero distance out of reach"
    NON_CONVERGENT = "Iteration budget exhausted"

    def __init__(self,
                 zero_finding_error: float,
                 iterations_count: int,
                 last_barrel_elevation: float,
                 reason: str = ""):
        """
        Parameters:
        - zero_finding_error: The error magnitude in meters
        - iterations_count: The number of iterations performed
        - last_barrel_elevation: The last computed barrel elevation in radians
        """
        self.zero_finding_error: float = zero_finding_error
        self.iterations_count: int = iterations_count
        self.last_barrel_elevation: float = last_barrel_elevation
        self.reason: str = reason
        msg = (f'Vertical error {zero_finding_error} '
               f'meters with {last_barrel_elevation} rad elevation, '
               f'after {iterations_count} iterations.')
        if reason:
            msg = f"{reason}. " + msg
        super().__init__(msg)


class SubsonicBreakdown(SolverRuntimeError):
    """Trajectory decayed below the minimum velocity before reaching a usable impact."""

    def __init__(self, last_distance: float, velocity: float, required_distance: Optional[float] = None):
        self.last_distance = last_distance
        self.velocity = velocity
        self.required_distance = required_distance
        msg = f'Minimum velocity reached: {velocity:.2f} m/s at {last_distance:.2f} m'
        if required_distance is not None:
            msg += f', before reaching {required_distance:.2f} m'
        super().__init__(msg)


class NumericalInstability(SolverRuntimeError):
    """Trajectory state became non-finite."""

    def __init__(self, time: float, note: str = ""):
        self.time = time
        msg = f"Non-finite trajectory state at t={time} s"
        if note:
            msg += f". {note}"
        super().__init__(msg)
