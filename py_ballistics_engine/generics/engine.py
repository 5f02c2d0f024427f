"""Engine protocol module for py_ballistics_engine.

This module defines the EngineProtocol type protocol that all ballistic
calculation engines must implement: integrating a trajectory at a given
barrel elevation and finding the zero angle. Any class providing these
methods can be handed to the Calculator.

Classes:
    EngineProtocol: Type protocol for ballistic calculation engines

Type Variables:
    ConfigT: Configuration type for the engine (covariant)
"""

# Standard library imports
from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional, Tuple, TypeVar

# Third-party imports
from typing_extensions import Protocol, runtime_checkable

if TYPE_CHECKING:
    from py_ballistics_engine.shot import Shot
    from py_ballistics_engine.trajectory_data import TrajectoryState

__all__ = ['EngineProtocol', 'ConfigT']

# Type variable for engine configuration
ConfigT = TypeVar("ConfigT", covariant=True)


@runtime_checkable
class EngineProtocol(Protocol[ConfigT]):
    """Protocol defining the interface for ballistic trajectory calculation engines.

    Type Parameters:
        ConfigT: The configuration type used by this engine implementation.

    Required Methods:
        - integrate: Trajectory states for a shot fired at a given elevation.
        - zero_angle: Barrel elevation that zeroes the shot at a distance.

    Examples:
        ```python
        class MyEngine(EngineProtocol[BaseEngineConfigDict]):
            def __init__(self, config=None):
                self.config = config

            def integrate(self, shot_info, elevation_angle, max_range=None, max_time=None, **kwargs):
                ...

            def zero_angle(self, shot_info, distance=None):
                ...

        isinstance(MyEngine(), EngineProtocol)  # True
        ```
    """

    def __init__(self, config: Optional[ConfigT] = None) -> None:
        ...

    @abstractmethod
    def integrate(
        self,
        shot_info: Shot,
        elevation_angle: float,
        max_range: Optional[float] = None,
        max_time: Optional[float] = None,
        *,
        stop_at_sight_line: bool = True,
        required_range: float = 0.0,
    ) -> Tuple[TrajectoryState, ...]:
        """Integrate the equations of motion from the muzzle until a termination condition.

        Args:
            shot_info: Complete shot configuration.
            elevation_angle: Barrel elevation from horizontal (rad).
            max_range: Downrange limit (m); None uses the engine default.
            max_time: Time-of-flight limit (s); None uses the engine default.
            stop_at_sight_line: End when the projectile falls through the line of sight.
            required_range: Minimum distance (m) for a velocity breakdown to count as impact.

        Returns:
            Time-ordered TrajectoryState snapshots, the last being the impact state.

        Raises:
            SubsonicBreakdown: Velocity decayed before any usable impact.
            NumericalInstability: A state became non-finite.

        Mathematical Background:
            ```
            dV/dt = -rho * |V - W| * (V - W) * Cd(M) * pi / (8 * BC) + g + S(t)

            Where:
            - V is velocity relative to the ground, W the wind velocity
            - Cd(M) the drag coefficient at Mach M = |V - W| / c
            - S(t) the lateral spin-drift acceleration
            ```
        """
        ...

    @abstractmethod
    def zero_angle(self, shot_info: Shot, distance: Optional[float] = None) -> float:
        """Calculate the barrel elevation that crosses the line of sight at `distance`.

        Args:
            shot_info: Complete shot configuration.
            distance: Zero distance (m); None uses `shot_info.launch.zero_distance`.

        Returns:
            Barrel elevation in radians.

        Raises:
            ZeroNotFound: If no solution exists or the search does not converge.
        """
        ...
