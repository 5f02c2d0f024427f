"""Ballistic trajectory data structures and result assembly.

Core Components:
    - TrajectoryState: Raw integrator sample (time, position, velocity)
    - TrajectoryPoint: Reported sample (time, position, speed, kinetic energy)
    - TrajectoryResult: Summary metrics plus the ordered point sequence
    - assemble: Reduces a state sequence into a TrajectoryResult

Typical Usage:
    ```python
    from py_ballistics_engine import Calculator, Shot

    result = Calculator().solve(shot, max_points=200)
    print(result.max_range, result.time_of_flight, result.impact_energy)
    for point in result:
        print(f"{point.time:.3f}s x={point.x:.1f} y={point.y:.3f} v={point.speed:.0f}")
    at_300 = result.point_at_distance(300.0)
    ```
"""
from __future__ import annotations

import bisect
from dataclasses import dataclass, field

from typing_extensions import Iterator, NamedTuple, Optional, Sequence, Tuple

from py_ballistics_engine.vector import Vector

__all__ = (
    'TrajectoryState',
    'TrajectoryPoint',
    'TrajectoryResult',
    'assemble',
    'kinetic_energy',
)


def _lerp(x: float, x0: float, y0: float, x1: float, y1: float) -> float:
    if x1 == x0:
        return y0
    return y0 + (y1 - y0) * (x - x0) / (x1 - x0)


def kinetic_energy(mass: float, speed: float) -> float:
    """Kinetic energy (J) of `mass` kg moving at `speed` m/s."""
    return 0.5 * mass * speed * speed


class TrajectoryState(NamedTuple):
    """Integrator snapshot.

    Attributes:
        time: Time since launch (s).
        position: Position (m), x downrange, y up, z right.
        velocity: Velocity (m/s).
    """

    time: float
    position: Vector
    velocity: Vector

    @property
    def speed(self) -> float:
        return self.velocity.magnitude()

    def is_finite(self) -> bool:
        return self.position.is_finite() and self.velocity.is_finite() and self.time == self.time

    @staticmethod
    def interpolate_x(x: float, p0: TrajectoryState, p1: TrajectoryState) -> TrajectoryState:
        """State at downrange `x`, interpolated linearly between two states."""
        x0, x1 = p0.position.x, p1.position.x

        def _interp(y0: float, y1: float) -> float:
            return _lerp(x, x0, y0, x1, y1)

        return TrajectoryState(
            time=_interp(p0.time, p1.time),
            position=Vector(x,
                            _interp(p0.position.y, p1.position.y),
                            _interp(p0.position.z, p1.position.z)),
            velocity=Vector(_interp(p0.velocity.x, p1.velocity.x),
                            _interp(p0.velocity.y, p1.velocity.y),
                            _interp(p0.velocity.z, p1.velocity.z)),
        )


class TrajectoryPoint(NamedTuple):
    """Reported trajectory sample.

    Attributes:
        time: Time since launch (s).
        position: Position (m).
        speed: Speed magnitude (m/s).
        energy: Kinetic energy (J).
    """

    time: float
    position: Vector
    speed: float
    energy: float

    @property
    def x(self) -> float:
        """Downrange distance (m)."""
        return self.position.x

    @property
    def y(self) -> float:
        """Height (m)."""
        return self.position.y

    @property
    def z(self) -> float:
        """Lateral offset (m), positive to the right."""
        return self.position.z

    @classmethod
    def from_state(cls, state: TrajectoryState, mass: float) -> TrajectoryPoint:
        speed = state.speed
        return cls(state.time, state.position, speed, kinetic_energy(mass, speed))


@dataclass(frozen=True)
class TrajectoryResult:
    """Computed trajectory of the shot.

    Attributes:
        max_range: Downrange position of the terminal state (m).
        max_height: Highest vertical position reached (m).
        time_of_flight: Time of the terminal state (s).
        impact_velocity: Speed at the terminal state (m/s).
        impact_energy: Kinetic energy at the terminal state (J).
        points: Sampled points, ordered by time.
    """

    max_range: float
    max_height: float
    time_of_flight: float
    impact_velocity: float
    impact_energy: float
    points: Tuple[TrajectoryPoint, ...] = field(repr=False)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[TrajectoryPoint]:
        yield from self.points

    def __getitem__(self, item):
        return self.points[item]

    def point_at_distance(self, x: float) -> TrajectoryPoint:
        """Point at downrange `x` (m), linearly interpolated between samples.

        Raises:
            ValueError: If `x` lies outside the sampled range.
        """
        xs = [p.x for p in self.points]
        if not self.points or x < xs[0] or x > xs[-1]:
            raise ValueError(f"Distance {x} m is outside the sampled range")
        i = bisect.bisect_left(xs, x)
        if xs[i] == x:
            return self.points[i]
        p0, p1 = self.points[i - 1], self.points[i]

        def _interp(y0: float, y1: float) -> float:
            return _lerp(x, p0.x, y0, p1.x, y1)

        return TrajectoryPoint(
            time=_interp(p0.time, p1.time),
            position=Vector(x, _interp(p0.y, p1.y), _interp(p0.z, p1.z)),
            speed=_interp(p0.speed, p1.speed),
            energy=_interp(p0.energy, p1.energy),
        )


def _decimate(states: Sequence[TrajectoryState], max_points: int) -> Sequence[TrajectoryState]:
    n = len(states)
    if n <= max_points:
        return states
    step = (n - 1) / (max_points - 1)
    return [states[round(i * step)] for i in range(max_points)]


def assemble(states: Sequence[TrajectoryState], mass: float,
             max_points: Optional[int] = None) -> TrajectoryResult:
    """Reduce integrator states into a TrajectoryResult.

    Args:
        states: Non-empty, time-ordered states; the last one is the impact state.
        mass: Projectile mass (kg).
        max_points: Upper bound on reported points. None keeps every state;
            otherwise states are decimated evenly, keeping the first and last.

    Raises:
        ValueError: If `states` is empty or `max_points` < 2.
    """
    if not states:
        raise ValueError("Cannot assemble a trajectory from an empty state sequence")
    if max_points is not None and max_points < 2:
        raise ValueError(f"max_points must be at least 2, got {max_points}")

    terminal = states[-1]
    impact_velocity = terminal.speed
    sampled = states if max_points is None else _decimate(states, max_points)
    return TrajectoryResult(
        max_range=terminal.position.x,
        max_height=max(s.position.y for s in states),
        time_of_flight=terminal.time,
        impact_velocity=impact_velocity,
        impact_energy=kinetic_energy(mass, impact_velocity),
        points=tuple(TrajectoryPoint.from_state(s, mass) for s in sampled),
    )
