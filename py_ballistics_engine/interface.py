"""Ballistics calculator interface and engine loading system.

This module provides the main `Calculator` class that serves as the primary interface
for ballistic trajectory calculations. It implements a plugin-based architecture
that can dynamically load different integration engines through Python entry points.
The module relies on the EngineProtocol to ensure that engines offer the necessary methods.

Key Classes:
    - Calculator: Main ballistics calculator with pluggable engine support
    - _EngineLoader: Internal utility for discovering and loading engine plugins

Functions:
    - solve: Zero the shot, integrate the full trajectory and assemble the result
    - solve_zero_angle: Barrel elevation for the zero distance
    - integrate: Raw trajectory states at a given elevation
"""
from dataclasses import dataclass, field
from importlib.metadata import entry_points, EntryPoint
from typing import Generic, Any

from typing_extensions import Dict, Generator, Mapping, Optional, Tuple, Type, TypeVar, Union

from py_ballistics_engine.conditions import AtmosphericConditions, WindConditions
from py_ballistics_engine.engines import BaseEngineConfigDict, EulerIntegrationEngine
from py_ballistics_engine.exceptions import ValidationError
from py_ballistics_engine.generics.engine import EngineProtocol
from py_ballistics_engine.logger import logger
from py_ballistics_engine.munition import LaunchConditions, ProjectileSpec
from py_ballistics_engine.shot import Shot
from py_ballistics_engine.trajectory_data import TrajectoryResult, TrajectoryState, assemble

ConfigT = TypeVar('ConfigT', covariant=True)

DEFAULT_ENTRY_SUFFIX = '_engine'
DEFAULT_ENTRY_GROUP = 'py_ballistics_engine'
DEFAULT_ENTRY: Type[EngineProtocol] = EulerIntegrationEngine

EngineProtocolType = Type[EngineProtocol[ConfigT]]
EngineProtocolEntry = Union[str, EngineProtocolType, None]
ShotRequest = Union[Shot, Mapping[str, Any]]


@dataclass
class _Defaults:
    """Engine and configuration used by Calculators created without explicit ones."""

    engine: EngineProtocolEntry = None
    engine_config: Dict[str, Any] = field(default_factory=dict)


_defaults = _Defaults()


def set_defaults(engine: EngineProtocolEntry = None,
                 engine_config: Optional[BaseEngineConfigDict] = None) -> None:
    """Replace the engine and engine configuration used by new Calculators."""
    global _defaults
    _defaults = _Defaults(engine, dict(engine_config or {}))


def get_defaults() -> Tuple[EngineProtocolEntry, Dict[str, Any]]:
    """Engine entry and engine configuration currently used by new Calculators."""
    return _defaults.engine, dict(_defaults.engine_config)


@dataclass
class _EngineLoader:
    _entry_point_group = DEFAULT_ENTRY_GROUP
    _entry_point_suffix = DEFAULT_ENTRY_SUFFIX

    @classmethod
    def _get_entries_by_group(cls) -> set:
        all_entry_points = entry_points()
        if hasattr(all_entry_points, 'select'):  # for importlib >= 5
            ballistic_entry_points = all_entry_points.select(group=cls._entry_point_group)
        elif hasattr(all_entry_points, 'get'):  # for importlib < 5
            ballistic_entry_points = all_entry_points.get(cls._entry_point_group, [])  # type: ignore[arg-type]
        else:
            raise RuntimeError('Entry point not supported')
        return set(ballistic_entry_points)

    @classmethod
    def iter_engines(cls) -> Generator[EntryPoint, None, None]:
        """Iterate over all available engines in the entry points."""
        for ep in cls._get_entries_by_group():
            if ep.name.endswith(cls._entry_point_suffix):
                yield ep

    @classmethod
    def _load_from_entry(cls, ep: EntryPoint) -> Optional[EngineProtocolType]:
        try:
            handle: EngineProtocolType = ep.load()
            if not isinstance(handle, EngineProtocol):
                raise TypeError(f"Unsupported engine {ep.value} does not implement EngineProtocol")
            logger.debug(f"Loaded engine from: {ep.value} (Class: {handle})")
            return handle  # type: ignore
        except (ImportError, AttributeError, TypeError, ValueError) as e:
            logger.error(f"Error loading engine from {ep.value}: {e}")
        return None

    @classmethod
    def load(cls, entry_point: EngineProtocolEntry = DEFAULT_ENTRY) -> Type[EngineProtocol[Any]]:
        if entry_point is None:
            entry_point = DEFAULT_ENTRY
        if isinstance(entry_point, type) and isinstance(entry_point, EngineProtocol):
            return entry_point  # type: ignore
        if isinstance(entry_point, str):
            for ep in cls.iter_engines():
                if ep.name == entry_point:
                    if handle := cls._load_from_entry(ep):
                        return handle
            if ':' in entry_point:
                ep = EntryPoint(entry_point, entry_point, cls._entry_point_group)
                if handle := cls._load_from_entry(ep):
                    return handle
            raise ValueError(f"No 'engine' entry point found containing '{entry_point}'")
        raise TypeError("Invalid entry_point type, expected 'str' or 'EngineProtocol'")


@dataclass
class Calculator(Generic[ConfigT]):
    """Basic interface for the ballistics calculator.

    Attributes:
        config: Engine configuration overrides. Merged over the loaded defaults.
        engine: Entry-point name, "module:Class" string or engine class.
            None uses the configured default (Euler).

    Examples:
        ```python
        calc = Calculator(engine="rk4_engine", config={"cStepMultiplier": 0.5})
        result = calc.solve(shot, max_points=200)
        ```
    """

    config: Optional[ConfigT] = field(default=None)
    engine: EngineProtocolEntry = field(default=None)
    _engine_instance: EngineProtocol[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        default_engine, engine_config = get_defaults()
        if self.config:
            engine_config.update(self.config)  # type: ignore[call-overload]
        engine = self.engine if self.engine is not None else default_engine
        self._engine_instance = _EngineLoader.load(engine)(engine_config)

    def __getattr__(self, item: str) -> Any:
        """Delegate attribute access to the underlying engine instance.

        Raises:
            AttributeError: If the attribute is not found on either the
                `Calculator` object or its `_engine_instance`.
        """
        if item == '_engine_instance':
            raise AttributeError(item)
        if hasattr(self._engine_instance, item):
            return getattr(self._engine_instance, item)
        raise AttributeError(
            f"'{self.__class__.__name__}' object or its underlying engine "
            f"'{self._engine_instance.__class__.__name__}' has no attribute '{item}'"
        )

    def zero_angle(self, shot: ShotRequest) -> float:
        """Barrel elevation (rad, relative to the line of sight) for the shot's zero distance."""
        return self._engine_instance.zero_angle(_as_shot(shot))

    def integrate(self, shot: ShotRequest, elevation_angle: float,
                  max_range: Optional[float] = None,
                  max_time: Optional[float] = None) -> Tuple[TrajectoryState, ...]:
        """Trajectory states for the shot fired at `elevation_angle` (rad from horizontal)."""
        return self._engine_instance.integrate(_as_shot(shot), elevation_angle, max_range, max_time)

    def solve(self, shot: ShotRequest,
              max_range: Optional[float] = None,
              max_time: Optional[float] = None,
              max_points: Optional[int] = None) -> TrajectoryResult:
        """Zero the shot, then compute and summarize its full trajectory.

        Args:
            shot: Shot, or mapping of request fields accepted by `Shot.create`.
            max_range: Downrange limit (m). Defaults to engine config cMaximumRange.
            max_time: Time-of-flight limit (s). Defaults to engine config cMaximumTime.
            max_points: Upper bound on the number of reported points (>= 2).
                None reports every integration step.

        Returns:
            TrajectoryResult: Summary metrics and sampled points.

        Raises:
            ValidationError: Invalid request field.
            ZeroNotFound: No barrel elevation zeroes the shot.
            SubsonicBreakdown: Velocity decayed before passing the zero distance.
            NumericalInstability: Non-finite state during integration.
        """
        shot = _as_shot(shot)
        if max_points is not None and (isinstance(max_points, bool) or not isinstance(max_points, int)
                                       or max_points < 2):
            raise ValidationError(f"max_points must be an integer >= 2, got {max_points!r}")

        zero_angle = self._engine_instance.zero_angle(shot)
        elevation = zero_angle + shot.launch.shooting_angle
        logger.debug(f"Zero angle {zero_angle} rad, firing at {elevation} rad")
        states = self._engine_instance.integrate(shot, elevation, max_range, max_time,
                                                 required_range=shot.launch.zero_distance)
        return assemble(states, shot.projectile.mass, max_points)

    @staticmethod
    def iter_engines() -> Generator[EntryPoint, None, None]:
        """Iterate all available engines in the entry points."""
        yield from _EngineLoader.iter_engines()


def _as_shot(shot: ShotRequest) -> Shot:
    if isinstance(shot, Shot):
        return shot
    if isinstance(shot, Mapping):
        return Shot.create(**shot)
    raise ValidationError(f"Expected Shot or mapping of request fields, got {type(shot).__name__}")


def solve(shot: ShotRequest, *,
          max_range: Optional[float] = None,
          max_time: Optional[float] = None,
          max_points: Optional[int] = None,
          engine: EngineProtocolEntry = None,
          config: Optional[BaseEngineConfigDict] = None) -> TrajectoryResult:
    """Solve a single request with a fresh Calculator."""
    return Calculator(config, engine).solve(shot, max_range, max_time, max_points)


def solve_zero_angle(projectile: ProjectileSpec,
                     launch: LaunchConditions,
                     atmosphere: Optional[AtmosphericConditions] = None, *,
                     engine: EngineProtocolEntry = None,
                     config: Optional[BaseEngineConfigDict] = None) -> float:
    """Barrel elevation (rad) that crosses the line of sight at `launch.zero_distance`."""
    shot = Shot(projectile, launch, WindConditions(), atmosphere or AtmosphericConditions.icao())
    return Calculator(config, engine).zero_angle(shot)


def integrate(projectile: ProjectileSpec,
              launch: LaunchConditions,
              elevation_angle: float,
              wind: Optional[WindConditions] = None,
              atmosphere: Optional[AtmosphericConditions] = None,
              max_time: Optional[float] = None,
              max_range: Optional[float] = None, *,
              engine: EngineProtocolEntry = None,
              config: Optional[BaseEngineConfigDict] = None) -> Tuple[TrajectoryState, ...]:
    """Trajectory states for a projectile fired at `elevation_angle` (rad from horizontal)."""
    shot = Shot(projectile, launch, wind or WindConditions(), atmosphere or AtmosphericConditions.icao())
    return Calculator(config, engine).integrate(shot, elevation_angle, max_range, max_time)


__all__ = ('Calculator', '_EngineLoader', 'solve', 'solve_zero_angle', 'integrate',
           'set_defaults', 'get_defaults')
