"""Base integration engine for ballistic trajectory calculations.

The module serves as the core framework for the engine system, providing:
- Engine configuration management through BaseEngineConfig and BaseEngineConfigDict
- Abstract base class BaseIntegrationEngine implementing the EngineProtocol
- The shared trajectory loop with its termination handling
- The zero-angle search (bracketed Illinois iteration)

Classes:
    BaseEngineConfig: Dataclass configuration for engine parameters
    BaseEngineConfigDict: TypedDict version for flexible configuration
    BaseIntegrationEngine: Abstract base class for integration engines
    TerminationReason: Why a trajectory run stopped
    IntegrationResult: States of one run together with its termination reason

Configuration Constants:
    cZeroFindingAccuracy: Maximum allowed vertical error for zero-finding (m)
    cMaxIterations: Maximum iterations for zero-finding
    cMinimumVelocity: Minimum velocity to continue trajectory calculation (m/s)
    cGravityConstant: Gravitational acceleration constant (m/s²)

Architecture:
    BaseIntegrationEngine owns everything except the single-step update. Concrete
    subclasses implement `_step`, a pure function of (props, state, dt), and declare
    their DEFAULT_TIME_STEP. Engines hold nothing but their configuration, so one
    instance may serve concurrent calls.

See Also:
    py_ballistics_engine.generics.engine.EngineProtocol: Protocol interface
    py_ballistics_engine.engines: Concrete engine implementations
    py_ballistics_engine.trajectory_data: Data structures for results
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from enum import Enum, auto

from typing_extensions import List, NamedTuple, Optional, Tuple, TypedDict, TypeVar

from py_ballistics_engine.exceptions import (
    NumericalInstability,
    SubsonicBreakdown,
    ValidationError,
    ZeroNotFound,
)
from py_ballistics_engine.generics.engine import EngineProtocol
from py_ballistics_engine.logger import logger
from py_ballistics_engine.shot import Shot, ShotProps
from py_ballistics_engine.trajectory_data import TrajectoryState
from py_ballistics_engine.vector import Vector

__all__ = (
    'create_base_engine_config',
    'BaseEngineConfig',
    'BaseEngineConfigDict',
    'DEFAULT_BASE_ENGINE_CONFIG',
    'BaseIntegrationEngine',
    'IntegrationResult',
    'TerminationReason',
)

cZeroFindingAccuracy: float = 1e-4  # Max allowed vertical error in meters to end zero search
cMaxIterations: int = 60  # maximum number of iterations for zero search
cMinimumVelocity: float = 15.0  # m/s, minimum velocity to continue trajectory
cGravityConstant: float = -9.80665  # meters per second squared
cStepMultiplier: float = 1.0  # Multiplier for engine's default step, for changing integration speed & precision
cMaximumTime: float = 10.0  # s, default time limit of a trajectory run
cMaximumRange: float = 5000.0  # m, default range limit of a trajectory run
cImpactTolerance: float = 1e-3  # m, descent below the sight line that counts as impact
cMaxZeroElevation: float = math.radians(10.0)  # rad, upper end of the zero-angle bracket
cSpinDriftFactor: float = 1.25  # inches, Litz spin-drift coefficient


@dataclass
class BaseEngineConfig:
    """Configuration dataclass for ballistic calculation engines.

    All parameters use SI units.

    Attributes:
        cZeroFindingAccuracy: Maximum allowed vertical error (m) at the zero distance.
                             Defaults to 1e-4 m.
        cMaxIterations: Maximum iterations of the zero-angle search.
                       Defaults to 60 iterations.
        cMinimumVelocity: Minimum speed in m/s to continue calculation.
                         Defaults to 15 m/s.
        cGravityConstant: Gravitational acceleration in m/s².
                         Defaults to -9.80665 m/s².
        cStepMultiplier: Multiplier for engine's default integration time step.
                        Values < 1.0 increase precision but slow calculation.
                        Defaults to 1.0.
        cMaximumTime: Time limit (s) of a run when the caller supplies none.
        cMaximumRange: Range limit (m) of a run when the caller supplies none.
        cImpactTolerance: Distance (m) below the sight line that ends a run.
        cMaxZeroElevation: Upper end (rad) of the zero-angle bracket.
        cSpinDriftFactor: Litz spin-drift coefficient (inches).

    Examples:
        >>> config = BaseEngineConfig(
        ...     cMinimumVelocity=30.0,
        ...     cStepMultiplier=0.5  # Higher precision
        ... )
    """

    cZeroFindingAccuracy: float = cZeroFindingAccuracy
    cMaxIterations: int = cMaxIterations
    cMinimumVelocity: float = cMinimumVelocity
    cGravityConstant: float = cGravityConstant
    cStepMultiplier: float = cStepMultiplier
    cMaximumTime: float = cMaximumTime
    cMaximumRange: float = cMaximumRange
    cImpactTolerance: float = cImpactTolerance
    cMaxZeroElevation: float = cMaxZeroElevation
    cSpinDriftFactor: float = cSpinDriftFactor


#: Default configuration instance using standard ballistic calculation parameters
DEFAULT_BASE_ENGINE_CONFIG: BaseEngineConfig = BaseEngineConfig()


class BaseEngineConfigDict(TypedDict, total=False):
    """TypedDict for flexible engine configuration from dictionaries.

    All fields are optional; unspecified fields use their values from
    DEFAULT_BASE_ENGINE_CONFIG when passed through create_base_engine_config().

    Examples:
        >>> config_dict: BaseEngineConfigDict = {
        ...     'cMinimumVelocity': 30.0,
        ...     'cStepMultiplier': 0.8
        ... }
        >>> config = create_base_engine_config(config_dict)
    """

    cZeroFindingAccuracy: Optional[float]
    cMaxIterations: Optional[int]
    cMinimumVelocity: Optional[float]
    cGravityConstant: Optional[float]
    cStepMultiplier: Optional[float]
    cMaximumTime: Optional[float]
    cMaximumRange: Optional[float]
    cImpactTolerance: Optional[float]
    cMaxZeroElevation: Optional[float]
    cSpinDriftFactor: Optional[float]


def create_base_engine_config(interface_config: Optional[BaseEngineConfigDict] = None) -> BaseEngineConfig:
    """Create BaseEngineConfig from optional dictionary configuration.

    Args:
        interface_config: Optional dictionary containing configuration overrides.
                         Only specified fields will override defaults.

    Returns:
        BaseEngineConfig instance with merged configuration values.

    Raises:
        TypeError: If interface_config contains unknown keys.
    """
    config = asdict(DEFAULT_BASE_ENGINE_CONFIG)
    if interface_config is not None and isinstance(interface_config, dict):
        config.update({k: v for k, v in interface_config.items() if v is not None})
    return BaseEngineConfig(**config)


class TerminationReason(Enum):
    """Why a trajectory run stopped."""

    RANGE_LIMIT = auto()
    TIME_LIMIT = auto()
    SIGHT_LINE = auto()
    MINIMUM_VELOCITY = auto()


class IntegrationResult(NamedTuple):
    states: Tuple[TrajectoryState, ...]
    reason: TerminationReason
    step_count: int

    @property
    def terminal(self) -> TrajectoryState:
        return self.states[-1]


def _require_limit(name: str, value: float) -> float:
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{name} must be positive and finite, got {value!r}")
    return float(value)


_BaseEngineConfigDictT = TypeVar("_BaseEngineConfigDictT", bound='BaseEngineConfigDict', covariant=True)


class BaseIntegrationEngine(ABC, EngineProtocol[_BaseEngineConfigDictT]):
    """All calculations are done in SI units (meters, seconds, kilograms)."""

    DEFAULT_TIME_STEP: float = 1e-3  # seconds

    def __init__(self, _config: Optional[_BaseEngineConfigDictT] = None):
        """Initialize the class.

        Args:
            _config: The configuration object.
        """
        self._config: BaseEngineConfig = create_base_engine_config(_config)
        self.gravity_vector: Vector = Vector(.0, self._config.cGravityConstant, .0)

    @property
    def config(self) -> BaseEngineConfig:
        return self._config

    def get_calc_step(self) -> float:
        """Integration time step in seconds."""
        return self._config.cStepMultiplier * self.DEFAULT_TIME_STEP

    def _init_trajectory(self, shot: Shot, barrel_elevation: float = 0.0) -> ShotProps:
        """Convert Shot into engine-ready scalars."""
        return ShotProps.from_shot(shot, barrel_elevation, self._config.cSpinDriftFactor)

    def _acceleration(self, props: ShotProps, time: float, position: Vector, velocity: Vector) -> Vector:
        """Total acceleration (m/s²) acting on the projectile.

        ```
        a = g - rho * |V - W| * (V - W) * Cd(M) * pi / (8 * BC) + spin drift
        ```
        """
        density, sound_speed = props.density_and_sound_speed_at(position.y)
        # Air resistance seen by bullet is ground velocity minus wind velocity relative to ground
        relative_velocity = velocity - props.wind_vector
        relative_speed = relative_velocity.magnitude()
        drag = density * relative_speed * props.drag_by_mach(relative_speed / sound_speed)
        acceleration = self.gravity_vector - relative_velocity * drag  # type: ignore[operator]
        if props.has_spin_drift:
            acceleration += Vector(.0, .0, props.spin_drift_acceleration(time))  # type: ignore[operator]
        return acceleration

    @abstractmethod
    def _step(self, props: ShotProps, state: TrajectoryState, dt: float) -> TrajectoryState:
        """Advance `state` by `dt` seconds. Must not modify anything."""
        ...

    def integrate(self, shot_info: Shot,
                  elevation_angle: float,
                  max_range: Optional[float] = None,
                  max_time: Optional[float] = None,
                  *,
                  stop_at_sight_line: bool = True,
                  required_range: float = 0.0) -> Tuple[TrajectoryState, ...]:
        """Compute the trajectory of the shot fired at a given barrel elevation.

        Args:
            shot_info: The shot information.
            elevation_angle: Barrel elevation from horizontal (rad).
            max_range: Downrange limit (m). Defaults to config cMaximumRange.
            max_time: Time limit (s). Defaults to config cMaximumTime.
            stop_at_sight_line: End the run when the projectile falls through the line of sight.
            required_range: Distance (m) the projectile must pass for a velocity
                breakdown to be reported as an impact rather than an error.

        Returns:
            Time-ordered states, the last one being the impact state.

        Raises:
            SubsonicBreakdown: If speed decays below cMinimumVelocity before `required_range`.
            NumericalInstability: If the state becomes non-finite.
        """
        props = self._init_trajectory(shot_info, elevation_angle)
        range_limit = _require_limit('max_range', self._config.cMaximumRange if max_range is None else max_range)
        time_limit = _require_limit('max_time', self._config.cMaximumTime if max_time is None else max_time)
        return self._integrate(props, range_limit, time_limit,
                               stop_at_sight_line=stop_at_sight_line,
                               required_range=required_range).states

    def _integrate(self, props: ShotProps, range_limit: float, time_limit: float, *,
                   stop_at_sight_line: bool = True,
                   minimum_velocity: Optional[float] = None,
                   required_range: float = 0.0) -> IntegrationResult:
        """Run the trajectory loop for prepared shot properties.

        Args:
            props: Information specific to the shot, including barrel elevation.
            range_limit: Meters downrange to stop calculation; the terminal state is
                interpolated onto this distance.
            time_limit: Seconds of flight to stop calculation.
            stop_at_sight_line: End when the projectile descends below the line of sight
                by more than cImpactTolerance after having reached it.
            minimum_velocity: Overrides cMinimumVelocity (0 disables the check).
            required_range: See `integrate`.

        Returns:
            IntegrationResult with the recorded states and the termination reason.
        """
        _cMinimumVelocity = self._config.cMinimumVelocity if minimum_velocity is None else minimum_velocity
        _cImpactTolerance = self._config.cImpactTolerance
        dt = self.get_calc_step()

        velocity_vector = Vector(
            math.cos(props.barrel_elevation), math.sin(props.barrel_elevation), .0
        ).mul_by_const(props.muzzle_velocity)
        state = TrajectoryState(time=.0, position=Vector(.0, .0, .0), velocity=velocity_vector)
        states: List[TrajectoryState] = [state]
        # Sight-line impact is only detected once the projectile has reached the line of sight
        reached_sight_line = state.position.y >= props.line_of_sight_height(.0) - _cImpactTolerance

        termination_reason: Optional[TerminationReason] = None
        integration_step_count = 0
        while termination_reason is None:
            integration_step_count += 1
            try:
                new_state = self._step(props, state, dt)
            except (ArithmeticError, ValueError) as exc:
                logger.warning(f"Step {integration_step_count} failed: {exc}")
                raise NumericalInstability(state.time + dt, str(exc)) from exc

            if not new_state.is_finite():
                logger.warning(f"Non-finite state after {integration_step_count} steps")
                raise NumericalInstability(new_state.time, f"step {integration_step_count}, dt={dt}")

            if new_state.speed < _cMinimumVelocity:
                termination_reason = TerminationReason.MINIMUM_VELOCITY
                if new_state.position.x <= required_range:
                    logger.debug(f"Minimum velocity reached at {new_state.position.x:.2f} m")
                    raise SubsonicBreakdown(new_state.position.x, new_state.speed, required_range)
                # The last state before breakdown is the impact state
                break

            x = new_state.position.x
            if x >= range_limit:
                if x > range_limit:
                    new_state = TrajectoryState.interpolate_x(range_limit, state, new_state)
                termination_reason = TerminationReason.RANGE_LIMIT
            elif stop_at_sight_line:
                sight_line = props.line_of_sight_height(x)
                if new_state.position.y >= sight_line - _cImpactTolerance:
                    reached_sight_line = True
                elif reached_sight_line:
                    termination_reason = TerminationReason.SIGHT_LINE
            if termination_reason is None and new_state.time >= time_limit:
                termination_reason = TerminationReason.TIME_LIMIT

            states.append(new_state)
            state = new_state

        logger.debug(f"{type(self).__name__} ran {integration_step_count} iterations: {termination_reason.name}")
        return IntegrationResult(tuple(states), termination_reason, integration_step_count)

    def zero_angle(self, shot_info: Shot, distance: Optional[float] = None) -> float:
        """Find the barrel elevation needed to cross the line of sight at a specific distance.

        Zeroing runs use a level line of sight and no wind.

        Args:
            shot_info: The shot information.
            distance: Zero distance (m). Defaults to `shot_info.launch.zero_distance`.

        Returns:
            Barrel elevation (rad) relative to the line of sight.

        Raises:
            ZeroNotFound: If the distance is out of reach, the bracket holds no root,
                or the iteration budget is exhausted.
        """
        props = self._init_trajectory(shot_info)
        if distance is None:
            distance = props.zero_distance
        return self._zero_angle(props, _require_limit('distance', distance))

    def _zero_angle(self, props: ShotProps, distance: float) -> float:
        """Illinois iteration over barrel elevation for a particular zero.

        Args:
            props: Shot parameters
            distance: Horizontal zero distance (m).

        Returns:
            Barrel elevation (rad) at which height equals sight height at `distance`.
        """
        _cZeroFindingAccuracy = self._config.cZeroFindingAccuracy
        _cMaxIterations = self._config.cMaxIterations
        zero_props = props.for_zeroing()
        target_height = zero_props.sight_height
        iterations_count = 0

        def error_at_distance(angle_rad: float) -> float:
            """Signed vertical error (m) at the zero distance."""
            result = self._integrate(zero_props.with_elevation(angle_rad), distance, self._config.cMaximumTime,
                                     stop_at_sight_line=False, minimum_velocity=0.0)
            terminal = result.terminal
            if result.reason is not TerminationReason.RANGE_LIMIT:
                shortfall = distance - terminal.position.x
                logger.warning(f"Zero distance {distance} m out of reach at {angle_rad} rad elevation")
                raise ZeroNotFound(shortfall, iterations_count, angle_rad, ZeroNotFound.OUT_OF_REACH)
            return terminal.position.y - target_height

        low, high = .0, self._config.cMaxZeroElevation
        f_low = error_at_distance(low)
        if math.fabs(f_low) < _cZeroFindingAccuracy:
            return low
        f_high = error_at_distance(high)
        if math.fabs(f_high) < _cZeroFindingAccuracy:
            return high
        if f_low * f_high > 0:
            logger.warning(f"No sign change for zero at {distance} m: errors {f_low:.4f} m, {f_high:.4f} m")
            raise ZeroNotFound(min(f_low, f_high, key=math.fabs), iterations_count,
                               low if math.fabs(f_low) < math.fabs(f_high) else high,
                               ZeroNotFound.NO_SIGN_CHANGE)

        side = 0
        angle, error = low, f_low
        while iterations_count < _cMaxIterations:
            iterations_count += 1
            angle = (f_low * high - f_high * low) / (f_low - f_high)
            error = error_at_distance(angle)
            if math.fabs(error) < _cZeroFindingAccuracy:
                logger.debug(f"Zero found after {iterations_count} iterations: {angle} rad")
                return angle
            if error * f_high > 0:
                high, f_high = angle, error
                if side == -1:
                    f_low /= 2
                side = -1
            else:
                low, f_low = angle, error
                if side == 1:
                    f_high /= 2
                side = 1

        logger.warning(f"Zero search did not converge after {iterations_count} iterations")
        raise ZeroNotFound(error, iterations_count, angle, ZeroNotFound.NON_CONVERGENT)
