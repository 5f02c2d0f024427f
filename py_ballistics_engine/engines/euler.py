"""Euler integration engine for ballistic trajectory calculations.

The Euler method is a first-order numerical integration technique. This engine
uses its semi-implicit (symplectic) form: velocity is updated first and the new
velocity moves the projectile, which keeps the method stable at the small fixed
time step used here.

Classes:
    EulerIntegrationEngine: Concrete implementation using semi-implicit Euler

Examples:
    >>> from py_ballistics_engine import Calculator
    >>> calc = Calculator(engine="py_ballistics_engine:EulerIntegrationEngine")

Mathematical Background:
    For a step of size h:

    v(t + h) = v(t) + h * a(t, x(t), v(t))
    x(t + h) = x(t) + h * v(t + h)

See Also:
    py_ballistics_engine.engines.rk4: More accurate RK4 integration
    py_ballistics_engine.engines.base_engine.BaseIntegrationEngine: Base class
"""

from typing_extensions import override

from py_ballistics_engine.engines.base_engine import BaseEngineConfigDict, BaseIntegrationEngine
from py_ballistics_engine.shot import ShotProps
from py_ballistics_engine.trajectory_data import TrajectoryState

__all__ = ('EulerIntegrationEngine',)


class EulerIntegrationEngine(BaseIntegrationEngine[BaseEngineConfigDict]):
    """Semi-implicit Euler integration engine.

    Attributes:
        DEFAULT_TIME_STEP: Default time step in seconds (0.5 ms).

    Examples:
        >>> config = BaseEngineConfigDict(cMinimumVelocity=30.0)
        >>> engine = EulerIntegrationEngine(config)
    """

    DEFAULT_TIME_STEP = 5e-4

    @override
    def _step(self, props: ShotProps, state: TrajectoryState, dt: float) -> TrajectoryState:
        # Spin drift acceleration is singular at t=0, so it is sampled mid-step
        acceleration = self._acceleration(props, state.time + 0.5 * dt, state.position, state.velocity)
        velocity = state.velocity + acceleration * dt  # type: ignore[operator]
        position = state.position + velocity * dt  # type: ignore[operator]
        return TrajectoryState(state.time + dt, position, velocity)
