"""Runge-Kutta 4th order integration engine for ballistic trajectory calculations.

Classes:
    RK4IntegrationEngine: Concrete implementation using 4th-order Runge-Kutta

Examples:
    >>> from py_ballistics_engine import Calculator
    >>> calc = Calculator(engine="rk4_engine")

Mathematical Background:
    The RK4 method approximates the solution to dy/dt = f(t, y) using:

    k₁ = h * f(tₙ, yₙ)
    k₂ = h * f(tₙ + h/2, yₙ + k₁/2)
    k₃ = h * f(tₙ + h/2, yₙ + k₂/2)
    k₄ = h * f(tₙ + h, yₙ + k₃)

    yₙ₊₁ = yₙ + (k₁ + 2k₂ + 2k₃ + k₄)/6

    Here y is the pair (position, velocity), so each stage evaluates the full
    acceleration (drag with altitude-dependent air, gravity, spin drift).

Algorithm Properties:
    - Order: 4 (local truncation error is O(h⁵))
    - Four acceleration evaluations per step
    - Fixed step size (not adaptive)

See Also:
    py_ballistics_engine.engines.euler: Simpler default method
    py_ballistics_engine.engines.base_engine.BaseIntegrationEngine: Base class
"""

from typing_extensions import override

from py_ballistics_engine.engines.base_engine import BaseEngineConfigDict, BaseIntegrationEngine
from py_ballistics_engine.shot import ShotProps
from py_ballistics_engine.trajectory_data import TrajectoryState

__all__ = ('RK4IntegrationEngine',)


class RK4IntegrationEngine(BaseIntegrationEngine[BaseEngineConfigDict]):
    """Runge-Kutta 4th order integration engine for ballistic trajectory calculations.

    Examples:
        >>> precise_config = BaseEngineConfigDict(cStepMultiplier=0.5)
        >>> engine = RK4IntegrationEngine(precise_config)
        >>> engine.get_calc_step()
        0.0005
    """

    DEFAULT_TIME_STEP = 1e-3

    @override
    def _step(self, props: ShotProps, state: TrajectoryState, dt: float) -> TrajectoryState:
        t, x, v = state
        half = 0.5 * dt
        # Spin drift acceleration is singular at t=0, so the first stage samples it mid-step
        a1 = self._acceleration(props, t + half if t == 0 else t, x, v)
        p1 = v
        p2 = v + a1.mul_by_const(half)
        a2 = self._acceleration(props, t + half, x + p1.mul_by_const(half), p2)
        p3 = v + a2.mul_by_const(half)
        a3 = self._acceleration(props, t + half, x + p2.mul_by_const(half), p3)
        p4 = v + a3.mul_by_const(dt)
        a4 = self._acceleration(props, t + dt, x + p3.mul_by_const(dt), p4)

        sixth = dt / 6.0
        velocity = v + (a1 + a2.mul_by_const(2) + a3.mul_by_const(2) + a4).mul_by_const(sixth)
        position = x + (p1 + p2.mul_by_const(2) + p3.mul_by_const(2) + p4).mul_by_const(sixth)
        return TrajectoryState(t + dt, position, velocity)
