"""Integration engines for ballistic trajectory calculations.

All engines implement the EngineProtocol interface and share the trajectory loop,
termination handling and zero search of BaseIntegrationEngine; they differ only
in the single-step update.

Available Engines:
    - BaseIntegrationEngine: Abstract base class for all integration engines
    - EulerIntegrationEngine: Semi-implicit Euler method (default, euler_engine)
    - RK4IntegrationEngine: Fourth-order Runge-Kutta method (rk4_engine)

Configuration:
    - All engines accept BaseEngineConfigDict for configuration.

Examples:
    >>> from py_ballistics_engine.engines import RK4IntegrationEngine, BaseEngineConfigDict
    >>> custom_config = BaseEngineConfigDict(cMinimumVelocity=30.0)

    >>> # Using with Calculator
    >>> from py_ballistics_engine import Calculator
    >>> calc = Calculator(engine="rk4_engine")  # By name
    >>> calc = Calculator(config=custom_config, engine=RK4IntegrationEngine)  # By class
"""

from .base_engine import *
from .euler import *
from .rk4 import *

__all__ = (
    # Base engine infrastructure
    'create_base_engine_config',
    'BaseEngineConfig',
    'BaseEngineConfigDict',
    'DEFAULT_BASE_ENGINE_CONFIG',
    'BaseIntegrationEngine',
    'IntegrationResult',
    'TerminationReason',

    # Integration engines
    'EulerIntegrationEngine',
    'RK4IntegrationEngine',
)
