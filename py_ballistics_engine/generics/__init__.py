"""Generic type definitions for ballistic calculation engines.

Protocol Definitions:
    EngineProtocol: Core interface for ballistic trajectory calculation engines

Type Variables:
    ConfigT: Generic configuration type for engine parameters
"""

from .engine import *

__all__ = ['EngineProtocol', 'ConfigT']
