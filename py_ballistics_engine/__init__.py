"""Point-mass exterior ballistics engine."""

import importlib.metadata

__version__ = importlib.metadata.version("py_ballistics_engine")

# Standard library imports
import os
import sys

# Third-party imports
from typing_extensions import Any, Dict, Optional

# Local imports
from .logger import logger as log
from .interface import Calculator, _EngineLoader, get_defaults, integrate, set_defaults, solve, solve_zero_angle

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load engine defaults from a .pybe.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pybe.toml or pybe.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pybe_toml(start_dir: Optional[str] = None) -> Optional[str]:
        """Search for the config file starting from the specified directory.

        Args:
            start_dir: The directory to start searching from. Default is the current working directory.

        Returns:
            The absolute path to the config file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir or os.getcwd())
        while True:
            pybe_paths = [
                os.path.join(current_dir, '.pybe.toml'),
                os.path.join(current_dir, 'pybe.toml'),
            ]
            for pybe_path in pybe_paths:
                if os.path.exists(pybe_path):
                    return os.path.abspath(pybe_path)

            # Move to the parent directory
            parent_dir = os.path.dirname(current_dir)

            # If we have reached the root directory, stop searching
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        filepath = find_pybe_toml()

    engine = None
    engine_config: Dict[str, Any] = {}
    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

        if _pybe := _config.get('pybe'):
            engine = _pybe.get('engine')
            engine_config = dict(_pybe.get('engine_config', {}))
            if engine is None and not engine_config and not suppress_warnings:
                log.warning("Config `pybe` section has no `engine` or `engine_config`")
        elif not suppress_warnings:
            log.warning("Config has no `pybe` section")

    set_defaults(engine, engine_config)  # type: ignore[arg-type]
    log.debug("Calculator defaults load success")


def _basic_config(filename: Optional[str] = None,
                  engine_config: Optional[Dict[str, Any]] = None,
                  engine: Optional[str] = None,
                  suppress_warnings: bool = False) -> None:
    """Load engine defaults from file or Mapping.

    Args:
        filename: Configuration file path
        engine_config: Dictionary of BaseEngineConfig overrides
        engine: Engine entry-point name or "module:Class"
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and engine_config are provided
    """
    if filename and (engine_config or engine):
        raise ValueError("Can't use engine_config and config file at same time")
    if not filename and (engine_config or engine):
        set_defaults(engine, engine_config)  # type: ignore[arg-type]
    else:
        # trying to load definitions from pybe.toml
        _load_config(filename, suppress_warnings)


basicConfig = _basic_config

basicConfig()


from .conditions import AtmosphericConditions, WindConditions, density_and_sound_speed, components
from .constants import *
from .drag_model import DragModel, DragDataPoint, DragTable, make_data_points, sectional_density, form_factor
from .drag_tables import TableG1, TableG7, TableG8, get_drag_tables_names
from .engines import (create_base_engine_config, BaseEngineConfig, BaseEngineConfigDict,
                      BaseIntegrationEngine, EulerIntegrationEngine, RK4IntegrationEngine,
                      IntegrationResult, TerminationReason)
from .exceptions import (ValidationError, InvalidDragModel, InvalidAtmosphere, SolverRuntimeError,
                         ZeroNotFound, SubsonicBreakdown, NumericalInstability)
from .logger import logger, enable_file_logging, disable_file_logging
from .munition import ProjectileSpec, LaunchConditions
from .shot import Shot, ShotProps
from .trajectory_data import TrajectoryState, TrajectoryPoint, TrajectoryResult, assemble
from .vector import Vector

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__",
    # Skip imported modules and typing helpers
    "tomllib", "sys", "os", "importlib", "Any", "Dict", "Optional",
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
__all__.append("_EngineLoader")
