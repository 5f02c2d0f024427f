import logging

import pytest

from py_ballistics_engine.interface import _EngineLoader
from py_ballistics_engine.logger import logger

logger.setLevel(logging.DEBUG)


def pytest_addoption(parser):
    parser.addoption(
        "--engine",
        action="store",
        default=None,  # be sure to use the default value from _EngineLoader
        help="Specify the engine entry point name",
    )


@pytest.fixture(scope="class")
def loaded_engine_instance(request):
    engine_name = request.config.getoption("--engine", None)
    logger.info(f"Attempting to load engine: '{engine_name}'")
    try:
        engine = _EngineLoader.load(engine_name)
        try:
            # instantiate once to verify the engine accepts an empty config
            engine({})
        except Exception as e:
            raise Exception(f"Engine {engine} loaded but could not be instantiated: {e}")
        print(f"Successfully loaded engine: {engine}")
        yield engine
    except Exception as e:
        pytest.exit(f"Cannot start tests:\nFailed to load engine via _EngineLoader: {e}", returncode=1)
