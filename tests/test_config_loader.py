import logging

import pytest

from py_ballistics_engine import (Calculator, RK4IntegrationEngine, EulerIntegrationEngine, basicConfig,
                                  get_defaults, set_defaults)
from py_ballistics_engine.logger import logger


@pytest.fixture(autouse=True)
def restore_defaults():
    yield
    set_defaults()


class TestConfigLoader:

    def test_set_defaults(self):
        set_defaults('rk4_engine', {'cMinimumVelocity': 30.0})
        assert get_defaults() == ('rk4_engine', {'cMinimumVelocity': 30.0})
        calc = Calculator()
        assert isinstance(calc._engine_instance, RK4IntegrationEngine)
        assert calc._engine_instance.config.cMinimumVelocity == 30.0

    def test_explicit_config_overrides_defaults(self):
        set_defaults(None, {'cMinimumVelocity': 30.0, 'cStepMultiplier': 2.0})
        calc = Calculator(config={'cStepMultiplier': 0.5})
        assert isinstance(calc._engine_instance, EulerIntegrationEngine)
        assert calc._engine_instance.config.cMinimumVelocity == 30.0
        assert calc._engine_instance.config.cStepMultiplier == 0.5

    def test_defaults_are_copied(self):
        config = {'cMaxIterations': 5}
        set_defaults(None, config)
        config['cMaxIterations'] = 50
        _, engine_config = get_defaults()
        engine_config['cMaxIterations'] = 500
        assert get_defaults()[1] == {'cMaxIterations': 5}

    def test_basic_config_manual(self):
        basicConfig(engine_config={'cGravityConstant': -9.81}, engine='rk4_engine')
        calc = Calculator()
        assert isinstance(calc._engine_instance, RK4IntegrationEngine)
        assert calc.gravity_vector.y == -9.81

    def test_basic_config_file(self, tmp_path):
        config_file = tmp_path / "pybe.toml"
        config_file.write_text(
            '[pybe]\n'
            'engine = "rk4_engine"\n'
            '\n'
            '[pybe.engine_config]\n'
            'cZeroFindingAccuracy = 1e-5\n'
            'cMaximumRange = 2000.0\n'
        )
        basicConfig(str(config_file))
        assert get_defaults() == ('rk4_engine', {'cZeroFindingAccuracy': 1e-5, 'cMaximumRange': 2000.0})
        assert Calculator()._engine_instance.config.cMaximumRange == 2000.0

    def test_basic_config_discovery(self, tmp_path, monkeypatch):
        (tmp_path / ".pybe.toml").write_text('[pybe.engine_config]\ncMaxIterations = 12\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        basicConfig()
        assert get_defaults() == (None, {'cMaxIterations': 12})

    def test_missing_section_warns(self, tmp_path, caplog):
        config_file = tmp_path / "pybe.toml"
        config_file.write_text('[other]\nvalue = 1\n')
        with caplog.at_level(logging.WARNING, logger=logger.name):
            basicConfig(str(config_file))
        assert "no `pybe` section" in caplog.text
        assert get_defaults() == (None, {})

    def test_missing_section_suppressed(self, tmp_path, caplog):
        config_file = tmp_path / "pybe.toml"
        config_file.write_text('[other]\nvalue = 1\n')
        with caplog.at_level(logging.WARNING, logger=logger.name):
            basicConfig(str(config_file), suppress_warnings=True)
        assert "pybe" not in caplog.text

    def test_file_and_manual_conflict(self, tmp_path):
        with pytest.raises(ValueError):
            basicConfig(str(tmp_path / "pybe.toml"), engine_config={'cMaxIterations': 3})
