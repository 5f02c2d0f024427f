from importlib.metadata import EntryPoint
from typing import cast
from types import SimpleNamespace

import pytest

from py_ballistics_engine.generics.engine import EngineProtocol
from py_ballistics_engine.interface import _EngineLoader
from py_ballistics_engine import Calculator, EulerIntegrationEngine, RK4IntegrationEngine


class TestEngineLoader:
    def test_entry_point_loaded(self, loaded_engine_instance):
        assert isinstance(loaded_engine_instance, EngineProtocol), "Not implements EngineProtocol"

    def test_iter_engines_non_empty(self):
        engines = list(Calculator.iter_engines())
        assert {'euler_engine', 'rk4_engine'} <= {ep.name for ep in engines}

    def test_engine_by_name(self):
        assert _EngineLoader.load('rk4_engine') is RK4IntegrationEngine
        assert _EngineLoader.load('euler_engine') is EulerIntegrationEngine

    def test_engine_by_path(self):
        assert _EngineLoader.load('py_ballistics_engine.engines.rk4:RK4IntegrationEngine') is RK4IntegrationEngine

    def test_engine_by_class(self):
        assert _EngineLoader.load(RK4IntegrationEngine) is RK4IntegrationEngine

    def test_engine_loader_fallback_invalid(self):
        with pytest.raises(ValueError):
            _ = Calculator(engine='not_an_engine')

    def test_engine_loader_bad_path(self):
        with pytest.raises(ValueError):
            _ = Calculator(engine='py_ballistics_engine.engines.rk4:NoSuchEngine')

    def test_engine_loader_bad_type(self):
        with pytest.raises(TypeError):
            _EngineLoader.load(42)  # type: ignore[arg-type]

    def test_calculator_attr_missing(self, loaded_engine_instance):
        calc = Calculator(engine=loaded_engine_instance)
        # Missing attribute should raise AttributeError
        with pytest.raises(AttributeError):
            _ = getattr(calc, 'no_such_method')

    def test_calculator_delegates_to_engine(self):
        calc = Calculator(engine=RK4IntegrationEngine, config={'cStepMultiplier': 0.5})
        assert calc.get_calc_step() == pytest.approx(0.5e-3)
        assert calc.config == {'cStepMultiplier': 0.5}
        assert calc._engine_instance.config.cStepMultiplier == 0.5


@pytest.mark.extended
class TestEngineLoaderExtended:

    class DummyEP:
        def __init__(self, name: str, value: str, group: str, loader):
            self.name = name
            self.value = value
            self.group = group
            self._loader = loader

        def load(self):  # Mimic importlib.metadata.EntryPoint API
            return self._loader()

    def test_load_from_entry_import_error(self):
        def boom():
            raise ImportError("nope")

        ep = self.DummyEP("bad_engine", "x.y:Z", _EngineLoader._entry_point_group, boom)
        assert _EngineLoader._load_from_entry(cast(EntryPoint, ep)) is None

    def test_load_from_entry_type_error(self):
        # Return an object that is not an EngineProtocol
        ep = self.DummyEP("not_engine", "x.y:Z", _EngineLoader._entry_point_group, lambda: SimpleNamespace())
        assert _EngineLoader._load_from_entry(cast(EntryPoint, ep)) is None

    def test_load_with_none_uses_default_engine(self):
        # Should not raise and should return a callable class
        cls = _EngineLoader.load(None)
        assert callable(cls)
        assert cls is EulerIntegrationEngine
