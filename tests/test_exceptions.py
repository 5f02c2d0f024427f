import pytest

from py_ballistics_engine.exceptions import (InvalidAtmosphere, InvalidDragModel, NumericalInstability,
                                             SolverRuntimeError, SubsonicBreakdown, ValidationError, ZeroNotFound)

pytestmark = pytest.mark.extended


def test_hierarchy():
    assert issubclass(ValidationError, ValueError)
    assert issubclass(InvalidDragModel, ValidationError)
    assert issubclass(InvalidAtmosphere, ValidationError)
    assert issubclass(SolverRuntimeError, RuntimeError)
    for exc in (ZeroNotFound, SubsonicBreakdown, NumericalInstability):
        assert issubclass(exc, SolverRuntimeError)


def test_invalid_drag_model_message():
    err = InvalidDragModel("G3")
    assert err.token == "G3"
    assert "'G3'" in str(err)


def test_zero_not_found_message_and_attrs():
    err = ZeroNotFound(0.5, 7, 0.012)
    assert "after 7 iterations" in str(err)
    assert err.iterations_count == 7
    assert err.zero_finding_error == 0.5
    assert err.last_barrel_elevation == 0.012
    assert err.reason == ""

    err2 = ZeroNotFound(0.1, 2, 0.001, reason=ZeroNotFound.NON_CONVERGENT)
    assert str(err2).startswith(ZeroNotFound.NON_CONVERGENT)


def test_subsonic_breakdown_message_variants():
    err = SubsonicBreakdown(123.456, 14.9)
    assert err.last_distance == 123.456
    assert err.velocity == 14.9
    assert err.required_distance is None
    assert "123.46 m" in str(err)
    assert "before reaching" not in str(err)

    err2 = SubsonicBreakdown(50.0, 14.0, 100.0)
    assert "before reaching 100.00 m" in str(err2)


def test_numerical_instability_message():
    err = NumericalInstability(0.25)
    assert err.time == 0.25
    assert "t=0.25" in str(err)
    assert "overflow" in str(NumericalInstability(0.5, "overflow"))
