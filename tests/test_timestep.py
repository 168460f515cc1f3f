import pytest

from shooter.timestep import FixedTimestep, VariableTimestep, make_timestep


def test_fixed_step_accumulates_remainder():
    ts = FixedTimestep(step_ms=16)
    assert ts.advance(10) == []
    assert ts.advance(10) == [16]
    assert ts.pending_ms == 4


def test_fixed_step_bounds_catch_up():
    ts = FixedTimestep(step_ms=16, max_steps=5)
    assert ts.advance(1000) == [16] * 5
    assert ts.pending_ms == 0


def test_variable_step_passes_elapsed_through():
    assert VariableTimestep().advance(23) == [23]


def test_make_timestep_rejects_unknown_mode():
    assert isinstance(make_timestep("fixed", 10), FixedTimestep)
    with pytest.raises(ValueError):
        make_timestep("warp")
