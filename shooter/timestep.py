"""Tick clocks.

`FixedTimestep` accumulates wall-clock frame time and releases it in equal
steps, so simulation outcomes do not depend on the host frame rate. The
number of catch-up steps per frame is bounded; excess time is dropped
rather than replayed.

`VariableTimestep` hands the raw elapsed time to the simulation as a single
step, reproducing frame-rate dependent behaviour.
"""

from __future__ import annotations

from typing import List

from shooter.constants import DEFAULT_STEP_MS, MAX_CATCH_UP_STEPS


class FixedTimestep:
    def __init__(self, step_ms: int = DEFAULT_STEP_MS, max_steps: int = MAX_CATCH_UP_STEPS):
        if step_ms <= 0:
            raise ValueError("step_ms must be positive")
        self.step_ms = step_ms
        self.max_steps = max_steps
        self._accum = 0

    @property
    def pending_ms(self) -> int:
        return self._accum

    def advance(self, elapsed_ms: int) -> List[int]:
        self._accum += max(0, elapsed_ms)
        steps = min(self._accum // self.step_ms, self.max_steps)
        if steps == self.max_steps:
            self._accum = 0
        else:
            self._accum -= steps * self.step_ms
        return [self.step_ms] * steps


class VariableTimestep:
    def advance(self, elapsed_ms: int) -> List[int]:
        return [max(0, elapsed_ms)]


def make_timestep(mode: str, step_ms: int = DEFAULT_STEP_MS):
    if mode == "fixed":
        return FixedTimestep(step_ms)
    if mode == "variable":
        return VariableTimestep()
    raise ValueError(f"unknown timestep mode {mode!r}")


__all__ = ["FixedTimestep", "VariableTimestep", "make_timestep"]
