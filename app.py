"""Application entry point.

Owns the process-level loop: one central event poll per frame, input
routing into held controls, simulation ticks from the configured clock,
then render and present. Exit status:

    0  window closed / quit key, or game over (final score printed)
    1  a display, window, text or font resource could not be acquired
    2  invalid SHOOTER_* configuration
"""

from __future__ import annotations

import sys

import pygame

from shooter.controls import MovementControls
from shooter.display import InitializationError, open_display
from shooter.input_router import InputRouter
from shooter.logger import get_logger
from shooter.renderer import Renderer
from shooter.settings import Settings
from shooter.simulation import TickInput, new_run, step
from shooter.timestep import make_timestep

log = get_logger("app")


def run(settings: Settings) -> int:
    state = new_run(seed=settings.seed, legacy_enemies=settings.legacy_enemies)
    router = InputRouter(settings.key_bindings)
    controls = MovementControls()
    clock_steps = make_timestep(settings.timestep, settings.step_ms)

    with open_display(settings) as ctx:
        renderer = Renderer(ctx.font)
        ctx.clock.tick()
        log.info("run started", f"(timestep={settings.timestep}, seed={settings.seed!r})")
        while True:
            # --- Single central event poll ---
            actions = router.process(pygame.event.get())
            if "quit" in actions:
                log.info("quit requested after", state.ticks, "ticks")
                return 0
            controls.apply_actions(actions)

            # --- Simulation ---
            elapsed_ms = ctx.clock.tick(settings.fps)
            for dt_ms in clock_steps.advance(elapsed_ms):
                result = step(state, TickInput(controls.velocity(), controls.consume_fire()), dt_ms)
                if result.game_over:
                    break

            # --- Render & present ---
            renderer.render(state, ctx.screen)
            pygame.display.flip()

            if state.game_over:
                print(f"Game Over! Score: {state.score}")
                return 0


def main() -> int:
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        log.error("invalid configuration:", exc)
        return 2
    try:
        return run(settings)
    except InitializationError as exc:
        log.error(exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
