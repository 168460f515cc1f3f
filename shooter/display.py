"""Scoped acquisition of the pygame resources the game draws with.

`open_display` brings up the video subsystem, the window, the text
subsystem and the score font, in that order, and always shuts pygame
down on exit, whether the run ended by quit, game over or an exception.
Any acquisition failure raises `InitializationError` naming the resource.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

import pygame

from shooter.constants import ARENA_HEIGHT, ARENA_WIDTH, FONT_SIZE, WINDOW_TITLE
from shooter.logger import get_logger
from shooter.settings import Settings

log = get_logger("display")


class InitializationError(RuntimeError):
    def __init__(self, resource: str, detail: str = ""):
        self.resource = resource
        self.detail = detail
        msg = f"{resource} could not be initialized"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


@dataclass
class DisplayContext:
    screen: pygame.Surface
    font: pygame.font.Font
    clock: pygame.time.Clock


def load_font(path: str | None, size: int = FONT_SIZE) -> pygame.font.Font:
    """Load the score font; `None` selects pygame's bundled default font."""
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as exc:
        raise InitializationError("font", f"{path or 'default'} ({exc})") from exc


@contextmanager
def open_display(settings: Settings, size: tuple[int, int] = (ARENA_WIDTH, ARENA_HEIGHT)) -> Iterator[DisplayContext]:
    try:
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise InitializationError("video subsystem", str(exc)) from exc

        try:
            screen = pygame.display.set_mode(size)
        except pygame.error as exc:
            raise InitializationError("window", str(exc)) from exc

        if screen is None:
            raise InitializationError("renderer", "no display surface")
        pygame.display.set_caption(WINDOW_TITLE)

        try:
            pygame.font.init()
        except pygame.error as exc:
            raise InitializationError("text subsystem", str(exc)) from exc

        font = load_font(settings.font_path)
        log.debug("display ready", screen.get_size())
        yield DisplayContext(screen=screen, font=font, clock=pygame.time.Clock())
    finally:
        pygame.quit()
        log.debug("display released")


__all__ = ["InitializationError", "DisplayContext", "open_display", "load_font"]
