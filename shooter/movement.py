"""Position integration.

Positions are integer pixels; each axis moves by `int(velocity * dt_ms)`,
truncated toward zero. Only the player is kept inside the arena.
Projectiles and enemies are allowed to leave it and are retired by their
systems.
"""

from __future__ import annotations

import pygame

from shooter.entities import Body, Player
from shooter.geometry import arena_rect


def integrate(body: Body, dt_ms: int) -> None:
    body.rect.x += int(body.vx * dt_ms)
    body.rect.y += int(body.vy * dt_ms)


def clamp_to_arena(rect: pygame.Rect, arena: pygame.Rect | None = None) -> None:
    """Shift `rect` so it lies fully inside `arena`. Idempotent."""
    rect.clamp_ip(arena if arena is not None else arena_rect())


def move_player(player: Player, dt_ms: int, arena: pygame.Rect | None = None) -> None:
    integrate(player.body, dt_ms)
    clamp_to_arena(player.rect, arena)


__all__ = ["integrate", "clamp_to_arena", "move_player"]
