"""Entity records.

Every entity owns a `Body` (rectangle + velocity) instead of inheriting
from a common physics base; kind-specific fields sit next to it. Sizes are
fixed when the entity is created and never changed afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import pygame

from shooter.constants import (
    ENEMY_DESCENT_SPEED,
    ENEMY_SIZE,
    PLAYER_SIZE,
    PLAYER_START,
    PROJECTILE_SIZE,
    PROJECTILE_SPEED,
)


@dataclass
class Body:
    rect: pygame.Rect
    vx: float = 0.0  # px per ms
    vy: float = 0.0

    @property
    def velocity(self) -> tuple[float, float]:
        return self.vx, self.vy


@dataclass
class Player:
    body: Body
    kind: ClassVar[str] = "player"

    @classmethod
    def spawn(cls, x: int = PLAYER_START[0], y: int = PLAYER_START[1]) -> "Player":
        return cls(Body(pygame.Rect(x, y, *PLAYER_SIZE)))

    @property
    def rect(self) -> pygame.Rect:
        return self.body.rect


@dataclass
class Projectile:
    body: Body
    active: bool = True
    kind: ClassVar[str] = "projectile"

    @classmethod
    def launch_from(cls, shooter_rect: pygame.Rect) -> "Projectile":
        """Projectile centred horizontally on `shooter_rect`, at its top edge, moving up."""
        w, h = PROJECTILE_SIZE
        x = shooter_rect.x + shooter_rect.w // 2 - w // 2
        return cls(Body(pygame.Rect(x, shooter_rect.y, w, h), 0.0, -PROJECTILE_SPEED))

    @property
    def rect(self) -> pygame.Rect:
        return self.body.rect


@dataclass
class Enemy:
    body: Body
    active: bool = True
    kind: ClassVar[str] = "enemy"

    @classmethod
    def at(cls, x: int, y: int = 0, speed: float = ENEMY_DESCENT_SPEED) -> "Enemy":
        return cls(Body(pygame.Rect(x, y, *ENEMY_SIZE), 0.0, speed))

    @property
    def rect(self) -> pygame.Rect:
        return self.body.rect

    @property
    def speed(self) -> float:
        return self.body.vy


__all__ = ["Body", "Player", "Projectile", "Enemy"]
