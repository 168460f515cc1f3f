"""Fire control.

`CooldownGun` decides whether a fire attempt is accepted and, if so,
produces the projectile: one shot, then nothing until the cooldown has
strictly elapsed. Rejected attempts are silent; they return `None` and
leave the cooldown untouched.
"""

from __future__ import annotations

from typing import Optional

from shooter.constants import FIRE_COOLDOWN_MS
from shooter.entities import Player, Projectile
from shooter.logger import get_logger

log = get_logger("weapons")


class CooldownGun:
    name = "gun"

    def __init__(self, cooldown_ms: int = FIRE_COOLDOWN_MS, last_fire_ms: int | None = None):
        self.cooldown_ms = cooldown_ms
        # None until the first accepted shot; the first attempt of a run always fires.
        self.last_fire_ms = last_fire_ms

    def can_fire(self, now_ms: int) -> bool:
        if self.last_fire_ms is None:
            return True
        return now_ms - self.last_fire_ms > self.cooldown_ms

    def try_fire(self, player: Player, now_ms: int) -> Optional[Projectile]:
        if not self.can_fire(now_ms):
            return None
        self.last_fire_ms = now_ms
        projectile = Projectile.launch_from(player.rect)
        log.debug("fire at", now_ms, "ms ->", tuple(projectile.rect))
        return projectile


__all__ = ["CooldownGun"]
