"""ProjectileSystem.

Owns every live projectile and runs its per-tick lifecycle:

  1. Compaction: projectiles retired on the previous tick are dropped.
  2. Movement: survivors are integrated (no arena clamp).
  3. Off-arena: a projectile fully above the top edge, or whose top edge is
     on or below the bottom edge, is retired.
  4. Enemy hits: each still-active projectile is tested against the active
     enemies in order; the first overlap retires both and scores a hit.
     A retired projectile is not tested again, so it hits at most one enemy
     per tick, and an enemy retired by an earlier projectile this tick is
     no longer a target.

Rendering does not happen here; the renderer asks for `active()` rects.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from shooter.constants import ARENA_HEIGHT
from shooter.entities import Enemy, Projectile
from shooter.geometry import overlaps
from shooter.logger import get_logger
from shooter.movement import integrate

log = get_logger("projectiles")


class ProjectileSystem:
    def __init__(self, arena_height: int = ARENA_HEIGHT):
        self.arena_height = arena_height
        self._projectiles: List[Projectile] = []

    # --- Collection Protocol -------------------------------------------------
    def __len__(self) -> int:
        return len(self._projectiles)

    def __iter__(self) -> Iterator[Projectile]:
        return iter(self._projectiles)

    def active(self) -> Iterator[Projectile]:
        return (p for p in self._projectiles if p.active)

    # --- API -----------------------------------------------------------------
    def add(self, projectile: Projectile) -> Projectile:
        self._projectiles.append(projectile)
        return projectile

    def compact(self) -> int:
        before = len(self._projectiles)
        self._projectiles = [p for p in self._projectiles if p.active]
        return before - len(self._projectiles)

    def is_off_arena(self, projectile: Projectile) -> bool:
        rect = projectile.rect
        return rect.bottom < 0 or rect.top >= self.arena_height

    # --- Simulation ----------------------------------------------------------
    def update(self, dt_ms: int, enemies: Iterable[Enemy]) -> Dict[str, int]:
        """Advance all projectiles one tick and resolve enemy hits.

        Returns a summary dict; `hits_enemy` is the number of enemies
        destroyed this tick.
        """
        removed = self.compact()
        left_arena = 0
        hits_enemy = 0
        targets = list(enemies)

        for proj in self._projectiles:
            integrate(proj.body, dt_ms)
            if self.is_off_arena(proj):
                proj.active = False
                left_arena += 1
                continue

            for enemy in targets:
                if enemy.active and overlaps(proj.rect, enemy.rect):
                    proj.active = False
                    enemy.active = False
                    hits_enemy += 1
                    log.debug("hit enemy at", tuple(enemy.rect))
                    break

        return {
            "removed": removed,
            "left_arena": left_arena,
            "hits_enemy": hits_enemy,
            "active": sum(1 for _ in self.active()),
        }


__all__ = ["ProjectileSystem"]
