"""EnemySystem.

Enemies enter at the top edge with a fixed chance per tick and descend at
their own speed. An enemy whose top edge reaches the bottom of the arena is
retired. Retired enemies (off-arena or shot) are dropped at the start of
the next update.

`retain_inactive=True` reproduces the original arcade behaviour instead:
retired enemies stay in the collection forever and keep moving. They never
collide or score, but the collection grows for the whole run.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from shooter.constants import ARENA_HEIGHT, ARENA_WIDTH, ENEMY_DESCENT_SPEED, ENEMY_SIZE, ENEMY_SPAWN_CHANCE
from shooter.entities import Enemy
from shooter.logger import get_logger
from shooter.movement import integrate
from shooter.rng_service import RNGService

log = get_logger("enemies")


class EnemySystem:
    def __init__(
        self,
        rng: RNGService,
        spawn_chance: float = ENEMY_SPAWN_CHANCE,
        descent_speed: float = ENEMY_DESCENT_SPEED,
        arena_width: int = ARENA_WIDTH,
        arena_height: int = ARENA_HEIGHT,
        retain_inactive: bool = False,
    ):
        self.rng = rng
        self.spawn_chance = spawn_chance
        self.descent_speed = descent_speed
        self.arena_width = arena_width
        self.arena_height = arena_height
        self.retain_inactive = retain_inactive
        self._enemies: List[Enemy] = []

    def __len__(self) -> int:
        return len(self._enemies)

    def __iter__(self) -> Iterator[Enemy]:
        return iter(self._enemies)

    def active(self) -> Iterator[Enemy]:
        return (e for e in self._enemies if e.active)

    # --- Spawning ------------------------------------------------------------
    def spawn_at(self, x: int, y: int = 0, speed: Optional[float] = None) -> Enemy:
        enemy = Enemy.at(x, y, self.descent_speed if speed is None else speed)
        self._enemies.append(enemy)
        log.debug("spawn enemy at", tuple(enemy.rect))
        return enemy

    def try_spawn(self) -> Optional[Enemy]:
        """Roll the per-tick spawn chance; on success add one enemy on the top edge."""
        if not self.rng.chance(self.spawn_chance):
            return None
        x = self.rng.randrange(self.arena_width - ENEMY_SIZE[0])
        return self.spawn_at(x)

    # --- Simulation ----------------------------------------------------------
    def compact(self) -> int:
        before = len(self._enemies)
        self._enemies = [e for e in self._enemies if e.active]
        return before - len(self._enemies)

    def update(self, dt_ms: int) -> Dict[str, int]:
        removed = 0 if self.retain_inactive else self.compact()
        left_arena = 0
        for enemy in self._enemies:
            integrate(enemy.body, dt_ms)
            if enemy.active and enemy.rect.top >= self.arena_height:
                enemy.active = False
                left_arena += 1
        return {"removed": removed, "left_arena": left_arena, "active": sum(1 for _ in self.active())}


__all__ = ["EnemySystem"]
