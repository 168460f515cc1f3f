"""Directional controls.

Tracks which direction actions are currently held and derives the
player's velocity from the held set, so releasing one of two opposite
keys leaves the other in effect.
"""

from __future__ import annotations

from typing import Iterable, Set

from shooter.constants import PLAYER_SPEED

DIRECTIONS = ("up", "down", "left", "right")


class MovementControls:
    def __init__(self, speed: float = PLAYER_SPEED) -> None:
        self.speed = speed
        self._held: Set[str] = set()
        self.fire_requested = False

    @property
    def held(self) -> frozenset:
        return frozenset(self._held)

    def apply_actions(self, actions: Iterable[str]) -> None:
        """Fold one frame of router actions into the held state.

        `fire` is edge-triggered and stays requested until `consume_fire`.
        """
        for act in actions:
            if act in DIRECTIONS:
                self._held.add(act)
            elif act.startswith("stop_") and act[5:] in DIRECTIONS:
                self._held.discard(act[5:])
            elif act == "fire":
                self.fire_requested = True

    def consume_fire(self) -> bool:
        requested = self.fire_requested
        self.fire_requested = False
        return requested

    def velocity(self) -> tuple[float, float]:
        dx = ("right" in self._held) - ("left" in self._held)
        dy = ("down" in self._held) - ("up" in self._held)
        return dx * self.speed, dy * self.speed


__all__ = ["MovementControls", "DIRECTIONS"]
