"""Frame composition.

Layer order (bottom -> top):
1. Background fill
2. Player
3. Active projectiles
4. Active enemies
5. Score label (HUD)

The renderer only reads simulation state. Presenting the frame
(`pygame.display.flip`) is left to the caller. The optional
`capture_sequence` records executed steps for tests, which avoids
sampling pixels.
"""

from __future__ import annotations

from typing import List, Optional

import pygame

from shooter.constants import (
    BACKGROUND_COLOR,
    ENEMY_COLOR,
    PLAYER_COLOR,
    PROJECTILE_COLOR,
    SCORE_COLOR,
    SCORE_RECT,
)
from shooter.simulation import SimulationState


class Renderer:
    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self._label_score: Optional[int] = None
        self._label: Optional[pygame.Surface] = None

    def score_label(self, score: int) -> pygame.Surface:
        """Score text stretched to the HUD rect; re-rendered only when the score changes."""
        if self._label is None or score != self._label_score:
            text = self.font.render(f"Score: {score}", False, SCORE_COLOR)
            self._label = pygame.transform.scale(text, SCORE_RECT[2:])
            self._label_score = score
        return self._label

    def render(
        self,
        state: SimulationState,
        target_surface: pygame.Surface,
        capture_sequence: Optional[List[str]] = None,
    ) -> None:
        seq = capture_sequence
        target_surface.fill(BACKGROUND_COLOR)
        if seq is not None:
            seq.append("background")

        pygame.draw.rect(target_surface, PLAYER_COLOR, state.player.rect)
        if seq is not None:
            seq.append("player")

        for proj in state.projectiles.active():
            pygame.draw.rect(target_surface, PROJECTILE_COLOR, proj.rect)
        if seq is not None:
            seq.append("projectiles")

        for enemy in state.enemies.active():
            pygame.draw.rect(target_surface, ENEMY_COLOR, enemy.rect)
        if seq is not None:
            seq.append("enemies")

        target_surface.blit(self.score_label(state.score), SCORE_RECT[:2])
        if seq is not None:
            seq.append("hud")


__all__ = ["Renderer"]
