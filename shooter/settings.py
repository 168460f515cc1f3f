"""Runtime configuration.

Defaults live on the `Settings` dataclass; `Settings.from_env` overlays the
`SHOOTER_*` environment variables. Nothing is persisted between runs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

import pygame

from shooter.constants import DEFAULT_FPS, DEFAULT_STEP_MS
from shooter.logger import get_logger

log = get_logger("settings")

TIMESTEP_MODES = ("fixed", "variable")


def default_key_bindings() -> Dict[str, List[int]]:
    return {
        "up": [pygame.K_UP, pygame.K_w],
        "down": [pygame.K_DOWN, pygame.K_s],
        "left": [pygame.K_LEFT, pygame.K_a],
        "right": [pygame.K_RIGHT, pygame.K_d],
        "fire": [pygame.K_SPACE],
        "quit": [pygame.K_ESCAPE],
    }


@dataclass
class Settings:
    seed: int | None = None
    timestep: str = "fixed"
    step_ms: int = DEFAULT_STEP_MS
    fps: int = DEFAULT_FPS
    font_path: str | None = None
    legacy_enemies: bool = False
    key_bindings: Dict[str, List[int]] = field(default_factory=default_key_bindings)

    def __post_init__(self):
        if self.timestep not in TIMESTEP_MODES:
            raise ValueError(f"unknown timestep mode {self.timestep!r}, expected one of {TIMESTEP_MODES}")
        if self.step_ms <= 0:
            raise ValueError(f"step_ms must be positive, got {self.step_ms}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        kwargs = {}
        if env.get("SHOOTER_SEED"):
            kwargs["seed"] = _parse_int("SHOOTER_SEED", env["SHOOTER_SEED"])
        if env.get("SHOOTER_TIMESTEP"):
            kwargs["timestep"] = env["SHOOTER_TIMESTEP"].strip().lower()
        if env.get("SHOOTER_STEP_MS"):
            kwargs["step_ms"] = _parse_int("SHOOTER_STEP_MS", env["SHOOTER_STEP_MS"])
        if env.get("SHOOTER_FPS"):
            kwargs["fps"] = _parse_int("SHOOTER_FPS", env["SHOOTER_FPS"])
        if env.get("SHOOTER_FONT"):
            kwargs["font_path"] = env["SHOOTER_FONT"]
        kwargs["legacy_enemies"] = env.get("SHOOTER_LEGACY_ENEMIES", "0") == "1"
        settings = cls(**kwargs)
        log.debug("settings loaded:", settings)
        return settings


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


__all__ = ["Settings", "default_key_bindings", "TIMESTEP_MODES"]
