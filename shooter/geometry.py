"""Axis-aligned rectangle helpers shared by the systems."""

from __future__ import annotations

import pygame

from shooter.constants import ARENA_HEIGHT, ARENA_WIDTH


def overlaps(a: pygame.Rect, b: pygame.Rect) -> bool:
    """True when the two rectangles share a non-zero area.

    Half-open on both axes: rectangles that only touch along an edge do not
    overlap. Symmetric in its arguments.
    """
    return bool(a.colliderect(b))


def arena_rect(width: int = ARENA_WIDTH, height: int = ARENA_HEIGHT) -> pygame.Rect:
    return pygame.Rect(0, 0, width, height)


__all__ = ["overlaps", "arena_rect"]
