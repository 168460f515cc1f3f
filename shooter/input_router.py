"""Centralized input routing.

Transforms raw pygame events into semantic *actions*:

- direction keys: `up`/`down`/`left`/`right` on press, `stop_<dir>` on release
- fire key: `fire` on press only (edge-triggered)
- window close or the quit key: `quit`

Rules are predicates `event -> action | None` evaluated in declaration
order; the first match wins for each event. Press/release actions keep
their order so that a press and release in the same frame resolve
correctly. One-shot actions are collapsed to their first occurrence.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence

import pygame

from shooter.controls import DIRECTIONS

Action = str
Rule = Callable[[pygame.event.Event], Action | None]

ONE_SHOT_ACTIONS = ("fire", "quit")


def _key_rule(key: int, action: Action, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return action
        return None

    return _r


def _quit_rule(e: pygame.event.Event):
    return "quit" if e.type == pygame.QUIT else None


class InputRouter:
    """Maps pygame events to semantic actions."""

    def __init__(self, key_bindings: Dict[str, Sequence[int]]) -> None:
        self._rules: List[Rule] = [_quit_rule]
        self._register_bindings(key_bindings)

    def _register_bindings(self, key_bindings: Dict[str, Sequence[int]]) -> None:
        for direction in DIRECTIONS:
            for key in key_bindings.get(direction, ()):
                self._rules.append(_key_rule(key, direction, pygame.KEYDOWN))
                self._rules.append(_key_rule(key, f"stop_{direction}", pygame.KEYUP))
        for act in ONE_SHOT_ACTIONS:
            for key in key_bindings.get(act, ()):
                self._rules.append(_key_rule(key, act))

    def process(self, events: Iterable[pygame.event.Event]) -> List[Action]:
        actions: List[Action] = []
        for e in events:
            for rule in self._rules:
                a = rule(e)
                if a:
                    if a not in ONE_SHOT_ACTIONS or a not in actions:
                        actions.append(a)
                    break
        return actions


__all__ = ["InputRouter", "Action", "Rule"]
