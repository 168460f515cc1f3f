import pygame

from shooter.input_router import InputRouter
from shooter.settings import default_key_bindings


def _key(event_type, key):
    return pygame.event.Event(event_type, {"key": key})


def test_direction_press_and_release():
    router = InputRouter(default_key_bindings())
    events = [
        _key(pygame.KEYDOWN, pygame.K_LEFT),
        _key(pygame.KEYDOWN, pygame.K_w),
        _key(pygame.KEYUP, pygame.K_LEFT),
    ]
    assert router.process(events) == ["left", "up", "stop_left"]


def test_fire_is_press_only_and_deduplicated():
    router = InputRouter(default_key_bindings())
    events = [
        _key(pygame.KEYDOWN, pygame.K_SPACE),
        _key(pygame.KEYUP, pygame.K_SPACE),
        _key(pygame.KEYDOWN, pygame.K_SPACE),
    ]
    assert router.process(events) == ["fire"]


def test_window_close_and_escape_quit():
    router = InputRouter(default_key_bindings())
    assert router.process([pygame.event.Event(pygame.QUIT, {})]) == ["quit"]
    assert router.process([_key(pygame.KEYDOWN, pygame.K_ESCAPE)]) == ["quit"]


def test_unbound_keys_are_ignored():
    router = InputRouter(default_key_bindings())
    assert router.process([_key(pygame.KEYDOWN, pygame.K_q)]) == []


def test_configurable_bindings():
    bindings = default_key_bindings()
    bindings["fire"] = [pygame.K_z]
    router = InputRouter(bindings)
    assert router.process([_key(pygame.KEYDOWN, pygame.K_z)]) == ["fire"]
    assert router.process([_key(pygame.KEYDOWN, pygame.K_SPACE)]) == []
