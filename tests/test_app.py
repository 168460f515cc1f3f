import pygame
import pytest

import app
from shooter.display import InitializationError
from shooter.settings import Settings
from shooter.simulation import new_run


def _quit_events():
    return [pygame.event.Event(pygame.QUIT, {})]


def test_quit_exits_cleanly(monkeypatch):
    monkeypatch.setattr(pygame.event, "get", _quit_events)
    assert app.run(Settings(seed=1)) == 0
    assert not pygame.display.get_init()


def test_game_over_prints_score(monkeypatch, capsys):
    def doomed_run(seed=None, legacy_enemies=False):
        state = new_run(seed=seed, legacy_enemies=legacy_enemies)
        state.score = 30
        state.enemies.spawn_at(375, 480, speed=0.0)
        return state

    monkeypatch.setattr(app, "new_run", doomed_run)
    monkeypatch.setattr(pygame.event, "get", lambda: [])
    assert app.run(Settings(seed=1, timestep="variable")) == 0
    assert "Game Over! Score: 30" in capsys.readouterr().out


def test_missing_font_is_fatal(monkeypatch, tmp_path):
    monkeypatch.setenv("SHOOTER_FONT", str(tmp_path / "missing.ttf"))
    assert app.main() == 1
    assert not pygame.display.get_init()


def _raise_pygame_error(*args, **kwargs):
    raise pygame.error("device unavailable")


@pytest.mark.parametrize(
    "module, name, replacement, resource",
    [
        (pygame.display, "init", _raise_pygame_error, "video subsystem"),
        (pygame.display, "set_mode", _raise_pygame_error, "window"),
        (pygame.display, "set_mode", lambda *a, **k: None, "renderer"),
        (pygame.font, "init", _raise_pygame_error, "text subsystem"),
    ],
)
def test_init_failure_names_resource(monkeypatch, module, name, replacement, resource):
    monkeypatch.setattr(module, name, replacement)
    with pytest.raises(InitializationError) as exc:
        app.run(Settings())
    assert exc.value.resource == resource
    assert resource in str(exc.value)
    assert app.main() == 1
    assert not pygame.display.get_init()


def test_missing_font_names_resource(tmp_path):
    with pytest.raises(InitializationError) as exc:
        app.run(Settings(font_path=str(tmp_path / "missing.ttf")))
    assert exc.value.resource == "font"


def test_invalid_config_exit_code(monkeypatch):
    monkeypatch.setenv("SHOOTER_TIMESTEP", "warp")
    assert app.main() == 2
