"""Simulation state and the per-tick orchestrator.

All mutable game state lives in `SimulationState`, created by `new_run`
and passed explicitly to `step`. One call to `step` is one tick:

    steer player -> attempt fire -> move player -> projectiles
    -> enemy spawn roll -> enemies -> player/enemy contact check

A contact between the player and any active enemy flips `game_over`;
further calls to `step` leave the state untouched.

Usage:

    state = new_run(seed=7)
    result = step(state, TickInput(velocity=(0.2, 0.0), fire=True), 16)
    if result.game_over:
        print(state.score)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shooter.constants import SCORE_PER_HIT
from shooter.enemy_system import EnemySystem
from shooter.entities import Player
from shooter.geometry import arena_rect, overlaps
from shooter.logger import get_logger
from shooter.movement import move_player
from shooter.projectile_system import ProjectileSystem
from shooter.rng_service import RNGService
from shooter.weapons import CooldownGun

log = get_logger("simulation")


@dataclass
class TickInput:
    velocity: tuple[float, float] = (0.0, 0.0)
    fire: bool = False


@dataclass
class TickResult:
    tick: int
    fired: bool = False
    hits: int = 0
    spawned: bool = False
    score: int = 0
    game_over: bool = False


@dataclass
class SimulationState:
    player: Player
    projectiles: ProjectileSystem
    enemies: EnemySystem
    gun: CooldownGun = field(default_factory=CooldownGun)
    score: int = 0
    clock_ms: int = 0
    ticks: int = 0
    game_over: bool = False


def new_run(seed: int | None = None, legacy_enemies: bool = False) -> SimulationState:
    """Fresh run: player at the start position, empty collections, zero score."""
    return SimulationState(
        player=Player.spawn(),
        projectiles=ProjectileSystem(),
        enemies=EnemySystem(RNGService(seed), retain_inactive=legacy_enemies),
    )


def player_hit(state: SimulationState) -> bool:
    return any(overlaps(state.player.rect, enemy.rect) for enemy in state.enemies.active())


def step(state: SimulationState, tick_input: TickInput, dt_ms: int) -> TickResult:
    if state.game_over:
        return TickResult(tick=state.ticks, score=state.score, game_over=True)

    now_ms = state.clock_ms
    body = state.player.body
    body.vx, body.vy = tick_input.velocity

    fired = False
    if tick_input.fire:
        shot = state.gun.try_fire(state.player, now_ms)
        if shot is not None:
            state.projectiles.add(shot)
            fired = True

    move_player(state.player, dt_ms, arena_rect())

    summary = state.projectiles.update(dt_ms, state.enemies)
    state.score += summary["hits_enemy"] * SCORE_PER_HIT

    spawned = state.enemies.try_spawn() is not None
    state.enemies.update(dt_ms)

    state.ticks += 1
    state.clock_ms += dt_ms

    if player_hit(state):
        state.game_over = True
        log.info("game over after", state.ticks, "ticks, score", state.score)

    return TickResult(
        tick=state.ticks,
        fired=fired,
        hits=summary["hits_enemy"],
        spawned=spawned,
        score=state.score,
        game_over=state.game_over,
    )


__all__ = ["SimulationState", "TickInput", "TickResult", "new_run", "step", "player_hit"]
