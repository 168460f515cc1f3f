"""Gameplay and tuning constants.

Single place for the arena geometry, entity sizes, speeds and colours so
that systems and tests agree on the same numbers. Speeds are expressed in
pixels per millisecond; times in milliseconds.
"""

# Arena
ARENA_WIDTH = 800
ARENA_HEIGHT = 600
WINDOW_TITLE = "Arcade Shooter"

# Player
PLAYER_START = (375, 500)
PLAYER_SIZE = (50, 50)
PLAYER_SPEED = 0.2  # applied per held direction key

# Projectiles
PROJECTILE_SIZE = (10, 10)
PROJECTILE_SPEED = 0.2  # upward
FIRE_COOLDOWN_MS = 1000

# Enemies
ENEMY_SIZE = (50, 50)
ENEMY_DESCENT_SPEED = 0.4  # downward
ENEMY_SPAWN_CHANCE = 0.02  # independent chance per tick

# Scoring
SCORE_PER_HIT = 10

# Timing
DEFAULT_FPS = 60
DEFAULT_STEP_MS = 16
MAX_CATCH_UP_STEPS = 5  # fixed steps simulated per frame at most

# Colours (RGB)
BACKGROUND_COLOR = (0, 0, 128)
PLAYER_COLOR = (255, 0, 0)
PROJECTILE_COLOR = (0, 0, 255)
ENEMY_COLOR = (0, 255, 0)
SCORE_COLOR = (255, 255, 255)

# HUD
SCORE_RECT = (10, 10, 100, 30)
FONT_SIZE = 24

__all__ = [name for name in globals().keys() if name.isupper()]
