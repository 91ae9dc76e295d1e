"""
Space Invaders Constants
"""

from __future__ import annotations

TITLE = "Space Invaders"

WIDTH = 800
HEIGHT = 600

FPS = 60

# Player
PLAYER_WIDTH = 60
PLAYER_HEIGHT = 20
PLAYER_SPEED = 8
PLAYER_Y = HEIGHT - 80

# Projectile
BULLET_WIDTH = 4
BULLET_HEIGHT = 12
BULLET_SPEED = 12

# Enemy grid
ROWS = 3
COLS = 8
ENEMY_WIDTH = 50
ENEMY_HEIGHT = 20
ENEMY_SPACING_X = 20
ENEMY_SPACING_Y = 20
ENEMY_START_X = 80
ENEMY_START_Y = 60
WALL_MARGIN = 20

# Scoring and progression
POINTS_PER_KILL = 10
START_LIVES = 3
MAX_LEVEL = 5

# Effects
STAR_COUNT = 80
STAR_SIZE = 2
MAX_EXPLOSIONS = 20
EXPLOSION_TTL = 20  # frames, ~0.3s at 60 FPS
EXPLOSION_BASE_RADIUS = 5

# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
ORANGE = (255, 200, 0)

# Fonts
FONT_NAME = "arial"
TITLE_FONT_SIZE = 40
MESSAGE_FONT_SIZE = 24
HUD_FONT_SIZE = 20
