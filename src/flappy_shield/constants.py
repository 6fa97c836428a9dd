"""
constants.py: Centralized configuration for the game simulation.
"""

import math

# -------- Viewport Config --------
# Virtual viewport: every game-logic position and size lives in these units.
VIEWPORT_WIDTH = 400
VIEWPORT_HEIGHT = 600
PLAY_HEIGHT = VIEWPORT_HEIGHT

# Frame timing
TARGET_FPS = 60
MAX_FRAME_DT = 0.1              # Largest step fed to update() (seconds)

# -------- Bird Config --------
BIRD_START_X = 100
BIRD_START_Y = 250
BIRD_WIDTH = 40
BIRD_HEIGHT = 30

ROTATION_FACTOR = 0.002         # rad per (unit/s) of velocity
ROTATION_SMOOTHING = 0.1        # Per-frame interpolation toward target
MAX_NOSE_DOWN = math.pi / 2
WING_SPEED_UP = 15.0            # rad/s while climbing
WING_SPEED_DOWN = 8.0           # rad/s while falling

# Death animation
DEATH_GRAVITY_SCALE = 1.5
DEATH_VELOCITY_SCALE = 1.5
DEATH_ROTATION_SMOOTHING = 0.15
DEATH_TARGET_ROTATION = math.pi
DEATH_MIN_VELOCITY = 200.0
DEATH_MAX_DURATION = 2.0        # seconds

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_MARGIN = 50                # Off-screen slack before a pipe is pruned
PIPE_GAP_EDGE = 100             # Minimum distance from gap to top/bottom edge
PAIR_EPSILON = 10               # Segments closer than this belong to one pair

# -------- Physics Config (units / second / second) --------
BASE_GRAVITY = 1000.0
JUMP_FORCE = 250.0
MAX_FALL_VELOCITY = 400.0

# -------- Difficulty Config --------
BASE_PIPE_SPEED = 150.0         # units/second
BASE_PIPE_GAP = 150.0
BASE_SPAWN_INTERVAL = 1.5       # seconds
POINTS_PER_LEVEL = 25
SPEED_PER_LEVEL = 30.0
GAP_PER_LEVEL = 10.0
GRAVITY_PER_LEVEL = 50.0
INTERVAL_PER_LEVEL = 0.1
MIN_PIPE_GAP = 100.0
MIN_SPAWN_INTERVAL = 0.8

LEVEL_UP_MESSAGES = (
    "Speed up!",
    "Extreme difficulty!",
    "Inferno mode on!",
    "Top speed!",
    "Epic challenge!",
)
NOTIFICATION_DURATION = 2.0     # seconds

# -------- Ability Config --------
SHIELD_DURATION = 3.0           # seconds
SHIELD_COOLDOWN = 15.0          # seconds
DEFAULT_ABILITY_KEY = "KeyE"

# -------- Input Config --------
TOUCH_COOLDOWN_MS = 100
MOUSE_AFTER_TOUCH_MS = 500
