"""
constants.py: Centralized tuning values for the simulation and rendering.
"""

import enum


class RenderMode(enum.Enum):
    FLAT = "flat"       # Colored rectangles only
    SPRITE = "sprite"   # Images, with rectangle placeholders for missing ones


# -------- Screen Config --------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
DEFAULT_FPS = 60
DEFAULT_MAX_DT = 0.1            # Largest dt a single step will integrate (seconds)

# -------- Flyer Config --------
FLYER_X = 100                   # Fixed lane position shared by both players
SPAWN_HEIGHT = 285.0
FLOOR_Y = 570.0
CEILING_Y = 0.0
FLYER_SIZE = 30                 # Height of the flyer's bounding box
START_SPEED = 210.0             # Horizontal drift speed (units/second)
SPEED_GAIN = 60.0               # Drift speed increase (units/s^2)
INTENSITY_GAIN = 0.6            # Cosmetic intensity per second
INTENSITY_WRAP = 7.3            # Background tint wraps back to 0 above this

# -------- Physics Config (Units / Second / Second) --------
GRAVITY_ACCEL = 9.81 * 150      # 1471.5, exaggerated on purpose
JUMP_IMPULSE = -400.0           # Velocity set while jump is held

# -------- Trail Config --------
TRAIL_OFFSET_X = 80.0           # Spawn x, a little behind the lane
TRAIL_DRIFT = 300.0             # Leftward drift (units/second)
TRAIL_EXPIRY_X = -1.0
TRAIL_SPAWN_THRESHOLD = 0.0075  # Spawn timer threshold (seconds)
TRAIL_SIZE = 20

# -------- Obstacle Config --------
GAP_HALF = 150.0                # Gap is always 2 * GAP_HALF tall
GAP_MID_MIN = 150
GAP_MID_MAX = 451               # Exclusive upper bound of the midpoint draw
DEFAULT_GAP_TOP = 200.0
DEFAULT_GAP_BOTTOM = 400.0
OBSTACLE_WIDTH = 50
INTERCEPT_X = 130               # Obstacles right of this cannot hit the lane
RECYCLE_BELOW_X = -50.0
RECYCLE_TO_X = 950.0
RECYCLE_NUDGE = 210.0           # Fixed-rate nudge applied when recycling
OBSTACLE_STARTS = (300, 600, 800, 1000, 1200)
PIPE_IMAGE_OFFSET = 500         # Top pipe sprite is drawn this far above gap_top

# -------- Match Config --------
WIN_SCORE = 10

# -------- Colors & Fonts --------
BACKGROUND_COLOR = (0, 191, 255)
PIPE_COLOR = (0, 150, 0)
PLACEHOLDER_COLOR = (255, 0, 255)
TEXT_COLOR = (0, 0, 0)
GAME_OVER_COLOR = (255, 0, 0)
HINT_COLOR = (255, 255, 255)

LABEL_FONT = ("arial", 12, False)
HUD_FONT = ("arial", 24, True)
BANNER_FONT = ("arial", 40, True)
HINT_FONT = ("arial", 20, False)
