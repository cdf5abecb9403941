"""
data_models.py: The simulated entities (flyer, trail marker, obstacle pair).
"""

import random
from dataclasses import dataclass, field
from typing import Optional

from .constants import (
    FLYER_X, SPAWN_HEIGHT, FLOOR_Y, CEILING_Y, FLYER_SIZE, START_SPEED,
    SPEED_GAIN, INTENSITY_GAIN, GRAVITY_ACCEL, JUMP_IMPULSE,
    TRAIL_OFFSET_X, TRAIL_DRIFT, TRAIL_EXPIRY_X,
    GAP_HALF, GAP_MID_MIN, GAP_MID_MAX, DEFAULT_GAP_TOP, DEFAULT_GAP_BOTTOM,
    OBSTACLE_WIDTH, INTERCEPT_X, RECYCLE_BELOW_X, RECYCLE_TO_X, RECYCLE_NUDGE
)
from .physics_core import Color, palette_color


@dataclass
class Flyer:
    """A player-controlled bird. x is its fixed lane."""
    x: float = FLYER_X
    height: float = SPAWN_HEIGHT
    velocity: float = 0.0
    speed: float = START_SPEED
    intensity: float = 0.0

    def integrate(self, dt: float, gravity_sign: float = 1.0):
        """Explicit Euler step under gravity. Does not clamp."""
        self.velocity += GRAVITY_ACCEL * gravity_sign * dt
        self.height += self.velocity * dt * gravity_sign
        self.speed += SPEED_GAIN * dt
        self.intensity += INTENSITY_GAIN * dt

    def jump(self, impulse: float = JUMP_IMPULSE):
        """Overwrites the velocity, whatever it was."""
        self.velocity = impulse

    def clamp_to_bounds(self):
        # Floor stops the fall, ceiling only pins the position.
        if self.height > FLOOR_Y:
            self.height = FLOOR_Y
            self.velocity = 0.0
        if self.height < CEILING_Y:
            self.height = CEILING_Y

    def reset(self):
        self.x = FLYER_X
        self.height = SPAWN_HEIGHT
        self.velocity = 0.0
        self.speed = START_SPEED
        self.intensity = 0.0

    def color(self, player: int) -> Color:
        return palette_color(self.intensity, self.x, player)


@dataclass
class Trail:
    """A cosmetic marker left behind a flyer; drifts left until it expires."""
    x: float
    height: float
    intensity: float = 0.0

    @classmethod
    def spawn(cls, owner_height: float, lane_offset: float = TRAIL_OFFSET_X) -> "Trail":
        return cls(x=lane_offset, height=owner_height)

    def advance(self, dt: float):
        self.x -= TRAIL_DRIFT * dt

    def is_expired(self) -> bool:
        return self.x < TRAIL_EXPIRY_X

    def color(self, player: int) -> Color:
        return palette_color(self.intensity, self.x, player)


@dataclass
class Obstacle:
    """
    An upper/lower pipe pair with a 300 unit gap between gap_top and
    gap_bottom. Recycles itself to the right once it scrolls off-screen.
    """
    x: float
    gap_top: Optional[float] = None
    gap_bottom: Optional[float] = None
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def __post_init__(self):
        # An explicit gap is kept; otherwise draw one.
        if self.gap_top is None or self.gap_bottom is None:
            self.randomize_gap()

    @property
    def gap_width(self) -> float:
        return self.gap_bottom - self.gap_top

    def randomize_gap(self):
        """Draws a new gap midpoint uniformly from [150, 451]."""
        midpoint = GAP_MID_MIN + self.rng.random() * (GAP_MID_MAX - GAP_MID_MIN)
        self.gap_top = midpoint - GAP_HALF
        self.gap_bottom = midpoint + GAP_HALF

    def advance(self, dt: float, owner_speed: float):
        """Scrolls left at the reference flyer's drift speed."""
        self.x -= owner_speed * dt
        if self.x < RECYCLE_BELOW_X:
            self.x = RECYCLE_TO_X
            self.x -= RECYCLE_NUDGE * dt
            self.randomize_gap()

    def collides_with(self, flyer: Flyer) -> bool:
        """
        Axis-aligned test against the interception window. Not swept, so a
        large enough step can tunnel through a pipe.
        """
        in_window = self.x <= INTERCEPT_X and flyer.x <= self.x + OBSTACLE_WIDTH
        if not in_window:
            return False
        hits_bottom = flyer.height + FLYER_SIZE >= self.gap_bottom
        hits_top = flyer.height <= self.gap_top
        return hits_bottom or hits_top

    def reset(self, initial_x: float):
        self.x = initial_x
        self.gap_top = DEFAULT_GAP_TOP
        self.gap_bottom = DEFAULT_GAP_BOTTOM
        self.randomize_gap()
