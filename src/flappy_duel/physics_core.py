"""
physics_core.py: Shared pure helpers used by the entities and the renderer.
"""

import logging
import math
from typing import Tuple

from .constants import INTENSITY_WRAP

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value to the inclusive range [low, high]."""
    return min(max(value, low), high)


def _channel(value: float) -> int:
    return int(clamp(value, 0, 255))


def palette_color(intensity: float, x: float, player: int) -> Color:
    """
    Maps a cosmetic intensity and horizontal position to a player's color.

    Player 1 fades red -> blue, player 2 fades green -> blue; the remaining
    channel brightens with x.
    """
    level = math.floor(intensity) * 35
    lane = 255 - 200 + 2 * x
    if player == 1:
        return _channel(255 - level), _channel(lane), _channel(level)
    if player == 2:
        return _channel(lane), _channel(255 - level), _channel(level)
    raise ValueError(f"Unknown player index: {player}")


def tint_color(intensity: float, x: float) -> Color:
    """Background tint for flat rendering. Cycles every 7.3 units of intensity."""
    level = math.floor(intensity % INTENSITY_WRAP) * 35
    return _channel(level), _channel(255 - 200 + 2 * x), _channel(255 - level)


def sanitize_dt(dt: float, max_dt: float) -> float:
    """
    Applies the frame time policy: negative or non-finite deltas become 0,
    deltas larger than max_dt (a stalled driver) are capped.
    """
    if not math.isfinite(dt) or dt < 0:
        logger.debug("Discarding invalid dt %r", dt)
        return 0.0
    if dt > max_dt:
        logger.debug("Capping dt %.4f to %.4f", dt, max_dt)
        return max_dt
    return dt
