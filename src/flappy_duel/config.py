"""Configuration loading from environment variables and CLI overrides."""

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_FPS, DEFAULT_MAX_DT, WIN_SCORE, RenderMode

_TRUE = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class GameConfig:
    render_mode: RenderMode = RenderMode.SPRITE
    asset_dir: Optional[str] = "assets"
    fps: int = DEFAULT_FPS
    max_dt: float = DEFAULT_MAX_DT
    win_score: int = WIN_SCORE
    flip_gravity: bool = False
    seed: Optional[int] = None
    log_level: str = "info"
    log_file: Optional[str] = None


def _env_optional_int(name: str) -> Optional[int]:
    value = os.environ.get(name)
    return int(value) if value else None


def load_config(**overrides) -> GameConfig:
    """
    Load configuration from .env and FLAPPY_* environment variables.
    Keyword overrides (None values ignored) win over the environment.
    """
    load_dotenv(find_dotenv(usecwd=True))

    try:
        mode = RenderMode(os.environ.get("FLAPPY_RENDER_MODE", RenderMode.SPRITE.value).lower())
    except ValueError:
        raise ValueError(f"Invalid FLAPPY_RENDER_MODE: {os.environ['FLAPPY_RENDER_MODE']!r}") from None

    config = GameConfig(
        render_mode=mode,
        asset_dir=os.environ.get("FLAPPY_ASSET_DIR", "assets"),
        fps=int(os.environ.get("FLAPPY_FPS", str(DEFAULT_FPS))),
        max_dt=float(os.environ.get("FLAPPY_MAX_DT", str(DEFAULT_MAX_DT))),
        win_score=int(os.environ.get("FLAPPY_WIN_SCORE", str(WIN_SCORE))),
        flip_gravity=os.environ.get("FLAPPY_FLIP_GRAVITY", "").lower() in _TRUE,
        seed=_env_optional_int("FLAPPY_SEED"),
        log_level=os.environ.get("FLAPPY_LOG_LEVEL", "info"),
        log_file=os.environ.get("FLAPPY_LOG_FILE") or None,
    )

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if isinstance(overrides.get("render_mode"), str):
        overrides["render_mode"] = RenderMode(overrides["render_mode"].lower())
    config = replace(config, **overrides)

    if config.fps <= 0:
        raise ValueError(f"fps must be positive, got {config.fps}")
    if config.max_dt <= 0:
        raise ValueError(f"max_dt must be positive, got {config.max_dt}")
    if config.win_score <= 0:
        raise ValueError(f"win_score must be positive, got {config.win_score}")
    return config
