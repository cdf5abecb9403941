"""Command line entry point: python -m flappy_duel."""

import argparse
import logging

from .config import load_config
from .logger import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flappy-duel",
        description="Two-player Flappy Bird. ',' jumps player 1, 't' jumps player 2, "
                    "'r' restarts the round, 'n' starts a new match.",
    )
    parser.add_argument("--mode", choices=["flat", "sprite"], help="render mode")
    parser.add_argument("--assets", dest="asset_dir", help="directory holding the sprite PNGs")
    parser.add_argument("--fps", type=int, help="frame rate cap")
    parser.add_argument("--max-dt", type=float, help="largest time step integrated per frame (seconds)")
    parser.add_argument("--win-score", type=int, help="rounds needed to win the match")
    parser.add_argument("--flip-gravity", action="store_true", default=None,
                        help="invert gravity on alternate rounds")
    parser.add_argument("--seed", type=int, help="seed for obstacle gaps")
    parser.add_argument("--log-level", choices=["debug", "info", "warning", "error"])
    parser.add_argument("--log-file", help="also write NDJSON logs to this file")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(
            render_mode=args.mode,
            asset_dir=args.asset_dir,
            fps=args.fps,
            max_dt=args.max_dt,
            win_score=args.win_score,
            flip_gravity=args.flip_gravity,
            seed=args.seed,
            log_level=args.log_level,
            log_file=args.log_file,
        )
    except ValueError as e:
        parser.error(str(e))

    setup_logging(config.log_level, config.log_file)

    # Deferred so --help and config errors never import pygame
    from .game import FlappyDuel

    FlappyDuel(config).run()


if __name__ == "__main__":
    main()
