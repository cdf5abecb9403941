"""
simulation.py: The two-player world simulation.

One Simulation owns both flyers, their trail collections and the fixed
roster of obstacles. The driver calls step(dt, inputs) once per frame and
then renders from the resulting state; nothing here draws or reads devices.
"""

import enum
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from .constants import (
    DEFAULT_MAX_DT, JUMP_IMPULSE, OBSTACLE_STARTS, TRAIL_OFFSET_X,
    TRAIL_SPAWN_THRESHOLD, WIN_SCORE
)
from .data_models import Flyer, Obstacle, Trail
from .physics_core import sanitize_dt

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class PlayerInput(enum.Enum):
    """Logical inputs the simulation polls every step."""
    JUMP_P1 = "jump_p1"
    JUMP_P2 = "jump_p2"
    RESTART = "restart"
    NEW_MATCH = "new_match"


class InputSource(Protocol):
    def is_held(self, identifier: PlayerInput) -> bool:
        ...


def prune_trails(trails: List[Trail]) -> List[Trail]:
    """Returns the trails that are still on screen, preserving order."""
    return [t for t in trails if not t.is_expired()]


@dataclass
class Simulation:
    """
    The authoritative game state.

    hits[0] and hits[1] count rounds won by player 1 and player 2; a player
    is credited when the *other* player hits an obstacle. Restart never
    touches them, only new_match() does. Once a player has won the match,
    the restart input is ignored until a new match starts.
    """
    rng: random.Random = field(default_factory=random.Random, repr=False)
    max_dt: float = DEFAULT_MAX_DT
    win_score: int = WIN_SCORE
    flip_gravity: bool = False
    jump_impulse: float = JUMP_IMPULSE

    flyers: Tuple[Flyer, Flyer] = field(default_factory=lambda: (Flyer(), Flyer()))
    trails: Tuple[List[Trail], List[Trail]] = field(default_factory=lambda: ([], []))
    obstacles: List[Obstacle] = field(default_factory=list)
    hits: List[int] = field(default_factory=lambda: [0, 0])
    score: float = 0.0
    state: GameState = GameState.PLAYING
    spawn_timer: float = 0.0
    rounds_played: int = 0
    gravity_sign: float = 1.0
    match_winner: Optional[int] = None

    def __post_init__(self):
        if not self.obstacles:
            self.obstacles = [Obstacle(x=float(x), rng=self.rng) for x in OBSTACLE_STARTS]

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def winner(self) -> Optional[int]:
        """The player (1 or 2) who first reached win_score, until new_match()."""
        return self.match_winner

    def restart(self):
        """Starts a fresh round. Hit counters persist."""
        for flyer in self.flyers:
            flyer.reset()
        for obstacle, start in zip(self.obstacles, OBSTACLE_STARTS):
            obstacle.reset(float(start))
        self.score = 0.0
        self.spawn_timer = 0.0
        for trails in self.trails:
            trails.clear()
        self.state = GameState.PLAYING
        logger.info("Round restarted", extra={"data": {"hits": list(self.hits)}})

    def new_match(self):
        """Zeroes both hit counters and the round parity, then restarts."""
        self.hits[0] = 0
        self.hits[1] = 0
        self.rounds_played = 0
        self.gravity_sign = 1.0
        self.match_winner = None
        logger.info("New match")
        self.restart()

    def step(self, dt: float, inputs: InputSource):
        """
        Advances the world by dt seconds.
        Mutates every entity, then evaluates collisions and scoring.
        """
        dt = sanitize_dt(dt, self.max_dt)

        # 1. Restart / new match
        if inputs.is_held(PlayerInput.NEW_MATCH):
            self.new_match()
        elif inputs.is_held(PlayerInput.RESTART) and self.match_winner is None:
            self.restart()

        # 2. Trail spawning (the timer keeps running once past the threshold)
        self.spawn_timer += dt
        if self.spawn_timer > TRAIL_SPAWN_THRESHOLD:
            for flyer, trails in zip(self.flyers, self.trails):
                trails.append(Trail.spawn(flyer.height, TRAIL_OFFSET_X))
        for trails in self.trails:
            for trail in trails:
                trail.intensity = self.score

        # 3. Frozen frame after a hit
        if self.game_over:
            return

        self._update_gravity_sign()

        # 4. Level-triggered jumps
        if inputs.is_held(PlayerInput.JUMP_P1):
            self.flyers[0].jump(self.jump_impulse)
        if inputs.is_held(PlayerInput.JUMP_P2):
            self.flyers[1].jump(self.jump_impulse)

        # 5. Integrate flyers, trails and obstacles
        for flyer in self.flyers:
            flyer.integrate(dt, self.gravity_sign)

        for trails in self.trails:
            for trail in trails:
                trail.advance(dt)
            trails[:] = prune_trails(trails)

        # Obstacles scroll at player 1's speed only
        reference = self.flyers[0]
        for obstacle in self.obstacles:
            obstacle.advance(dt, reference.speed)

        # 6. Survival time
        self.score += dt

        # 7. Bounds
        for flyer in self.flyers:
            flyer.clamp_to_bounds()

        self.evaluate_collisions()

    def evaluate_collisions(self) -> Optional[int]:
        """
        Tests every obstacle against both flyers.

        Returns the player (1 or 2) whose hit ended the round in this pass,
        or None. Only the first hit while PLAYING is credited, and nothing
        is credited once the match has a winner.
        """
        loser = None
        for obstacle in self.obstacles:
            hit_p1 = obstacle.collides_with(self.flyers[0])
            hit_p2 = obstacle.collides_with(self.flyers[1])
            if not (hit_p1 or hit_p2):
                continue
            if self.state is GameState.PLAYING and self.match_winner is None:
                loser = 1 if hit_p1 else 2
                self._credit_round(loser)
            self.state = GameState.GAME_OVER
        return loser

    def _credit_round(self, loser: int):
        survivor = 2 if loser == 1 else 1
        self.hits[survivor - 1] += 1
        self.rounds_played += 1
        logger.info(
            "Player %d hit an obstacle, round to player %d", loser, survivor,
            extra={"data": {"round": self.rounds_played, "survived_s": round(self.score, 2),
                            "hits": list(self.hits)}}
        )
        if self.match_winner is None and self.hits[survivor - 1] >= self.win_score:
            self.match_winner = survivor
            logger.info("Player %d wins the match", survivor, extra={"data": {"hits": list(self.hits)}})

    def _update_gravity_sign(self):
        if not self.flip_gravity:
            return
        self.gravity_sign = -1.0 if self.rounds_played % 2 else 1.0
