"""
Flappy Duel: a two-player side-scrolling arcade game.
"""

from .data_models import Flyer, Obstacle, Trail
from .simulation import GameState, PlayerInput, Simulation

__all__ = ["Flyer", "Obstacle", "Trail", "GameState", "PlayerInput", "Simulation"]

__version__ = "0.1.0"
