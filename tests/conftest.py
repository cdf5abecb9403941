import random

import pytest

from flappy_duel.simulation import PlayerInput, Simulation


class HeldKeys:
    """InputSource holding a fixed set of inputs."""

    def __init__(self, *held: PlayerInput):
        self.held = set(held)

    def is_held(self, identifier: PlayerInput) -> bool:
        return identifier in self.held


@pytest.fixture
def sim():
    return Simulation(rng=random.Random(1234))


@pytest.fixture
def nothing_held():
    return HeldKeys()


def park_obstacles(sim, x=2000.0):
    """Moves every obstacle far to the right so nothing can collide."""
    for obstacle in sim.obstacles:
        obstacle.x = x
