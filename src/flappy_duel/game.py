#!/usr/bin/env python3
"""
game.py

Pygame driver: window, clock, keyboard and the frame loop that calls
Simulation.step and Renderer.render once per frame.
"""

import logging
import random
from typing import Dict, Optional, Tuple

import pygame

from .assets import AssetStore
from .config import GameConfig
from .constants import SCREEN_WIDTH, SCREEN_HEIGHT
from .physics_core import Color
from .renderer import Font, Renderer
from .simulation import PlayerInput, Simulation

logger = logging.getLogger(__name__)

DEFAULT_BINDINGS: Dict[PlayerInput, int] = {
    PlayerInput.JUMP_P1: pygame.K_COMMA,
    PlayerInput.JUMP_P2: pygame.K_t,
    PlayerInput.RESTART: pygame.K_r,
    PlayerInput.NEW_MATCH: pygame.K_n,
}


class KeyboardInput:
    """InputSource backed by the current pygame key state."""

    def __init__(self, bindings: Optional[Dict[PlayerInput, int]] = None):
        self.bindings = dict(bindings or DEFAULT_BINDINGS)
        self._pressed = None

    def poll(self):
        """Snapshot the keyboard; call once per frame after pumping events."""
        self._pressed = pygame.key.get_pressed()

    def is_held(self, identifier: PlayerInput) -> bool:
        key = self.bindings.get(identifier)
        if key is None or self._pressed is None:
            return False
        return bool(self._pressed[key])


class PygameSurface:
    """DrawSurface over a pygame.Surface."""

    def __init__(self, screen: pygame.Surface, clear_color: Color = (0, 0, 0)):
        self.screen = screen
        self.clear_color = clear_color
        self._fonts: Dict[Font, pygame.font.Font] = {}

    def _font(self, font: Font) -> pygame.font.Font:
        if font not in self._fonts:
            name, size, bold = font
            self._fonts[font] = pygame.font.SysFont(name, size, bold=bold)
        return self._fonts[font]

    def clear(self):
        self.screen.fill(self.clear_color)

    def draw_image(self, resource: pygame.Surface, x: float, y: float,
                   size: Optional[Tuple[int, int]] = None):
        if size is not None:
            resource = pygame.transform.scale(resource, size)
        self.screen.blit(resource, (int(x), int(y)))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color):
        pygame.draw.rect(self.screen, color, (int(x), int(y), int(w), int(h)))

    def fill_text(self, text: str, x: float, y: float, color: Color, font: Font):
        surf = self._font(font).render(text, True, color)
        self.screen.blit(surf, (int(x), int(y)))


class FlappyDuel:
    def __init__(self, config: GameConfig):
        pygame.init()
        self.config = config
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Flappy Duel")

        # --- Game Logic ---
        self.simulation = Simulation(
            rng=random.Random(config.seed),
            max_dt=config.max_dt,
            win_score=config.win_score,
            flip_gravity=config.flip_gravity,
        )
        self.inputs = KeyboardInput()

        # --- Rendering ---
        self.assets = AssetStore.load(config.asset_dir)
        self.renderer = Renderer(PygameSurface(self.screen), self.assets, config.render_mode)

        # Time Management
        self.clock = pygame.time.Clock()

    def run(self):
        """The main execution loop."""
        logger.info(
            "Starting: mode=%s fps=%d max_dt=%.3f win_score=%d flip_gravity=%s",
            self.config.render_mode.value, self.config.fps, self.config.max_dt,
            self.config.win_score, self.config.flip_gravity
        )
        running = True
        # The first tick measures time since the clock was created, not a frame.
        self.clock.tick()
        while running:
            dt = self.clock.tick(self.config.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            self.inputs.poll()
            self.simulation.step(dt, self.inputs)
            self.renderer.render(self.simulation)
            pygame.display.flip()

        logger.info("Quit with hits %d-%d", *self.simulation.hits)
        pygame.quit()
