"""
renderer.py: Read-only render pass from Simulation state to a draw surface.

The renderer only issues semantic draw calls. Which file backs "bird" or
"top_pipe", and how a rectangle reaches the screen, belongs to the
DrawSurface and asset store handed in by the driver.
"""

from typing import Any, Optional, Protocol, Tuple

from .constants import (
    RenderMode,
    SCREEN_WIDTH, SCREEN_HEIGHT, FLYER_SIZE, TRAIL_SIZE, OBSTACLE_WIDTH,
    PIPE_IMAGE_OFFSET, BACKGROUND_COLOR, PIPE_COLOR, PLACEHOLDER_COLOR,
    TEXT_COLOR, GAME_OVER_COLOR, HINT_COLOR,
    LABEL_FONT, HUD_FONT, BANNER_FONT, HINT_FONT
)
from .data_models import Flyer, Obstacle
from .physics_core import Color, tint_color
from .simulation import Simulation

Font = Tuple[str, int, bool]


class DrawSurface(Protocol):
    def clear(self) -> None:
        ...

    def draw_image(self, resource: Any, x: float, y: float,
                   size: Optional[Tuple[int, int]] = None) -> None:
        ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        ...

    def fill_text(self, text: str, x: float, y: float, color: Color, font: Font) -> None:
        ...


class AssetLookup(Protocol):
    def get(self, name: str) -> Optional[Any]:
        ...


class Renderer:
    """Draws one frame per render() call."""

    BACKGROUND_TILES = (0, 200, 400)

    def __init__(self, surface: DrawSurface, assets: AssetLookup, mode: RenderMode = RenderMode.SPRITE):
        self.surface = surface
        self.assets = assets
        self.mode = mode

    def render(self, sim: Simulation):
        self.surface.clear()
        self._draw_background(sim)

        for player, flyer in enumerate(sim.flyers, start=1):
            self._draw_flyer(flyer, player)

        for player, trails in enumerate(sim.trails, start=1):
            for trail in trails:
                self.surface.fill_rect(trail.x + 5, trail.height, TRAIL_SIZE, TRAIL_SIZE, trail.color(player))

        for obstacle in sim.obstacles:
            self._draw_obstacle(obstacle)

        self._draw_hud(sim)

    def _sprite(self, name: str) -> Optional[Any]:
        if self.mode is not RenderMode.SPRITE:
            return None
        return self.assets.get(name)

    def _draw_background(self, sim: Simulation):
        image = self._sprite("background")
        if image is not None:
            for x in self.BACKGROUND_TILES:
                self.surface.draw_image(image, x, 0)
            return
        if self.mode is RenderMode.FLAT:
            lead = sim.flyers[0]
            color = tint_color(lead.intensity, lead.x)
        else:
            color = BACKGROUND_COLOR
        self.surface.fill_rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT, color)

    def _draw_flyer(self, flyer: Flyer, player: int):
        image = self._sprite("bird")
        if image is not None:
            self.surface.draw_image(image, flyer.x, flyer.height)
        else:
            color = flyer.color(player) if self.mode is RenderMode.FLAT else PLACEHOLDER_COLOR
            self.surface.fill_rect(flyer.x, flyer.height, FLYER_SIZE, FLYER_SIZE, color)
        self.surface.fill_text(str(player), flyer.x, flyer.height + 30, TEXT_COLOR, LABEL_FONT)

    def _draw_obstacle(self, obstacle: Obstacle):
        bottom = self._sprite("bottom_pipe")
        if bottom is not None:
            self.surface.draw_image(bottom, obstacle.x, obstacle.gap_bottom)
        else:
            self.surface.fill_rect(obstacle.x, obstacle.gap_bottom, OBSTACLE_WIDTH,
                                   SCREEN_HEIGHT - obstacle.gap_bottom, PIPE_COLOR)

        top = self._sprite("top_pipe")
        if top is not None:
            self.surface.draw_image(top, obstacle.x, obstacle.gap_top - PIPE_IMAGE_OFFSET)
        else:
            self.surface.fill_rect(obstacle.x, 0, OBSTACLE_WIDTH, obstacle.gap_top, PIPE_COLOR)

    def _draw_hud(self, sim: Simulation):
        self.surface.fill_text(f"Player 1: {sim.hits[0]}", 300, 50, TEXT_COLOR, HUD_FONT)
        self.surface.fill_text(f"Player 2: {sim.hits[1]}", 300, 80, TEXT_COLOR, HUD_FONT)

        if not sim.game_over:
            return
        winner = sim.winner
        if winner is None:
            self.surface.fill_text("GAME OVER", 280, 300, GAME_OVER_COLOR, BANNER_FONT)
            self.surface.fill_text("Press 'r' to reset", 320, 340, HINT_COLOR, HINT_FONT)
        else:
            self.surface.fill_text(f"PLAYER {winner} WINS", 250, 300, GAME_OVER_COLOR, BANNER_FONT)
            self.surface.fill_text("Press 'n' for a new match", 300, 340, HINT_COLOR, HINT_FONT)
