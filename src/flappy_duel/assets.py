"""
assets.py: Loads the named sprites used in sprite render mode.
"""

import logging
import os
from typing import Dict, Iterable, Optional

import pygame

logger = logging.getLogger(__name__)

ASSET_NAMES = ("bird", "background", "top_pipe", "bottom_pipe")


class AssetStore:
    """Maps logical asset names to pygame surfaces. Missing names map to None."""

    def __init__(self, images: Optional[Dict[str, pygame.Surface]] = None):
        self.images: Dict[str, pygame.Surface] = dict(images or {})

    def get(self, name: str) -> Optional[pygame.Surface]:
        return self.images.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.images

    @classmethod
    def load(cls, directory: Optional[str], names: Iterable[str] = ASSET_NAMES) -> "AssetStore":
        """
        Loads <name>.png for each name. Files that are missing or fail to
        decode are skipped with a warning; the renderer draws placeholders.
        """
        store = cls()
        if not directory:
            return store

        for name in names:
            path = os.path.join(directory, f"{name}.png")
            if not os.path.isfile(path):
                logger.warning("Asset %r not found at %s, using placeholder", name, path)
                continue
            try:
                image = pygame.image.load(path)
            except pygame.error as e:
                logger.warning("Could not load asset %r from %s: %s", name, path, e)
                continue
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                image = image.convert_alpha()
            store.images[name] = image
            logger.debug("Loaded asset %r from %s", name, path)
        return store
