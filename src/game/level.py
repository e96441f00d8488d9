# src/game/level.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Tuple
import pygame
from .config import (
    WIDTH, HEIGHT, PLATFORM_W, PLATFORM_H, PLATFORM_SPACING, INITIAL_PLATFORMS
)

@dataclass
class Platform:
    x: int  # left edge
    y: int  # top edge

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, PLATFORM_W, PLATFORM_H)


class LevelGen:
    """
    Endless vertical stack of platforms.

    The list is kept in creation order, so the last element is always the
    topmost platform and the anchor for the next one. Pass `rng` (anything with
    `randint(a, b)`) to control placement, or a `seed` to build a random.Random.
    """
    def __init__(self, seed: int | None = None, rng=None):
        if rng is None:
            if seed is None:
                seed = random.randrange(0, 2**32 - 1)
            rng = random.Random(seed)
        self.seed = seed
        self.rng = rng
        self.platforms: List[Platform] = []

    def _rand_x(self) -> int:
        return int(self.rng.randint(0, WIDTH - PLATFORM_W))

    @property
    def topmost(self) -> Platform:
        assert self.platforms, "platform sequence must never be empty during play"
        return self.platforms[-1]

    def generate_initial(self, n: int = INITIAL_PLATFORMS):
        """Append n platforms bottom-to-top: HEIGHT-100, HEIGHT-200, ..."""
        for i in range(n):
            self.platforms.append(Platform(self._rand_x(), HEIGHT - PLATFORM_SPACING * (i + 1)))

    def maybe_spawn(self) -> bool:
        """Add one platform above the topmost if it sits below the top edge."""
        top = self.topmost
        if top.y > 0:
            self.platforms.append(Platform(self._rand_x(), top.y - PLATFORM_SPACING))
            return True
        return False

    def prune(self) -> int:
        """Drop platforms that reached the bottom edge; returns how many went."""
        before = len(self.platforms)
        self.platforms = [p for p in self.platforms if p.y < HEIGHT]
        return before - len(self.platforms)

    def clear(self):
        self.platforms.clear()

    def draw(self, surf: pygame.Surface, color: Tuple[int, int, int]):
        for platform in self.platforms:
            pygame.draw.rect(surf, color, platform.rect)
