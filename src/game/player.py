# src/game/player.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Iterable
from .config import (
    WIDTH, PLAYER_W, PLAYER_H, PLATFORM_W, GRAVITY, JUMP_FORCE, MOVE_SPEED,
    PLAYER_START_X, PLAYER_START_Y
)
from .level import Platform

@dataclass
class Player:
    """
    Bouncing block. y grows downward, vy is in world units per tick.
    There is no stored state machine: falling/rising is read off the sign of vy.
    """
    x: float = PLAYER_START_X
    y: float = float(PLAYER_START_Y)
    vy: float = 0.0

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), PLAYER_W, PLAYER_H)

    @property
    def phase(self) -> str:
        if self.vy > 0.0:
            return "falling"
        if self.vy < 0.0:
            return "rising"
        return "apex"

    def update_physics(self):
        """Gravity then integration, one fixed tick."""
        self.vy += GRAVITY
        self.y += self.vy

    def apply_input(self, left: bool, right: bool):
        # both held -> they cancel
        if left:
            self.x -= MOVE_SPEED
        if right:
            self.x += MOVE_SPEED

    def wrap(self):
        # strict comparisons: exactly 0 or WIDTH stays put
        if self.x < 0.0:
            self.x = float(WIDTH)
        elif self.x > WIDTH:
            self.x = 0.0

    def bounce_on_platforms(self, platforms: Iterable[Platform]) -> bool:
        """
        Snap vy to JUMP_FORCE when falling through any platform's span.

        Only the top edge is tested: a player whose feet are anywhere below a
        platform's top (even past its bottom) still bounces while falling.
        Returns True if at least one platform triggered.
        """
        bounced = False
        for p in platforms:
            if (self.vy > 0.0
                    and self.x + PLAYER_W > p.x
                    and self.x < p.x + PLATFORM_W
                    and self.y + PLAYER_H > p.y):
                self.vy = JUMP_FORCE
                bounced = True
        return bounced

    def step(self, left: bool, right: bool, platforms: Iterable[Platform]) -> bool:
        self.update_physics()
        self.apply_input(left, right)
        self.wrap()
        return self.bounce_on_platforms(platforms)

    def respawn(self):
        """Back to the start height at rest; x is left where it drifted."""
        self.y = float(PLAYER_START_Y)
        self.vy = 0.0
