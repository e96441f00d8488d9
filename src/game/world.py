# src/game/world.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List
from .config import HEIGHT, SCORE_DIVISOR, INITIAL_PLATFORMS
from .level import LevelGen, Platform
from .player import Player

@dataclass
class StepInfo:
    bounced: bool
    spawned: bool
    pruned: int
    reset: bool
    score: int


class World:
    """
    Authoritative game state: one player, the platform stack, score.

    `step` runs one tick in a fixed order (physics and bounce, spawn, prune,
    score, fall check). A fall below the bottom edge resets the run on the spot;
    there is no game-over screen.
    """
    def __init__(self, seed: int | None = None, rng=None, level: LevelGen | None = None):
        self.level = level if level is not None else LevelGen(seed, rng=rng)
        self.player = Player()
        self.score = 0
        self.best_score = 0
        self.deaths = 0
        self.ticks = 0
        if not self.level.platforms:
            self.level.generate_initial(INITIAL_PLATFORMS)

    @property
    def platforms(self) -> List[Platform]:
        return self.level.platforms

    @property
    def seed(self):
        return self.level.seed

    def height_score(self) -> int:
        return math.floor((HEIGHT - self.player.y) / SCORE_DIVISOR)

    def update_score(self):
        self.score = max(self.score, self.height_score())
        self.best_score = max(self.best_score, self.score)

    def has_fallen(self) -> bool:
        return self.player.y > HEIGHT

    def reset(self):
        """Hard reset: fresh platforms, player back at the start. Best score survives.

        A direct call is not counted in `deaths`; only falls detected by `step` are.
        """
        self.player.respawn()
        self.score = 0
        self.level.clear()
        self.level.generate_initial(INITIAL_PLATFORMS)

    def _on_fall(self):
        self.deaths += 1
        self.reset()

    def step(self, left: bool = False, right: bool = False) -> StepInfo:
        bounced = self.player.step(left, right, self.level.platforms)
        spawned = self.level.maybe_spawn()
        pruned = self.level.prune()

        self.update_score()
        fell = self.has_fallen()
        if fell:
            self._on_fall()

        self.ticks += 1
        return StepInfo(bounced=bounced, spawned=spawned, pruned=pruned, reset=fell, score=self.score)
