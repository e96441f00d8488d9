# src/env/observations.py
from __future__ import annotations
from typing import List, Sequence, Tuple
import numpy as np

from src.game.config import (
    WIDTH, HEIGHT, PLAYER_W, PLAYER_H, PLATFORM_W, JUMP_FORCE
)

N_NEAREST = 3
OBS_SIZE = 3 + 3 * N_NEAREST
VY_SCALE = abs(JUMP_FORCE) * 2.0   # beyond this the vy feature saturates

def _clamp(x: float, lo: float = -1.0, hi: float = 1.0) -> float:
    return lo if x < lo else (hi if x > hi else x)

def _nearest_platforms(player, platforms: Sequence) -> List:
    """Platforms sorted by vertical distance between their top and the player's feet."""
    feet = player.y + PLAYER_H
    return sorted(platforms, key=lambda p: abs(p.y - feet))[:N_NEAREST]

def observation_bounds() -> Tuple[np.ndarray, np.ndarray]:
    low = np.array([0.0, -1.0, -1.0] + [-1.0, -1.0, 0.0] * N_NEAREST, dtype=np.float32)
    high = np.array([1.0, 1.0, 1.0] + [1.0, 1.0, 1.0] * N_NEAREST, dtype=np.float32)
    return low, high

def build_observation(player, platforms: Sequence) -> np.ndarray:
    """
    Returns a fixed (12,) float32 vector:
      [ x_norm, y_norm, vy_norm,
        dx0, dy0, present0,
        dx1, dy1, present1,
        dx2, dy2, present2 ]
    - x_norm  in [0,1]  (x / WIDTH)
    - y_norm  in [-1,1] (y / HEIGHT, negative above the screen)
    - vy_norm in [-1,1]
    - dx: platform center minus player center, / WIDTH
    - dy: platform top minus player feet, / HEIGHT (negative = above the feet)
    - missing slots: dx=0, dy=-1, present=0
    """
    feats: List[float] = [
        _clamp(player.x / WIDTH, 0.0, 1.0),
        _clamp(player.y / HEIGHT),
        _clamp(player.vy / VY_SCALE),
    ]

    cx = player.x + PLAYER_W / 2
    feet = player.y + PLAYER_H
    near = _nearest_platforms(player, platforms)
    for i in range(N_NEAREST):
        if i < len(near):
            p = near[i]
            dx = (p.x + PLATFORM_W / 2 - cx) / WIDTH
            dy = (p.y - feet) / HEIGHT
            feats.extend([_clamp(dx), _clamp(dy), 1.0])
        else:
            feats.extend([0.0, -1.0, 0.0])

    return np.asarray(feats, dtype=np.float32)
