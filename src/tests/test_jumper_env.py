"""
Tests for JumperEnv (Gymnasium environment) and its observation vector.

Usage (from repo root):
  python -m src.tests.test_jumper_env
"""

from __future__ import annotations
import os
import sys
from types import SimpleNamespace
from typing import List, Tuple

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
from gymnasium.utils.env_checker import check_env

from src.env.jumper_env import JumperEnv
from src.env.observations import build_observation, OBS_SIZE
from src.game.config import WIDTH, HEIGHT, COLOR_BG, COLOR_PLAYER
from src.game.level import Platform


def test_api_check():
    env = JumperEnv(frame_skip=4)
    try:
        check_env(env.unwrapped)
    finally:
        env.close()

def test_smoke_rollout():
    env = JumperEnv(frame_skip=4, time_limit_seconds=5.0)
    try:
        obs, info = env.reset(seed=123)
        assert env.observation_space.contains(obs), "Initial observation not in space"
        assert info["seed"] == 123
        for t in range(200):
            obs, r, term, trunc, info = env.step(env.action_space.sample())
            assert isinstance(r, float)
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            if term or trunc:
                break
        assert term or trunc, "5s limit should end the episode"
    finally:
        env.close()

def test_determinism():
    def rollout(seed_val: int, action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = JumperEnv(frame_skip=2)
        traj = []
        try:
            obs, _ = env.reset(seed=seed_val)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    rng = np.random.RandomState(42)
    action_seq = [int(rng.randint(0, 4)) for _ in range(300)]
    t1 = rollout(7, action_seq)
    t2 = rollout(7, action_seq)
    assert len(t1) == len(t2)
    for (o1, r1, te1, tr1), (o2, r2, te2, tr2) in zip(t1, t2):
        assert np.allclose(o1, o2)
        assert (r1, te1, tr1) == (r2, te2, tr2)

def test_fall_terminates_with_penalty():
    env = JumperEnv(frame_skip=4)
    try:
        env.reset(seed=5)
        env.world.player.y = float(HEIGHT)
        env.world.player.vy = 1.0
        obs, r, term, trunc, info = env.step(0)
        assert term and not trunc
        assert r == -1.0
        assert info["fell"] and info["score"] == 0
        assert env.world.deaths == 1
    finally:
        env.close()

def test_rgb_array_render():
    env = JumperEnv(render_mode="rgb_array")
    try:
        env.reset(seed=1)
        frame = env.render()
        assert frame.shape == (HEIGHT, WIDTH, 3)
        assert frame.dtype == np.uint8
        # same drawing as the game window: player box at (200, 550)
        assert tuple(frame[580, 220]) == COLOR_PLAYER
        assert tuple(frame[595, 5]) == COLOR_BG
    finally:
        env.close()

def test_observation_layout():
    player = SimpleNamespace(x=200.0, y=540.0, vy=-12.0)
    plats = [Platform(185, 600), Platform(0, 100), Platform(330, 500), Platform(100, 300)]
    obs = build_observation(player, plats)
    assert obs.dtype == np.float32 and obs.shape == (OBS_SIZE,)
    assert obs[0] == np.float32(0.5)
    assert obs[1] == np.float32(0.9)
    assert obs[2] == np.float32(-0.5)
    # nearest to the feet (y=600) first: the platform at 600 sits dead center
    assert obs[3] == 0.0 and obs[4] == 0.0 and obs[5] == 1.0
    # then y=500: centered at 365 vs player center 220
    assert np.isclose(obs[6], 145 / WIDTH) and np.isclose(obs[7], -100 / HEIGHT)

def test_observation_missing_slots():
    player = SimpleNamespace(x=0.0, y=-900.0, vy=99.0)
    obs = build_observation(player, [])
    assert obs[1] == -1.0 and obs[2] == 1.0
    assert list(obs[3:]) == [0.0, -1.0, 0.0] * 3


def main():
    tests = [(name, fn) for name, fn in sorted(globals().items())
             if name.startswith("test_") and callable(fn)]
    try:
        for name, fn in tests:
            fn()
            print(f"✓ {name}")
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    print("🎉 All env tests passed")


if __name__ == "__main__":
    main()
