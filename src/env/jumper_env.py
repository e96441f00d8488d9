# src/env/jumper_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import WIDTH, HEIGHT, FPS, TITLE
from src.game.game import draw_scene
from src.game.world import World
from src.env.observations import build_observation, observation_bounds

# action -> (left, right)
ACTIONS = ((False, False), (True, False), (False, True), (True, True))


class JumperEnv(gym.Env):
    """
    Block Jump Gymnasium environment (vector observations).
    - Simulation at 60 ticks/s, same World.step as the game.
    - Agent acts every `frame_skip` ticks (default 4).
    - Actions: 0 = NOOP, 1 = LEFT, 2 = RIGHT, 3 = LEFT+RIGHT.
    - Reward: points gained during the decision step; -1 on a fall.
    - Episode terminates on the first fall (the world has already reset itself).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 30.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        self.action_space = gym.spaces.Discrete(len(ACTIONS))
        low, high = observation_bounds()
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        self.world: Optional[World] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        self.screen = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # explicit seed -> used as-is; otherwise drawn from the env's np_random
        if seed is not None:
            level_seed = int(seed)
        else:
            level_seed = int(self.np_random.integers(0, 2**31 - 1))

        self.world = World(seed=level_seed)
        self.timestep = 0
        self.current_seed = self.world.seed

        obs = self._get_obs()
        info = {"seed": self.current_seed, "score": 0}
        if self.render_mode == "human":
            self.render()
        return obs, info

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.world is not None, "call reset() before step()"

        left, right = ACTIONS[int(action)]
        score_before = self.world.score
        fell = False
        bounces = 0

        for _ in range(self.frame_skip):
            info = self.world.step(left, right)
            bounces += int(info.bounced)
            if info.reset:
                fell = True
                break

        if fell:
            reward = -1.0
        else:
            reward = float(self.world.score - score_before)

        self.timestep += 1
        terminated = fell
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        obs = self._get_obs()
        info = {
            "score": self.world.score,
            "best_score": self.world.best_score,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "bounces": bounces,
            "fell": fell,
        }

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    def _get_obs(self) -> np.ndarray:
        assert self.world is not None
        return build_observation(self.world.player, self.world.platforms)

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.world is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption(f"{TITLE} - Gym Env")
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.clock = pygame.time.Clock()

        if self.render_mode == "human":
            # keep the OS from flagging the window as hung
            pygame.event.pump()

        draw_scene(self.screen, self.world)

        if self.render_mode == "human":
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
