# src/env/dragon_env.py
from __future__ import annotations
import random
from typing import Optional, Dict, Any, List
import numpy as np
import gymnasium as gym
import pygame

from src.dragon.config import SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_SCALE
from src.dragon.host import Effect, apply_effects
from src.keys import Key
from src.dragon.modes import GameMode, GameState, TickInput, new_game, restart, transition
from src.env.observations import build_observation, OBS_LOW, OBS_HIGH

SIM_FRAME_MS = 20.0     # 50 Hz; keeps dt = 0.2 so the dragon advances 1 unit per tick
SCORE_REWARD = 10.0


def decision_inputs(action: int, frame_skip: int, frame_time_ms: float = SIM_FRAME_MS) -> List[TickInput]:
    """Ticks for one agent decision: FLAP presses SPACE on the first tick only."""
    return [TickInput(frame_time_ms, Key.SPACE if (action == 1 and i == 0) else None)
            for i in range(frame_skip)]


class DragonEnv(gym.Env):
    """
    Flappy Dragon Gymnasium environment (vector observations).
    - Each sim tick is one pass through the game-mode state machine.
    - Agent acts every `frame_skip` ticks (default 2) -> 25 decisions/sec.
    - Actions: 0 = NOOP, 1 = FLAP (SPACE on the first tick of the decision).
    - Observation: shape (6,), float32 (see observations.build_observation).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 50}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 2,
                 frame_time_ms: float = SIM_FRAME_MS,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert frame_time_ms > 0.0, "frame_time_ms must be > 0"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.frame_time_ms = float(frame_time_ms)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            ticks = time_limit_seconds * 1000.0 / self.frame_time_ms
            self.time_limit_decisions = int(ticks / self.frame_skip)

        # --- Gym spaces ---
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.state: Optional[GameState] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None
        self._last_effects: List[Effect] = []

        # Rendering
        self.window = None
        self.host = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Given seed -> obstacles use it directly; otherwise draw one from np_random
        if seed is not None:
            obstacle_seed = int(seed)
        else:
            obstacle_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.current_seed = obstacle_seed

        self.state = new_game(random.Random(obstacle_seed))
        restart(self.state)
        # zero-length tick: leaves the physics untouched but yields the first frame's draw list
        self.state, self._last_effects = transition(self.state, TickInput(0.0, None))
        self.timestep = 0

        obs = build_observation(self.state)
        info = {"seed": self.current_seed, "score": 0}

        if self.render_mode == "human":
            self.render()

        return obs, info

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.state is not None, "Call reset() before step()"

        score_before = self.state.score
        for inp in decision_inputs(action, self.frame_skip, self.frame_time_ms):
            self.state, self._last_effects = transition(self.state, inp)
            if self.state.mode is GameMode.END:
                break

        alive = self.state.mode is GameMode.PLAYING
        reward = 1.0 if alive else -1.0
        reward += SCORE_REWARD * (self.state.score - score_before)

        self.timestep += 1
        terminated = not alive
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        obs = build_observation(self.state)
        info = {
            "score": self.state.score,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "death_cause": self.state.death_cause,
        }

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None:
            return

        if self.host is None:
            # imported here so headless training never needs the runner module
            from src.dragon.game import PygameHost
            pygame.init()
            size = (SCREEN_WIDTH * WINDOW_SCALE, SCREEN_HEIGHT * WINDOW_SCALE)
            if self.render_mode == "human":
                self.window = pygame.display.set_mode(size)
                pygame.display.set_caption("Flappy Dragon - Gym Env")
                self.clock = pygame.time.Clock()
            self.host = PygameHost(scale=WINDOW_SCALE, surface=self.window)

        apply_effects(self.host, self._last_effects)
        frame = self.host.compose()

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", 50))
            return None

        # rgb_array: (H, W, 3) uint8
        arr = pygame.surfarray.array3d(frame)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.host is not None:
            pygame.display.quit()
            pygame.quit()
            self.host = None
            self.window = None
            self.clock = None
