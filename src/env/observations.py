# src/env/observations.py
from __future__ import annotations
import numpy as np

from src.dragon.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_SIZE, MAX_FALL_SPEED, MAX_GAP_SIZE
)

OBS_SIZE = 6
OBS_LOW = np.array([0.0, -1.0, -1.0, 0.0, 0.0, 0.0], dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0, 1.0, 1.0, 1.0], dtype=np.float32)


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)


def build_observation(state) -> np.ndarray:
    """
    Compact vector for an agent, all values normalized:
      [y_norm, vel_norm, dx_norm, gap_top_norm, gap_bottom_norm, gap_size_norm]
    - y_norm   : sprite top over [0, SCREEN_HEIGHT - SPRITE_SIZE]
    - vel_norm : velocity / MAX_FALL_SPEED (flap -> -0.5)
    - dx_norm  : (obstacle.x - player.x) / SCREEN_WIDTH, negative while overlapping the wall
    - gap_*    : gap edges over SCREEN_HEIGHT, gap size over MAX_GAP_SIZE
    """
    player, obstacle = state.player, state.obstacle
    half = obstacle.half_size

    y_norm = _clamp(player.y / max(1, SCREEN_HEIGHT - SPRITE_SIZE), 0.0, 1.0)
    vel_norm = _clamp(player.velocity / MAX_FALL_SPEED, -1.0, 1.0)
    dx_norm = _clamp((obstacle.x - player.x) / SCREEN_WIDTH, -1.0, 1.0)
    gap_top = _clamp((obstacle.gap_y - half) / SCREEN_HEIGHT, 0.0, 1.0)
    gap_bot = _clamp((obstacle.gap_y + half) / SCREEN_HEIGHT, 0.0, 1.0)
    gap_size = _clamp(obstacle.size / MAX_GAP_SIZE, 0.0, 1.0)

    return np.array([y_norm, vel_norm, dx_norm, gap_top, gap_bot, gap_size], dtype=np.float32)
