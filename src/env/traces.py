# src/env/traces.py
"""
Recorded episodes: one `.npz` per episode holding the decision actions plus the
seed and frame_skip needed to regenerate it, and the helper that feeds those
decisions back through a DragonGame tick by tick.
"""
from __future__ import annotations
from pathlib import Path
from typing import Tuple

import numpy as np

from src.dragon.game import DragonGame
from src.dragon.modes import GameMode, restart
from src.env.dragon_env import SIM_FRAME_MS, decision_inputs


def trace_path(out_dir: Path, policy: str, seed: int) -> Path:
    return out_dir / "traces" / policy / f"{seed}.npz"


def save_trace(path: Path, seed: int, frame_skip: int, actions, obs=None):
    path.parent.mkdir(parents=True, exist_ok=True)
    arrays = {
        "actions": np.asarray(actions, dtype=np.int8),
        "seed": np.int64(seed),
        "frame_skip": np.int64(frame_skip),
    }
    if obs is not None:
        arrays["obs"] = np.asarray(obs, dtype=np.float32)
    np.savez(path, **arrays)


def load_trace(path: Path) -> Tuple[int, int, np.ndarray]:
    """Returns (seed, frame_skip, actions)."""
    if not path.exists():
        raise FileNotFoundError(f"Trace not found: {path}")
    with np.load(path) as data:
        actions = data["actions"]
        if actions.ndim != 1:
            raise ValueError(f"Expected 1D action array, got shape {actions.shape}")
        return int(data["seed"]), int(data["frame_skip"]), actions.astype(np.int64)


def play_decision(game: DragonGame, action: int, frame_skip: int,
                  frame_time_ms: float = SIM_FRAME_MS) -> bool:
    """Run one recorded decision through the game's host. False once the dragon is dead."""
    for inp in decision_inputs(action, frame_skip, frame_time_ms):
        game.host.frame_time_ms = inp.frame_time_ms
        game.host.key = inp.key
        game.tick()
        if game.state.mode is GameMode.END:
            return False
    return True


def prime(game: DragonGame):
    """Put the game straight into play, the way DragonEnv.reset does."""
    restart(game.state)
    game.host.frame_time_ms = 0.0
    game.host.key = None
    game.tick()
