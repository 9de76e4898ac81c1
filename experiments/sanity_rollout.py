# /experiments/sanity_rollout.py
"""
Sanity rollouts for DragonEnv: a coin-flip flapper and a gap-chasing heuristic
over fixed seeds. Each episode becomes one row of episodes.csv and, with
--save-traces, a replayable `.npz` under traces/<policy>/<seed>.npz.

Usage (from repo root):
  python -m experiments.sanity_rollout --policies both --save-traces
  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222 --save-traces --save-obs
  python -m experiments.sanity_rollout --policies random --steps 300 --out-dir /tmp/sanity
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import Callable, Dict, List

import numpy as np

from src.env.dragon_env import DragonEnv, SIM_FRAME_MS
from src.env.traces import trace_path, save_trace

Policy = Callable[[np.ndarray], int]

CSV_HEADER = [
    "policy", "seed", "frame_skip", "decision_hz",
    "decisions", "return", "score", "terminated", "truncated", "death_cause", "flap_ratio",
]


def coin_flip(seed: int, flap_prob: float = 0.15) -> Policy:
    rng = np.random.RandomState(10_000 + seed)
    return lambda _obs: int(rng.random_sample() < flap_prob)


def gap_chaser(_seed: int) -> Policy:
    """Flap while falling with the dragon's top below the middle of the next gap."""
    def act(obs: np.ndarray) -> int:
        gap_mid = 0.5 * (obs[3] + obs[4])
        return int(obs[1] >= 0.0 and obs[0] > gap_mid)
    return act


POLICIES: Dict[str, Callable[[int], Policy]] = {"random": coin_flip, "heuristic": gap_chaser}


def rollout(env: DragonEnv, policy: Policy, seed: int, steps_limit: int, keep_obs: bool) -> dict:
    obs, info = env.reset(seed=seed)
    actions: List[int] = []
    observations = [obs.copy()] if keep_obs else None
    ret, term, trunc = 0.0, False, False

    while len(actions) < steps_limit and not (term or trunc):
        a = policy(obs)
        actions.append(a)
        obs, r, term, trunc, info = env.step(a)
        ret += r
        if keep_obs:
            observations.append(obs.copy())

    return {
        "actions": actions,
        "obs": observations,
        "return": ret,
        "score": int(info.get("score", 0)),
        "terminated": term,
        "truncated": trunc,
        "death_cause": info.get("death_cause"),
    }


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both", choices=["random", "heuristic", "both"])
    ap.add_argument("--seeds", type=str, default="", help="Comma-separated seeds (default 101..120)")
    ap.add_argument("--frame-skip", type=int, default=2, help="Sim ticks per decision step")
    ap.add_argument("--steps", type=int, default=10_000, help="Hard cap on decision steps")
    ap.add_argument("--out-dir", type=str, default="experiments/runs")
    ap.add_argument("--save-traces", action="store_true", help="Write a replayable .npz per episode")
    ap.add_argument("--save-obs", action="store_true", help="Also store observations in the trace")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    seeds = [int(s) for s in args.seeds.split(",") if s.strip()] or list(range(101, 121))
    names = list(POLICIES) if args.policies == "both" else [args.policies]
    decision_hz = 1000.0 / SIM_FRAME_MS / args.frame_skip

    episodes_csv = out_dir / "episodes.csv"
    new_file = not episodes_csv.exists()
    print(f"Running {names} on {len(seeds)} seeds (frame_skip={args.frame_skip}, decision_hz≈{decision_hz:.1f})")

    env = DragonEnv(frame_skip=args.frame_skip)
    try:
        with episodes_csv.open("a", newline="") as f:
            w = csv.writer(f)
            if new_file:
                w.writerow(CSV_HEADER)
            for name in names:
                for seed in seeds:
                    ep = rollout(env, POLICIES[name](seed), seed, args.steps, args.save_traces and args.save_obs)
                    n = len(ep["actions"])
                    w.writerow([
                        name, seed, args.frame_skip, decision_hz,
                        n, f"{ep['return']:.1f}", ep["score"], int(ep["terminated"]), int(ep["truncated"]),
                        ep["death_cause"] or "", f"{sum(ep['actions']) / max(1, n):.3f}",
                    ])
                    if args.save_traces:
                        save_trace(trace_path(out_dir, name, seed), seed, args.frame_skip, ep["actions"], ep["obs"])
                    print(f"[{name}] seed={seed}  len={n}  score={ep['score']}  "
                          f"ret={ep['return']:.1f}  cause={ep['death_cause']}")
    finally:
        env.close()

    print(f"✓ Sanity rollouts complete ({episodes_csv})")


if __name__ == "__main__":
    main()
