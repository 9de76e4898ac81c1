# /experiments/replay.py
"""
Watch a recorded DragonEnv episode in the game's own window.

The trace (written by experiments.sanity_rollout --save-traces) carries its seed
and frame_skip, so the replay regenerates the same obstacles and feeds each
recorded decision back through DragonGame, pressing SPACE on the first tick of
every FLAP decision.

Usage (from repo root):
  python -m experiments.replay --policy heuristic --seed 105
  python -m experiments.replay --trace experiments/runs/traces/random/112.npz --sprites dragon.png

Controls: SPACE pause/resume | N step (when paused) | R restart | ESC quit
"""

from __future__ import annotations
import argparse
import random
from pathlib import Path

import pygame

from src.dragon.config import SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_SCALE, TEXT_CELL_PX
from src.dragon.game import DragonGame, PygameHost, load_sprite_sheet
from src.env.traces import trace_path, load_trace, play_decision, prime

OVERLAY_ROW = SCREEN_HEIGHT * WINDOW_SCALE // TEXT_CELL_PX - 3


def _fresh_game(host: PygameHost, seed: int) -> DragonGame:
    game = DragonGame(host, random.Random(seed))
    prime(game)
    return game


def _overlay(host: PygameHost, game: DragonGame, step_idx: int, total: int, paused: bool):
    st = game.state
    host.print_at(0, OVERLAY_ROW, f"step {step_idx}/{total}{'  [paused]' if paused else ''}")
    host.print_at(0, OVERLAY_ROW + 1,
                  f"y={st.player.y} v={st.player.velocity:+.2f} gap={st.obstacle.gap_y}±{st.obstacle.half_size}")


def replay(seed: int, frame_skip: int, actions, frames=None, fps: int = 25):
    pygame.init()
    pygame.display.set_caption(f"Flappy Dragon replay  seed={seed}")
    window = pygame.display.set_mode((SCREEN_WIDTH * WINDOW_SCALE, SCREEN_HEIGHT * WINDOW_SCALE))
    clock = pygame.time.Clock()
    host = PygameHost(frames=frames, surface=window)
    game = _fresh_game(host, seed)

    step_idx = 0
    paused = single_step = False
    alive = True
    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return game.state
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    return game.state
                if event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_n and paused:
                    single_step = True
                elif event.key == pygame.K_r:
                    game = _fresh_game(host, seed)
                    step_idx, alive, paused = 0, True, False

            if alive and step_idx < len(actions) and (not paused or single_step):
                alive = play_decision(game, int(actions[step_idx]), frame_skip)
                step_idx += 1
                single_step = False
                if not alive:
                    print(f"Dead at decision {step_idx}: score={game.state.score} cause={game.state.death_cause}")

            _overlay(host, game, step_idx, len(actions), paused)
            host.compose()
            pygame.display.flip()
            clock.tick(fps)
    finally:
        pygame.quit()


def main():
    ap = argparse.ArgumentParser(description="Replay a recorded DragonEnv episode.")
    ap.add_argument("--seed", type=int, default=None, help="Episode seed (with --policy)")
    ap.add_argument("--policy", type=str, default="random", help="Trace subfolder, e.g. random / heuristic")
    ap.add_argument("--trace", type=str, default="", help="Explicit path to a .npz trace")
    ap.add_argument("--out-dir", type=str, default="experiments/runs")
    ap.add_argument("--sprites", type=str, default=None, help="Optional sprite sheet PNG")
    ap.add_argument("--fps", type=int, default=25, help="Decisions shown per second")
    args = ap.parse_args()

    if args.trace:
        path = Path(args.trace)
    elif args.seed is not None:
        path = trace_path(Path(args.out_dir), args.policy, args.seed)
    else:
        raise SystemExit("Please provide --seed or --trace")

    seed, frame_skip, actions = load_trace(path)
    print(f"Replaying {path}  seed={seed}  decisions={len(actions)}  frame_skip={frame_skip}")

    pygame.init()
    frames = load_sprite_sheet(Path(args.sprites)) if args.sprites else None
    final = replay(seed, frame_skip, actions, frames=frames, fps=args.fps)
    print(f"Final score: {final.score}")


if __name__ == "__main__":
    main()
