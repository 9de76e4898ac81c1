# src/tests/obstacle_unit.py
"""
Obstacle generation, gap sizing and wall collisions.

Usage (from repo root):
  python -m src.tests.obstacle_unit
"""
import random

from src.dragon.config import SCREEN_HEIGHT, SPRITE_SIZE, RENDER_OFFSET_X
from src.dragon.geometry import BBox
from src.dragon.obstacle import Obstacle, gap_size
from src.dragon.player import Player


def test_gap_shrinks_with_score():
    for s in range(0, 31):
        assert gap_size(s) == 32 - s


def test_gap_floor_holds():
    for s in list(range(30, 40)) + [100, 10_000]:
        assert gap_size(s) == 2


def test_gap_centre_band():
    rng = random.Random(7)
    for s in range(200):
        obs = Obstacle.new(100, s, rng)
        assert 4 * SPRITE_SIZE <= obs.gap_y < SCREEN_HEIGHT - 4 * SPRITE_SIZE
        assert obs.size == gap_size(s)
        assert obs.x == 100


def test_injected_rng_is_deterministic():
    r1, r2 = random.Random(99), random.Random(99)
    a = [Obstacle.new(0, 0, r1).gap_y for _ in range(10)]
    b = [Obstacle.new(0, 0, r2).gap_y for _ in range(10)]
    assert a == b


def test_segments():
    obs = Obstacle(x=20, gap_y=30, size=20)
    assert obs.upper_bbox() == BBox(20, 0, 24, 20)
    assert obs.lower_bbox() == BBox(20, 40, 24, SCREEN_HEIGHT)


def test_player_in_gap_is_safe():
    obs = Obstacle(x=20, gap_y=30, size=20)
    assert not obs.hit_obstacle(Player(x=20, y=25))


def test_player_below_gap_away_from_wall_is_safe():
    obs = Obstacle(x=80, gap_y=30, size=20)     # gap spans y in [20, 40)
    assert not obs.hit_obstacle(Player(x=20, y=60))


def test_player_below_gap_at_wall_hits_lower():
    obs = Obstacle(x=20, gap_y=30, size=20)
    assert obs.hit_obstacle(Player(x=20, y=60))


def test_player_above_gap_hits_upper():
    obs = Obstacle(x=20, gap_y=30, size=20)
    assert obs.hit_obstacle(Player(x=18, y=0))


def test_passed_by():
    obs = Obstacle(x=100, gap_y=60, size=10)
    edge = 100 + SPRITE_SIZE + RENDER_OFFSET_X
    assert not obs.passed_by(Player(x=edge, y=10))
    assert obs.passed_by(Player(x=edge + 1, y=10))


def test_bricks_layout():
    obs = Obstacle(x=160, gap_y=64, size=16)
    rects = obs.bricks(player_x=5)
    screen_x = 160 - 5 + RENDER_OFFSET_X
    assert all(r[0] == screen_x for r in rects)
    upper = [r for r in rects if r[1] < 64]
    lower = [r for r in rects if r[1] >= 64]
    assert len(upper) == (64 - 8) // SPRITE_SIZE
    assert len(lower) == (SCREEN_HEIGHT - 72) // SPRITE_SIZE + 1
    assert lower[0][1] == 72


def main():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
    print("✓ obstacle unit ok")


if __name__ == "__main__":
    main()
