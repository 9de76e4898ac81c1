# src/tests/player_unit.py
"""
Dragon kinematics and wing animation.

Usage (from repo root):
  python -m src.tests.player_unit
"""
from src.dragon.config import (
    PLAYER_START_X, PLAYER_START_Y, MAX_FALL_SPEED, FLAP_IMPULSE,
    DEFAULT_ANIMATION_FRAME, ANIMATION_FRAME_LENGTH
)
from src.dragon.player import Player


def test_spawn_position():
    p = Player.spawn()
    assert (p.x, p.y) == (PLAYER_START_X, PLAYER_START_Y)
    assert p.velocity == 0.0
    assert p.curr_animation_index == DEFAULT_ANIMATION_FRAME and not p.is_animating


def test_zero_dt_changes_nothing():
    p = Player(x=10, y=40, velocity=2.5)
    p.gravity_and_move(0.0)
    assert (p.x, p.y, p.velocity) == (10, 40, 2.5)


def test_velocity_rises_to_cap():
    p = Player(x=0, y=0)
    prev = p.velocity
    for _ in range(40):
        p.gravity_and_move(1.0)
        assert p.velocity >= prev, "velocity must not decrease while falling"
        assert p.velocity <= MAX_FALL_SPEED
        prev = p.velocity
    assert p.velocity == MAX_FALL_SPEED


def test_slow_fall_still_moves_one_unit():
    p = Player(x=5, y=25)
    p.gravity_and_move(1.0)          # v=0.4 -> trunc(0.4)=0 -> forced to 1
    assert p.y == 26
    assert p.x == 11                 # trunc(6.0 * 1.0)


def test_displacement_truncates():
    p = Player(x=0, y=50, velocity=2.0)
    p.gravity_and_move(1.5)          # v=2.6, dy=trunc(3.9)=3, dx=trunc(9.0)=9
    assert p.y == 53
    assert p.x == 9


def test_flap_sets_fixed_impulse():
    for v in (-4.0, -1.0, 0.0, 3.3, MAX_FALL_SPEED):
        p = Player(x=0, y=50, velocity=v)
        p.flap()
        assert p.velocity == FLAP_IMPULSE
    p.flap()
    assert p.velocity == FLAP_IMPULSE   # no stacking


def test_y_never_negative():
    p = Player(x=0, y=2)
    for i in range(50):
        if i % 3 == 0:
            p.flap()
        p.gravity_and_move(1.0)
        assert p.y >= 0


def test_animation_runs_one_cycle():
    p = Player.spawn()
    p.update_animation(100.0)
    assert p.curr_animation_index == DEFAULT_ANIMATION_FRAME, "idle dragon must not animate"

    p.start_flap_animation()
    p.update_animation(ANIMATION_FRAME_LENGTH)     # not strictly greater yet
    assert p.curr_animation_index == DEFAULT_ANIMATION_FRAME

    seen = []
    for _ in range(4):
        p.update_animation(ANIMATION_FRAME_LENGTH + 1.0)
        seen.append(p.curr_animation_index)
    assert seen == [2, 3, 0, 1]
    assert not p.is_animating
    assert p.curr_frame_time == 0.0


def main():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
    print("✓ player unit ok")


if __name__ == "__main__":
    main()
