# src/tests/player_input_unit.py
"""
Roguelike player input: move / attack intents and turn hand-off.

Usage (from repo root):
  python -m src.tests.player_input_unit
"""
from src.keys import Key
from src.dungeon.components import (
    Health, Point, TurnState, WantsToAttack, WantsToMove, World
)
from src.dungeon.player_input import player_input


def _world():
    w = World()
    hero = w.spawn(Point(5, 5), Health(current=3, max=5), player=True)
    orc = w.spawn(Point(6, 5), Health(current=2, max=2), enemy=True)
    return w, hero, orc


def test_no_key_does_nothing():
    w, _, _ = _world()
    intents, turn = player_input(w, None, TurnState.AWAITING_INPUT)
    assert intents == []
    assert turn is TurnState.AWAITING_INPUT


def test_move_into_empty_cell():
    w, hero, _ = _world()
    intents, turn = player_input(w, Key.A, TurnState.AWAITING_INPUT)
    assert intents == [WantsToMove(entity=hero, destination=Point(4, 5))]
    assert turn is TurnState.PLAYER_TURN
    assert w.positions[hero] == Point(5, 5), "input only emits intents"


def test_each_direction():
    w, hero, _ = _world()
    expected = {Key.W: Point(5, 4), Key.S: Point(5, 6), Key.A: Point(4, 5)}
    for key, dest in expected.items():
        intents, _ = player_input(w, key, TurnState.AWAITING_INPUT)
        assert intents == [WantsToMove(hero, dest)]


def test_bump_into_enemy_attacks_instead_of_moving():
    w, hero, orc = _world()
    intents, turn = player_input(w, Key.D, TurnState.AWAITING_INPUT)
    assert intents == [WantsToAttack(attacker=hero, victim=orc)]
    assert not any(isinstance(i, WantsToMove) for i in intents)
    assert turn is TurnState.PLAYER_TURN


def test_space_heals_up_to_max():
    w, hero, _ = _world()
    for expected in (4, 5, 5):
        intents, turn = player_input(w, Key.SPACE, TurnState.AWAITING_INPUT)
        assert intents == []
        assert turn is TurnState.PLAYER_TURN
        assert w.health[hero].current == expected


def test_unmapped_key_keeps_turn():
    w, _, _ = _world()
    intents, turn = player_input(w, Key.P, TurnState.AWAITING_INPUT)
    assert intents == []
    assert turn is TurnState.AWAITING_INPUT


def test_missing_player_raises():
    w = World()
    w.spawn(Point(0, 0), enemy=True)
    try:
        player_input(w, Key.D, TurnState.AWAITING_INPUT)
    except LookupError:
        pass
    else:
        raise AssertionError("expected LookupError without a player")


def main():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
    print("✓ player_input unit ok")


if __name__ == "__main__":
    main()
