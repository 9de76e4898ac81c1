# src/dungeon/player_input.py
from __future__ import annotations
from typing import List, Optional, Tuple, Union

from src.keys import Key
from .components import Point, TurnState, WantsToAttack, WantsToMove, World

Intent = Union[WantsToMove, WantsToAttack]

MOVE_DELTAS = {
    Key.A: Point(-1, 0),
    Key.D: Point(1, 0),
    Key.W: Point(0, -1),
    Key.S: Point(0, 1),
}
NO_MOVE = Point(0, 0)


def player_input(world: World, key: Optional[Key],
                 turn_state: TurnState) -> Tuple[List[Intent], TurnState]:
    """
    Turn the key pressed this frame into intents for the player entity.
    - SPACE waits a turn and heals 1 HP (capped at max)
    - WASD moves, or attacks whatever enemy stands on the destination
    Returns (intents, new turn state); unhandled keys leave the turn state alone.
    """
    if key is None:
        return [], turn_state

    if key is Key.SPACE:
        player, _ = world.player_entity()
        health = world.health.get(player)
        if health is not None:
            health.current = min(health.max, health.current + 1)
        return [], TurnState.PLAYER_TURN

    delta = MOVE_DELTAS.get(key, NO_MOVE)
    if delta == NO_MOVE:
        return [], turn_state

    player, pos = world.player_entity()
    destination = pos + delta

    intents: List[Intent] = [
        WantsToAttack(attacker=player, victim=enemy)
        for enemy in world.enemies_at(destination)
    ]
    if not intents:
        intents.append(WantsToMove(entity=player, destination=destination))

    return intents, TurnState.PLAYER_TURN
