# src/dungeon/components.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Set, Tuple

Entity = int


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)


@dataclass
class Health:
    current: int
    max: int


class TurnState(Enum):
    AWAITING_INPUT = "awaiting_input"
    PLAYER_TURN = "player_turn"
    MONSTER_TURN = "monster_turn"


# --- Intents (consumed by the movement / combat systems) ---

@dataclass(frozen=True)
class WantsToMove:
    entity: Entity
    destination: Point


@dataclass(frozen=True)
class WantsToAttack:
    attacker: Entity
    victim: Entity


@dataclass
class World:
    """Tiny entity store: ids map to optional components, tags live in sets."""
    positions: Dict[Entity, Point] = field(default_factory=dict)
    health: Dict[Entity, Health] = field(default_factory=dict)
    players: Set[Entity] = field(default_factory=set)
    enemies: Set[Entity] = field(default_factory=set)
    _next_id: int = 0

    def spawn(self, pos: Point, health: Optional[Health] = None,
              player: bool = False, enemy: bool = False) -> Entity:
        e = self._next_id
        self._next_id += 1
        self.positions[e] = pos
        if health is not None:
            self.health[e] = health
        if player:
            self.players.add(e)
        if enemy:
            self.enemies.add(e)
        return e

    def player_entity(self) -> Tuple[Entity, Point]:
        for e in sorted(self.players):
            if e in self.positions:
                return e, self.positions[e]
        raise LookupError("World has no player entity with a position")

    def enemies_at(self, pos: Point) -> Iterator[Entity]:
        for e in sorted(self.enemies):
            if self.positions.get(e) == pos:
                yield e
