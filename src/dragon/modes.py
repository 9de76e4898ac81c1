# src/dragon/modes.py
"""
Game-mode state machine.

`transition(state, inp)` is the whole per-tick game: it copies the state,
runs the handler for the current mode and returns the new state (whose
`mode` is the next mode) plus the effects the host should render.
Escape is checked before the mode dispatch and only adds a Quit effect.
"""
from __future__ import annotations
import copy
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_SIZE, RENDER_OFFSET_X,
    DT_DIVISOR, BRICK_SPRITE, TEXT_CONSOLE, SPRITE_CONSOLE, COLOR_NAVY
)
from src.keys import Key
from .host import Effect, ClearConsole, PrintText, DrawSprite, Quit
from .obstacle import Obstacle
from .player import Player


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


@dataclass
class GameState:
    mode: GameMode
    player: Player
    obstacle: Obstacle
    score: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False)
    death_cause: Optional[str] = None   # "obstacle" | "fell" | None


@dataclass(frozen=True)
class TickInput:
    frame_time_ms: float = 0.0
    key: Optional[Key] = None


def new_game(rng: Optional[random.Random] = None) -> GameState:
    """Fresh state sitting on the title menu."""
    rng = rng if rng is not None else random.Random()
    return GameState(
        mode=GameMode.MENU,
        player=Player.spawn(),
        obstacle=Obstacle.new(SCREEN_WIDTH, 0, rng),
        score=0,
        rng=rng,
    )


def restart(state: GameState):
    """Reset the run in place and start playing."""
    state.player = Player.spawn()
    state.mode = GameMode.PLAYING
    state.obstacle = Obstacle.new(SCREEN_WIDTH, 0, state.rng)
    state.score = 0
    state.death_cause = None


# --- Mode handlers (mutate the working copy, return effects) ---

def _menu_keys(state: GameState, key: Optional[Key]) -> List[Effect]:
    if key is Key.P:
        restart(state)
    elif key is Key.Q:
        return [Quit()]
    return []


def _main_menu(state: GameState, inp: TickInput) -> List[Effect]:
    effects: List[Effect] = [
        ClearConsole(SPRITE_CONSOLE),
        ClearConsole(TEXT_CONSOLE),
        PrintText(5, "Welcome to Flappy Dragon"),
        PrintText(8, "(P) Play Game"),
        PrintText(9, "(Q) Quit Game"),
    ]
    return effects + _menu_keys(state, inp.key)


def _play(state: GameState, inp: TickInput) -> List[Effect]:
    player = state.player

    dt = inp.frame_time_ms / DT_DIVISOR
    player.gravity_and_move(dt)

    if inp.key is Key.SPACE:
        player.flap()
        player.start_flap_animation()

    player.update_animation(inp.frame_time_ms)

    effects: List[Effect] = [
        ClearConsole(TEXT_CONSOLE, COLOR_NAVY),
        PrintText(0, "Press SPACE to flap.", x=0),
        PrintText(1, f"Score: {state.score}", x=0),
        ClearConsole(SPRITE_CONSOLE),
        DrawSprite((RENDER_OFFSET_X, player.y, SPRITE_SIZE, SPRITE_SIZE), player.curr_animation_index),
    ]
    effects.extend(DrawSprite(r, BRICK_SPRITE) for r in state.obstacle.bricks(player.x))

    if state.obstacle.passed_by(player):
        state.score += 1
        state.obstacle = Obstacle.new(player.x + SCREEN_WIDTH, state.score, state.rng)

    if player.y > SCREEN_HEIGHT:
        state.mode = GameMode.END
        state.death_cause = "fell"
    elif state.obstacle.hit_obstacle(player):
        state.mode = GameMode.END
        state.death_cause = "obstacle"

    return effects


def _dead(state: GameState, inp: TickInput) -> List[Effect]:
    effects: List[Effect] = [
        ClearConsole(SPRITE_CONSOLE),
        ClearConsole(TEXT_CONSOLE),
        PrintText(5, "You are dead :("),
        PrintText(6, f"You earned {state.score} points"),
        PrintText(8, "(P) Play Again"),
        PrintText(9, "(Q) Quit Game"),
    ]
    return effects + _menu_keys(state, inp.key)


_HANDLERS: Dict[GameMode, Callable[[GameState, TickInput], List[Effect]]] = {
    GameMode.MENU: _main_menu,
    GameMode.PLAYING: _play,
    GameMode.END: _dead,
}


def transition(state: GameState, inp: TickInput) -> Tuple[GameState, List[Effect]]:
    """One tick. The input state is left untouched."""
    nxt = copy.deepcopy(state)
    effects: List[Effect] = []
    if inp.key is Key.ESCAPE:
        effects.append(Quit())
    effects.extend(_HANDLERS[nxt.mode](nxt, inp))
    return nxt, effects
