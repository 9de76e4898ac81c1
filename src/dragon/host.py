# src/dragon/host.py
"""
Host boundary: what the core asks of the windowing / rendering layer.

The core never draws directly. Each tick it returns a list of effects
(plain dataclasses) and `apply_effects` replays them on a Host. The pygame
window lives in `game.py`; `RecordingHost` keeps everything in memory so the
state machine can be exercised without a display.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from src.keys import Key
from .config import COLOR_WHITE, TEXT_CONSOLE

Color = Tuple[int, int, int]
Rect = Tuple[int, int, int, int]


# --- Effects ---

@dataclass(frozen=True)
class ClearConsole:
    console: int
    bg: Optional[Color] = None


@dataclass(frozen=True)
class PrintText:
    y: int
    text: str
    x: Optional[int] = None      # None -> centred on the row


@dataclass(frozen=True)
class DrawSprite:
    rect: Rect
    frame: int
    tint: Color = COLOR_WHITE


@dataclass(frozen=True)
class Quit:
    pass


Effect = Union[ClearConsole, PrintText, DrawSprite, Quit]


class Host(ABC):
    """Capability interface. Subclasses provide the actual drawing."""

    frame_time_ms: float = 0.0
    key: Optional[Key] = None
    quitting: bool = False

    @abstractmethod
    def cls(self, console: int, bg: Optional[Color] = None):
        raise NotImplementedError

    @abstractmethod
    def print_at(self, x: int, y: int, text: str):
        raise NotImplementedError

    @abstractmethod
    def print_centered(self, y: int, text: str):
        raise NotImplementedError

    @abstractmethod
    def add_sprite(self, rect: Rect, frame: int, tint: Color):
        raise NotImplementedError

    def quit(self):
        self.quitting = True


def apply_effects(host: Host, effects: Sequence[Effect]):
    for fx in effects:
        if isinstance(fx, ClearConsole):
            host.cls(fx.console, fx.bg)
        elif isinstance(fx, PrintText):
            if fx.x is None:
                host.print_centered(fx.y, fx.text)
            else:
                host.print_at(fx.x, fx.y, fx.text)
        elif isinstance(fx, DrawSprite):
            host.add_sprite(fx.rect, fx.frame, fx.tint)
        elif isinstance(fx, Quit):
            host.quit()
        else:
            raise TypeError(f"Unknown effect: {fx!r}")


@dataclass
class RecordingHost(Host):
    """Headless host: remembers the last frame's text and sprites."""
    frame_time_ms: float = 0.0
    key: Optional[Key] = None
    quitting: bool = False
    text: List[str] = field(default_factory=list)
    sprites: List[Tuple[Rect, int]] = field(default_factory=list)

    def cls(self, console: int, bg: Optional[Color] = None):
        if console == TEXT_CONSOLE:
            self.text.clear()
        else:
            self.sprites.clear()

    def print_at(self, x: int, y: int, text: str):
        self.text.append(text)

    def print_centered(self, y: int, text: str):
        self.text.append(text)

    def add_sprite(self, rect: Rect, frame: int, tint: Color):
        self.sprites.append((rect, frame))
