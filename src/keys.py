# src/keys.py
from enum import Enum


class Key(Enum):
    """Virtual keys shared by both games (at most one per tick)."""
    SPACE = "space"
    P = "p"
    Q = "q"
    ESCAPE = "escape"
    W = "w"
    A = "a"
    S = "s"
    D = "d"
