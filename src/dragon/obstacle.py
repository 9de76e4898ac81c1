# src/dragon/obstacle.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Tuple
from .config import (
    SCREEN_HEIGHT, SPRITE_SIZE, RENDER_OFFSET_X,
    MAX_GAP_SIZE, MIN_GAP_SIZE, GAP_MARGIN
)
from .geometry import BBox
from .player import Player

Rect = Tuple[int, int, int, int]  # (x, y, w, h) in screen units


def gap_size(score: int) -> int:
    """Gap narrows by one unit per point scored, down to MIN_GAP_SIZE."""
    return max(MIN_GAP_SIZE, MAX_GAP_SIZE - score)


@dataclass
class Obstacle:
    """A one-sprite-wide wall with a gap centred on gap_y."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def new(cls, x: int, score: int, rng: random.Random) -> Obstacle:
        gap_y = rng.randrange(GAP_MARGIN, SCREEN_HEIGHT - GAP_MARGIN)
        return cls(x=x, gap_y=gap_y, size=gap_size(score))

    @property
    def half_size(self) -> int:
        return self.size // 2

    def upper_bbox(self) -> BBox:
        return BBox(self.x, 0, self.x + SPRITE_SIZE, self.gap_y - self.half_size)

    def lower_bbox(self) -> BBox:
        return BBox(self.x, self.gap_y + self.half_size, self.x + SPRITE_SIZE, SCREEN_HEIGHT)

    def hit_obstacle(self, player: Player) -> bool:
        me = player.bbox
        return me.is_hit(self.upper_bbox()) or me.is_hit(self.lower_bbox())

    def passed_by(self, player: Player) -> bool:
        """True once the player is fully past the wall's trailing edge."""
        return player.x > self.x + SPRITE_SIZE + RENDER_OFFSET_X

    def bricks(self, player_x: int) -> List[Rect]:
        """Screen rects of the brick sprites for both wall segments."""
        screen_x = self.x - player_x + RENDER_OFFSET_X
        half = self.half_size
        rects: List[Rect] = []

        end_upper = (self.gap_y - half) // SPRITE_SIZE
        for row in range(end_upper):
            rects.append((screen_x, row * SPRITE_SIZE, SPRITE_SIZE, SPRITE_SIZE))

        lower_top = self.gap_y + half
        num_lower = (SCREEN_HEIGHT - lower_top) // SPRITE_SIZE + 1
        for row in range(num_lower):
            rects.append((screen_x, lower_top + row * SPRITE_SIZE, SPRITE_SIZE, SPRITE_SIZE))

        return rects
