# src/dragon/player.py
from __future__ import annotations
from dataclasses import dataclass
from .config import (
    PLAYER_START_X, PLAYER_START_Y, SPRITE_SIZE,
    GRAVITY, MAX_FALL_SPEED, FLAP_IMPULSE, FORWARD_SPEED,
    NUM_ANIMATION_FRAMES, DEFAULT_ANIMATION_FRAME, ANIMATION_FRAME_LENGTH
)
from .geometry import BBox, sprite_box


@dataclass
class Player:
    """
    The dragon.
    - x grows as the world scrolls (world coords, the screen keeps it at RENDER_OFFSET_X)
    - y is the top of the sprite, 0 = top of screen, never negative
    - velocity > 0 means falling
    """
    x: int
    y: int
    velocity: float = 0.0
    curr_animation_index: int = DEFAULT_ANIMATION_FRAME
    curr_frame_time: float = 0.0
    is_animating: bool = False

    @classmethod
    def spawn(cls) -> Player:
        return cls(x=PLAYER_START_X, y=PLAYER_START_Y)

    @property
    def bbox(self) -> BBox:
        return sprite_box(self.x, self.y, SPRITE_SIZE)

    def gravity_and_move(self, dt: float):
        """Integrate gravity, then move down by the truncated velocity and forward at a fixed rate."""
        if dt <= 0.0:
            return

        self.velocity = min(self.velocity + GRAVITY * dt, MAX_FALL_SPEED)

        dy = int(self.velocity * dt)   # int() truncates toward zero
        # slow descent still moves at least one unit per frame
        if dy == 0 and self.velocity > 0.0:
            dy = 1
        self.y += dy
        self.x += int(FORWARD_SPEED * dt)

        if self.y < 0:
            self.y = 0

    def flap(self):
        """Replace (not add to) the current velocity with the flap impulse."""
        self.velocity = FLAP_IMPULSE

    def start_flap_animation(self):
        if not self.is_animating:
            self.is_animating = True

    def update_animation(self, frame_time_ms: float):
        if not self.is_animating:
            return

        self.curr_frame_time += frame_time_ms

        if self.curr_frame_time > ANIMATION_FRAME_LENGTH:
            self.curr_frame_time = 0.0
            self.curr_animation_index = (self.curr_animation_index + 1) % NUM_ANIMATION_FRAMES

            # one wing beat done once we're back on the rest frame
            if self.curr_animation_index == DEFAULT_ANIMATION_FRAME:
                self.is_animating = False
