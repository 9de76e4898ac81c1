# src/dragon/geometry.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class BBox:
    """Axis-aligned box, half-open on both axes: [x, x_end) x [y, y_end)."""
    x: int
    y: int
    x_end: int
    y_end: int

    def is_hit(self, b: BBox) -> bool:
        """
        True when one of our edges lies inside `b` on both axes.
        Only our edges are tested against `b`'s range, so a box that fully
        wraps `b` without an edge inside it is NOT reported as a hit.
        """
        x_start_inside = b.x <= self.x < b.x_end
        x_end_inside = b.x <= self.x_end < b.x_end
        x_inside = x_start_inside or x_end_inside

        y_start_inside = b.y <= self.y < b.y_end
        y_end_inside = b.y <= self.y_end < b.y_end
        y_inside = y_start_inside or y_end_inside

        return x_inside and y_inside


def sprite_box(x: int, y: int, size: int) -> BBox:
    return BBox(x, y, x + size, y + size)
