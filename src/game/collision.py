"""Axis-aligned box overlap and power-up collection.

Boxes are `(x, y, w, h)` tuples in screen pixels with y growing downward.
Touching edges do not count as an overlap.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from config import SPRITE_SIZE
from game.state import Point

Box = Tuple[int, int, int, int]


def boxes_overlap(a: Box, b: Box) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return not (
        ax + aw <= bx
        or ax >= bx + bw
        or ay + ah <= by
        or ay >= by + bh
    )


def power_up_box(point: Point) -> Box:
    return (point[0], point[1], SPRITE_SIZE, SPRITE_SIZE)


def find_collected(character: Box, power_ups: Iterable[Point]) -> List[Point]:
    """Return every power-up point whose square overlaps `character`."""
    return [p for p in power_ups if boxes_overlap(character, power_up_box(p))]


__all__ = ["Box", "boxes_overlap", "power_up_box", "find_collected"]
