"""Game state model: character, animation cursor, score and power-ups.

`GameState` is a single mutable aggregate owned by the game scene. Only the
update step (and persistence restore at startup) writes to it; input reaches
it through the direction mailbox, never directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from config import WIDTH, HEIGHT, SPRITE_SIZE, STARTING_POS

Point = Tuple[int, int]

MAX_X = WIDTH - SPRITE_SIZE
MAX_Y = HEIGHT - SPRITE_SIZE


class Direction(Enum):
    """Movement direction; each value is a unit vector on at most one axis."""

    NONE = (0, 0)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def vector(self) -> Point:
        return self.value

    @property
    def is_horizontal(self) -> bool:
        return self.value[0] != 0

    @property
    def is_vertical(self) -> bool:
        return self.value[1] != 0


class AnimationState(Enum):
    """Closed set of character animations.

    Each member carries the sheet row its frames come from, how many frames
    the cycle has, and whether the frames are drawn mirrored horizontally.
    RUN_RIGHT has its own row in the sheet but is drawn from RUN_LEFT's
    frames, flipped.
    """

    IDLE = (0, 7, False)
    RUN_LEFT = (1, 8, False)
    RUN_UP = (2, 8, False)
    RUN_RIGHT = (1, 8, True)
    RUN_DOWN = (4, 8, False)

    def __init__(self, row: int, frame_count: int, mirrored: bool) -> None:
        self.row = row
        self.frame_count = frame_count
        self.mirrored = mirrored

    @classmethod
    def for_direction(cls, direction: Direction) -> "AnimationState":
        return _ANIMATION_FOR_DIRECTION[direction]


_ANIMATION_FOR_DIRECTION = {
    Direction.NONE: AnimationState.IDLE,
    Direction.LEFT: AnimationState.RUN_LEFT,
    Direction.UP: AnimationState.RUN_UP,
    Direction.RIGHT: AnimationState.RUN_RIGHT,
    Direction.DOWN: AnimationState.RUN_DOWN,
}


def clamp_position(x: int, y: int) -> Point:
    return (max(0, min(MAX_X, x)), max(0, min(MAX_Y, y)))


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x <= MAX_X and 0 <= y <= MAX_Y


@dataclass
class GameState:
    position: Point = STARTING_POS
    direction: Direction = Direction.NONE
    animation_frame: int = 0
    frame_timer: int = 0
    score: int = 0
    power_ups: List[Point] = field(default_factory=list)

    @property
    def animation(self) -> AnimationState:
        return AnimationState.for_direction(self.direction)

    @property
    def character_box(self) -> Tuple[int, int, int, int]:
        """(x, y, w, h) of the character's bounding square."""
        x, y = self.position
        return (x, y, SPRITE_SIZE, SPRITE_SIZE)

    def restore(self, position: Point, score: int, power_ups: List[Point]) -> None:
        """Overwrite the persisted fields with a saved snapshot."""
        self.position = (int(position[0]), int(position[1]))
        self.score = int(score)
        self.power_ups = [(int(x), int(y)) for x, y in power_ups]


__all__ = [
    "Point",
    "Direction",
    "AnimationState",
    "GameState",
    "clamp_position",
    "in_bounds",
    "MAX_X",
    "MAX_Y",
]
