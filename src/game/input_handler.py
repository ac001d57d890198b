"""Arrow-key input: maps key press/release events to a movement direction.

The handler never touches `GameState`. It deposits the newest direction into
a `DirectionMailbox`, which the scene drains once per tick.
"""

from __future__ import annotations

import threading
from typing import Optional

import pygame

from game.state import Direction

KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


class DirectionMailbox:
    """Single-slot mailbox: a later `put` overwrites an unread one."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: Optional[Direction] = None

    def put(self, direction: Direction) -> None:
        with self._lock:
            self._pending = direction

    def take(self) -> Optional[Direction]:
        """Return the pending direction (or None) and empty the slot."""
        with self._lock:
            direction, self._pending = self._pending, None
        return direction


class InputHandler:
    def __init__(self, mailbox: DirectionMailbox) -> None:
        self.mailbox = mailbox
        self.direction = Direction.NONE

    def _set(self, direction: Direction) -> None:
        if direction is not self.direction:
            self.direction = direction
            self.mailbox.put(direction)

    def on_key_down(self, key: int) -> None:
        direction = KEY_DIRECTIONS.get(key)
        if direction is not None:
            self._set(direction)

    def on_key_up(self, key: int) -> None:
        released = KEY_DIRECTIONS.get(key)
        if released is None:
            return
        # Releasing either key of an axis stops motion on that axis only
        if released.is_horizontal and self.direction.is_horizontal:
            self._set(Direction.NONE)
        elif released.is_vertical and self.direction.is_vertical:
            self._set(Direction.NONE)

    def handle_event(self, event) -> None:
        if event.type == pygame.KEYDOWN:
            self.on_key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.on_key_up(event.key)


__all__ = ["KEY_DIRECTIONS", "DirectionMailbox", "InputHandler"]
