"""One fixed tick of game logic.

`update_step` moves the character, clamps it to the window, advances the
animation cursor and collects any power-ups the character now overlaps. It
does no I/O and cannot fail.
"""

from __future__ import annotations

from typing import List, Optional

from config import CHARACTER_SPEED, FRAME_DELAY
from game.collision import find_collected
from game.state import Direction, GameState, Point, clamp_position


def _apply_direction(state: GameState, direction: Direction) -> None:
    state.direction = direction
    # A frame index valid for an 8-frame run can be out of range for idle
    state.animation_frame %= state.animation.frame_count


def _advance_animation(state: GameState) -> None:
    state.frame_timer += 1
    if state.frame_timer > FRAME_DELAY:
        state.animation_frame = (
            state.animation_frame + 1
        ) % state.animation.frame_count
        state.frame_timer = 0


def _collect_power_ups(state: GameState) -> List[Point]:
    collected = find_collected(state.character_box, state.power_ups)
    if collected:
        state.score += len(collected)
        state.power_ups = [p for p in state.power_ups if p not in collected]
    return collected


def update_step(
    state: GameState, direction: Optional[Direction] = None
) -> List[Point]:
    """Advance `state` by one tick.

    If `direction` is given it replaces the state's current direction before
    moving. Returns the power-up points collected during this tick.
    """
    if direction is not None and direction is not state.direction:
        _apply_direction(state, direction)

    dx, dy = state.direction.vector
    x, y = state.position
    state.position = clamp_position(
        x + dx * CHARACTER_SPEED, y + dy * CHARACTER_SPEED
    )

    _advance_animation(state)
    return _collect_power_ups(state)


__all__ = ["update_step"]
