"""Game package: re-export common symbols for simpler imports.

Callers can import public types from `game` directly, e.g.:

    from game import GameState, Direction, update_step

The scene itself lives in `game.game_scene` and is imported from there, so
the pure game logic can be used without pulling in the scene machinery.
"""

from .state import GameState, Direction, AnimationState
from .collision import boxes_overlap, find_collected
from .update import update_step
from .spawner import spawn_power_ups
from .input_handler import DirectionMailbox, InputHandler
from .persistence import Snapshot, load_game_state, save_game_state

__all__ = [
    "GameState",
    "Direction",
    "AnimationState",
    "boxes_overlap",
    "find_collected",
    "update_step",
    "spawn_power_ups",
    "DirectionMailbox",
    "InputHandler",
    "Snapshot",
    "load_game_state",
    "save_game_state",
]
