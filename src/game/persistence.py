"""Save and restore the persisted part of the game state.

The save file is a tagged, versioned JSON record:

    {
        "format": "sprite-animation-game/save",
        "version": 1,
        "character": [x, y, w, h],
        "score": n,
        "power_ups": [[x, y], ...]
    }

Reading is forgiving: a missing file, unreadable file, wrong tag, unknown
version or invalid field is reported and discarded, and the caller keeps its
freshly initialized state. Writing failures are reported and ignored.
"""

from __future__ import annotations

import contextlib
import json
import os
from dataclasses import dataclass
from typing import List, Optional

from config import SAVE_PATH, SPRITE_SIZE
from game.state import GameState, Point, in_bounds

SAVE_FORMAT = "sprite-animation-game/save"
SAVE_VERSION = 1


class SaveFormatError(ValueError):
    """Raised when a save record is readable but not a valid snapshot."""


@dataclass
class Snapshot:
    position: Point
    score: int
    power_ups: List[Point]

    @classmethod
    def of(cls, state: GameState) -> "Snapshot":
        return cls(state.position, state.score, list(state.power_ups))

    def apply_to(self, state: GameState) -> None:
        state.restore(self.position, self.score, self.power_ups)


def _int(value, what: str) -> int:
    # bool is an int subclass; reject it so `true` never reads as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise SaveFormatError(f"{what} must be an integer, got {value!r}")
    return value


def snapshot_to_record(snapshot: Snapshot) -> dict:
    x, y = snapshot.position
    return {
        "format": SAVE_FORMAT,
        "version": SAVE_VERSION,
        "character": [x, y, SPRITE_SIZE, SPRITE_SIZE],
        "score": snapshot.score,
        "power_ups": [[px, py] for px, py in snapshot.power_ups],
    }


def snapshot_from_record(record) -> Snapshot:
    """Validate a decoded record and build a Snapshot from it."""
    if not isinstance(record, dict):
        raise SaveFormatError("save record must be a JSON object")
    if record.get("format") != SAVE_FORMAT:
        raise SaveFormatError(f"unknown save format {record.get('format')!r}")
    version = record.get("version")
    if version != SAVE_VERSION:
        raise SaveFormatError(f"unsupported save version {version!r}")

    character = record["character"]
    if not isinstance(character, list) or len(character) != 4:
        raise SaveFormatError("character must be [x, y, w, h]")
    x, y, w, h = (_int(v, "character") for v in character)
    if (w, h) != (SPRITE_SIZE, SPRITE_SIZE):
        raise SaveFormatError(f"character size {w}x{h} does not match sprites")
    if not in_bounds(x, y):
        raise SaveFormatError(f"character position {(x, y)} is out of bounds")

    score = _int(record["score"], "score")
    if score < 0:
        raise SaveFormatError(f"score must be non-negative, got {score}")

    raw_power_ups = record["power_ups"]
    if not isinstance(raw_power_ups, list):
        raise SaveFormatError("power_ups must be a list")
    power_ups: List[Point] = []
    for entry in raw_power_ups:
        if not isinstance(entry, list) or len(entry) != 2:
            raise SaveFormatError(f"power-up entry {entry!r} must be [x, y]")
        px, py = _int(entry[0], "power-up"), _int(entry[1], "power-up")
        if not in_bounds(px, py):
            raise SaveFormatError(f"power-up position {(px, py)} is out of bounds")
        power_ups.append((px, py))

    return Snapshot((x, y), score, power_ups)


def save_game_state(state: GameState, path: str = SAVE_PATH) -> bool:
    """Write a snapshot of `state` to `path`. Returns True on success."""
    record = snapshot_to_record(Snapshot.of(state))
    tmp_path = path + ".tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(record, f)
        os.replace(tmp_path, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            os.remove(tmp_path)
        print(f"[Persistence] Failed to save game state to {path}: {e}")
        return False
    print(f"[Persistence] Saved game state to {path} (score={state.score})")
    return True


def load_game_state(path: str = SAVE_PATH) -> Optional[Snapshot]:
    """Read a snapshot from `path`; None if absent or invalid."""
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            record = json.load(f)
        snapshot = snapshot_from_record(record)
    except (OSError, ValueError, KeyError, TypeError, RecursionError) as e:
        # json.JSONDecodeError and SaveFormatError are both ValueErrors;
        # deeply nested JSON raises RecursionError
        print(f"[Persistence] Ignoring saved state in {path}: {e}")
        return None
    print(
        f"[Persistence] Loaded game state from {path} "
        f"(score={snapshot.score}, power-ups={len(snapshot.power_ups)})"
    )
    return snapshot


__all__ = [
    "SAVE_FORMAT",
    "SAVE_VERSION",
    "SaveFormatError",
    "Snapshot",
    "snapshot_to_record",
    "snapshot_from_record",
    "save_game_state",
    "load_game_state",
]
