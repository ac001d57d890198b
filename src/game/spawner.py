"""Random placement of power-ups inside the playable area."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from config import POWER_UP_COUNT
from game.state import MAX_X, MAX_Y, Point


def spawn_power_ups(
    count: int = POWER_UP_COUNT, rng: Optional[np.random.Generator] = None
) -> List[Point]:
    """Return `count` top-left points drawn uniformly from [0, MAX_X) x [0, MAX_Y).

    Points are generated in one vectorized draw; pass a seeded `rng` for
    reproducible layouts.
    """
    if count <= 0:
        return []
    rng = rng or np.random.default_rng()
    xs = rng.integers(0, MAX_X, size=count)
    ys = rng.integers(0, MAX_Y, size=count)
    return [(int(x), int(y)) for x, y in zip(xs, ys)]


__all__ = ["spawn_power_ups"]
