"""Sprite atlas: loads the sprite sheet and slices it into named frames.

The sheet is a SHEET_COLUMNS x SHEET_ROWS grid of SPRITE_SIZE cells. Rows
0-4 hold the animation strips; two further cells hold the background tile
and the power-up glyph. Frames are copied out of the sheet so they do not
keep the full sheet alive as subsurfaces.

Loading failures are fatal: `AtlasLoadError` propagates to the caller.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, List, Tuple

import pygame

from config import (
    SPRITE_SIZE,
    SHEET_COLUMNS,
    SHEET_ROWS,
    BACKGROUND_CELL,
    POWER_UP_CELL,
)
from textures.resoucepath import SPRITE_SHEET_PATH

# Sheet rows read as animation strips, in sheet order
ANIMATION_ROWS = 5


class AtlasLoadError(RuntimeError):
    """The sprite sheet is missing, unreadable or too small."""


def cell_rect(col: int, row: int, size: int = SPRITE_SIZE) -> pygame.Rect:
    return pygame.Rect(col * size, row * size, size, size)


@dataclass
class SpriteAtlas:
    # Row index -> frames, left to right
    strips: Dict[int, List[pygame.Surface]]
    background: pygame.Surface
    power_up: pygame.Surface

    @classmethod
    def from_surface(cls, sheet: pygame.Surface) -> "SpriteAtlas":
        need: Tuple[int, int] = (SHEET_COLUMNS * SPRITE_SIZE, SHEET_ROWS * SPRITE_SIZE)
        w, h = sheet.get_size()
        if w < need[0] or h < need[1]:
            raise AtlasLoadError(
                f"sprite sheet is {w}x{h}, expected at least {need[0]}x{need[1]}"
            )

        def cut(col: int, row: int) -> pygame.Surface:
            return sheet.subsurface(cell_rect(col, row)).copy()

        strips = {
            row: [cut(col, row) for col in range(SHEET_COLUMNS)]
            for row in range(ANIMATION_ROWS)
        }
        return cls(
            strips=strips,
            background=cut(*BACKGROUND_CELL),
            power_up=cut(*POWER_UP_CELL),
        )

    @classmethod
    def load(cls, path: str = SPRITE_SHEET_PATH) -> "SpriteAtlas":
        if not os.path.isfile(path):
            raise AtlasLoadError(f"The sprite sheet could not be found: {path}")
        try:
            sheet = pygame.image.load(path)
        except (pygame.error, OSError) as e:
            raise AtlasLoadError(f"The sprite sheet could not be read: {path}: {e}") from e
        # convert_alpha needs a display surface; skip it when running headless
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            sheet = sheet.convert_alpha()
        atlas = cls.from_surface(sheet)
        print(f"[Atlas] Loaded sprite sheet {path} ({sheet.get_width()}x{sheet.get_height()})")
        return atlas

    def frames(self, row: int) -> List[pygame.Surface]:
        return self.strips[row]


__all__ = ["AtlasLoadError", "SpriteAtlas", "cell_rect", "ANIMATION_ROWS"]
