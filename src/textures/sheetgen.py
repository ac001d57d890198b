"""Placeholder sprite sheet generator

Draws an 8x8 grid of 64px cells in the layout the game expects and saves it
as PNG, so the game can run before real art exists.

Usage (examples):
  - Default location (run from the repo root):
      sprite-sheetgen
  - Custom output and seed:
      sprite-sheetgen -o assets/SpriteSheet.png --seed 7

Layout:
  - Rows 0-4: Idle, RunLeft, RunUp, RunRight, RunDown strips (8 frames).
    Each row has its own body colour; a bar grows with the frame index so
    playback is visible.
  - Cell (7, 0): background tile (checkered grass).
  - Cell (0, 6): power-up glyph (gold diamond).
"""

from __future__ import annotations

import argparse
import os
import random

# We use pygame to write PNG without new dependencies
import pygame

from config import SPRITE_SIZE, SHEET_COLUMNS, SHEET_ROWS, BACKGROUND_CELL, POWER_UP_CELL

ROW_COLORS = (
    (230, 230, 230),  # idle
    (220, 80, 80),  # run left
    (80, 200, 90),  # run up
    (80, 120, 230),  # run right
    (230, 180, 60),  # run down
)


def ensure_parent_dir(path: str) -> None:
    d = os.path.dirname(path)
    if d and not os.path.isdir(d):
        os.makedirs(d, exist_ok=True)


def _draw_character(surf: pygame.Surface, rect: pygame.Rect, color, frame: int, row: int) -> None:
    s = rect.width
    body = pygame.Rect(0, 0, s // 2, (s * 3) // 4)
    body.center = rect.center
    pygame.draw.rect(surf, color, body, border_radius=s // 8)
    # Facing marker: left for RunLeft, up for RunUp, etc. Idle has none
    eye = s // 10
    if row == 1:
        pygame.draw.circle(surf, (0, 0, 0), (body.left + eye * 2, body.top + eye * 2), eye)
    elif row == 2:
        pygame.draw.circle(surf, (0, 0, 0), (body.centerx, body.top + eye), eye)
    elif row == 3:
        pygame.draw.circle(surf, (0, 0, 0), (body.right - eye * 2, body.top + eye * 2), eye)
    elif row == 4:
        pygame.draw.circle(surf, (0, 0, 0), (body.centerx, body.bottom - eye * 2), eye)
    # Frame indicator bar along the bottom
    bar_w = max(1, (s * (frame + 1)) // SHEET_COLUMNS)
    pygame.draw.rect(surf, (20, 20, 20), pygame.Rect(rect.left, rect.bottom - 4, bar_w, 4))


def _draw_background(surf: pygame.Surface, rect: pygame.Rect, rng: random.Random) -> None:
    surf.fill((58, 120, 52, 255), rect)
    step = max(1, rect.width // 8)
    for y in range(rect.top, rect.bottom, step):
        for x in range(rect.left, rect.right, step):
            if rng.random() < 0.2:
                shade = rng.randint(64, 84)
                surf.fill((shade, 140, 60, 255), pygame.Rect(x, y, step, step))


def _draw_power_up(surf: pygame.Surface, rect: pygame.Rect) -> None:
    cx, cy = rect.center
    r = rect.width // 3
    points = [(cx, cy - r), (cx + r, cy), (cx, cy + r), (cx - r, cy)]
    pygame.draw.polygon(surf, (250, 210, 40), points)
    pygame.draw.polygon(surf, (160, 110, 0), points, 2)


def build_sheet(size: int = SPRITE_SIZE, seed: int = 0) -> pygame.Surface:
    rng = random.Random(seed)
    surf = pygame.Surface((SHEET_COLUMNS * size, SHEET_ROWS * size), pygame.SRCALPHA)
    surf.fill((0, 0, 0, 0))
    for row, color in enumerate(ROW_COLORS):
        for col in range(SHEET_COLUMNS):
            _draw_character(surf, pygame.Rect(col * size, row * size, size, size), color, col, row)
    bg_col, bg_row = BACKGROUND_CELL
    bg_rect = pygame.Rect(bg_col * size, bg_row * size, size, size)
    surf.fill((0, 0, 0, 0), bg_rect)
    _draw_background(surf, bg_rect, rng)
    pu_col, pu_row = POWER_UP_CELL
    _draw_power_up(surf, pygame.Rect(pu_col * size, pu_row * size, size, size))
    return surf


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(
        description="Generate a placeholder sprite sheet for the game."
    )
    ap.add_argument(
        "-o",
        "--output",
        default=os.path.join("assets", "SpriteSheet.png"),
        help="Output PNG path",
    )
    ap.add_argument("--seed", type=int, default=0, help="Seed for background speckle")
    args = ap.parse_args(argv)

    if not pygame.get_init():
        pygame.init()
    try:
        surf = build_sheet(seed=args.seed)
        out_path = os.path.abspath(args.output)
        ensure_parent_dir(out_path)
        pygame.image.save(surf, out_path)
        print(f"Saved sprite sheet: {out_path}  ({surf.get_width()}x{surf.get_height()})")
    finally:
        pygame.quit()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
