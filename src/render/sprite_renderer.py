"""2D sprite rendering on an orthographic OpenGL projection.

Uploads every atlas frame once, then draws textured quads in window pixel
coordinates (origin top-left, y down). Ensure an active OpenGL context exists
before instantiating this class.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from OpenGL.GL import (
    glBegin,
    glEnd,
    glBindTexture,
    glBlendFunc,
    glClear,
    glColor4f,
    glDisable,
    glEnable,
    glLoadIdentity,
    glMatrixMode,
    glOrtho,
    glTexCoord2f,
    glVertex2f,
    GL_BLEND,
    GL_COLOR_BUFFER_BIT,
    GL_MODELVIEW,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_QUADS,
    GL_SRC_ALPHA,
    GL_TEXTURE_2D,
)

from config import WIDTH, HEIGHT, SPRITE_SIZE, SCORE_POSITION
from game.state import AnimationState, GameState
from textures.atlas import SpriteAtlas
from textures.texture_utils import delete_textures, surface_to_texture


class SpriteRenderer:
    """Draws the tiled background, power-ups, character and score."""

    def __init__(self, atlas: SpriteAtlas, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self._strips: Dict[int, List[int]] = {
            row: [surface_to_texture(frame) for frame in frames]
            for row, frames in atlas.strips.items()
        }
        self._background_tex = surface_to_texture(atlas.background)
        self._power_up_tex = surface_to_texture(atlas.power_up)

    # --------------------------- frame state ----------------------------
    def begin(self) -> None:  # pragma: no cover - visual
        glClear(GL_COLOR_BUFFER_BIT)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)
        glColor4f(1.0, 1.0, 1.0, 1.0)

    def end(self) -> None:  # pragma: no cover - visual
        glDisable(GL_TEXTURE_2D)
        glDisable(GL_BLEND)

    # --------------------------- drawing --------------------------------
    def _draw_quad(
        self, tex: int, x: float, y: float, size: float = SPRITE_SIZE, *, mirrored: bool = False
    ) -> None:  # pragma: no cover - visual
        u0, u1 = (1.0, 0.0) if mirrored else (0.0, 1.0)
        glBindTexture(GL_TEXTURE_2D, tex)
        glBegin(GL_QUADS)
        # Upload flipped the image, so v=1 is the top row
        glTexCoord2f(u0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(u1, 1.0)
        glVertex2f(x + size, y)
        glTexCoord2f(u1, 0.0)
        glVertex2f(x + size, y + size)
        glTexCoord2f(u0, 0.0)
        glVertex2f(x, y + size)
        glEnd()

    def draw_background(self) -> None:  # pragma: no cover - visual
        for y in range(0, self.height, SPRITE_SIZE):
            for x in range(0, self.width, SPRITE_SIZE):
                self._draw_quad(self._background_tex, x, y)

    def draw_power_ups(self, points) -> None:  # pragma: no cover - visual
        for x, y in points:
            self._draw_quad(self._power_up_tex, x, y)

    def character_frame(self, animation: AnimationState, frame: int) -> Tuple[int, bool]:
        """Texture id and mirror flag for `frame` of `animation`."""
        strip = self._strips[animation.row]
        return strip[frame % len(strip)], animation.mirrored

    def draw_character(self, state: GameState) -> None:  # pragma: no cover - visual
        tex, mirrored = self.character_frame(state.animation, state.animation_frame)
        x, y = state.position
        self._draw_quad(tex, x, y, mirrored=mirrored)

    def draw(self, state: GameState, text=None) -> None:  # pragma: no cover - visual
        self.begin()
        self.draw_background()
        self.draw_power_ups(state.power_ups)
        self.draw_character(state)
        if text is not None:
            sx, sy = SCORE_POSITION
            text.draw_text(f"Score: {state.score}", sx, sy, key="score", baseline=True)
        self.end()

    def release(self) -> None:
        textures = [t for strip in self._strips.values() for t in strip]
        textures += [self._background_tex, self._power_up_tex]
        delete_textures(textures)
        self._strips = {}
