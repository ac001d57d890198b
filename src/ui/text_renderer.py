"""Simple text rendering for OpenGL with pygame fonts.

Draws single-line labels (the score) in screen space on top of the sprites.
Each label is keyed so its texture is only re-uploaded when the text changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Optional

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glBegin,
    glEnd,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_QUADS,
)


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]
    last_text: str | None = None


class TextRenderer:
    """2D text renderer for OpenGL using pygame.font.

    Expects the caller to have set up a top-left origin orthographic
    projection with texturing and blending enabled (SpriteRenderer.begin()).
    """

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        font: Optional[pygame.font.Font] = None,
        size: int = 20,
    ) -> None:
        self.width = screen_width
        self.height = screen_height
        self.font = font or pygame.font.Font(None, size)
        self._slots: Dict[str, _TexSlot] = {}

    def _upload_surface(self, slot: _TexSlot, surf: pygame.Surface) -> None:
        data = pygame.image.tostring(surf, "RGBA", True)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glTexImage2D(
            GL_TEXTURE_2D,
            0,
            GL_RGBA,
            w,
            h,
            0,
            GL_RGBA,
            GL_UNSIGNED_BYTE,
            data,
        )
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        slot.size = (w, h)

    def _slot(self, key: str) -> _TexSlot:
        slot = self._slots.get(key)
        if slot is None:
            slot = _TexSlot(id=glGenTextures(1), size=(0, 0))
            self._slots[key] = slot
        return slot

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Tuple[int, int, int, int] = (255, 255, 255, 255),
        *,
        key: str,
        baseline: bool = False,
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        """Draw one line of text; returns (w, h).

        With `baseline=True`, `y` is the text baseline (as in AWT drawString)
        rather than the top edge.
        """
        slot = self._slot(key)
        if slot.last_text != text:
            self._upload_surface(slot, self.font.render(text, True, color))
            slot.last_text = text

        w, h = slot.size
        draw_x = x
        draw_y = y - self.font.get_ascent() if baseline else y

        glBindTexture(GL_TEXTURE_2D, slot.id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # pygame.image.tostring with flip gives origin at bottom-left, so v is inverted
        glTexCoord2f(0.0, 1.0)
        glVertex2f(draw_x, draw_y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(draw_x + w, draw_y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(draw_x + w, draw_y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(draw_x, draw_y + h)
        glEnd()
        return w, h
