"""Texture upload utilities for OpenGL.

Turns pygame surfaces (atlas frames, tiles) into GL texture IDs with crisp
pixel-art sampling, and frees them again when the renderer is released.
"""

from typing import Iterable

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glDeleteTextures,
    glTexImage2D,
    glTexParameteri,
    GL_TEXTURE_2D,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_NEAREST,
    GL_CLAMP_TO_EDGE,
)


def surface_to_texture(surface: pygame.Surface) -> int:
    """Upload a pygame surface as an RGBA texture.

    Requires an active GL context. The image is flipped on upload, so
    texture coordinate v=1 is the top row of the surface.

    Returns
    -------
    int
        OpenGL texture ID
    """
    texture_data = pygame.image.tostring(surface, "RGBA", True)
    width, height = surface.get_size()

    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        texture_data,
    )

    # Nearest filtering keeps pixel art crisp
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
    # Clamp edges so neighbouring cells never bleed into a tile
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)

    return texture_id


def delete_textures(tex_ids: Iterable[int]) -> None:
    ids = [int(t) for t in tex_ids]
    if ids:
        glDeleteTextures(ids)
