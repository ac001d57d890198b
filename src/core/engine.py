"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up window, GL state, main loop and pacing.
- Scene: holds game state & update/draw logic.
- TextRenderer: 2D text overlay (score).

The loop runs on the main thread because the GL context belongs to it. Each
iteration handles events, runs one tick, draws, then sleeps out the rest of
the tick budget.
"""

from __future__ import annotations

from typing import Callable, Optional

import pygame
from OpenGL.GL import (
    glDisable,
    glClearColor,
    glViewport,
    GL_DEPTH_TEST,
    GL_CULL_FACE,
)

from config import *
from core.pacing import FramePacer
from core.scene import Scene
from ui.text_renderer import TextRenderer


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self, scene_factory: Optional[Callable[[], Scene]] = None):
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame versions won't accept the vsync kwarg, or vsync
            # was requested but unavailable on this system/driver.
            pygame.display.set_mode((WIDTH, HEIGHT), flags)

        # 2D only: no depth test, no culling (mirrored quads flip winding)
        glViewport(0, 0, WIDTH, HEIGHT)
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_CULL_FACE)
        glClearColor(0.0, 0.0, 0.0, 1.0)

        self.pacer = FramePacer(FPS, MIN_SLEEP_MS)

        if scene_factory is None:
            from game.game_scene import GameScene

            scene_factory = GameScene
        self.scene = scene_factory()

        self.text = TextRenderer(WIDTH, HEIGHT)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def update(self, dt: float):
        self.scene.update(dt)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.scene.render(text=self.text)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        # Game logic is tick-based; dt is the nominal tick length
        dt = 1.0 / FPS
        try:
            while True:
                self.pacer.begin_tick()
                if not self.handle_events():
                    break
                self.update(dt)
                self.render()
                self.pacer.end_tick()
            # Only a normal window close snapshots the game
            self.scene.shutdown()
        finally:
            pygame.quit()
