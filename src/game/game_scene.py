"""Game scene: owns the game state and wires input, update, render and saves.

Startup loads the sprite atlas (fatal on failure), builds a fresh state with
randomly placed power-ups, then overwrites it with a saved snapshot if one is
present and valid. Each tick drains the direction mailbox once and runs the
update step. Shutdown writes a snapshot.
"""

from __future__ import annotations

import time
from typing import Optional

import numpy as np

from config import *
from core.scene import Scene
from game.input_handler import DirectionMailbox, InputHandler
from game.persistence import load_game_state, save_game_state
from game.spawner import spawn_power_ups
from game.state import GameState
from game.update import update_step
from textures.atlas import SpriteAtlas


class GameScene(Scene):
    def __init__(
        self,
        atlas: Optional[SpriteAtlas] = None,
        *,
        save_path: Optional[str] = SAVE_PATH,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        super().__init__()
        self.save_path = save_path

        start_time = time.perf_counter()
        self.atlas = atlas if atlas is not None else SpriteAtlas.load()
        self.log_timing("Loading sprite atlas", start_time, time.perf_counter())

        self.state = GameState(
            position=STARTING_POS,
            power_ups=spawn_power_ups(POWER_UP_COUNT, rng),
        )
        if save_path is not None:
            snapshot = load_game_state(save_path)
            if snapshot is not None:
                snapshot.apply_to(self.state)

        self.mailbox = DirectionMailbox()
        self.input = InputHandler(self.mailbox)
        self.updaters.append(self.tick)

        # Created on first render; needs the GL context
        self._renderer = None

        print("[GameScene] Game scene initialization complete.")

    def log_timing(self, message: str, start_time: float, end_time: float) -> None:
        print(f"[GameScene] {message} took {end_time - start_time:.6f} seconds")

    def handle_event(self, event) -> None:
        self.input.handle_event(event)

    def tick(self, dt: float) -> None:
        collected = update_step(self.state, self.mailbox.take())
        for x, y in collected:
            print(f"[GameScene] Collected power-up at ({x}, {y}); score={self.state.score}")

    def render(self, text=None) -> None:  # pragma: no cover - visual
        if self._renderer is None:
            from render.sprite_renderer import SpriteRenderer

            self._renderer = SpriteRenderer(self.atlas)
        self._renderer.draw(self.state, text=text)

    def shutdown(self) -> None:
        if self.save_path is not None:
            save_game_state(self.state, self.save_path)
        if self._renderer is not None:
            self._renderer.release()
            self._renderer = None
