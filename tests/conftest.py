import os

# Headless pygame for every test module
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from game.state import GameState
from textures.atlas import SpriteAtlas
from textures.sheetgen import build_sheet


@pytest.fixture
def state():
    return GameState(position=(100, 100), power_ups=[])


@pytest.fixture
def sheet():
    return build_sheet(seed=1)


@pytest.fixture
def atlas(sheet):
    return SpriteAtlas.from_surface(sheet)
