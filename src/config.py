WIDTH = 512
HEIGHT = 512
WINDOW_TITLE = "Sprite Animation Game"
FPS = 60
VSYNC = False
# Lower bound on the per-tick sleep so a slow frame still yields the CPU
MIN_SLEEP_MS = 5
# Sprite sheet layout: SHEET_COLUMNS x SHEET_ROWS cells of SPRITE_SIZE pixels
SPRITE_SIZE = 64
SHEET_COLUMNS = 8
SHEET_ROWS = 8
# (column, row) of the static tiles inside the sheet
BACKGROUND_CELL = (7, 0)
POWER_UP_CELL = (0, 6)
# Character movement in pixels per tick
CHARACTER_SPEED = 4
STARTING_POS = (100, 100)
# Ticks an animation frame is held before advancing (fires every 6th tick)
FRAME_DELAY = 5
POWER_UP_COUNT = 4
SAVE_PATH = "gameState.sav"
SCORE_POSITION = (10, 20)
