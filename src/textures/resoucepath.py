ASSETS_PATH: str = "./assets/"

SPRITE_SHEET_PATH: str = ASSETS_PATH + "SpriteSheet.png"
