"""Frontend timing, layout, and colors."""

# Timing
FPS = 60
TPS = 60

TITLE = "Lamumu Space"

# Colors
BG_COLOR = (8, 6, 24)
TEXT_COLOR = (220, 220, 240)
TEXT_DIM = (140, 140, 170)
ACCENT = (0, 212, 255)
POWERUP_COLOR = (255, 107, 107)
POWERUP_BAR_BG = (50, 40, 70)

COW_BODY = (255, 255, 255)
COW_SPOTS = (0, 0, 0)
COW_BODY_POWERED = (255, 153, 153)
COW_SPOTS_POWERED = (204, 0, 0)

TOKEN_GOLD = (255, 215, 0)
TOKEN_EDGE = (255, 170, 0)

# HUD
HUD_MARGIN = 12
POWERUP_BAR_W = 160
POWERUP_BAR_H = 8

# Optional images, looked up in the assets directory
ASSET_FILES = {
    "player": "cow.png",
    "token": "commondot_logo.png",
}
