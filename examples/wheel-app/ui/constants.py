"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Layout dimensions
WHEEL_SIZE = 520
STATUS_H = 56
SCREEN_W = WHEEL_SIZE
SCREEN_H = WHEEL_SIZE + STATUS_H

WHEEL_CENTER = (WHEEL_SIZE // 2, WHEEL_SIZE // 2)
WHEEL_RADIUS = WHEEL_SIZE // 2 - 20
HUB_RADIUS = 40
LABEL_INSET = 30  # label right edge, measured in from the rim
POINTER_W = 28
POINTER_H = 24

# Colors
BG_COLOR = (20, 20, 30)
SECTOR_BORDER = (235, 235, 240)
HUB_FILL = (250, 250, 250)
HUB_BORDER = (243, 156, 18)
POINTER_FILL = (231, 76, 60)
POINTER_BORDER = (255, 255, 255)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
OK_COLOR = (100, 220, 120)
ERROR_COLOR = (240, 90, 90)
MODAL_SHADE = (0, 0, 0, 160)
MODAL_BG = (40, 40, 58)
MODAL_BORDER = (90, 90, 120)
