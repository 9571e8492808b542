#!/usr/bin/env python3
"""
Shared constants for the Solar Simulation (screen pixels unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""
import math

TAU = math.pi * 2

# Window
WINDOW_TITLE = "Solar Simulation"
WINDOW_SIZE = 650  # px, square window
TARGET_FPS = 60

# Unit scales
AU_FRACTION = 0.058  # 1 AU = 5.8% of the window size
KM_SCALE = 5.0  # orbit speed units -> pixels

# Speed control
DEFAULT_SPEED = 1.0
SPEED_STEP = 0.1
MIN_SPEED = 0.0
MAX_SPEED = 5.0

# Text
FONT_LG = 20
FONT_SM = 10
LABEL_GAP = 5  # px between a body's rim and its year label
FPS_POS = (20, 10)
SPEED_POS = (20, 30)

# Named colours (RGB), same values as the raylib palette
BLACK = (0, 0, 0)
RAYWHITE = (245, 245, 245)
LIGHTGRAY = (200, 200, 200)
GRAY = (130, 130, 130)
DARKGRAY = (80, 80, 80)
ORANGE = (255, 161, 0)
GOLD = (255, 203, 0)
RED = (230, 41, 55)
LIME = (0, 158, 47)
BLUE = (0, 121, 241)
DARKBLUE = (0, 82, 172)
SKYBLUE = (102, 191, 255)
PURPLE = (200, 122, 255)
BEIGE = (211, 176, 131)
BROWN = (127, 106, 79)

PALETTE = {
    "BLACK": BLACK,
    "RAYWHITE": RAYWHITE,
    "LIGHTGRAY": LIGHTGRAY,
    "GRAY": GRAY,
    "DARKGRAY": DARKGRAY,
    "ORANGE": ORANGE,
    "GOLD": GOLD,
    "RED": RED,
    "LIME": LIME,
    "BLUE": BLUE,
    "DARKBLUE": DARKBLUE,
    "SKYBLUE": SKYBLUE,
    "PURPLE": PURPLE,
    "BEIGE": BEIGE,
    "BROWN": BROWN,
}

BACKGROUND_COLOR = BLACK
TEXT_COLOR = RAYWHITE
FPS_COLOR = LIME

# Logical key names understood by the renderer
KEY_TOGGLE_ORBITS = "space"
SPEED_DOWN_KEYS = ("minus", "kp_minus")
SPEED_UP_KEYS = ("equals", "plus", "kp_plus")
