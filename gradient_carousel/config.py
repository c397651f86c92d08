"""Application configuration constants."""

from __future__ import annotations

# Performance
TARGET_FPS = 120

# Physics
FRICTION = 0.9              # Velocity kept per 1/60 s frame (0-1, lower = more friction)
FRICTION_RATE = 60.0        # Frames per second the friction factor is expressed in
VELOCITY_EPSILON = 0.02     # |velocity| below this snaps to zero
WHEEL_SENS = 0.6
WHEEL_IMPULSE_SCALE = 20.0
DRAG_SENS = 1.0
DRAG_MIN_DT_S = 0.001
KEY_IMPULSE = 60.0          # Wheel-equivalent delta for one arrow key press
WHEEL_NOTCH_PX = 100.0      # Wheel delta of one notch, in scroll pixels

# Card layout
MAX_ROTATION = 28.0         # Degrees
MAX_DEPTH = 140.0           # Pixels
MIN_SCALE = 0.92
SCALE_RANGE = 0.1
MAX_BLUR = 2.0              # Pixels of blur at the viewport edge
BLUR_EXPONENT = 1.1
GAP = 28.0
CARD_W = 300.0              # Used until a real measurement arrives
CARD_H = 400.0
CARD_HEIGHT_FRAC = 0.55     # Card height as a fraction of window height
PERSPECTIVE = 1200.0
Z_ORDER_BASE = 1000

# Palette extraction
PALETTE_THUMB_MAX = 48
PALETTE_THUMB_MIN = 16
PALETTE_MIN_ALPHA = 0.05
PALETTE_MIN_LIGHTNESS = 0.10
PALETTE_MAX_LIGHTNESS = 0.92
PALETTE_MIN_SATURATION = 0.08
PALETTE_HUE_BINS = 36
PALETTE_SAT_BINS = 5
PALETTE_MIDTONE_BIAS = 0.6
PALETTE_MIN_HUE_GAP = 25.0
PALETTE_SECONDARY_RATIO = 0.6
PALETTE_PRIMARY_LIGHTNESS = 0.5
PALETTE_SECONDARY_LIGHTNESS = 0.72
PALETTE_SAT_FLOOR = 0.45
PALETTE_PRIMARY_SAT_BOOST = 1.15
PALETTE_SECONDARY_SAT_BOOST = 1.05
FALLBACK_HUE_STEP = 37
FALLBACK_SATURATION = 0.65
FALLBACK_LIGHTNESS = (0.52, 0.72)

# Gradient transitions (seconds)
GRADIENT_TWEEN_S = 0.45
GRADIENT_FAST_WINDOW_S = 0.8
GRADIENT_DEFAULT = (240.0, 240.0, 240.0, 235.0, 235.0, 235.0)

# Background
BG_BASE_COLOR = (246, 247, 249)
BG_FAST_INTERVAL_S = 1.0 / 60.0
BG_SLOW_INTERVAL_S = 1.0 / 30.0
BG_TIME_SCALE = 0.2
BG_ALPHA_PRIMARY = 0.85
BG_ALPHA_SECONDARY = 0.70

# Entry animation
ENTRY_CARD_S = 0.6
ENTRY_STAGGER_S = 0.05
ENTRY_VISIBLE_FRAC = 0.6
ENTRY_START_SCALE = 0.92
ENTRY_START_Y = 40.0

# Window
WINDOW_TITLE = "Gradient Carousel"
WINDOW_W = 1280
WINDOW_H = 800
RESIZE_DEBOUNCE_S = 0.08

# Image limits
MAX_FILE_SIZE_MB = 200

# HUD
FONT_SIZE = 20

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_TOGGLE_HUD = 73         # KEY_I
KEY_TOGGLE_PAUSE = 80       # KEY_P
KEY_NEXT = 262              # KEY_RIGHT
KEY_PREV = 263              # KEY_LEFT
KEY_CLOSE = 256             # KEY_ESCAPE

# Supported image extensions
IMG_EXTS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".webp", ".tga"})
