# settings.py

# Window / display
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60
TITLE = "Forced Exit"

# Colors
COLOR_BG = (15, 15, 20)
COLOR_METER_BG = (28, 28, 38)
COLOR_TEXT = (220, 220, 220)

# Meter bar (HUD strip hosting the in-game clock)
METER_HEIGHT = 32
METER_REFRESH_TICKS = 30  # fire meter_screen_refresh every N frames
