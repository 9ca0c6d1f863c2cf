"""
Sliding Boxes Configuration
Contains display settings and animation constants.
"""

# Display
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
WINDOW_TITLE = "Sliding Boxes"
FRAME_DELAY_MS = 10  # Fixed sleep after each presented frame

# Colors
COLOR_BG = (255, 140, 0)   # Orange
COLOR_BOX = (0, 100, 0)    # Dark green

# Boxes
BOX_COUNT = 10
BOX_SIZE = 30
BOX_START_X = 50
BOX_SPACING = 50
BOX_START_Y = 200
BOX_VELOCITY = 5      # Pixels per update call
BOX_DELAY = 100       # ms between activation of consecutive boxes
DIRECTION_STRIDE = 1  # Every n-th box starts moving up
