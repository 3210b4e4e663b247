"""
Game constants for the terminal snake.
"""

# Board dimensions (fixed, cells)
BOARD_WIDTH = 20
BOARD_HEIGHT = 20

# Simulation speed: one tick every TICK_MS milliseconds
TICK_MS = 200

# Input command that ends the game
QUIT = "QUIT"

# Glyphs used by the curses renderer
BODY_GLYPH = "██"
APPLE_GLYPH = "@@"
BORDER_GLYPH = "*"
