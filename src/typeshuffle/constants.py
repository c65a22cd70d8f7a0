# Scramble pass
MAX_CELL_ITERATIONS = 4
DEFAULT_EFFECT = "fx3"
GLYPHS = (
    'A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'I', 'J', 'K', 'L', 'M',
    'N', 'O', 'P', 'Q', 'R', 'S', 'T', 'U', 'V', 'W', 'X', 'Y', 'Z',
    '!', '@', '#', '$', '&', '*', '(', ')', '-', '_', '+', '=', '/',
    '[', ']', '{', '}', ';', ':', '<', '>', ',',
    '0', '1', '2', '3', '4', '5', '6', '7', '8', '9',
)

# Per-element configuration defaults (milliseconds)
DEFAULT_TRIGGER = "click"
TRIGGER_TYPES = ("load", "click", "scroll")
DEFAULT_DURATION_MS = 750
DEFAULT_DELAY_MS = 5000
DEFAULT_SCROLL_ONCE = True
GLITCH_EFFECT_ATTR = "glitch"

# resetCells fade-out: seconds per cell, total stagger spread per line.
RESET_FADE_DURATION = 0.5
RESET_STAGGER_AMOUNT = 1.0

# Scroll region starts when the element top reaches 75% of the viewport height.
SCROLL_START_RATIO = 0.75

# Fixed-pitch layout of glyphs on the rendering surface (pixels).
CHAR_WIDTH = 22
LINE_HEIGHT = 40
FONT_SIZE = 24
FONT_NAME = "Courier New"
TEXT_COLOR = (235, 235, 245)

WINDOW_WIDTH = 900
WINDOW_HEIGHT = 600
SCROLL_STEP = 40
