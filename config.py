# config.py
"""
Configuration settings for the terminal slide presenter.
"""
import os

# ── Deck settings ───────────────────────────────────────────────────────────

# Marker separating slides (plain substring match, anywhere in the text)
DELIMITER = "---"

# Seconds between modification-time checks on the presented file
WATCH_INTERVAL = 1.0

# ── Presentation metadata ──────────────────────────────────────────────────

DEFAULT_AUTHOR = "me"
DATE_FORMAT    = "%d-%m-%Y"

# ── Rendering ──────────────────────────────────────────────────────────────

# Style theme consumed by the markdown renderer
THEME_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "theme.json")

SLIDE_PADDING  = 1
STATUS_PADDING = 1

AUTHOR_MARGIN_LEFT = 2
DATE_MARGIN        = 1    # left and right of the date
PAGE_MARGIN_RIGHT  = 3

# ── Keys ───────────────────────────────────────────────────────────────────

QUIT_KEYS = ("ctrl+c", "q")
PREV_KEYS = ("left",)
NEXT_KEYS = ("right", "space", " ")
