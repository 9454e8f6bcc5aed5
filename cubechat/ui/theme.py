"""UI theme constants.

Light page behind the viewport with a dark chat panel beside it.
"""

# Viewport overlay
OVERLAY_FG = "#000000"
OVERLAY_FONT = ("Arial", 32, "bold")

# Chat transcript colors
MESSAGE_COLORS = {
    "user": "#58a6ff",       # Bright blue
    "assistant": "#7ee787",  # Bright green
    "error": "#ff7b72",      # Red
    "system": "#888888",
}

# Status bar colors
STATUS_COLORS = {
    "idle": "gray",
    "thinking": "#ffa657",   # Orange - waiting for AI response
    "error": "#ff7b72",
}

MONO_FONT_FAMILY = "Consolas"
