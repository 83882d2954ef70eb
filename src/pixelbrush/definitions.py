# BYTES PER PIXEL (R, G, B, A)
CHANNELS = 4

# BRUSH DEFAULTS
DEFAULT_BRUSH_SIZE = 1
DEFAULT_BRUSH_COLOR = "#ffffffff"  # Opaque white
MIN_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 64

# DEMO APPLICATION
DEMO_WIDTH = 64
DEMO_HEIGHT = 64
DEMO_BRUSH_SIZE = 10
DEMO_BRUSH_COLOR = "#ff000064"  # Red, alpha 100
DEMO_BACKGROUND = "#9e9e9e"     # Grey

# PALETTES
PALETTES = {
    "none": None,
    "rplace": "r_place"
}

# BRUSH PREVIEW
BRUSH_PREVIEW_COLOR = "#ffffff50"

# LOG LEVELS
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
