"""
Constants and configuration values for Tattoo Stencil.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Processing modes
MODE_SOLID_STENCIL = "solid-stencil"
MODE_BLACK_WHITE = "black-white"
MODE_LINE_SKETCH = "line-sketch"

# Default settings
DEFAULT_THRESHOLD = 128
DEFAULT_CONTRAST = 1.5
DEFAULT_LINE_THICKNESS = 2
DEFAULT_INVERT = False
DEFAULT_MODE = MODE_SOLID_STENCIL

# Parameter ranges (inclusive)
THRESHOLD_MIN = 0
THRESHOLD_MAX = 255
CONTRAST_MIN = 0.5
CONTRAST_MAX = 3.0
LINE_THICKNESS_MIN = 1
LINE_THICKNESS_MAX = 5

# Channel values
CHANNELS = 4
BLACK = 0
WHITE = 255

# ITU-R BT.601 luma weights
LUMA_RED = 0.299
LUMA_GREEN = 0.587
LUMA_BLUE = 0.114

# Sobel kernels
SOBEL_X = (
    (-1, 0, 1),
    (-2, 0, 2),
    (-1, 0, 1),
)
SOBEL_Y = (
    (-1, -2, -1),
    (0, 0, 0),
    (1, 2, 1),
)

# Result output names
OUTPUT_SOLID_STENCIL = "solid_stencil"
OUTPUT_BLACK_WHITE = "black_white"
OUTPUT_LINE_SKETCH = "line_sketch"

# File naming
OUTPUT_SUFFIXES = {
    OUTPUT_SOLID_STENCIL: "_solid_stencil",
    OUTPUT_BLACK_WHITE: "_black_white",
    OUTPUT_LINE_SKETCH: "_line_sketch",
}
DEFAULT_OUTPUT_FORMAT = "PNG"
DEFAULT_OUTPUT_EXTENSION = ".png"

# Supported file formats
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}

# Settings file constants
SETTINGS_SCHEMA_VERSION = 1
FIELD_SCHEMA_VERSION = "schema_version"
FIELD_SETTINGS = "settings"

# Node types
NODE_TYPE_IMAGE_IMPORT = "Image Import"
NODE_TYPE_STENCIL = "Stencil"
NODE_TYPE_OUTPUT = "Stencil Output"
