#!/usr/bin/env python3
"""
Image to ASCII Rasterizer - Constants
=====================================
Enums, fixed geometry and the character ramps shipped as presets.
"""

from enum import Enum, auto

from PIL import Image


# =============================================================================
# ENUMS
# =============================================================================

class ColorMode(Enum):
    """How glyphs are colored in the rendered bitmap."""
    MONOCHROME = auto()   # Configured foreground for every glyph
    SAMPLED = auto()      # Glyph takes the color of its source cell


class Resample(Enum):
    """Interpolation used when shrinking the source to the cell grid."""
    NEAREST = Image.Resampling.NEAREST
    BILINEAR = Image.Resampling.BILINEAR


# =============================================================================
# GEOMETRY
# =============================================================================

# Width/height of a monospace glyph; halves the row count so art is not stretched
CHAR_ASPECT_RATIO = 0.5

# Pixel size of one character cell in the rendered bitmap
CELL_WIDTH = 10
CELL_HEIGHT = 20
FONT_SIZE = 20

# Channel weights must sum to 1 within this tolerance
WEIGHT_TOLERANCE = 1e-10

DEFAULT_WIDTH = 100
DEFAULT_FOREGROUND = 'black'
DEFAULT_BACKGROUND = 'white'

# Color of cells left fully transparent after resampling
MATTE_COLOR = (0, 0, 0)

# Monospace fonts tried in order before falling back to Pillow's default
FONT_CANDIDATES = (
    'DejaVuSansMono.ttf',
    '/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf',
    '/usr/share/fonts/TTF/DejaVuSansMono.ttf',
    '/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf',
    '/System/Library/Fonts/Menlo.ttc',
    'C:\\Windows\\Fonts\\consola.ttf',
)


# =============================================================================
# CHARACTER SETS
# =============================================================================

class CharacterSet:
    """Predefined ramps, ordered from sparse to dense."""

    SIMPLE: str = " .:-=+*#%@"
    COMPLEX: str = " .'^,\":;Il!i><~+_-?][{}1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

    @classmethod
    def get_preset(cls, name: str) -> str:
        """Get character set by name."""
        presets = {
            'simple': cls.SIMPLE,
            'complex': cls.COMPLEX,
        }
        return presets.get(name.lower(), cls.SIMPLE)
