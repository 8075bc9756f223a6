#!/usr/bin/env python3
"""
Image to ASCII Rasterizer - Configuration
=========================================
Conversion settings, channel weights and the named presets.
"""

import numbers
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from PIL import ImageColor

from ascii_rasterizer.constants import (
    CharacterSet,
    ColorMode,
    Resample,
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    DEFAULT_WIDTH,
    WEIGHT_TOLERANCE,
)
from ascii_rasterizer.errors import InvalidConfiguration


RGB = Tuple[int, int, int]
Color = Union[str, RGB]


def parse_color(color: Color) -> RGB:
    """
    Resolve a color to an RGB tuple.

    Args:
        color: Any Pillow color string ('#fff', 'rgb(1,2,3)', 'navy') or an RGB tuple

    Returns:
        (r, g, b) with each channel in 0-255

    Raises:
        InvalidConfiguration: If the color cannot be parsed
    """
    if isinstance(color, str):
        try:
            rgb = ImageColor.getrgb(color)
        except ValueError as e:
            raise InvalidConfiguration(f"Unknown color: {color!r}") from e
        return tuple(rgb[:3])

    try:
        r, g, b = color
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(f"Color must be a string or RGB triple, got {color!r}") from e

    for channel in (r, g, b):
        if isinstance(channel, bool) or not isinstance(channel, numbers.Integral) or not 0 <= channel <= 255:
            raise InvalidConfiguration(f"Color channels must be integers in 0-255, got {color!r}")
    return (int(r), int(g), int(b))


# =============================================================================
# CHANNEL WEIGHTS
# =============================================================================

@dataclass(frozen=True)
class ChannelWeights:
    """Contribution of each channel to the brightness scalar."""

    red: float = 0.299
    green: float = 0.587
    blue: float = 0.114

    @classmethod
    def from_percentages(cls, red: int, green: int, blue: int) -> 'ChannelWeights':
        """Build weights from whole percentages that must add up to 100."""
        total = red + green + blue
        if total != 100:
            raise InvalidConfiguration(f"RGB weights must sum to 100%, got {total}%")
        return cls(red / 100, green / 100, blue / 100)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def validate(self) -> None:
        """Raise InvalidConfiguration unless every weight is in [0, 1] and they sum to 1."""
        for name, value in zip(('red', 'green', 'blue'), self.as_tuple()):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidConfiguration(f"{name} weight must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise InvalidConfiguration(f"{name} weight must be within [0, 1], got {value}")

        total = self.red + self.green + self.blue
        if abs(total - 1.0) > WEIGHT_TOLERANCE:
            raise InvalidConfiguration(f"Channel weights must sum to 1, got {total}")


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class RasterConfig:
    """Configuration for one image-to-ASCII conversion."""

    width: int = DEFAULT_WIDTH                   # Target width in characters
    color_mode: ColorMode = ColorMode.MONOCHROME
    invert: bool = False                         # Invert brightness mapping
    charset: str = CharacterSet.SIMPLE           # Ramp, sparse to dense

    foreground: Color = DEFAULT_FOREGROUND       # Glyph color in monochrome mode
    background: Color = DEFAULT_BACKGROUND       # Fill color of the bitmap

    weights: ChannelWeights = field(default_factory=ChannelWeights)
    resample: Resample = Resample.BILINEAR
    font_path: Optional[str] = None              # TrueType font, searched if None

    def validate(self) -> None:
        """
        Check the whole configuration before any pixel is touched.

        Raises:
            InvalidConfiguration: On the first problem found
        """
        if isinstance(self.width, bool) or not isinstance(self.width, numbers.Integral):
            raise InvalidConfiguration(f"Width must be an integer, got {self.width!r}")
        if self.width <= 0:
            raise InvalidConfiguration(f"Width must be positive, got {self.width}")

        if not isinstance(self.charset, str) or len(self.charset) == 0:
            raise InvalidConfiguration("Character ramp must not be empty")

        if not isinstance(self.color_mode, ColorMode):
            raise InvalidConfiguration(f"Unknown color mode: {self.color_mode!r}")
        if not isinstance(self.resample, Resample):
            raise InvalidConfiguration(f"Unknown resample method: {self.resample!r}")

        self.weights.validate()
        parse_color(self.foreground)
        parse_color(self.background)

    @property
    def foreground_rgb(self) -> RGB:
        return parse_color(self.foreground)

    @property
    def background_rgb(self) -> RGB:
        return parse_color(self.background)

    def with_options(self, **changes) -> 'RasterConfig':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


# =============================================================================
# PRESET CONFIGURATIONS
# =============================================================================

class Presets:
    """Predefined configuration presets."""

    @staticmethod
    def simple() -> RasterConfig:
        """Ten-step ramp, black on white."""
        return RasterConfig(charset=CharacterSet.SIMPLE)

    @staticmethod
    def complex() -> RasterConfig:
        """Long ramp for photographs."""
        return RasterConfig(charset=CharacterSet.COMPLEX)

    @staticmethod
    def colored() -> RasterConfig:
        """Glyphs take the color of the pixels they replace."""
        return RasterConfig(
            charset=CharacterSet.COMPLEX,
            color_mode=ColorMode.SAMPLED,
            background='black',
        )
