"""
Image to ASCII Rasterizer
=========================
Converts a raster image into ASCII art: one character per pixel block, picked
by brightness, optionally colored, and returned both as text and as a rendered
bitmap.
"""

from ascii_rasterizer.artwork import AsciiArtwork, CharacterCell
from ascii_rasterizer.brightness import BrightnessMapper
from ascii_rasterizer.colorizer import Colorizer
from ascii_rasterizer.config import ChannelWeights, Presets, RasterConfig, parse_color
from ascii_rasterizer.constants import CharacterSet, ColorMode, Resample
from ascii_rasterizer.converter import AsciiRasterizer, convert
from ascii_rasterizer.downsampler import Downsampler
from ascii_rasterizer.errors import (
    ConversionError,
    InvalidConfiguration,
    InvalidInput,
    RenderingUnavailable,
)
from ascii_rasterizer.formatters import AnsiColorFormatter, HtmlFormatter
from ascii_rasterizer.loader import decode_data_uri, load_bitmap
from ascii_rasterizer.rasterizer import Rasterizer
from ascii_rasterizer.store import ConverterStore

__version__ = "0.1.0"

__all__ = [
    # Main classes
    'AsciiRasterizer',
    'RasterConfig',
    'AsciiArtwork',
    'CharacterCell',
    'ChannelWeights',

    # Enums and character sets
    'ColorMode',
    'Resample',
    'CharacterSet',
    'Presets',

    # Pipeline stages
    'Downsampler',
    'BrightnessMapper',
    'Colorizer',
    'Rasterizer',

    # Formatters
    'AnsiColorFormatter',
    'HtmlFormatter',

    # Errors
    'ConversionError',
    'InvalidConfiguration',
    'InvalidInput',
    'RenderingUnavailable',

    # Helpers
    'convert',
    'load_bitmap',
    'decode_data_uri',
    'parse_color',
    'ConverterStore',
]
