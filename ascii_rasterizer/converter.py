#!/usr/bin/env python3
"""
Image to ASCII Rasterizer - Converter
=====================================
One synchronous pass from a source bitmap to text and rendered bitmap.

The converter keeps no state between calls, so one instance (or the module
level convert()) can serve independent images from several threads.
"""

import logging
from typing import List, Optional

from ascii_rasterizer.artwork import AsciiArtwork, CharacterCell
from ascii_rasterizer.brightness import BrightnessMapper
from ascii_rasterizer.colorizer import Colorizer
from ascii_rasterizer.config import RasterConfig
from ascii_rasterizer.downsampler import Downsampler, SourceBitmap
from ascii_rasterizer.rasterizer import Rasterizer


logger = logging.getLogger(__name__)


class AsciiRasterizer:
    """Main class for converting images to ASCII art."""

    def __init__(self, config: Optional[RasterConfig] = None):
        """Initialize with optional configuration."""
        self.config = config or RasterConfig()

    def convert(self, source: SourceBitmap) -> AsciiArtwork:
        """
        Convert a bitmap to ASCII art.

        Configuration and input are validated before any pixel is read, so a
        failure never leaves partial output behind.

        Args:
            source: PIL image or (h, w, 3|4) uint8 array; not modified

        Returns:
            AsciiArtwork with text and bitmap built from the same cells

        Raises:
            InvalidConfiguration: Bad weights, empty ramp, bad width or colors
            InvalidInput: Empty or unsupported source
            RenderingUnavailable: Output surface or font could not be created
        """
        config = self.config
        config.validate()
        image = Downsampler.as_image(source)

        font = Rasterizer.load_font(config.font_path)

        samples = Downsampler.sample(image, config.width, config.resample)
        rows, columns = samples.shape[:2]

        _, indices = BrightnessMapper.map_grid(samples, config.charset,
                                               config.weights, config.invert)

        cells: List[CharacterCell] = []
        for y in range(rows):
            for x in range(columns):
                foreground, background = Colorizer.colorize(samples[y, x], config)
                cells.append(CharacterCell(
                    row=y,
                    col=x,
                    char=config.charset[indices[y, x]],
                    foreground=foreground,
                    background=background,
                ))

        text = Rasterizer.emit_text(cells, columns)
        bitmap = Rasterizer.emit_bitmap(cells, columns, rows, config.background_rgb, font)

        logger.debug("Converted %dx%d image to %dx%d characters with a %d-step ramp",
                     image.width, image.height, columns, rows, len(config.charset))

        return AsciiArtwork(
            cells=cells,
            text=text,
            bitmap=bitmap,
            columns=columns,
            rows=rows,
            original_size=image.size,
        )


def convert(source: SourceBitmap, config: Optional[RasterConfig] = None) -> AsciiArtwork:
    """Convenience wrapper around AsciiRasterizer(config).convert(source)."""
    return AsciiRasterizer(config).convert(source)
