#!/usr/bin/env python3
"""
Image to ASCII Rasterizer - Downsampler
=======================================
Shrinks a source bitmap to one RGB sample per character cell.
"""

import logging
import math
from typing import Tuple, Union

import numpy as np
from PIL import Image

from ascii_rasterizer.constants import CHAR_ASPECT_RATIO, MATTE_COLOR, Resample
from ascii_rasterizer.errors import InvalidConfiguration, InvalidInput


logger = logging.getLogger(__name__)

SourceBitmap = Union[Image.Image, np.ndarray]


class Downsampler:
    """Reduce a source bitmap to the character grid."""

    @staticmethod
    def as_image(source: SourceBitmap) -> Image.Image:
        """
        Accept a PIL image or an (h, w, 3|4) uint8 array.

        Raises:
            InvalidInput: If the source is neither, or has a zero dimension
        """
        if isinstance(source, np.ndarray):
            if source.ndim != 3 or source.shape[2] not in (3, 4):
                raise InvalidInput(f"Pixel array must have shape (h, w, 3|4), got {source.shape}")
            if source.shape[0] == 0 or source.shape[1] == 0:
                raise InvalidInput(f"Source bitmap has no pixels: {source.shape[1]}x{source.shape[0]}")
            source = Image.fromarray(np.ascontiguousarray(source, dtype=np.uint8))
        elif not isinstance(source, Image.Image):
            raise InvalidInput(f"Unsupported source bitmap type: {type(source).__name__}")

        width, height = source.size
        if width <= 0 or height <= 0:
            raise InvalidInput(f"Source bitmap has no pixels: {width}x{height}")
        return source

    @staticmethod
    def grid_size(source_size: Tuple[int, int], width: int) -> Tuple[int, int]:
        """
        Calculate the character grid for a source of the given pixel size.

        Args:
            source_size: (width, height) of the source in pixels
            width: Target width in characters

        Returns:
            (columns, rows); rows never drop below 1
        """
        src_width, src_height = source_size
        width = int(width)
        if width <= 0:
            raise InvalidConfiguration(f"Width must be positive, got {width}")
        if src_width <= 0 or src_height <= 0:
            raise InvalidInput(f"Source bitmap has no pixels: {src_width}x{src_height}")

        scale_factor = width / src_width
        rows = math.floor(src_height * scale_factor * CHAR_ASPECT_RATIO)
        return width, max(1, rows)

    @staticmethod
    def _to_rgba(image: Image.Image) -> Image.Image:
        """Normalise any mode to RGB or RGBA, keeping alpha only when it matters."""
        if image.mode == 'RGB':
            return image

        try:
            rgba = image.convert('RGBA')
        except ValueError as e:
            raise InvalidInput(f"Unsupported image mode {image.mode!r}: {e}") from e

        if rgba.getextrema()[3][0] == 255:
            return rgba.convert('RGB')
        return rgba

    @staticmethod
    def _drop_alpha(resized: Image.Image) -> np.ndarray:
        """RGB of each cell; only fully transparent cells take the matte color."""
        arr = np.array(resized, dtype=np.uint8)
        if resized.mode != 'RGBA':
            return arr

        rgb = arr[..., :3].copy()
        rgb[arr[..., 3] == 0] = MATTE_COLOR
        return rgb

    @classmethod
    def sample(cls, source: SourceBitmap, width: int,
               resample: Resample = Resample.BILINEAR) -> np.ndarray:
        """
        Resample the source to one RGB triple per cell.

        Args:
            source: Image or pixel array, left untouched
            width: Target width in characters
            resample: Interpolation filter

        Returns:
            uint8 array of shape (rows, columns, 3)
        """
        image = cls.as_image(source)
        columns, rows = cls.grid_size(image.size, width)

        # Resizing RGBA premultiplies internally, so alpha does not darken the color
        resized = cls._to_rgba(image).resize((columns, rows), resample.value)
        logger.debug("Downsampled %dx%d source to %dx%d cells",
                     image.width, image.height, columns, rows)

        return cls._drop_alpha(resized).reshape(rows, columns, 3)
