#!/usr/bin/env python3
"""
Image to ASCII Rasterizer - Output Emission
===========================================
Writes a cell grid out as plain text and as a bitmap of drawn glyphs.
"""

import base64
import io
import logging
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from ascii_rasterizer.artwork import CharacterCell
from ascii_rasterizer.constants import CELL_HEIGHT, CELL_WIDTH, FONT_CANDIDATES, FONT_SIZE
from ascii_rasterizer.errors import InvalidConfiguration, RenderingUnavailable


logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _load_font(font_path: Optional[str]) -> ImageFont.ImageFont:
    if font_path is not None:
        try:
            return ImageFont.truetype(font_path, FONT_SIZE)
        except OSError as e:
            raise InvalidConfiguration(f"Cannot load font {font_path!r}: {e}") from e

    for path in FONT_CANDIDATES:
        try:
            font = ImageFont.truetype(path, FONT_SIZE)
        except OSError:
            continue
        logger.debug("Using font %s", path)
        return font

    try:
        return ImageFont.load_default(size=FONT_SIZE)
    except OSError as e:
        raise RenderingUnavailable(f"No font available for rendering: {e}") from e


class Rasterizer:
    """Produce the text and bitmap forms of a cell grid."""

    @staticmethod
    def load_font(font_path: Optional[str] = None) -> ImageFont.ImageFont:
        """
        Load the monospace font used for glyphs.

        Args:
            font_path: Explicit TrueType file; known monospace fonts are tried if None

        Returns:
            A font at FONT_SIZE pixels, falling back to Pillow's default font

        Raises:
            InvalidConfiguration: If an explicit font_path cannot be loaded
            RenderingUnavailable: If no font at all can be loaded
        """
        return _load_font(font_path)

    @staticmethod
    def emit_text(cells: Sequence[CharacterCell], columns: int) -> str:
        """Join characters row-major, ending every row with a newline."""
        rows: List[str] = []
        for start in range(0, len(cells), columns):
            rows.append(''.join(cell.char for cell in cells[start:start + columns]) + '\n')
        return ''.join(rows)

    @staticmethod
    def bitmap_size(columns: int, rows: int) -> Tuple[int, int]:
        return columns * CELL_WIDTH, rows * CELL_HEIGHT

    @classmethod
    def create_surface(cls, columns: int, rows: int,
                       background: Tuple[int, int, int]) -> Image.Image:
        """
        Allocate the output bitmap filled with the background color.

        Raises:
            RenderingUnavailable: If Pillow cannot allocate the surface
        """
        size = cls.bitmap_size(columns, rows)
        try:
            return Image.new('RGB', size, background)
        except (OSError, MemoryError, ValueError) as e:
            raise RenderingUnavailable(f"Cannot create {size[0]}x{size[1]} drawing surface: {e}") from e

    @classmethod
    def emit_bitmap(cls, cells: Sequence[CharacterCell], columns: int, rows: int,
                    background: Tuple[int, int, int],
                    font: Optional[ImageFont.ImageFont] = None) -> Image.Image:
        """
        Draw every glyph into its cell, top-aligned, in the cell's foreground color.

        Args:
            cells: Row-major cells
            columns: Grid width
            rows: Grid height
            background: Fill color for the whole bitmap
            font: Glyph font (default: load_font())

        Returns:
            RGB image of size (columns * CELL_WIDTH, rows * CELL_HEIGHT)
        """
        if font is None:
            font = cls.load_font()

        canvas = cls.create_surface(columns, rows, background)
        draw = ImageDraw.Draw(canvas)

        for cell in cells:
            if cell.char == ' ':
                continue
            # Default 'la' anchor puts the top of the ascender at the cell origin
            draw.text((cell.col * CELL_WIDTH, cell.row * CELL_HEIGHT),
                      cell.char, fill=cell.foreground, font=font)

        return canvas

    @staticmethod
    def to_data_uri(image: Image.Image, image_format: str = 'PNG') -> str:
        """Encode an image as a base64 data URI."""
        buffer = io.BytesIO()
        image.save(buffer, format=image_format)
        encoded = base64.b64encode(buffer.getvalue()).decode('ascii')
        return f"data:image/{image_format.lower()};base64,{encoded}"
