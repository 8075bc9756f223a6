#!/usr/bin/env python3
"""
Image to ASCII Rasterizer - Results
===================================
The cell and artwork types handed back to callers.
"""

import io
from dataclasses import dataclass
from typing import Dict, List, Tuple

from PIL import Image


@dataclass(frozen=True)
class CharacterCell:
    """One character of the art at its grid position."""
    row: int
    col: int
    char: str
    foreground: Tuple[int, int, int]
    background: Tuple[int, int, int]


@dataclass
class AsciiArtwork:
    """Result of a conversion: text and bitmap built from the same cells."""
    cells: List[CharacterCell]                       # Row-major
    text: str                                        # Rows, each ending in '\n'
    bitmap: Image.Image                              # Rendered cell grid
    columns: int = 0
    rows: int = 0
    original_size: Tuple[int, int] = (0, 0)

    @property
    def lines(self) -> List[str]:
        return self.text.split('\n')[:-1]

    def row_cells(self, row: int) -> List[CharacterCell]:
        start = row * self.columns
        return self.cells[start:start + self.columns]

    def to_png(self) -> bytes:
        """Encode the bitmap as PNG."""
        buffer = io.BytesIO()
        self.bitmap.save(buffer, format='PNG')
        return buffer.getvalue()

    @property
    def data_uri(self) -> str:
        from ascii_rasterizer.rasterizer import Rasterizer
        return Rasterizer.to_data_uri(self.bitmap)

    def as_dict(self) -> Dict[str, str]:
        """Output contract: the encoded image plus the plain text."""
        return {
            'rendered_bitmap_data_uri': self.data_uri,
            'ascii_text': self.text,
        }
