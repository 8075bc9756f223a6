#!/usr/bin/env python3
"""
Image to ASCII Rasterizer - Formatters
======================================
Terminal and HTML renderings of a finished artwork.
"""

import html
from typing import Literal, Tuple

from ascii_rasterizer.artwork import AsciiArtwork


# =============================================================================
# ANSI COLOR OUTPUT
# =============================================================================

class AnsiColorFormatter:
    """Format ASCII art with ANSI color codes for terminal output."""

    RESET = "\033[0m"

    @staticmethod
    def rgb_to_ansi_24bit(r: int, g: int, b: int, foreground: bool = True) -> str:
        """Convert RGB to 24-bit ANSI color code (true color)."""
        code = 38 if foreground else 48
        return f"\033[{code};2;{r};{g};{b}m"

    @staticmethod
    def rgb_to_ansi_256(r: int, g: int, b: int, foreground: bool = True) -> str:
        """Convert RGB to 256-color ANSI code."""
        if r == g == b:
            # Grayscale ramp
            if r < 8:
                color = 16
            elif r > 248:
                color = 231
            else:
                color = round((r - 8) / 247 * 24) + 232
        else:
            # Color cube (6x6x6)
            color = 16 + (36 * round(r / 255 * 5)) + (6 * round(g / 255 * 5)) + round(b / 255 * 5)

        code = 38 if foreground else 48
        return f"\033[{code};5;{color}m"

    @classmethod
    def _code(cls, rgb: Tuple[int, int, int], color_mode: str, foreground: bool) -> str:
        if color_mode == '256':
            return cls.rgb_to_ansi_256(*rgb, foreground=foreground)
        return cls.rgb_to_ansi_24bit(*rgb, foreground=foreground)

    @classmethod
    def format_artwork(cls, artwork: AsciiArtwork,
                       color_mode: Literal['24bit', '256'] = '24bit',
                       background: bool = True) -> str:
        """
        Color each character with its cell's foreground.

        Args:
            artwork: Converted artwork
            color_mode: '24bit' or '256'
            background: Also paint the cell background

        Returns:
            One line per row, each reset at the end
        """
        output_lines = []

        for row in range(artwork.rows):
            output = ""
            prev = None
            for cell in artwork.row_cells(row):
                colors = (cell.foreground, cell.background)
                # Only emit codes when the colors change
                if colors != prev:
                    output += cls._code(cell.foreground, color_mode, True)
                    if background:
                        output += cls._code(cell.background, color_mode, False)
                    prev = colors
                output += cell.char
            output += cls.RESET
            output_lines.append(output)

        return '\n'.join(output_lines)


# =============================================================================
# HTML OUTPUT
# =============================================================================

class HtmlFormatter:
    """Format ASCII art as HTML with one styled span per character."""

    @staticmethod
    def format_artwork(artwork: AsciiArtwork,
                       font_size: str = "10px",
                       font_family: str = "monospace",
                       line_height: float = 1.0) -> str:
        """
        Format an artwork as a standalone HTML page.

        Args:
            artwork: Converted artwork
            font_size: CSS font size
            font_family: CSS font family
            line_height: Line height multiplier

        Returns:
            HTML string
        """
        body = ""
        for row in range(artwork.rows):
            for cell in artwork.row_cells(row):
                fr, fg, fb = cell.foreground
                br, bg, bb = cell.background
                style = f"color: rgb({fr},{fg},{fb}); background-color: rgb({br},{bg},{bb});"
                body += f'<span style="{style}">{html.escape(cell.char)}</span>'
            body += '\n'

        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <style>
        .ascii-art {{
            font-family: {font_family};
            font-size: {font_size};
            line-height: {line_height};
            white-space: pre;
            display: inline-block;
        }}
    </style>
</head>
<body>
<div class="ascii-art">
{body}</div>
</body>
</html>"""
