#!/usr/bin/env python3
"""
Image to ASCII Rasterizer - Brightness Mapping
==============================================
Turns RGB samples into normalized brightness and picks the closest ramp character.

A ramp character's reference brightness is its position in the ramp divided by
the ramp length, not the ink coverage of the glyph. Ramps must therefore be
passed already ordered from sparse to dense (or the reverse).
"""

from typing import Sequence, Tuple

import numpy as np

from ascii_rasterizer.config import ChannelWeights
from ascii_rasterizer.errors import InvalidConfiguration


class BrightnessMapper:
    """Brightness computation and character selection."""

    @staticmethod
    def brightness(rgb: Sequence[int], weights: ChannelWeights, invert: bool = False) -> float:
        """
        Normalized brightness of one sample.

        Args:
            rgb: (r, g, b) in 0-255
            weights: Channel weights summing to 1
            invert: Use (255 - weighted sum) instead

        Returns:
            Brightness in [0, 1]
        """
        r, g, b = (float(c) for c in rgb[:3])
        weighted = weights.red * r + weights.green * g + weights.blue * b
        weighted = min(255.0, max(0.0, weighted))
        if invert:
            weighted = 255.0 - weighted
        return weighted / 255.0

    @staticmethod
    def brightness_grid(samples: np.ndarray, weights: ChannelWeights,
                        invert: bool = False) -> np.ndarray:
        """Vectorized brightness() over a (rows, columns, 3) sample grid."""
        arr = samples.astype(np.float64)
        weighted = (weights.red * arr[..., 0]
                    + weights.green * arr[..., 1]
                    + weights.blue * arr[..., 2])
        weighted = np.clip(weighted, 0.0, 255.0)
        if invert:
            weighted = 255.0 - weighted
        return weighted / 255.0

    @staticmethod
    def reference_levels(charset: str) -> np.ndarray:
        """Reference brightness of each ramp position: index / len(charset)."""
        if len(charset) == 0:
            raise InvalidConfiguration("Character ramp must not be empty")
        return np.arange(len(charset), dtype=np.float64) / len(charset)

    @classmethod
    def select(cls, brightness: float, charset: str) -> int:
        """
        Index of the ramp character closest to the brightness.

        Ties go to the earliest character in the ramp.
        """
        levels = cls.reference_levels(charset)
        if not np.isfinite(brightness):
            # Out of every reference range; use the boundary character
            return len(charset) - 1 if brightness > 0 else 0
        return int(np.argmin(np.abs(brightness - levels)))

    @classmethod
    def select_grid(cls, brightness: np.ndarray, charset: str) -> np.ndarray:
        """Vectorized select() returning an int index grid of the same shape."""
        levels = cls.reference_levels(charset)
        # NaN or infinity lands on a boundary character
        clamped = np.nan_to_num(brightness, nan=0.0, posinf=1.0, neginf=0.0)
        distances = np.abs(clamped[..., np.newaxis] - levels)
        # argmin returns the first minimum, which keeps ramp order on ties
        return np.argmin(distances, axis=-1)

    @classmethod
    def map_grid(cls, samples: np.ndarray, charset: str, weights: ChannelWeights,
                 invert: bool = False) -> Tuple[np.ndarray, np.ndarray]:
        """
        Map a sample grid to ramp indices.

        Returns:
            (brightness grid, index grid)
        """
        levels = cls.brightness_grid(samples, weights, invert)
        return levels, cls.select_grid(levels, charset)
