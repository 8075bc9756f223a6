"""Assigns render colors to character cells."""

from typing import Sequence, Tuple

from ascii_rasterizer.config import RGB, RasterConfig
from ascii_rasterizer.constants import ColorMode


class Colorizer:
    """Pick foreground and background for a cell."""

    @staticmethod
    def colorize(sample: Sequence[int], config: RasterConfig) -> Tuple[RGB, RGB]:
        """
        Args:
            sample: The cell's sampled (r, g, b)
            config: Validated configuration

        Returns:
            (foreground, background) RGB tuples
        """
        background = config.background_rgb
        if config.color_mode == ColorMode.SAMPLED:
            r, g, b = (int(c) for c in sample[:3])
            return (r, g, b), background
        return config.foreground_rgb, background
