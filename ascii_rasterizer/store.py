#!/usr/bin/env python3
"""
Image to ASCII Rasterizer - Converter Store
===========================================
Holds the state of an interactive front end (uploaded image, option toggles,
tab selection, last result) and turns it into calls to the pure converter.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Literal, Optional

from PIL import Image

from ascii_rasterizer.artwork import AsciiArtwork
from ascii_rasterizer.config import ChannelWeights, RasterConfig
from ascii_rasterizer.constants import CharacterSet, ColorMode
from ascii_rasterizer.converter import convert
from ascii_rasterizer.errors import ConversionError, InvalidConfiguration, InvalidInput
from ascii_rasterizer.loader import ImageSource, load_bitmap


logger = logging.getLogger(__name__)

Tab = Literal['upload', 'result']


def _default_weights() -> Dict[str, int]:
    return {'red': 33, 'green': 34, 'blue': 33}


@dataclass
class ConverterStore:
    """Mutable UI state; each submit() runs a fresh, stateless conversion."""

    image: Optional[Image.Image] = None
    result: Optional[AsciiArtwork] = None
    error: Optional[str] = None
    active_tab: Tab = 'upload'

    colored: bool = False
    negative: bool = False
    complex: bool = False
    rgb_weights: Dict[str, int] = field(default_factory=_default_weights)
    width: str = "100"
    custom_ascii: str = ""
    char_color: str = "#000000"
    background_color: str = "#ffffff"

    def load_image(self, source: ImageSource) -> None:
        """Decode and keep an uploaded image; the previous result is dropped."""
        try:
            image = load_bitmap(source)
        except ConversionError as e:
            self.error = str(e)
            logger.debug("Upload rejected: %s", e)
            raise

        self.image = image
        self.result = None
        self.error = None

    def clear(self) -> None:
        """Forget the image and its result and go back to the upload tab."""
        self.image = None
        self.result = None
        self.error = None
        self.active_tab = 'upload'

    def set_weight(self, channel: str, value: int) -> None:
        if channel not in self.rgb_weights:
            raise KeyError(channel)
        self.rgb_weights[channel] = value

    def build_config(self) -> RasterConfig:
        """
        Translate the form state into a configuration.

        Raises:
            InvalidConfiguration: If the width is not a number or the weights
                do not add up to 100%
        """
        try:
            width = int(self.width)
        except ValueError as e:
            raise InvalidConfiguration(f"Width must be a whole number, got {self.width!r}") from e

        weights = ChannelWeights.from_percentages(
            self.rgb_weights['red'], self.rgb_weights['green'], self.rgb_weights['blue'])

        if self.custom_ascii:
            charset = self.custom_ascii
        else:
            charset = CharacterSet.COMPLEX if self.complex else CharacterSet.SIMPLE

        return RasterConfig(
            width=width,
            color_mode=ColorMode.SAMPLED if self.colored else ColorMode.MONOCHROME,
            invert=self.negative,
            charset=charset,
            foreground=self.char_color,
            background=self.background_color,
            weights=weights,
        )

    def submit(self) -> AsciiArtwork:
        """
        Convert the current image with the current options.

        On success the result tab becomes active. On failure the message is
        kept in `error` and the exception is re-raised.
        """
        try:
            config = self.build_config()
            if self.image is None:
                raise InvalidInput("No image loaded")
            artwork = convert(self.image, config)
        except ConversionError as e:
            self.error = str(e)
            logger.debug("Conversion rejected: %s", e)
            raise

        self.result = artwork
        self.error = None
        self.active_tab = 'result'
        return artwork
