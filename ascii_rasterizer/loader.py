"""Decoding uploaded images into source bitmaps."""

import base64
import binascii
import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from PIL import Image

from ascii_rasterizer.errors import InvalidInput


logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, BinaryIO]


def decode_data_uri(uri: str) -> bytes:
    """Return the payload of a base64 'data:' URI."""
    header, sep, payload = uri.partition(',')
    if not sep or not header.startswith('data:') or not header.endswith(';base64'):
        raise InvalidInput("Expected a base64 data URI")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInput(f"Malformed data URI payload: {e}") from e


def load_bitmap(source: ImageSource) -> Image.Image:
    """
    Decode an image from a path, raw bytes, a binary file object or a data URI.

    Returns:
        Fully loaded PIL image

    Raises:
        InvalidInput: If the data is not a readable image
    """
    if isinstance(source, str) and source.startswith('data:'):
        source = decode_data_uri(source)
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    try:
        image = Image.open(source)
        image.load()
    except FileNotFoundError as e:
        raise InvalidInput(f"Image not found: {source}") from e
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise InvalidInput(f"Cannot decode image: {e}") from e

    logger.debug("Loaded %s image, size %s, mode %s", image.format, image.size, image.mode)
    return image
