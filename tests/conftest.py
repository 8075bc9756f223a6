import io

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def solid_image():
    """Factory for single-color RGB images."""
    def make(color=(255, 255, 255), size=(2, 2), mode='RGB'):
        return Image.new(mode, size, color)
    return make


@pytest.fixture
def gradient_image():
    """Horizontal black-to-white gradient, 200x100."""
    row = np.linspace(0, 255, 200).astype(np.uint8)
    gray = np.tile(row, (100, 1))
    return Image.fromarray(np.stack([gray, gray, gray], axis=-1))


@pytest.fixture
def png_bytes(solid_image):
    buffer = io.BytesIO()
    solid_image((10, 120, 200), (40, 20)).save(buffer, format='PNG')
    return buffer.getvalue()
