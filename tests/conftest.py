import numpy as np
import pytest

from image_editor.models.image import Image, PIXEL_DTYPE


@pytest.fixture
def make_image():
    """Build an Image from rows of (r, g, b) tuples, row-major."""
    def _make(rows):
        return Image(pixels=np.array(rows, dtype=PIXEL_DTYPE))
    return _make


@pytest.fixture
def random_image():
    rng = np.random.default_rng(1234)

    def _make(width, height):
        return Image(pixels=rng.integers(0, 256, size=(height, width, 3), dtype=PIXEL_DTYPE))
    return _make
