import numpy as np
import pytest

from asciiraster.buffer import PixelBuffer

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def solid_buffer():
    """Factory for a single-colour RGBA buffer."""

    def make(width, height, colour=WHITE):
        arr = np.empty((height, width, 4), dtype=np.uint8)
        arr[:, :] = colour
        return PixelBuffer(arr, width, height)

    return make


@pytest.fixture
def gradient_buffer():
    """Factory for a horizontal black-to-white grey gradient."""

    def make(width, height):
        levels = np.linspace(0, 255, width).round().astype(np.uint8)
        arr = np.empty((height, width, 4), dtype=np.uint8)
        arr[:, :, :3] = levels[None, :, None]
        arr[:, :, 3] = 255
        return PixelBuffer(arr, width, height)

    return make
