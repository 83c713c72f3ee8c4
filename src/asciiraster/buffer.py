from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Flat, read-only RGB(A) pixel data in row-major order.

    ``data`` holds ``width * height * channels`` uint8 values. Nothing is
    checked at construction; the engine validates the buffer before it
    renders so a mismatch surfaces as ``EmptyBufferError``.
    """

    data: np.ndarray
    width: int
    height: int
    channels: int = 4

    def __post_init__(self):
        arr = np.asarray(self.data, dtype=np.uint8).reshape(-1)
        arr.flags.writeable = False
        object.__setattr__(self, "data", arr)

    @property
    def expected_length(self) -> int:
        return self.width * self.height * self.channels

    def as_grid(self) -> np.ndarray:
        """View the data as (height, width, channels)."""
        return self.data.reshape(self.height, self.width, self.channels)

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelBuffer:
        if image.mode != "RGBA":
            logger.debug("Converting %s image to RGBA", image.mode)
            image = image.convert("RGBA")
        return cls(np.asarray(image, dtype=np.uint8), image.width, image.height, 4)

    @classmethod
    def from_pixels(cls, rows: Sequence[Sequence[Iterable[int]]]) -> PixelBuffer:
        """Build a buffer from rows of (R, G, B) or (R, G, B, A) tuples."""
        arr = np.asarray(rows, dtype=np.uint8)
        if arr.ndim != 3:
            raise ValueError(f"Expected rows of pixel tuples, got array of shape {arr.shape}")
        height, width, channels = arr.shape
        return cls(arr, width, height, channels)
