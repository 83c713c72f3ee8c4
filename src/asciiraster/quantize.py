import math
from typing import Sequence

import numpy as np

from asciiraster.ramps import Ramp

# ITU-R BT.709 weights scaled to integers (0.2126, 0.7152, 0.0722) so that
# pure white lands on exactly 1.0
LUMA_WEIGHTS = (2126, 7152, 722)
LUMA_SCALE = 10_000 * 255


def luminance(pixel: Sequence[int]) -> float:
    """Relative luminance of an (R, G, B[, A]) pixel in [0, 1]. Alpha is ignored."""
    r, g, b = (int(c) for c in pixel[:3])
    value = (LUMA_WEIGHTS[0] * r + LUMA_WEIGHTS[1] * g + LUMA_WEIGHTS[2] * b) / LUMA_SCALE
    return min(1.0, max(0.0, value))


def glyph_index(lum: float, ramp: Ramp, invert: bool = False) -> int:
    last = len(ramp) - 1
    index = min(last, max(0, math.floor(lum * last)))
    return last - index if invert else index


def quantize(pixel: Sequence[int], ramp: Ramp, invert: bool = False) -> str:
    return ramp.glyphs[glyph_index(luminance(pixel), ramp, invert)]


def luminance_grid(samples: np.ndarray) -> np.ndarray:
    """Vectorised ``luminance`` over an array of shape (..., channels)."""
    rgb = samples[..., :3].astype(np.int64)
    weighted = rgb @ np.array(LUMA_WEIGHTS, dtype=np.int64)
    return np.clip(weighted / LUMA_SCALE, 0.0, 1.0)


def quantize_grid(samples: np.ndarray, ramp: Ramp, invert: bool = False) -> np.ndarray:
    """Map sampled pixels of shape (rows, cols, channels) to glyph indices of shape (rows, cols)."""
    last = len(ramp) - 1
    indices = np.clip(np.floor(luminance_grid(samples) * last).astype(np.int64), 0, last)
    if invert:
        indices = last - indices
    return indices
