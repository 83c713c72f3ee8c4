import numpy as np

from asciiraster.buffer import PixelBuffer
from asciiraster.planner import GridSize


def source_coordinates(source_size: int, count: int) -> np.ndarray:
    """Source index for each of ``count`` output cells: floor(i * source_size / count)."""
    return np.arange(count, dtype=np.int64) * source_size // count


def sample_nearest(buffer: PixelBuffer, size: GridSize) -> np.ndarray:
    """Pick one source pixel per output cell. Returns array of shape (rows, cols, channels).

    Nearest-neighbour only: cost depends on the grid size, never on the
    source resolution, and no neighbouring pixels are blended in.
    """
    xs = source_coordinates(buffer.width, size.columns)
    ys = source_coordinates(buffer.height, size.rows)
    return buffer.as_grid()[ys[:, None], xs[None, :]]
