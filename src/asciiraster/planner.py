import logging
import math
from dataclasses import dataclass

from asciiraster.errors import InvalidDimensionError

logger = logging.getLogger(__name__)

# Monospace cells are roughly twice as tall as wide; scale rows down so output isn't stretched
CELL_ASPECT_FACTOR = 0.55
MAX_WIDTH = 500
DEFAULT_WIDTH = 100


@dataclass(frozen=True)
class GridSize:
    columns: int
    rows: int


def plan_dimensions(
    source_width: int,
    source_height: int,
    width: int,
    *,
    cell_aspect: float = CELL_ASPECT_FACTOR,
    max_width: int = MAX_WIDTH,
) -> GridSize:
    """Work out the output grid for a source image and requested column count.

    Widths above ``max_width`` are clamped rather than rejected.
    """
    if source_width <= 0 or source_height <= 0:
        raise InvalidDimensionError(f"Source dimensions must be positive, got {source_width}x{source_height}")
    if width < 1:
        raise InvalidDimensionError(f"Output width must be at least 1, got {width}")

    if width > max_width:
        logger.warning("Output width %d exceeds maximum, clamping to %d", width, max_width)
        width = max_width

    rows = max(1, math.floor(source_height / source_width * width * cell_aspect))
    return GridSize(columns=width, rows=rows)
