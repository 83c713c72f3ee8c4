from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from asciiraster.buffer import PixelBuffer
from asciiraster.errors import EmptyBufferError, InvalidDimensionError
from asciiraster.planner import plan_dimensions
from asciiraster.quantize import quantize_grid
from asciiraster.ramps import DEFAULT_RAMP, Ramp
from asciiraster.sampling import sample_nearest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderParams:
    width: int
    ramp: Ramp = DEFAULT_RAMP
    invert: bool = False

    @classmethod
    def create(cls, width: int, ramp: str | Ramp = DEFAULT_RAMP, invert: bool = False) -> RenderParams:
        """Build params from user-facing values, resolving the ramp by name."""
        return cls(width=width, ramp=Ramp.from_name(ramp), invert=bool(invert))


@dataclass
class CellGrid:
    rows: list[str]  # one string per row, all the same length

    @property
    def columns(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def text(self) -> str:
        return assemble(self.rows)


def validate(buffer: PixelBuffer, params: RenderParams) -> Ramp:
    """Reject bad input up front so no stage ever sees it. Returns the resolved ramp."""
    if buffer.width <= 0 or buffer.height <= 0:
        raise InvalidDimensionError(f"Source dimensions must be positive, got {buffer.width}x{buffer.height}")
    if params.width < 1:
        raise InvalidDimensionError(f"Output width must be at least 1, got {params.width}")
    if buffer.channels not in (3, 4):
        raise EmptyBufferError(f"Expected 3 or 4 channels per pixel, got {buffer.channels}")
    if buffer.data.size != buffer.expected_length:
        raise EmptyBufferError(
            f"Pixel buffer holds {buffer.data.size} values, expected "
            f"{buffer.width}x{buffer.height}x{buffer.channels} = {buffer.expected_length}"
        )
    return Ramp.from_name(params.ramp)


def assemble(rows: Sequence[Sequence[str]]) -> str:
    """Join glyph rows with newlines, ending with a trailing newline."""
    return "".join("".join(row) + "\n" for row in rows)


def render_grid(buffer: PixelBuffer, params: RenderParams) -> CellGrid:
    ramp = validate(buffer, params)

    size = plan_dimensions(buffer.width, buffer.height, params.width)
    logger.debug(
        "Rendering %dx%d source to %d columns x %d rows with %s ramp%s",
        buffer.width,
        buffer.height,
        size.columns,
        size.rows,
        ramp.name.lower(),
        " (inverted)" if params.invert else "",
    )

    samples = sample_nearest(buffer, size)
    indices = quantize_grid(samples, ramp, params.invert)
    glyphs = np.array(list(ramp.glyphs))[indices]
    return CellGrid(rows=["".join(row) for row in glyphs])


def render(buffer: PixelBuffer, params: RenderParams) -> str:
    """Convert a pixel buffer to newline-delimited text art."""
    return render_grid(buffer, params).text()
