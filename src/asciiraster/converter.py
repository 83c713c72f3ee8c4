import logging
from pathlib import Path

from PIL import Image

from asciiraster.buffer import PixelBuffer
from asciiraster.engine import RenderParams, render
from asciiraster.planner import DEFAULT_WIDTH
from asciiraster.ramps import DEFAULT_RAMP, Ramp

logger = logging.getLogger(__name__)


def load_image(image: Image.Image | str | Path) -> PixelBuffer:
    if not isinstance(image, Image.Image):
        logger.debug("Decoding %s", image)
        with Image.open(image) as opened:
            return PixelBuffer.from_image(opened)
    return PixelBuffer.from_image(image)


def image_to_ascii(
    image: Image.Image | str | Path,
    width: int = DEFAULT_WIDTH,
    ramp: str | Ramp = DEFAULT_RAMP,
    invert: bool = False,
) -> str:
    params = RenderParams.create(width, ramp, invert)
    return render(load_image(image), params)
