class RenderError(ValueError):
    """Base class for input rejected before rendering starts."""


class InvalidDimensionError(RenderError):
    """Source width, source height or output width is not positive."""


class UnknownRampError(RenderError):
    """Ramp name is not one of the known ramps."""

    def __init__(self, name: str, known: list[str]):
        super().__init__(f"Unknown ramp {name!r} (expected one of: {', '.join(known)})")
        self.name = name
        self.known = known


class EmptyBufferError(RenderError):
    """Pixel data length does not match width * height * channels."""
