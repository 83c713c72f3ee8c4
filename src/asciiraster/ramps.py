from __future__ import annotations

from enum import Enum

from asciiraster.errors import UnknownRampError


class Ramp(Enum):
    """Glyph ramps ordered from emptiest (index 0) to densest (last index)."""

    SIMPLE = ' .:-=+*#%@",'
    DETAILED = "`.-_:',;^/i!lI~+?][}{1)(|\\tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"
    # Full block sits at index 1 and light shade last
    BLOCKS = " █▓▒░"

    @property
    def glyphs(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    @classmethod
    def names(cls) -> list[str]:
        return [ramp.name.lower() for ramp in cls]

    @classmethod
    def from_name(cls, name: str | Ramp) -> Ramp:
        if isinstance(name, Ramp):
            return name
        try:
            return cls[name.upper()]
        except (KeyError, AttributeError):
            raise UnknownRampError(str(name), cls.names()) from None


DEFAULT_RAMP = Ramp.DETAILED
