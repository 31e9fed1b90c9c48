"""Healthbar color conversion between RGB triplets and hex strings."""

import string
from typing import Any

from pydantic import BaseModel, ConfigDict


class RGB(BaseModel):
    """An RGB color, each channel 0-255."""
    model_config = ConfigDict(frozen=True)

    r: int
    g: int
    b: int

    def as_list(self) -> list[int]:
        return [self.r, self.g, self.b]


BLACK = RGB(r=0, g=0, b=0)


def _channel_hex(value: float) -> str:
    clamped = max(0, min(255, int(value)))
    return f"{clamped:02x}"


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a ``#rrggbb`` string.

    Channels outside 0-255 are clamped, not rejected.

    Example:
        >>> rgb_to_hex(161, 161, 161)
        '#a1a1a1'
    """
    return f"#{_channel_hex(r)}{_channel_hex(g)}{_channel_hex(b)}"


def hex_to_rgb(value: Any) -> RGB:
    """Convert a ``#rgb`` or ``#rrggbb`` string to an RGB color.

    The leading ``#`` is optional and surrounding whitespace is ignored.
    Anything else (wrong length, non-hex digits, non-string input)
    decodes to black instead of raising.
    """
    if not isinstance(value, str):
        return BLACK

    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) == 3:
        digits = "".join(c + c for c in digits)
    if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
        return BLACK

    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )
