"""CSS hex color code parsing."""

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")


class ColorCodeError(ValueError):
    """Raised when a string is not a valid hex color code."""


@dataclass(frozen=True)
class ColorCode:
    """
    A parsed CSS color code.

    Equality and hashing use the channel values only, so ``#fff`` and
    ``#FFFFFF`` compare equal while keeping their original spelling.
    """
    r: int
    g: int
    b: int
    a: int = 255
    original: str = field(default="", compare=False)

    @property
    def normalized(self) -> str:
        """Upper-case ``#RRGGBBAA`` form."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.original or self.normalized


def parse_color_code(text: str) -> ColorCode:
    """
    Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` into a ColorCode.

    Args:
        text: Color code, case-insensitive

    Returns:
        Parsed ColorCode (alpha defaults to 255)

    Raises:
        ColorCodeError: If the text is not one of the accepted formats
    """
    result = try_parse_color_code(text)
    if result is None:
        raise ColorCodeError(f"Invalid color code format: {text!r}")
    return result


def try_parse_color_code(text: str) -> Optional[ColorCode]:
    """Parse a color code, returning None instead of raising."""
    if not text or text[0] != "#":
        return None

    digits = text[1:]
    if not _HEX_PATTERN.fullmatch(digits):
        return None

    if len(digits) in (3, 4):
        # Each nibble doubles up: f -> ff, 8 -> 88
        channels = [int(c, 16) * 17 for c in digits]
    elif len(digits) in (6, 8):
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    else:
        return None

    alpha = channels[3] if len(channels) == 4 else 255
    return ColorCode(r=channels[0], g=channels[1], b=channels[2], a=alpha, original=text)
