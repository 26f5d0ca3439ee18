"""Color code parsing and sRGB to CIE L*a*b* conversion."""

from .code import ColorCode, ColorCodeError, parse_color_code, try_parse_color_code
from .lab import LabColor, rgb_to_lab, color_to_lab

__all__ = [
    "ColorCode",
    "ColorCodeError",
    "parse_color_code",
    "try_parse_color_code",
    "LabColor",
    "rgb_to_lab",
    "color_to_lab",
]
