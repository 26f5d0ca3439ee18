"""sRGB (D65) to CIE L*a*b* conversion."""

import math
from dataclasses import dataclass
from typing import Protocol, Tuple

# D65 reference white, scaled to Y = 100
REF_X = 95.047
REF_Y = 100.000
REF_Z = 108.883

# CIE constants in exact rational form
EPSILON = 216.0 / 24389.0
KAPPA = 24389.0 / 27.0


@dataclass(frozen=True)
class LabColor:
    """A color in CIE L*a*b* space. Components are not clamped."""
    l: float
    a: float
    b: float


class HasRGB(Protocol):
    r: int
    g: int
    b: int


def _linearize(n: float) -> float:
    """Inverse sRGB companding."""
    if n > 0.04045:
        return ((n + 0.055) / 1.055) ** 2.4
    return n / 12.92


def _pivot(t: float) -> float:
    if t > EPSILON:
        return math.cbrt(t)
    return (KAPPA * t + 16.0) / 116.0


def rgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert 8-bit sRGB channels to CIE XYZ (D65), scaled 0-100."""
    r_lin = _linearize(r / 255.0)
    g_lin = _linearize(g / 255.0)
    b_lin = _linearize(b / 255.0)

    x = r_lin * 41.24564 + g_lin * 35.75761 + b_lin * 18.04375
    y = r_lin * 21.26729 + g_lin * 71.51522 + b_lin * 7.21750
    z = r_lin * 1.93339 + g_lin * 11.91920 + b_lin * 95.03041
    return x, y, z


def xyz_to_lab(x: float, y: float, z: float) -> LabColor:
    """Convert CIE XYZ (0-100 scale, D65) to L*a*b*."""
    fx = _pivot(x / REF_X)
    fy = _pivot(y / REF_Y)
    fz = _pivot(z / REF_Z)

    return LabColor(
        l=116.0 * fy - 16.0,
        a=500.0 * (fx - fy),
        b=200.0 * (fy - fz),
    )


def rgb_to_lab(r: int, g: int, b: int) -> LabColor:
    """
    Convert an 8-bit sRGB triple to CIE L*a*b*.

    Args:
        r: Red channel, 0-255
        g: Green channel, 0-255
        b: Blue channel, 0-255

    Returns:
        LabColor with L nominally in [0, 100]

    Raises:
        ValueError: If a channel is outside 0-255
    """
    for name, value in (("r", r), ("g", g), ("b", b)):
        if not 0 <= value <= 255:
            raise ValueError(f"Channel {name} must be in [0, 255], got {value}")

    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def color_to_lab(color: HasRGB) -> LabColor:
    """Convert any record exposing ``r``, ``g``, ``b`` (e.g. ColorCode). Alpha is ignored."""
    return rgb_to_lab(color.r, color.g, color.b)
