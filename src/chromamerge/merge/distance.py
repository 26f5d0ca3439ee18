"""CIEDE2000 color difference."""

import math
from typing import Sequence

import numpy as np

from ..color.lab import LabColor

POW25_7 = 6103515625.0  # 25**7
# Chroma/hue values below this are treated as zero to keep atan2 stable near gray
ACHROMATIC_EPSILON = 1e-10


def _hue_prime(a_prime: float, b: float) -> float:
    if abs(a_prime) < ACHROMATIC_EPSILON and abs(b) < ACHROMATIC_EPSILON:
        return 0.0
    h = math.degrees(math.atan2(b, a_prime))
    return h if h >= 0 else h + 360.0


def _delta_big_h_prime(c1: float, c2: float, h1: float, h2: float) -> float:
    if c1 < ACHROMATIC_EPSILON or c2 < ACHROMATIC_EPSILON:
        return 0.0

    dh = h2 - h1
    if dh > 180.0:
        dh -= 360.0
    elif dh < -180.0:
        dh += 360.0

    return 2.0 * math.sqrt(c1 * c2) * math.sin(math.radians(dh) / 2.0)


def _mean_hue(c1: float, c2: float, h1: float, h2: float) -> float:
    h_sum = h1 + h2
    if c1 < ACHROMATIC_EPSILON or c2 < ACHROMATIC_EPSILON:
        return h_sum

    if abs(h1 - h2) <= 180.0:
        return h_sum / 2.0
    if h_sum < 360.0:
        return (h_sum + 360.0) / 2.0
    return (h_sum - 360.0) / 2.0


def delta_e(lab1: LabColor, lab2: LabColor) -> float:
    """
    Calculate the CIEDE2000 color difference between two Lab colors.

    Weighting factors kL, kC and kH are all 1.

    Args:
        lab1: First color
        lab2: Second color

    Returns:
        Non-negative perceptual distance (0 for identical colors)
    """
    l1, a1, b1 = lab1.l, lab1.a, lab1.b
    l2, a2, b2 = lab2.l, lab2.a, lab2.b

    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    c_bar7 = ((c1 + c2) / 2.0) ** 7
    g = 0.5 * (1.0 - math.sqrt(c_bar7 / (c_bar7 + POW25_7)))

    a1_prime = a1 * (1.0 + g)
    a2_prime = a2 * (1.0 + g)
    c1_prime = math.hypot(a1_prime, b1)
    c2_prime = math.hypot(a2_prime, b2)
    h1_prime = _hue_prime(a1_prime, b1)
    h2_prime = _hue_prime(a2_prime, b2)

    delta_l_prime = l2 - l1
    delta_c_prime = c2_prime - c1_prime
    delta_h_prime = _delta_big_h_prime(c1_prime, c2_prime, h1_prime, h2_prime)

    l_bar_prime = (l1 + l2) / 2.0
    c_bar_prime = (c1_prime + c2_prime) / 2.0
    h_bar_prime = _mean_hue(c1_prime, c2_prime, h1_prime, h2_prime)

    t = (
        1.0
        - 0.17 * math.cos(math.radians(h_bar_prime - 30.0))
        + 0.24 * math.cos(math.radians(2.0 * h_bar_prime))
        + 0.32 * math.cos(math.radians(3.0 * h_bar_prime + 6.0))
        - 0.20 * math.cos(math.radians(4.0 * h_bar_prime - 63.0))
    )

    l50_sq = (l_bar_prime - 50.0) ** 2
    s_l = 1.0 + (0.015 * l50_sq) / math.sqrt(20.0 + l50_sq)
    s_c = 1.0 + 0.045 * c_bar_prime
    s_h = 1.0 + 0.015 * c_bar_prime * t

    delta_theta = 30.0 * math.exp(-(((h_bar_prime - 275.0) / 25.0) ** 2))
    c_bar_prime7 = c_bar_prime ** 7
    r_c = 2.0 * math.sqrt(c_bar_prime7 / (c_bar_prime7 + POW25_7))
    r_t = -r_c * math.sin(math.radians(2.0 * delta_theta))

    term_l = delta_l_prime / s_l
    term_c = delta_c_prime / s_c
    term_h = delta_h_prime / s_h

    return math.sqrt(
        term_l * term_l
        + term_c * term_c
        + term_h * term_h
        + r_t * term_c * term_h
    )


def distance_matrix(labs: Sequence[LabColor]) -> np.ndarray:
    """
    Calculate all pairwise CIEDE2000 distances.

    Args:
        labs: Colors to compare

    Returns:
        Symmetric (n, n) float64 array with a zero diagonal
    """
    n = len(labs)
    matrix = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(i + 1, n):
            matrix[i, j] = matrix[j, i] = delta_e(labs[i], labs[j])
    return matrix
