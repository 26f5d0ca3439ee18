"""Public API for merging color palettes."""

from typing import Iterable, List, Optional

from ..color.code import parse_color_code
from ..color.lab import color_to_lab
from ..config import Settings
from .cluster import ColorGroup, build_groups, cluster_labs
from ..logging import get_logger

logger = get_logger(__name__)


def merge_colors(codes: Iterable[str], threshold: Optional[float] = None) -> List[ColorGroup]:
    """
    Group color codes that are perceptually indistinguishable.

    Args:
        codes: Hex color codes (``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``)
        threshold: Maximum CIEDE2000 distance to merge; defaults to Settings().threshold

    Returns:
        Every input color in exactly one ColorGroup, singletons included

    Raises:
        ColorCodeError: If any code cannot be parsed
    """
    if threshold is None:
        threshold = Settings().threshold

    parsed = [parse_color_code(code) for code in codes]
    if not parsed:
        return []

    labs = [color_to_lab(color) for color in parsed]
    uf = cluster_labs(labs, threshold)
    groups = build_groups(uf, parsed)

    merged = sum(1 for group in groups if group.size > 1)
    logger.info(f"Grouped {len(parsed)} colors into {len(groups)} groups ({merged} with duplicates) at threshold {threshold}")
    return groups
