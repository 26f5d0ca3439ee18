"""Perceptual color merging: CIEDE2000 distance and union-find clustering."""

from .model import merge_colors
from .cluster import ColorGroup, build_groups, cluster_labs
from .distance import delta_e, distance_matrix
from .union_find import UnionFind

__all__ = [
    "merge_colors",
    "ColorGroup",
    "build_groups",
    "cluster_labs",
    "delta_e",
    "distance_matrix",
    "UnionFind",
]
