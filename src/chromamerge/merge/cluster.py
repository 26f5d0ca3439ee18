"""Threshold clustering of Lab colors."""

from dataclasses import dataclass
from typing import List, Sequence

from ..color.code import ColorCode
from ..color.lab import LabColor
from .distance import delta_e
from .union_find import UnionFind
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ColorGroup:
    """A group of perceptually equivalent colors with a canonical representative."""
    group_id: str
    indices: List[int]
    members: List[str]
    canonical: str

    @property
    def size(self) -> int:
        return len(self.indices)


def cluster_labs(labs: Sequence[LabColor], threshold: float) -> UnionFind:
    """
    Group colors using single-link clustering on CIEDE2000 distance.

    Args:
        labs: Colors to cluster
        threshold: Maximum distance for two colors to be merged (inclusive)

    Returns:
        UnionFind over the indices of ``labs``
    """
    if threshold < 0:
        raise ValueError(f"threshold must be non-negative, got {threshold}")

    n = len(labs)
    uf = UnionFind(n)

    for i in range(n):
        for j in range(i + 1, n):
            distance = delta_e(labs[i], labs[j])
            if distance <= threshold and uf.union(i, j):
                logger.debug(f"Merged {i} and {j} (delta E: {distance:.3f})")

    return uf


def build_groups(uf: UnionFind, codes: Sequence[ColorCode]) -> List[ColorGroup]:
    """
    Convert a clustered UnionFind into ColorGroup records.

    The canonical member is the first-seen color (lowest index), and groups
    are numbered in the order of their lowest index.
    """
    if len(codes) != uf.count:
        raise ValueError(f"Expected {uf.count} colors, got {len(codes)}")

    groups = []
    for number, indices in enumerate(uf.enumerate_groups(), start=1):
        members = [str(codes[i]) for i in indices]
        groups.append(ColorGroup(
            group_id=f"grp_{number:03d}",
            indices=indices,
            members=members,
            canonical=members[0],
        ))
    return groups
