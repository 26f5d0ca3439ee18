"""Disjoint-set (union-find) structure for index-based clustering."""

from typing import Dict, List


class UnionFind:
    """
    Union-find over the indices ``0..n-1`` with path compression and union by rank.

    Every index starts in its own group. Groups only ever merge, so
    ``group_count`` plus the number of successful unions always equals ``n``.
    ``_size`` is only meaningful at a root.
    """

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"Element count must be non-negative, got {n}")

        self._count = n
        self._group_count = n
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n

    @property
    def count(self) -> int:
        """Number of elements."""
        return self._count

    @property
    def group_count(self) -> int:
        """Number of distinct groups."""
        return self._group_count

    def __len__(self) -> int:
        return self._count

    def find(self, x: int) -> int:
        """
        Return the representative of the group containing ``x``.

        Raises:
            IndexError: If ``x`` is outside ``[0, count)``
        """
        self._validate_index(x)

        root = x
        while self._parent[root] != root:
            root = self._parent[root]

        # Second pass: point every node on the path straight at the root
        while x != root:
            next_x = self._parent[x]
            self._parent[x] = root
            x = next_x

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the groups containing ``x`` and ``y``.

        On equal rank the root of ``x`` becomes the parent.

        Returns:
            True if two groups were merged, False if already connected
        """
        self._validate_index(x)
        self._validate_index(y)

        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        elif self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1

        self._parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        self._group_count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        self._validate_index(y)
        return self.find(x) == self.find(y)

    def group_size(self, x: int) -> int:
        return self._size[self.find(x)]

    def enumerate_groups(self) -> List[List[int]]:
        """
        Partition all indices into groups.

        Groups are ordered by their lowest index and members are ascending.
        """
        groups: Dict[int, List[int]] = {}
        for i in range(self._count):
            groups.setdefault(self.find(i), []).append(i)
        return list(groups.values())

    def _validate_index(self, x: int) -> None:
        if not 0 <= x < self._count:
            raise IndexError(f"Index {x} is out of range [0, {self._count})")
