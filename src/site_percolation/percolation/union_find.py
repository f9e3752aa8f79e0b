"""
Weighted quick-union disjoint set used by the percolation grid.

Elements are plain integer indices into two flat arrays (parent and size), so
the whole structure can be reset or copied without walking any tree.
"""

from typing import List


class InvalidArgument(ValueError):
    """Raised when a percolation object is given an out-of-range argument."""


class WeightedQuickUnionUF:
    """
    Disjoint set over elements ``0 .. n-1`` with union by size and path compression.

    Example:
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        uf.connected(0, 1)  # True
    """

    def __init__(self, n: int):
        """
        Initialize n singleton components.

        Args:
            n: Number of elements
        """
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidArgument(f"Number of elements must be a positive integer, got {n!r}")

        self._parent: List[int] = list(range(n))
        self._size: List[int] = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of components."""
        return self._count

    def _validate(self, p: int) -> None:
        n = len(self._parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """Return the root of the component containing p."""
        self._validate(p)
        parent = self._parent
        while p != parent[p]:
            # path halving
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the components containing p and q (smaller tree under larger)."""
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        if self._size[root_p] < self._size[root_q]:
            root_p, root_q = root_q, root_p
        self._parent[root_q] = root_p
        self._size[root_p] += self._size[root_q]
        self._count -= 1

    def component_size(self, p: int) -> int:
        return self._size[self.find(p)]

    def reset(self) -> None:
        """Return every element to its own singleton component."""
        n = len(self._parent)
        self._parent = list(range(n))
        self._size = [1] * n
        self._count = n

    def copy(self) -> 'WeightedQuickUnionUF':
        clone = WeightedQuickUnionUF(len(self._parent))
        clone._parent = self._parent[:]
        clone._size = self._size[:]
        clone._count = self._count
        return clone
