"""
Site percolation on an n-by-n grid.

Sites start closed and are opened one at a time. Connectivity between open
sites is tracked incrementally in a weighted quick-union structure with two
extra virtual elements: one joined to every open site in the top row and one
joined to every open site in the bottom row. The grid percolates exactly when
those two virtual elements share a component.
"""

import operator

import numpy as np

from .union_find import InvalidArgument, WeightedQuickUnionUF


def check_positive_int(value, name: str) -> int:
    """Return value as an int, raising InvalidArgument unless it is a positive integer."""
    if isinstance(value, (bool, np.bool_)):
        raise InvalidArgument(f"{name} must be a positive integer, got {value!r}")
    try:
        value = operator.index(value)
    except TypeError:
        raise InvalidArgument(f"{name} must be a positive integer, got {value!r}") from None
    if value <= 0:
        raise InvalidArgument(f"{name} must be a positive integer, got {value}")
    return value


class PercolationGrid:
    """
    An n-by-n grid of open/closed sites with an incremental top-to-bottom connectivity check.

    Rows and columns are 1-indexed. Sites can only go from closed to open.

    Example:
        grid = PercolationGrid(3)
        for row in range(1, 4):
            grid.open(row, 2)
        grid.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Initialize an all-closed grid.

        Args:
            n: Grid dimension (positive integer)
        """
        self._n = check_positive_int(n, "Grid size n")
        self._size = self._n * self._n
        self._open = np.zeros((self._n, self._n), dtype=bool)
        self._open_count = 0

        # Elements n*n and n*n+1 are the virtual top and bottom sites
        self._uf = WeightedQuickUnionUF(self._size + 2)
        self._top = self._size
        self._bottom = self._size + 1

    def __repr__(self) -> str:
        return (f"PercolationGrid(n={self._n}, open_sites={self._open_count}, "
                f"percolates={self.percolates()})")

    # --- Properties ---

    @property
    def n(self) -> int:
        return self._n

    @property
    def size(self) -> int:
        """Number of sites (n*n)."""
        return self._size

    @property
    def open_fraction(self) -> float:
        return self._open_count / self._size

    def open_mask(self) -> np.ndarray:
        """Read-only copy of the n-by-n open/closed matrix (True = open)."""
        mask = self._open.copy()
        mask.flags.writeable = False
        return mask

    # --- Internal helpers ---

    def _validate(self, row, col):
        """Return (row, col) as ints, raising InvalidArgument if either is outside [1, n]."""
        try:
            row = operator.index(row)
            col = operator.index(col)
        except TypeError:
            raise InvalidArgument(f"Site ({row!r}, {col!r}) must have integer coordinates") from None
        if row < 1 or row > self._n or col < 1 or col > self._n:
            raise InvalidArgument(
                f"Site ({row}, {col}) is outside the grid; rows and columns must be in [1, {self._n}]"
            )
        return row, col

    def _index(self, row: int, col: int) -> int:
        return (row - 1) * self._n + (col - 1)

    # --- Operations ---

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) and join it to its open neighbours.

        Opening an already-open site does nothing.

        Raises:
            InvalidArgument: if row or col is outside [1, n]
        """
        row, col = self._validate(row, col)
        if self._open[row - 1, col - 1]:
            return

        self._open[row - 1, col - 1] = True
        self._open_count += 1

        n = self._n
        p = self._index(row, col)
        uf = self._uf

        if row == 1:
            uf.union(p, self._top)
        if row == n:
            uf.union(p, self._bottom)

        if row > 1 and self._open[row - 2, col - 1]:
            uf.union(p, p - n)
        if row < n and self._open[row, col - 1]:
            uf.union(p, p + n)
        if col > 1 and self._open[row - 1, col - 2]:
            uf.union(p, p - 1)
        if col < n and self._open[row - 1, col]:
            uf.union(p, p + 1)

    def is_open(self, row: int, col: int) -> bool:
        row, col = self._validate(row, col)
        return bool(self._open[row - 1, col - 1])

    def is_full(self, row: int, col: int) -> bool:
        """
        Whether (row, col) is reachable from the top edge through open sites.

        A closed site is never joined to anything, so it is never full.
        """
        row, col = self._validate(row, col)
        return self._uf.connected(self._index(row, col), self._top)

    def number_of_open_sites(self) -> int:
        return self._open_count

    def percolates(self) -> bool:
        """Whether an open path joins the top row to the bottom row."""
        return self._uf.connected(self._top, self._bottom)

    # Conventional camel-case names
    isOpen = is_open
    isFull = is_full
    numberOfOpenSites = number_of_open_sites
