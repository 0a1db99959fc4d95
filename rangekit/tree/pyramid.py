from collections import deque
from functools import reduce

import numpy as np

from rangekit.errors import EmptyStructureError, IndexOutOfRangeError, check_index


def _same(a, b):
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return np.array_equal(a, b)
    return a == b


class RangeAggregator:
    """
    Range aggregator built as a pyramid of levels.

    Level 0 holds the values themselves and every level above holds the pairwise
    combination of the level below, up to a single root cell. When a level has an
    odd number of cells, the last one is carried up unchanged, so `combine` needs
    no identity element and the size does not have to be a power of two.

    `combine` must be associative. Commutativity is not required: queries fold
    the covering cells in index order.
    """

    def __init__(self, values, combine):
        if not callable(combine):
            raise TypeError(f"combine must be callable, got {type(combine).__name__}.")
        self._combine = combine
        self._levels = []

        if isinstance(values, np.ndarray):
            values = values.copy()
        level = list(values)
        if not level:
            return
        self._levels.append(level)
        while len(level) > 1:
            level = [self._pair(level, 2 * col) for col in range((len(level) + 1) // 2)]
            self._levels.append(level)

    def _pair(self, below, left):
        # Carry the unpaired last cell forward.
        if left + 1 < len(below):
            return self._combine(below[left], below[left + 1])
        return below[left]

    def _check_not_empty(self):
        if not self._levels:
            raise EmptyStructureError("The aggregator was built from an empty sequence.")

    def __len__(self):
        return len(self._levels[0]) if self._levels else 0

    @property
    def combine(self):
        return self._combine

    @property
    def height(self):
        return len(self._levels)

    @property
    def levels(self):
        return [list(level) for level in self._levels]

    @property
    def root(self):
        self._check_not_empty()
        return self._levels[-1][0]

    def cell_range(self, row, col):
        """
        Inclusive range of original indices covered by the cell (row, col).
        """
        self._check_not_empty()
        check_index(row, len(self._levels), "row")
        check_index(col, len(self._levels[row]), "col")
        return self._cell_range(row, col)

    def _cell_range(self, row, col):
        # Columns past the end of their level cover nothing: start > end.
        width = 1 << row
        return width * col, min(len(self), width * (col + 1)) - 1

    def update(self, pos, value):
        self._check_not_empty()
        check_index(pos, len(self), "pos")

        self._levels[0][pos] = value

        # Recompute the ancestors until one of them stays the same.
        col = pos
        for row in range(1, len(self._levels)):
            col >>= 1
            new_value = self._pair(self._levels[row - 1], 2 * col)
            if _same(self._levels[row][col], new_value):
                break
            self._levels[row][col] = new_value

    def query(self, left, right):
        self._check_not_empty()
        check_index(left, len(self), "left")
        check_index(right, len(self), "right")
        if left > right:
            raise IndexOutOfRangeError(f"left {left} is greater than right {right}.")

        operands = []
        queue = deque([(len(self._levels) - 1, 0)])
        while queue:
            row, col = queue.popleft()
            start, end = self._cell_range(row, col)
            if end < left or right < start:
                continue
            if left <= start and end <= right:
                operands.append((start, self._levels[row][col]))
            elif row > 0:
                queue.append((row - 1, 2 * col))
                queue.append((row - 1, 2 * col + 1))
            else:
                raise RuntimeError(f"Leaf cell {col} partially overlaps [{left}, {right}].")

        if not operands:
            raise RuntimeError(f"No cell covers [{left}, {right}].")
        operands.sort(key=lambda operand: operand[0])
        return reduce(self._combine, (value for _, value in operands))

    def reduce(self, start=0, end=None):
        """
        Aggregate over the half-open range [start, end).
        """
        if end is None:
            end = len(self)
        return self.query(start, end - 1)

    def __setitem__(self, idx, val):
        self.update(idx, val)

    def __getitem__(self, idx):
        self._check_not_empty()
        check_index(idx, len(self))
        return self._levels[0][idx]

    def __repr__(self):
        return f"{type(self).__name__}(size={len(self)}, height={self.height})"
