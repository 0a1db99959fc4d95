import math
import operator

from rangekit.tree.pyramid import RangeAggregator


class SumAggregator(RangeAggregator):
    """
    Sum aggregator.
    """

    def __init__(self, values):
        super().__init__(values, operator.add)

    def find_prefixsum_idx(self, prefixsum):
        """
        Smallest index whose running sum exceeds prefixsum (the last index if none does).
        Values are assumed to be non-negative.
        """
        self._check_not_empty()

        # Traverse to the leaf.
        col = 0
        for row in range(len(self._levels) - 1, 0, -1):
            below = self._levels[row - 1]
            left = 2 * col
            if left + 1 >= len(below) or below[left] > prefixsum:
                col = left
            else:
                prefixsum -= below[left]
                col = left + 1
        return col


class MinAggregator(RangeAggregator):
    """
    Min aggregator.
    """

    def __init__(self, values):
        super().__init__(values, min)


class MaxAggregator(RangeAggregator):
    """
    Max aggregator.
    """

    def __init__(self, values):
        super().__init__(values, max)


class GcdAggregator(RangeAggregator):
    """
    GCD aggregator.
    """

    def __init__(self, values):
        super().__init__(values, math.gcd)


AGGREGATORS = {
    "sum": SumAggregator,
    "min": MinAggregator,
    "max": MaxAggregator,
    "gcd": GcdAggregator,
}
