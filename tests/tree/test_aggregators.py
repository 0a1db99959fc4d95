import numpy as np
import pytest

from rangekit.tree import AGGREGATORS
from rangekit.tree.aggregators import GcdAggregator, MaxAggregator, MinAggregator, SumAggregator


def test_sum_reduce():
    tree = SumAggregator([0.0, 0.0, 1.0, 3.0])

    assert np.isclose(tree.reduce(0, 2), 0.0)
    assert np.isclose(tree.reduce(0, 3), 1.0)
    assert np.isclose(tree.reduce(0, 4), 4.0)
    assert np.isclose(tree.reduce(2, 3), 1.0)
    assert np.isclose(tree.reduce(2, 4), 4.0)


def test_sum_set_overlap():
    tree = SumAggregator([0.0] * 4)
    tree[2] = 1.0
    tree[2] = 3.0

    assert np.isclose(tree.reduce(0, 2), 0.0)
    assert np.isclose(tree.reduce(0, 4), 3.0)
    assert np.isclose(tree.reduce(1, 2), 0.0)
    assert np.isclose(tree.reduce(2, 3), 3.0)
    assert np.isclose(tree.reduce(3, 4), 0.0)


def test_prefixsum_idx():
    tree = SumAggregator([0.0, 0.0, 1.0, 3.0])

    assert tree.find_prefixsum_idx(0.0) == 2
    assert tree.find_prefixsum_idx(0.5) == 2
    assert tree.find_prefixsum_idx(0.99) == 2
    assert tree.find_prefixsum_idx(1.01) == 3
    assert tree.find_prefixsum_idx(3.00) == 3
    assert tree.find_prefixsum_idx(4.00) == 3


def test_prefixsum_idx_odd_size():
    tree = SumAggregator([0.5, 1.0, 1.0, 3.0, 2.0])

    assert tree.find_prefixsum_idx(0.00) == 0
    assert tree.find_prefixsum_idx(0.55) == 1
    assert tree.find_prefixsum_idx(1.51) == 2
    assert tree.find_prefixsum_idx(3.00) == 3
    assert tree.find_prefixsum_idx(5.49) == 3
    assert tree.find_prefixsum_idx(5.50) == 4
    assert tree.find_prefixsum_idx(100.0) == 4

    tree[4] = 0.0
    assert tree.find_prefixsum_idx(5.51) == 4


def test_min_tree():
    tree = MinAggregator([1.0, float("inf"), 0.5, 3.0])

    assert np.isclose(tree.reduce(0, 2), 1.0)
    assert np.isclose(tree.reduce(0, 3), 0.5)
    assert np.isclose(tree.reduce(2, 4), 0.5)
    assert np.isclose(tree.reduce(3, 4), 3.0)

    tree[2] = 0.7

    assert np.isclose(tree.reduce(0, 3), 0.7)
    assert np.isclose(tree.reduce(0, 4), 0.7)

    tree[2] = 4.0

    assert np.isclose(tree.reduce(0, 3), 1.0)
    assert np.isclose(tree.reduce(2, 3), 4.0)
    assert np.isclose(tree.reduce(2, 4), 3.0)


def test_max_tree():
    tree = MaxAggregator([3, 1, 4, 1, 5, 9, 2])
    assert tree.query(0, 6) == 9
    assert tree.query(0, 4) == 5
    assert tree.query(6, 6) == 2


def test_gcd_tree():
    tree = GcdAggregator([12, 18, 24, 36, 7])
    assert tree.query(0, 3) == 6
    assert tree.query(2, 3) == 12
    assert tree.query(0, 4) == 1

    tree[4] = 30
    assert tree.query(0, 4) == 6


@pytest.mark.parametrize("name", ["sum", "min", "max", "gcd"])
def test_registry(name):
    tree = AGGREGATORS[name]([6, 4, 8])
    expected = {"sum": 18, "min": 4, "max": 8, "gcd": 2}[name]
    assert tree.query(0, 2) == expected
