from rangekit.disjoint_set import UnionFind, WeightedUnionFind
from rangekit.errors import EmptyStructureError, IndexOutOfRangeError
from rangekit.tree import GcdAggregator, MaxAggregator, MinAggregator, RangeAggregator, SumAggregator
