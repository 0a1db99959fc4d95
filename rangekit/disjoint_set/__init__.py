from .union_find import UnionFind
from .weighted_union_find import WeightedUnionFind
