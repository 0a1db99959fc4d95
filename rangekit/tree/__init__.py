from .aggregators import AGGREGATORS, GcdAggregator, MaxAggregator, MinAggregator, SumAggregator
from .pyramid import RangeAggregator
