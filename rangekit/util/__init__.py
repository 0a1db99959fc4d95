from .misc import digit_sum, max_value, min_value, replace_if_better
from .printing import debug_print, print_grid, print_sequence
from .search import bisect_predicate
from .sort import merge_sort
