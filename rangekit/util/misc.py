def digit_sum(n, base=10):
    assert base >= 2
    n = abs(n)
    total = 0
    while n:
        n, digit = divmod(n, base)
        total += digit
    return total


def min_value(first, *rest):
    for value in rest:
        first = min(first, value)
    return first


def max_value(first, *rest):
    for value in rest:
        first = max(first, value)
    return first


def replace_if_better(mapping, key, candidate, cmp):
    """
    Store candidate under key when the key is missing or cmp(candidate, existing) holds.
    """
    if key in mapping and not cmp(candidate, mapping[key]):
        return False
    mapping[key] = candidate
    return True
