def _merge(left, right, cmp):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if cmp(left[i], right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(seq, cmp):
    """
    Bottom-up merge sort. cmp(a, b) is true when a should be placed before b, and a
    non-strict comparison such as `a <= b` keeps the sort stable. Returns None for an
    empty sequence.
    """
    items = list(seq)
    if not items:
        return None

    width = 1
    while width < len(items):
        merged = []
        for start in range(0, len(items), 2 * width):
            merged.extend(_merge(items[start : start + width], items[start + width : start + 2 * width], cmp))
        items = merged
        width *= 2
    return items
