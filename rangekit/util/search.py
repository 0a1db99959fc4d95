def bisect_predicate(left, right, judge):
    """
    Bisection over [left, right] for a predicate that holds up to some index and fails after it.
    Returns (ok, ng): the last index judged true (left - 1 if none) and the first judged false
    (right + 1 if none).
    """
    ok, ng = left - 1, right + 1
    while ng - ok > 1:
        mid = (ok + ng) // 2
        if judge(mid):
            ok = mid
        else:
            ng = mid
    return ok, ng
