class IndexOutOfRangeError(IndexError):
    """
    Index (or index range) outside of the structure.
    """


class EmptyStructureError(ValueError):
    """
    Operation on a structure built from an empty sequence.
    """


def check_index(idx, size, name="index"):
    if not 0 <= idx < size:
        raise IndexOutOfRangeError(f"{name} {idx} is out of range [0, {size - 1}].")
