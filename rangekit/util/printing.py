import sys


def print_sequence(seq, delimiter=" "):
    print(delimiter.join(str(value) for value in seq))


def print_grid(grid, delimiter=" "):
    for row in grid:
        print_sequence(row, delimiter)


def debug_print(**values):
    """
    Print named values to stderr as `| name: value | ...`. Silent under `python -O`.
    """
    if __debug__:
        print("| " + "".join(f"{name}: {value!r} | " for name, value in values.items()), file=sys.stderr)
