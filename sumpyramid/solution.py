"""Build the full solution pyramid from its base row."""

from typing import Optional

import numpy as np

from sumpyramid.domain import get_domain


def build_solution_from_bottom(base_row, mode="real", height: Optional[int] = None) -> tuple:
    """Return the solution as a tuple of rows, top row first.

    The base row becomes the bottom row; every entry above it is the
    domain sum of the two entries directly below.  Row ``r`` holds
    ``r + 1`` values.  Values come back as plain Python ``float`` (real
    mode) or ``complex`` (complex mode).

    Raises ValueError when *base_row* is empty, when *height* is given
    and disagrees with its length, or when a value does not fit *mode*.
    """
    domain = get_domain(mode)
    values = [domain.coerce(v) for v in base_row]
    n = len(values)
    if n == 0:
        raise ValueError("Base row must contain at least one value.")
    if height is not None and height != n:
        raise ValueError(
            f"Base row has {n} value{'s' if n != 1 else ''} "
            f"but the pyramid height is {height}."
        )

    row = np.asarray(values, dtype=domain.dtype)
    rows = [row]
    while len(row) > 1:
        row = domain.add(row[:-1], row[1:])
        rows.append(row)

    return tuple(tuple(r.tolist()) for r in reversed(rows))


if __name__ == "__main__":
    for base, mode in [([5, 3], "real"), ([2, 5, 3], "real"), ([(1, 2), (3, -1), 4j], "complex")]:
        print(f"\n{mode}: {base}")
        for r in build_solution_from_bottom(base, mode):
            print("   ", r)
