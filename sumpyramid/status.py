"""Check every cell of the grid against the solution."""

from sumpyramid.domain import get_domain
from sumpyramid.puzzle import STATUS_CORRECT, STATUS_EMPTY, STATUS_INCORRECT


def evaluate_statuses(cells, solution, mode="real") -> None:
    """Recompute the status of every cell in place.

    - Fixed cells are always ``correct``; their text is never re-read.
    - Blank text is ``empty``.
    - Text that does not parse in *mode* is ``incorrect``.
    - Anything else is ``correct`` only when it equals the solution value
      exactly (numeric comparison, so ``"8.0"`` matches ``8``).

    Safe to call repeatedly: the result depends only on the grid's text.
    """
    domain = get_domain(mode)
    for r, row in enumerate(cells):
        for c, cell in enumerate(row):
            if cell.fixed:
                cell.status = STATUS_CORRECT
                continue

            raw = cell.raw
            if raw is None or raw == "":
                cell.status = STATUS_EMPTY
                continue

            parsed = domain.parse(raw)
            if parsed is None:
                cell.status = STATUS_INCORRECT
                continue

            if domain.equals(parsed, solution[r][c]):
                cell.status = STATUS_CORRECT
            else:
                cell.status = STATUS_INCORRECT
