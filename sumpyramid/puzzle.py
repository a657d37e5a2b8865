"""Cell grid for a playable pyramid, plus the small in-place grid helpers."""

"""
A cell keeps the raw text the player typed next to its status, so
malformed input can be displayed and flagged rather than thrown away.
All helpers here mutate the caller's grid in place; the caller is the
single writer for a given puzzle.
"""

from dataclasses import dataclass, field
from typing import List

from sumpyramid.domain import get_domain

STATUS_EMPTY = "empty"
STATUS_CORRECT = "correct"
STATUS_INCORRECT = "incorrect"


@dataclass
class Cell:
    """One position of the pyramid grid."""
    row: int
    col: int
    raw: str = ""
    fixed: bool = False
    status: str = STATUS_EMPTY
    blinking: bool = False


@dataclass
class Puzzle:
    """A playable pyramid: the cell grid and the solution it is checked against."""
    height: int
    cells: List[List[Cell]]
    solution: tuple
    mode: str = "real"
    fixed_positions: frozenset = field(default_factory=frozenset)

    def cell(self, row: int, col: int) -> Cell:
        _check_position(self.height, row, col)
        return self.cells[row][col]


def _check_position(height: int, row: int, col: int) -> None:
    if not (0 <= row < height and 0 <= col <= row):
        raise ValueError(
            f"Position ({row}, {col}) is outside a pyramid of height {height}."
        )


def _check_triangular(solution) -> int:
    height = len(solution)
    if height == 0:
        raise ValueError("Solution must have at least one row.")
    for r, row in enumerate(solution):
        if len(row) != r + 1:
            raise ValueError(
                f"Solution row {r} has {len(row)} values; expected {r + 1}."
            )
    return height


def create_puzzle_from_solution(solution, fixed_positions=(), mode="real") -> Puzzle:
    """Build the starting grid for *solution*.

    Cells listed in *fixed_positions* show the formatted solution value
    and start (and stay) ``correct``; every other cell starts blank and
    ``empty``.  Raises ValueError for a non-triangular solution or a
    fixed position outside the grid.
    """
    domain = get_domain(mode)
    height = _check_triangular(solution)

    fixed = set()
    for pos in fixed_positions:
        r, c = pos
        _check_position(height, r, c)
        fixed.add((r, c))

    cells = []
    for r, row in enumerate(solution):
        cells.append([
            Cell(
                row=r,
                col=c,
                raw=domain.format(value) if (r, c) in fixed else "",
                fixed=(r, c) in fixed,
                status=STATUS_CORRECT if (r, c) in fixed else STATUS_EMPTY,
            )
            for c, value in enumerate(row)
        ])

    return Puzzle(
        height=height,
        cells=cells,
        solution=solution,
        mode=domain.name,
        fixed_positions=frozenset(fixed),
    )


def clear_blinking(cells) -> None:
    """Switch the blinking flag off on every cell."""
    for row in cells:
        for cell in row:
            cell.blinking = False


def set_blinking(cells, targets) -> None:
    """Switch blinking on for each (row, col) target.

    *targets* may hold ``ResolvableCell`` entries or plain pairs.
    Raises ValueError for a target outside the grid.
    """
    for target in targets:
        r, c = (target.row, target.col) if hasattr(target, "row") else target
        _check_position(len(cells), r, c)
        cells[r][c].blinking = True


def enter_value(puzzle: Puzzle, row: int, col: int, raw) -> bool:
    """Store what the player typed at (row, col) and refresh every status.

    Returns False, leaving the grid untouched, when the cell is fixed.
    """
    from sumpyramid.status import evaluate_statuses

    cell = puzzle.cell(row, col)
    if cell.fixed:
        return False
    cell.raw = "" if raw is None else str(raw)
    evaluate_statuses(puzzle.cells, puzzle.solution, puzzle.mode)
    return True


def is_solved(cells) -> bool:
    return all(cell.status == STATUS_CORRECT for row in cells for cell in row)
