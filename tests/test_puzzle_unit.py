"""Tests for the cell grid: creation, status evaluation and the grid helpers."""

import pytest

from sumpyramid.puzzle import (
    STATUS_CORRECT,
    STATUS_EMPTY,
    STATUS_INCORRECT,
    Cell,
    clear_blinking,
    create_puzzle_from_solution,
    enter_value,
    is_solved,
    set_blinking,
)
from sumpyramid.resolver import REASON_PARENT_SUM, ResolvableCell
from sumpyramid.solution import build_solution_from_bottom
from sumpyramid.status import evaluate_statuses


def _statuses(cells):
    return [[cell.status for cell in row] for row in cells]


# ── Creation ────────────────────────────────────────────────────────────

class TestCreatePuzzle:
    def test_fixed_and_blank_cells(self):
        puzzle = create_puzzle_from_solution(((8,), (5, 3)), [(0, 0)])
        top = puzzle.cells[0][0]
        assert (top.raw, top.fixed, top.status) == ("8", True, STATUS_CORRECT)
        left = puzzle.cells[1][0]
        assert (left.raw, left.fixed, left.status) == ("", False, STATUS_EMPTY)
        assert puzzle.height == 2
        assert puzzle.mode == "real"
        assert puzzle.fixed_positions == frozenset({(0, 0)})

    def test_shape_matches_solution(self):
        solution = build_solution_from_bottom([1, 2, 3, 4])
        puzzle = create_puzzle_from_solution(solution)
        assert [len(row) for row in puzzle.cells] == [1, 2, 3, 4]
        for r, row in enumerate(puzzle.cells):
            for c, cell in enumerate(row):
                assert (cell.row, cell.col) == (r, c)
                assert cell.blinking is False

    def test_complex_fixed_cell_uses_canonical_text(self):
        solution = build_solution_from_bottom([(1, 1), (2, -1), (0, 3)], "complex")
        puzzle = create_puzzle_from_solution(solution, [(0, 0), (1, 0), (2, 1)], "complex")
        assert puzzle.cells[0][0].raw == "5+2i"
        assert puzzle.cells[1][0].raw == "3"
        assert puzzle.cells[2][1].raw == "2-i"

    def test_out_of_range_fixed_position(self):
        with pytest.raises(ValueError, match="outside a pyramid of height 2"):
            create_puzzle_from_solution(((8,), (5, 3)), [(1, 2)])

    def test_non_triangular_solution(self):
        with pytest.raises(ValueError, match="expected 2"):
            create_puzzle_from_solution(((8,), (5, 3, 1)))

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown mode"):
            create_puzzle_from_solution(((8,), (5, 3)), mode="imaginary")


# ── Status evaluation ───────────────────────────────────────────────────

class TestEvaluateStatuses:
    def test_correct_incorrect_and_empty(self):
        puzzle = create_puzzle_from_solution(((8,), (5, 3)), [(0, 0)])
        puzzle.cells[1][0].raw = "5"
        puzzle.cells[1][1].raw = "4"
        evaluate_statuses(puzzle.cells, puzzle.solution, "real")
        assert _statuses(puzzle.cells) == [
            [STATUS_CORRECT],
            [STATUS_CORRECT, STATUS_INCORRECT],
        ]

        puzzle.cells[1][1].raw = ""
        evaluate_statuses(puzzle.cells, puzzle.solution, "real")
        assert puzzle.cells[1][1].status == STATUS_EMPTY

    def test_comparison_is_numeric_not_textual(self):
        puzzle = create_puzzle_from_solution(((8,), (5, 3)))
        puzzle.cells[0][0].raw = " 8.0 "
        evaluate_statuses(puzzle.cells, puzzle.solution)
        assert puzzle.cells[0][0].status == STATUS_CORRECT

    def test_malformed_text_is_incorrect_not_an_error(self):
        puzzle = create_puzzle_from_solution(((8,), (5, 3)))
        puzzle.cells[1][0].raw = "five"
        puzzle.cells[1][1].raw = "   "
        evaluate_statuses(puzzle.cells, puzzle.solution)
        assert puzzle.cells[1][0].status == STATUS_INCORRECT
        assert puzzle.cells[1][1].status == STATUS_INCORRECT

    def test_fixed_cell_forced_correct(self):
        puzzle = create_puzzle_from_solution(((8,), (5, 3)), [(0, 0)])
        puzzle.cells[0][0].raw = "garbage"
        puzzle.cells[0][0].status = STATUS_INCORRECT
        evaluate_statuses(puzzle.cells, puzzle.solution)
        assert puzzle.cells[0][0].status == STATUS_CORRECT

    def test_complex_mode(self):
        solution = build_solution_from_bottom([(1, 1), (2, -1)], "complex")
        puzzle = create_puzzle_from_solution(solution, mode="complex")
        puzzle.cells[0][0].raw = "3 + 0i"
        puzzle.cells[1][0].raw = "1+i"
        puzzle.cells[1][1].raw = "2+i"
        evaluate_statuses(puzzle.cells, puzzle.solution, "complex")
        assert _statuses(puzzle.cells) == [
            [STATUS_CORRECT],
            [STATUS_CORRECT, STATUS_INCORRECT],
        ]

    def test_idempotent(self):
        puzzle = create_puzzle_from_solution(build_solution_from_bottom([2, 5, 3]), [(2, 0)])
        puzzle.cells[1][0].raw = "7"
        puzzle.cells[1][1].raw = "x"
        puzzle.cells[0][0].raw = "16"
        evaluate_statuses(puzzle.cells, puzzle.solution)
        first = _statuses(puzzle.cells)
        evaluate_statuses(puzzle.cells, puzzle.solution)
        assert _statuses(puzzle.cells) == first


# ── Grid helpers ────────────────────────────────────────────────────────

def test_clear_blinking() -> None:
    cells = [[Cell(0, 0, blinking=True)], [Cell(1, 0), Cell(1, 1, blinking=True)]]
    clear_blinking(cells)
    assert all(not cell.blinking for row in cells for cell in row)


def test_set_blinking_accepts_entries_and_pairs() -> None:
    puzzle = create_puzzle_from_solution(build_solution_from_bottom([2, 5, 3]))
    set_blinking(puzzle.cells, [ResolvableCell(1, 0, REASON_PARENT_SUM), (2, 2)])
    blinking = {(c.row, c.col) for row in puzzle.cells for c in row if c.blinking}
    assert blinking == {(1, 0), (2, 2)}


@pytest.mark.parametrize("target", [(-1, 0), (3, 0), (1, 2), (0, -1)])
def test_set_blinking_rejects_positions_outside_grid(target) -> None:
    puzzle = create_puzzle_from_solution(build_solution_from_bottom([2, 5, 3]))
    with pytest.raises(ValueError, match="outside a pyramid of height 3"):
        set_blinking(puzzle.cells, [target])
    assert not any(cell.blinking for row in puzzle.cells for cell in row)


def test_enter_value_refreshes_statuses() -> None:
    puzzle = create_puzzle_from_solution(((8,), (5, 3)), [(0, 0)])
    assert enter_value(puzzle, 1, 0, "5") is True
    assert puzzle.cells[1][0].raw == "5"
    assert puzzle.cells[1][0].status == STATUS_CORRECT
    assert enter_value(puzzle, 1, 1, "2") is True
    assert puzzle.cells[1][1].status == STATUS_INCORRECT


def test_enter_value_never_overwrites_fixed_cell() -> None:
    puzzle = create_puzzle_from_solution(((8,), (5, 3)), [(0, 0)])
    assert enter_value(puzzle, 0, 0, "9") is False
    assert puzzle.cells[0][0].raw == "8"


def test_enter_value_outside_grid() -> None:
    puzzle = create_puzzle_from_solution(((8,), (5, 3)))
    with pytest.raises(ValueError, match="outside"):
        enter_value(puzzle, 2, 0, "1")


def test_is_solved() -> None:
    puzzle = create_puzzle_from_solution(((8,), (5, 3)), [(0, 0)])
    assert not is_solved(puzzle.cells)
    enter_value(puzzle, 1, 0, "5")
    enter_value(puzzle, 1, 1, "3")
    assert is_solved(puzzle.cells)
