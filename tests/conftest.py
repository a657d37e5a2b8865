import sys
from pathlib import Path

# Ensure the project root is on sys.path so `sumpyramid` and `main` are importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from sumpyramid import build_solution_from_bottom, create_puzzle_from_solution


@pytest.fixture
def make_grid():
    """Build a puzzle from *base* and type *entries* ({(r, c): text}) into it."""
    def _make(base, entries=None, fixed=(), mode="real"):
        puzzle = create_puzzle_from_solution(build_solution_from_bottom(base, mode), fixed, mode)
        for (r, c), text in (entries or {}).items():
            puzzle.cells[r][c].raw = text
        return puzzle
    return _make
