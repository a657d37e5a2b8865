"""Step-by-step pyramid solving and the uniqueness check for fixed masks."""

"""
``solve_step_by_step`` replays the human strategy: find what is deducible,
fill the first such cell from its neighbours, repeat.  It works on a copy
of the puzzle's grid and returns a trail of steps in the same shape the
hint explanations use.

``is_uniquely_determined`` answers a different question exactly: every
cell is a binomial-weighted sum of the base row, so a set of revealed
cells pins down the whole pyramid iff those weight rows have full rank.
"""

import copy
import time
from datetime import datetime
from math import comb

import numpy as np
import sympy
from sympy import Matrix

from sumpyramid.domain import get_domain
from sumpyramid.puzzle import Puzzle
from sumpyramid.resolver import explain_resolvable, find_resolvable_cells


def _coefficient_row(height: int, row: int, col: int) -> list:
    """Weights of the base row that sum to cell (row, col)."""
    depth = height - 1 - row
    weights = [0] * height
    for k in range(depth + 1):
        weights[col + k] = comb(depth, k)
    return weights


def is_uniquely_determined(height: int, fixed_positions) -> bool:
    """True when the values at *fixed_positions* determine every other cell."""
    positions = sorted(set(tuple(p) for p in fixed_positions))
    for r, c in positions:
        if not (0 <= r < height and 0 <= c <= r):
            raise ValueError(
                f"Position ({r}, {c}) is outside a pyramid of height {height}."
            )
    if len(positions) < height:
        return False
    matrix = Matrix([_coefficient_row(height, r, c) for r, c in positions])
    return matrix.rank() == height


def _render_grid(cells) -> str:
    return "\n".join(
        "  ".join(cell.raw if cell.raw else "_" for cell in row)
        for row in cells
    )


def solve_step_by_step(puzzle: Puzzle) -> dict:
    """Solve *puzzle* by repeated one-step deductions.

    The puzzle itself is left untouched.  Values are deduced from what is
    currently typed in the grid, so a wrong entry propagates through the
    trail and shows up as ``validation_status == "fail"``.

    Returns a dict with ``steps``, ``final_answer`` (the deduced grid as
    text), ``solved`` (no blank cells left) and a ``summary``.
    """
    t_start = time.perf_counter()
    domain = get_domain(puzzle.mode)
    work = copy.deepcopy(puzzle.cells)

    steps = [{
        "description": "Starting grid",
        "expression": _render_grid(work),
        "explanation": "Revealed and already-entered cells; '_' marks a blank.",
    }]

    while True:
        resolvables = find_resolvable_cells(work, domain)
        if not resolvables:
            break
        entry = resolvables[0]
        step = explain_resolvable(work, entry, domain)
        work[entry.row][entry.col].raw = step["value"]
        steps.append(step)

    solved = all(domain.parse(cell.raw) is not None for row in work for cell in row)
    matches = solved and all(
        domain.equals(domain.parse(cell.raw), puzzle.solution[cell.row][cell.col])
        for row in work for cell in row
    )

    runtime_ms = round((time.perf_counter() - t_start) * 1000, 3)
    return {
        "mode": domain.name,
        "height": puzzle.height,
        "steps": steps,
        "final_answer": _render_grid(work),
        "solved": solved,
        "summary": {
            "runtime_ms": runtime_ms,
            "total_steps": len(steps) - 1,
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "library": f"NumPy {np.__version__}, SymPy {sympy.__version__}",
            "validation_status": "pass" if matches else "fail",
        },
    }


if __name__ == "__main__":
    from sumpyramid.puzzle import create_puzzle_from_solution
    from sumpyramid.solution import build_solution_from_bottom

    examples = [
        ([2, 5, 3], [(0, 0), (1, 0), (2, 2)], "real"),
        ([(1, 1), (2, -1), (0, 3)], [(2, 0), (2, 1), (2, 2)], "complex"),
    ]
    for base, fixed, mode in examples:
        print(f"\n{'='*50}")
        print(f"Solving ({mode}): base {base}, fixed {fixed}")
        print('='*50)
        print(f"  Uniquely determined: {is_uniquely_determined(len(base), fixed)}")
        puzzle = create_puzzle_from_solution(build_solution_from_bottom(base, mode), fixed, mode)
        result = solve_step_by_step(puzzle)
        for step in result["steps"]:
            print(f"  {step['description']}")
            for line in step["expression"].split('\n'):
                print(f"    {line}")
        print(f"\n  => {result['summary']['validation_status']}")
