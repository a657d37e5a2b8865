"""Random puzzle generation."""

from typing import Optional

import numpy as np

from sumpyramid.domain import get_domain
from sumpyramid.engine import is_uniquely_determined, solve_step_by_step
from sumpyramid.puzzle import Puzzle, create_puzzle_from_solution
from sumpyramid.settings import resolve_settings
from sumpyramid.solution import build_solution_from_bottom


def random_base_row(height: int, mode="real", rng: Optional[np.random.Generator] = None,
                    low: int = 1, high: int = 9) -> list:
    """Draw *height* whole-number base values in [low, high].

    In complex mode both the real and the imaginary part are drawn.
    """
    domain = get_domain(mode)
    rng = rng if rng is not None else np.random.default_rng()
    real = rng.integers(low, high, size=height, endpoint=True)
    if domain.name == "complex":
        imag = rng.integers(low, high, size=height, endpoint=True)
        return [complex(float(a), float(b)) for a, b in zip(real, imag)]
    return [float(a) for a in real]


def random_fixed_positions(height: int, count: int,
                           rng: Optional[np.random.Generator] = None) -> list:
    """Pick *count* distinct cells of a pyramid of *height*, in (row, col) order."""
    rng = rng if rng is not None else np.random.default_rng()
    positions = [(r, c) for r in range(height) for c in range(r + 1)]
    if not 0 <= count <= len(positions):
        raise ValueError(
            f"Cannot reveal {count} cells of a pyramid with {len(positions)} cells."
        )
    chosen = rng.choice(len(positions), size=count, replace=False)
    return sorted(positions[i] for i in chosen)


def generate_puzzle(settings: Optional[dict] = None, seed=None) -> Puzzle:
    """Generate a new puzzle according to *settings* (see DEFAULT_SETTINGS).

    Masks are redrawn until the revealed cells determine the whole pyramid
    and, when ``require_step_solvable`` is set, until the A/B/C rules alone
    can fill it in.  Raises ValueError if no such mask turns up within
    ``max_attempts`` draws.
    """
    cfg = resolve_settings(settings)
    rng = np.random.default_rng(seed)
    height, mode = cfg["height"], cfg["mode"]

    base = random_base_row(height, mode, rng, cfg["min_value"], cfg["max_value"])
    solution = build_solution_from_bottom(base, mode, height=height)

    for _ in range(cfg["max_attempts"]):
        fixed = random_fixed_positions(height, cfg["fixed_count"], rng)
        if not is_uniquely_determined(height, fixed):
            continue
        puzzle = create_puzzle_from_solution(solution, fixed, mode)
        if cfg["require_step_solvable"]:
            result = solve_step_by_step(puzzle)
            if result["summary"]["validation_status"] != "pass":
                continue
        return puzzle

    raise ValueError(
        f"No suitable set of {cfg['fixed_count']} revealed cells found for "
        f"height {height} after {cfg['max_attempts']} attempts."
    )
