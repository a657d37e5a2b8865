"""
SumPyramid: number-pyramid puzzle engine.

Builds solutions from a base row, turns them into playable grids, checks
player input (real or complex numbers) and finds the cells that can be
deduced next.
"""

from .domain import COMPLEX, MODES, REAL, ComplexDomain, NumberDomain, RealDomain, get_domain
from .engine import is_uniquely_determined, solve_step_by_step
from .generator import generate_puzzle, random_base_row, random_fixed_positions
from .puzzle import (
    STATUS_CORRECT,
    STATUS_EMPTY,
    STATUS_INCORRECT,
    Cell,
    Puzzle,
    clear_blinking,
    create_puzzle_from_solution,
    enter_value,
    is_solved,
    set_blinking,
)
from .resolver import (
    REASON_LEFT_CHILD,
    REASON_PARENT_SUM,
    REASON_RIGHT_CHILD,
    ResolvableCell,
    deduce_value,
    explain_resolvable,
    find_resolvable_cells,
)
from .settings import DEFAULT_SETTINGS, resolve_settings
from .solution import build_solution_from_bottom
from .status import evaluate_statuses

__version__ = "1.0.0"
