"""Find the empty cells a player can deduce right now, and explain how."""

"""
Three local rules, mirroring how people solve the pyramid by hand:

  A  both children known      -> parent   = left + right
  B  parent and right known   -> left     = parent - right
  C  parent and left known    -> right    = parent - left

"Known" means the cell's text parses as a number in the active domain,
whether or not that number is the right one.  One call is one round:
cells that only become deducible after other deductions are not reported.
"""

from dataclasses import dataclass

from sumpyramid.domain import get_domain

REASON_PARENT_SUM = "A_padre_por_suma"
REASON_LEFT_CHILD = "B_hijo_izq_por_resta"
REASON_RIGHT_CHILD = "C_hijo_der_por_resta"


@dataclass(frozen=True)
class ResolvableCell:
    row: int
    col: int
    reason: str


def find_resolvable_cells(cells, mode="real") -> list:
    """Return every cell deducible in one step, sorted by (row, col).

    The scan walks parents top to bottom, left to right.  When rule A
    reports a parent, rules B and C are not checked against that same
    parent in this pass.  Duplicates are kept.
    """
    domain = get_domain(mode)
    height = len(cells)

    def is_filled(r, c):
        return domain.parse(cells[r][c].raw) is not None

    resolvables = []
    for r in range(height):
        for c in range(r + 1):
            if r == height - 1:
                continue

            parent_filled = is_filled(r, c)
            left_filled = is_filled(r + 1, c)
            right_filled = is_filled(r + 1, c + 1)

            if not parent_filled and left_filled and right_filled:
                resolvables.append(ResolvableCell(r, c, REASON_PARENT_SUM))
                continue

            if parent_filled and right_filled and not left_filled:
                resolvables.append(ResolvableCell(r + 1, c, REASON_LEFT_CHILD))
            if parent_filled and left_filled and not right_filled:
                resolvables.append(ResolvableCell(r + 1, c + 1, REASON_RIGHT_CHILD))

    resolvables.sort(key=lambda e: (e.row, e.col))
    return resolvables


# ── Explanations ────────────────────────────────────────────────────────

def _operands(entry: ResolvableCell):
    """Return (operation, first operand pos, second operand pos) for *entry*."""
    r, c = entry.row, entry.col
    if entry.reason == REASON_PARENT_SUM:
        return "+", (r + 1, c), (r + 1, c + 1)
    if entry.reason == REASON_LEFT_CHILD:
        return "-", (r - 1, c), (r, c + 1)
    if entry.reason == REASON_RIGHT_CHILD:
        return "-", (r - 1, c - 1), (r, c - 1)
    raise ValueError(f"Unknown deduction rule {entry.reason!r}.")


def _wrap(value, text: str, second: bool) -> str:
    """Parenthesise operands that would read ambiguously inside an expression."""
    z = complex(value)
    composite = z.real != 0 and z.imag != 0
    negative_second = second and text.startswith("-")
    return f"({text})" if composite or negative_second else text


def deduce_value(cells, entry: ResolvableCell, mode="real"):
    """Compute the value *entry* deduces from the currently filled neighbours.

    Raises ValueError when the neighbours the rule needs are not filled
    (for example because the grid changed since the entry was found).
    """
    domain = get_domain(mode)
    op, first_pos, second_pos = _operands(entry)
    first = domain.parse(cells[first_pos[0]][first_pos[1]].raw)
    second = domain.parse(cells[second_pos[0]][second_pos[1]].raw)
    if first is None or second is None:
        raise ValueError(
            f"Cell ({entry.row}, {entry.col}) is no longer deducible by rule {entry.reason}."
        )
    if op == "+":
        return domain.add(first, second)
    return domain.subtract(first, second)


def explain_resolvable(cells, entry: ResolvableCell, mode="real") -> dict:
    """Return a step dict describing how to deduce *entry*.

    Keys: ``description``, ``expression``, ``explanation``, ``row``,
    ``col``, ``reason`` and ``value`` (the deduced value as text).
    """
    domain = get_domain(mode)
    op, first_pos, second_pos = _operands(entry)
    value = deduce_value(cells, entry, domain)
    first = domain.parse(cells[first_pos[0]][first_pos[1]].raw)
    second = domain.parse(cells[second_pos[0]][second_pos[1]].raw)

    first_txt = _wrap(first, domain.format(first), second=False)
    second_txt = _wrap(second, domain.format(second), second=True)
    value_txt = domain.format(value)

    if entry.reason == REASON_PARENT_SUM:
        description = f"Add the two cells below ({entry.row}, {entry.col})"
        explanation = "Each cell is the sum of the two cells directly below it."
    elif entry.reason == REASON_LEFT_CHILD:
        description = f"Subtract the right neighbour from the cell above ({entry.row}, {entry.col})"
        explanation = (
            "The cell above is the sum of this cell and its right neighbour, "
            "so subtracting the neighbour leaves this cell."
        )
    else:
        description = f"Subtract the left neighbour from the cell above ({entry.row}, {entry.col})"
        explanation = (
            "The cell above is the sum of this cell and its left neighbour, "
            "so subtracting the neighbour leaves this cell."
        )

    return {
        "description": description,
        "expression": f"{first_txt} {op} {second_txt} = {value_txt}",
        "explanation": explanation,
        "row": entry.row,
        "col": entry.col,
        "reason": entry.reason,
        "value": value_txt,
    }
