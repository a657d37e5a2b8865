"""Default settings for puzzle generation."""

from typing import Optional

from sumpyramid.domain import MODES

# ── Default settings (merged under every caller override) ───────────────
DEFAULT_SETTINGS = {
    "mode": "real",                 # "real" or "complex"
    "height": 5,
    "min_value": 1,                 # range for base values (each part, in complex mode)
    "max_value": 9,
    "fixed_count": None,            # None -> exactly `height` cells revealed
    "require_step_solvable": True,  # puzzle must be solvable with rules A/B/C alone
    "max_attempts": 500,
}


def resolve_settings(overrides: Optional[dict] = None) -> dict:
    """Return DEFAULT_SETTINGS updated with *overrides*, validated.

    Raises ValueError for unknown keys or out-of-range values.
    """
    merged = dict(DEFAULT_SETTINGS)
    if overrides:
        unknown = sorted(set(overrides) - set(DEFAULT_SETTINGS))
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(unknown)}.")
        merged.update(overrides)

    if merged["mode"] not in MODES:
        raise ValueError(f"Unknown mode {merged['mode']!r}. Use 'real' or 'complex'.")
    if not isinstance(merged["height"], int) or merged["height"] < 1:
        raise ValueError("Height must be a whole number of at least 1.")
    if merged["min_value"] > merged["max_value"]:
        raise ValueError("min_value must not exceed max_value.")

    total_cells = merged["height"] * (merged["height"] + 1) // 2
    if merged["fixed_count"] is None:
        merged["fixed_count"] = merged["height"]
    if not 0 <= merged["fixed_count"] <= total_cells:
        raise ValueError(
            f"fixed_count must be between 0 and {total_cells} for height {merged['height']}."
        )
    if merged["max_attempts"] < 1:
        raise ValueError("max_attempts must be at least 1.")
    return merged
