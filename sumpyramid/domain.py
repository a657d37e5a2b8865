"""Number domains for the pyramid: real scalars and complex pairs."""

"""
Each domain bundles the five operations the rest of the engine needs:
parse, format, add, subtract, equals.  Parsing never raises: text that
is empty or malformed comes back as ``None`` ("no value") so the caller
can keep showing what the player typed.
"""

import math
import re
from typing import Optional

import numpy as np

# Plain decimal literal: "5", "-3.5", ".5", "5.", "1e3", "+2E-4".
_NUMBER_RE = re.compile(r'^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?$', re.IGNORECASE)


def _to_number(text: str) -> Optional[float]:
    """Return *text* as a finite float, or ``None`` when it isn't one."""
    s = text.strip()
    if not _NUMBER_RE.match(s):
        return None
    value = float(s)
    return value if math.isfinite(value) else None


def _fmt_num(value: float) -> str:
    """Format a float as short positional decimal text.

    - Integers print without a decimal point (``8`` not ``8.0``).
    - Negative zero prints as ``0``.
    - Never uses exponent notation, so the text always parses back,
      also inside a complex number, where an exponent sign would be
      taken for the split between real and imaginary parts.
    """
    value = float(value)
    if value == 0:
        return "0"
    return np.format_float_positional(value, trim='-')


class NumberDomain:
    """Operations shared by every numeric domain."""

    name = ""
    dtype = None

    def parse(self, text) -> Optional[object]:
        raise NotImplementedError

    def format(self, value) -> str:
        raise NotImplementedError

    def coerce(self, value):
        """Turn a caller-supplied base value into this domain's type."""
        raise NotImplementedError

    def add(self, x, y):
        return x + y

    def subtract(self, x, y):
        return x - y

    def equals(self, x, y) -> bool:
        # Exact comparison: 0.1 + 0.2 is not 0.3 here.
        return x == y

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class RealDomain(NumberDomain):
    name = "real"
    dtype = np.float64

    def parse(self, text) -> Optional[float]:
        if text is None:
            return None
        return _to_number(str(text))

    def format(self, value) -> str:
        return _fmt_num(value)

    def coerce(self, value) -> float:
        if isinstance(value, (complex, np.complexfloating)):
            raise ValueError(f"Complex value {value!r} is not allowed in real mode.")
        try:
            result = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"Base value {value!r} is not a number.")
        if not math.isfinite(result):
            raise ValueError(f"Base value {value!r} must be finite.")
        return result


class ComplexDomain(NumberDomain):
    """Complex numbers typed as ``a+bi``.

    Accepted forms include ``3``, ``3i``, ``i``, ``-i``, ``2-i`` and
    ``-3 + 2i``; case and whitespace don't matter.
    """

    name = "complex"
    dtype = np.complex128

    def parse(self, text) -> Optional[complex]:
        if text is None:
            return None
        s = re.sub(r'\s+', '', str(text)).lower()
        if s == "":
            return None

        if "i" not in s:
            a = _to_number(s)
            return complex(a, 0) if a is not None else None

        if not s.endswith("i"):
            return None

        core = s[:-1]
        if core in ("", "+", "-"):
            return complex(0, -1 if core == "-" else 1)

        # Right-most sign that isn't the leading one splits real | imaginary.
        idx = -1
        for pos in range(len(core) - 1, 0, -1):
            if core[pos] in "+-":
                idx = pos
                break

        if idx == -1:
            b = _to_number(core)
            return complex(0, b) if b is not None else None

        a = _to_number(core[:idx])
        b = _to_number(core[idx:])
        if a is None or b is None:
            return None
        return complex(a, b)

    def format(self, value) -> str:
        z = complex(value)
        a, b = z.real, z.imag
        a_part = _fmt_num(a) if a != 0 else ""

        b_part = ""
        if b != 0:
            if b == 1:
                b_part = ("+" if a != 0 else "") + "i"
            elif b == -1:
                b_part = "-i"
            else:
                b_part = ("+" if b > 0 and a != 0 else "") + _fmt_num(b) + "i"

        if a_part == "" and b_part == "":
            return "0"
        return a_part + b_part

    def coerce(self, value) -> complex:
        if isinstance(value, (tuple, list)):
            if len(value) != 2:
                raise ValueError(f"Complex pair {value!r} must have exactly two parts.")
            value = complex(*(REAL.coerce(part) for part in value))
        try:
            result = complex(value)
        except (TypeError, ValueError):
            raise ValueError(f"Base value {value!r} is not a number.")
        if not (math.isfinite(result.real) and math.isfinite(result.imag)):
            raise ValueError(f"Base value {value!r} must be finite.")
        return result


REAL = RealDomain()
COMPLEX = ComplexDomain()

MODES = {
    "real": REAL,
    "complex": COMPLEX,
}


def get_domain(mode) -> NumberDomain:
    """Return the domain for *mode* (``"real"`` or ``"complex"``).

    A domain instance is passed through unchanged.
    """
    if isinstance(mode, NumberDomain):
        return mode
    try:
        return MODES[mode]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown mode {mode!r}. Use 'real' or 'complex'.")
