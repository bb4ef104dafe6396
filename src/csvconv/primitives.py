"""Primitive converters between the five primitive kinds and text.

Every converter accepts a Python value whose *exact* type is ``str``,
``bool``, ``int`` or ``float`` and returns the target kind.  Anything else
raises ``UnsupportedConversion``; malformed text raises ``ParseFailure``.

Exports
-------
to_string, to_bool, to_int, to_uint, to_float
    One converter per target kind.

check_bounds
    Reject a number outside the 64-bit range of an integer kind.

format_float
    Fixed-point (never exponential) rendering of a float.

BUILTIN_CONVERTERS
    Dictionary mapping target names to converter functions.
    Default targets: string, bool, int, uint, float.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Callable

from .errors import ParseFailure, UnsupportedConversion

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1
INTEGER_BOUNDS = {"int": (INT64_MIN, INT64_MAX), "uint": (0, UINT64_MAX)}

TRUE_LITERALS = frozenset({"true", "yes", "1"})
FALSE_LITERALS = frozenset({"false", "no", "0"})

# Radix is taken from the prefix: 0x → 16, 0b → 2, 0o or a bare leading 0 → 8.
_INT_RE = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?P<digits>0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+|0[0-7]*|[1-9][0-9]*)"
)
_INF_RE = re.compile(r"[+-]?inf(inity)?", re.IGNORECASE)
_PREFIX_RADIX = {"0x": 16, "0b": 2, "0o": 8}


# ─────────────────────────────────────────────────────────────────────────────
# Private helpers
# ─────────────────────────────────────────────────────────────────────────────


def _unsupported(value: Any, target: str) -> UnsupportedConversion:
    return UnsupportedConversion(type(value).__qualname__, target)


def _parse_integer(text: str, target: str, *, signed: bool) -> int:
    m = _INT_RE.fullmatch(text)
    if m is None or (m["sign"] and not signed):
        raise ParseFailure(text, target)

    digits = m["digits"]
    radix = _PREFIX_RADIX.get(digits[:2].lower())
    if radix is not None:
        number = int(digits[2:], radix)
    elif len(digits) > 1:
        number = int(digits, 8 if digits[0] == "0" else 10)
    else:
        number = int(digits)
    if m["sign"] == "-":
        number = -number

    low, high = INTEGER_BOUNDS[target]
    if not low <= number <= high:
        raise ParseFailure(text, target, "value out of range")
    return number


def _wrap_signed(number: int) -> int:
    """Reinterpret the low 64 bits of *number* as two's complement."""
    number &= UINT64_MAX
    return number - (1 << 64) if number > INT64_MAX else number


def _truncate(value: float, target: str) -> int:
    if math.isnan(value) or math.isinf(value):
        raise UnsupportedConversion(f"float {value!r}", target, "value is not finite")
    return int(value)


# ─────────────────────────────────────────────────────────────────────────────
# Converters
# ─────────────────────────────────────────────────────────────────────────────


def check_bounds(value: Any, target: str) -> Any:
    """Raise ``UnsupportedConversion`` unless *value* fits the *target* kind.

    *target* is ``"int"`` or ``"uint"``.  NaN and infinities never fit.
    """
    low, high = INTEGER_BOUNDS[target]
    if not low <= value <= high:
        raise UnsupportedConversion(type(value).__qualname__, target, "value out of range")
    return value


def format_float(value: float) -> str:
    """Render *value* in fixed-point notation at full (round-trip) precision.

    ::

        format_float(1.5)    → "1.5"
        format_float(1e21)   → "1000000000000000000000.0"
        format_float(1e-7)   → "0.0000001"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    return text if "." in text else text + ".0"


def to_string(value: Any) -> str:
    kind = type(value)
    if kind is str:
        return value
    if kind is bool:
        return "true" if value else "false"
    if kind is int:
        return format(value, "d")
    if kind is float:
        return format_float(value)
    raise _unsupported(value, "string")


def to_bool(value: Any) -> bool:
    """Convert to bool.

    Text must be one of ``true``/``yes``/``1`` or ``false``/``no``/``0``
    (case-sensitive).  Numbers map nonzero → ``True``.
    """
    kind = type(value)
    if kind is str:
        if value in TRUE_LITERALS:
            return True
        if value in FALSE_LITERALS:
            return False
        raise ParseFailure(value, "bool")
    if kind is bool:
        return value
    if kind in (int, float):
        return value != 0
    raise _unsupported(value, "bool")


def to_int(value: Any) -> int:
    """Convert to a signed 64-bit integer.

    Text honours a radix prefix; floats are truncated toward zero; other
    integers are narrowed to 64 bits.
    """
    kind = type(value)
    if kind is str:
        return _parse_integer(value, "int", signed=True)
    if kind is bool:
        return 1 if value else 0
    if kind is int:
        return _wrap_signed(value)
    if kind is float:
        return _wrap_signed(_truncate(value, "int"))
    raise _unsupported(value, "int")


def to_uint(value: Any) -> int:
    """Convert to an unsigned 64-bit integer.  Negative text is a ``ParseFailure``."""
    kind = type(value)
    if kind is str:
        return _parse_integer(value, "uint", signed=False)
    if kind is bool:
        return 1 if value else 0
    if kind is int:
        return value & UINT64_MAX
    if kind is float:
        return _truncate(value, "uint") & UINT64_MAX
    raise _unsupported(value, "uint")


def to_float(value: Any) -> float:
    kind = type(value)
    if kind is str:
        if not value or not value.isascii() or value != value.strip() or "_" in value:
            raise ParseFailure(value, "float")
        try:
            number = float(value)
        except ValueError as exc:
            raise ParseFailure(value, "float") from exc
        if math.isinf(number) and not _INF_RE.fullmatch(value):
            raise ParseFailure(value, "float", "value out of range")
        return number
    if kind is bool:
        return 1.0 if value else 0.0
    if kind is float:
        return value
    if kind is int:
        try:
            return float(value)
        except OverflowError as exc:
            raise UnsupportedConversion("int", "float", "value out of range") from exc
    raise _unsupported(value, "float")


BUILTIN_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "string": to_string,
    "bool": to_bool,
    "int": to_int,
    "uint": to_uint,
    "float": to_float,
}
