"""Value model for stacklang.

Values are plain Python objects, there is no wrapper class:

    - Number -> float
    - String -> str
    - Bool   -> bool
    - List   -> list of values (heterogeneous, may nest)

Every value can be coerced to every other kind; none of the coercions
below raise. `bool` must be tested before numbers because it is an
`int` subclass.
"""

from __future__ import annotations

import math
import re
import sys
from decimal import Decimal
from typing import Optional

from stacklang import StackValue


NUMBER = "number"
STRING = "string"
BOOL = "bool"
LIST = "list"

KINDS = (NUMBER, STRING, BOOL, LIST)

# Same grammar an IEEE float parser accepts: no whitespace, no digit separators.
NUMBER_RE = re.compile(
    r"[+-]?(?:"
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf|infinity|nan"
    r")\Z",
    re.IGNORECASE,
)


def parse_number(text: str) -> Optional[float]:
    """Return the float spelled by `text`, or None if it is not a number."""
    if NUMBER_RE.match(text) is None:
        return None
    return float(text)


def make_value(obj) -> StackValue:
    """Normalise a Python object into a stack value (ints become floats)."""
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, (int, float)):
        return float(obj)
    if isinstance(obj, str):
        return obj
    if isinstance(obj, (list, tuple)):
        return [make_value(x) for x in obj]
    return str(obj)


def type_name(value: StackValue) -> str:
    if isinstance(value, bool):
        return BOOL
    if isinstance(value, float):
        return NUMBER
    if isinstance(value, list):
        return LIST
    return STRING


# -------------------------------
# Textual forms
# -------------------------------
def number_text(n: float) -> str:
    """Canonical text of a Number: no exponent, no trailing '.0'."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n == 0 and math.copysign(1.0, n) < 0:
        return "-0"
    text = format(Decimal(repr(n)), "f")
    if n == int(n) and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def display(value: StackValue) -> str:
    """Trace rendering: strings are wrapped in parentheses, lists in brackets."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return number_text(value)
    if isinstance(value, list):
        return "[" + " ".join(display(x) for x in value) + "]"
    return f"({value})"


# -------------------------------
# Coercions
# -------------------------------
def to_number(value: StackValue) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, float):
        return value
    if isinstance(value, list):
        return float(len(value))
    parsed = parse_number(value)
    return 0.0 if parsed is None else parsed


def to_string(value: StackValue) -> str:
    if isinstance(value, str):
        return value
    return display(value)


def to_bool(value: StackValue) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return value != 0.0
    return len(value) != 0


def to_list(value: StackValue) -> list[StackValue]:
    """Coerce to a list. Always returns a new list object."""
    if isinstance(value, list):
        return list(value)
    if isinstance(value, str):
        return [ch for ch in value]
    return [value]


COERCIONS = {
    NUMBER: to_number,
    STRING: to_string,
    BOOL: to_bool,
    LIST: to_list,
}


def cast(value: StackValue, kind: str) -> StackValue:
    """Coerce `value` to the named kind; unknown kind names return it unchanged."""
    coerce = COERCIONS.get(kind)
    if coerce is None:
        return value
    return coerce(value)


# -------------------------------
# Float -> integer conversions
# -------------------------------
U32_MAX = 2**32 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

# Longest String or List a single command may build.
MAX_SEQUENCE_LENGTH = 2**28


def to_index(n: float) -> int:
    """Truncate to a non-negative int for counts and indexes.

    NaN and negatives become 0, anything past sys.maxsize saturates to it.
    """
    if math.isnan(n) or n <= 0:
        return 0
    if n >= sys.maxsize:
        return sys.maxsize
    return int(n)


def to_code_point(n: float) -> int:
    return min(to_index(n), U32_MAX)


def to_status(n: float) -> int:
    """Truncate to a process status, saturating to the signed 32-bit range."""
    if math.isnan(n):
        return 0
    if n <= I32_MIN:
        return I32_MIN
    if n >= I32_MAX:
        return I32_MAX
    return int(n)
