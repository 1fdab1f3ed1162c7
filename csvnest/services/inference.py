from __future__ import annotations

import math
import re

from ..models.nested import Scalar

"""Scalar type inference for trimmed CSV cells.

Inference order is fixed and significant:
1. empty / whitespace only -> None
2. ``true`` / ``false`` (any case) -> bool
3. base-10 integer -> int
4. decimal / exponent float -> float
5. anything else -> the text itself

A string that parses as both int and float is an int; a boolean literal is
never reinterpreted as a number. Integers are not range-limited: values
outside 32/64-bit range stay exact Python ints instead of degrading to float.
"""

__all__ = [
    "infer_value",
]

# int() / float() も "1_000" や全角数字を受け付けるため正規表現で事前判定
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_BOOLEANS = {"true": True, "false": False}


def infer_value(text: str) -> Scalar:
    """Convert a cell to the best-fitting scalar. Never raises.

    >>> infer_value("42"), infer_value("4.2"), infer_value("TRUE"), infer_value(" ")
    (42, 4.2, True, None)
    """
    s = text.strip()
    if s == "":
        return None

    flag = _BOOLEANS.get(s.lower())
    if flag is not None:
        return flag

    if _INT_RE.fullmatch(s):
        return int(s)

    if _FLOAT_RE.fullmatch(s):
        value = float(s)
        # 1e999 などはオーバーフローで inf になる -> JSON で表現できないので文字列扱い
        if math.isfinite(value):
            return value

    return s
