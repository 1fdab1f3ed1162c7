from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

"""Value tree types for nested record construction.

A record is a tree whose leaves are scalars and whose inner nodes are either
maps (str keys) or lists (int positions). The union is closed: the serializer
accepts exactly these kinds.
"""

__all__ = [
    "MAX_INDEX",
    "NestedValue",
    "PathSegment",
    "Record",
    "Scalar",
]

Scalar = Union[None, bool, int, float, str]
NestedValue = Union[Scalar, "dict[str, NestedValue]", "list[NestedValue]"]
Record = dict[str, NestedValue]

_INDEX_RE = re.compile(r"[0-9]+")
MAX_INDEX = 2**31 - 1  # これを超える数字トークンはフィールド名


@dataclass(frozen=True)
class PathSegment:
    """One dot-separated token of a header path.

    A token made only of ASCII digits addresses a list position as long as it
    fits a 32-bit signed int (``MAX_INDEX``); anything else (including ``-1``,
    ``1.5`` pieces or ``99999999999``) addresses a map key.
    """
    text: str
    index: int | None = None  # 配列インデックス (名前セグメントなら None)

    @property
    def is_index(self) -> bool:
        return self.index is not None

    @classmethod
    def from_token(cls, token: str) -> PathSegment:
        if _INDEX_RE.fullmatch(token) and int(token) <= MAX_INDEX:
            return cls(text=token, index=int(token))
        return cls(text=token)
