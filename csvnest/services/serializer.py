from __future__ import annotations

import json
from collections.abc import Mapping

from ..models.nested import NestedValue

"""JSON rendering of the result document.

Only the value tree kinds are accepted: None, bool, int, float, str, dict with
str keys, list. Anything else is a programming error and raises TypeError.
"""

__all__ = [
    "render_document",
    "validate_tree",
]


def validate_tree(value: NestedValue, path: str = "$") -> None:
    """Walk the tree and reject values outside the closed value union."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError(f"{path}: map key must be str, got {type(k).__name__}")
            validate_tree(v, f"{path}.{k}")
        return
    if isinstance(value, list):
        for i, v in enumerate(value):
            validate_tree(v, f"{path}[{i}]")
        return
    raise TypeError(f"{path}: unsupported value type {type(value).__name__}")


def render_document(document: Mapping[str, NestedValue], indent: int = 2) -> str:
    """Render the document as indented JSON text ending with a newline.

    Insertion order of maps and element order of lists are kept. Non-ASCII text
    is written as is (UTF-8 on disk). NaN / Infinity raise ValueError.
    """
    validate_tree(dict(document))
    return json.dumps(document, ensure_ascii=False, indent=indent, allow_nan=False) + "\n"
