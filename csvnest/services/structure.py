from __future__ import annotations

import logging
from typing import Union

from ..models.nested import NestedValue, PathSegment, Record

"""Dotted-path structure builder.

Resolves a header such as ``address.city`` or ``skills.0`` to a location in a
record tree and stores a value there, creating intermediate maps and lists on
demand:

    "address.city" -> {"address": {"city": value}}
    "skills.0"     -> {"skills": [value]}
    "a.1.b"        -> {"a": [None, {"b": value}]}

The container created for a slot is chosen from the shape of the segment that
addresses *into* it: a digit-only segment means list, anything else means map.
Existing values are never consulted to pick a kind. When two paths of one
record disagree (``a.b`` and ``a.0``, or ``a`` and ``a.b``) the later path
replaces whatever the earlier one put in the shared slot.
"""

__all__ = [
    "parse_path",
    "set_nested_value",
]

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."

Container = Union[dict, list]


def parse_path(header: str) -> list[PathSegment]:
    """Split a dotted header into segments. A blank header yields no segments.

    >>> [s.index for s in parse_path("skills.0")]
    [None, 0]
    """
    if header == "":
        return []
    return [PathSegment.from_token(token) for token in header.split(PATH_SEPARATOR)]


def _kind_for(segment: PathSegment) -> type:
    """Container kind a slot needs so that ``segment`` can address into it."""
    return list if segment.is_index else dict


def _pad(items: list[NestedValue], size: int) -> None:
    # 足りない要素は None で埋める
    if len(items) < size:
        items.extend([None] * (size - len(items)))


def _list_for(holder: Container, segment: PathSegment) -> list[NestedValue]:
    """List addressed by an index segment.

    Below the root the holder already is that list. At the record root (always
    a map) the list lives under the segment text, so header ``0`` becomes
    ``{"0": [value]}``.
    """
    if isinstance(holder, list):
        return holder
    items = holder.get(segment.text)
    if not isinstance(items, list):
        items = []
        holder[segment.text] = items
    return items


def _descend(holder: Container, segment: PathSegment, kind: type) -> Container:
    if segment.is_index:
        items = _list_for(holder, segment)
        _pad(items, segment.index + 1)
        child = items[segment.index]
        if not isinstance(child, kind):
            child = kind()
            items[segment.index] = child
        return child

    child = holder.get(segment.text)
    if not isinstance(child, kind):
        if child is not None or segment.text in holder:
            logger.debug(f"path segment '{segment.text}': replacing {type(child).__name__} with {kind.__name__}")
        child = kind()
        holder[segment.text] = child
    return child


def _assign(holder: Container, segment: PathSegment, value: NestedValue) -> None:
    if segment.is_index:
        items = _list_for(holder, segment)
        _pad(items, segment.index + 1)
        items[segment.index] = value
    else:
        holder[segment.text] = value


def set_nested_value(record: Record, header: str, value: NestedValue) -> None:
    """Store ``value`` at the dotted ``header`` path inside ``record``.

    Missing maps/lists along the path are created; lists are padded with None
    up to the addressed index. Blank headers are ignored. Never raises for
    malformed paths.
    """
    segments = parse_path(header)
    if not segments:
        logger.debug("blank header ignored")
        return

    holder: Container = record
    last = len(segments) - 1
    for position, segment in enumerate(segments):
        if position == last:
            _assign(holder, segment, value)
        else:
            holder = _descend(holder, segment, _kind_for(segments[position + 1]))
