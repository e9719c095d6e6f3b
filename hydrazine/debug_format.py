"""Helpers that render sequences and source paths for debug messages."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def to_formatted_string(
    items: Iterable[T],
    format: Callable[[T], Any],
    space: str = " ",
    limit: int = 80,
) -> str:
    """Join format(item) for items with space, stopping once longer than limit."""
    iterator = iter(items)
    parts: list[str] = []
    length = 0
    for item in iterator:
        text = str(format(item))
        parts.append(text)
        length = len(text)
        break
    for item in iterator:
        text = space + str(format(item))
        parts.append(text)
        length += len(text)
        if length > limit:
            break
    return "".join(parts)


def to_string(items: Iterable[Any], space: str = " ", limit: int = 80) -> str:
    """Join the items as text with space, stopping once longer than limit."""
    return to_formatted_string(items, str, space, limit)


def strip_report_path(path: str, delimiter: str = "/") -> str:
    """Return what follows the last of the delimiter characters in path."""
    last = max((path.rfind(ch) for ch in delimiter), default=-1)
    return path[last + 1 :]