"""Normalization helpers shared by the loaders."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Slice *items* to the 1-based *page* of size *page_size*."""
    if page < 1 or page_size < 1:
        return []
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def matches_term(item: Any, term: str, fields: Iterable[str]) -> bool:
    """Case-insensitive substring match of *term* against the given string attributes."""
    needle = term.lower()
    for field_name in fields:
        value = getattr(item, field_name, None)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False


def filter_by_term(items: Iterable[T], term: str, fields: Iterable[str]) -> list[T]:
    """Keep items matching *term*; a blank term keeps everything."""
    if not term.strip():
        return list(items)
    field_names = tuple(fields)
    return [item for item in items if matches_term(item, term, field_names)]
