"""Helpers for compact debug logging.

Catalog responses can carry dozens of items with long description strings.
This module shortens such payloads before they are emitted in DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_MAX_LIST_ITEMS = 3


def summarize_for_log(value: Any, *, max_string: int = 120, _depth: int = 0) -> Any:
    """Return a shortened copy of *value* suitable for debug logs."""
    if _depth > 10:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        return {str(k): summarize_for_log(v, max_string=max_string, _depth=_depth + 1) for k, v in value.items()}

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        head = [summarize_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value[:_MAX_LIST_ITEMS]]
        if len(value) > _MAX_LIST_ITEMS:
            head.append(f"<+{len(value) - _MAX_LIST_ITEMS} more>")
        return head

    return repr(value)
