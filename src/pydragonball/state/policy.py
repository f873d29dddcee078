"""Pagination policy.

Pure functions; the browser uses them to keep ``total_pages`` and
``current_page`` consistent.
"""

from __future__ import annotations

import math


def compute_total_pages(total_count: int, page_size: int) -> int:
    """``ceil(total_count / page_size)``, never less than 1."""
    if total_count <= 0:
        return 1
    return max(1, math.ceil(total_count / page_size))


def page_in_bounds(page: int, total_pages: int) -> bool:
    return 1 <= page <= total_pages


def clamp_page(page: int, total_pages: int) -> int:
    return max(1, min(page, max(1, total_pages)))
