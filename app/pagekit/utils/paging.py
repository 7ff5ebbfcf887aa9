"""Paging helpers for hosts.

Hosts usually know an item total and a page size rather than a page count.
Keep the math here so callers don't re-implement it differently.
"""

from __future__ import annotations


def page_count_for(*, total_items: int, page_size: int) -> int:
    """Number of pages needed for total_items; an empty list still has 1 page."""

    if total_items < 0:
        raise ValueError("total_items must be >= 0")
    if page_size <= 0:
        raise ValueError("page_size must be > 0")

    return max(1, -(-int(total_items) // int(page_size)))


def item_range_for(*, page: int, page_size: int, total_items: int) -> tuple[int, int]:
    """1-based (first, last) item numbers shown on a page.

    Returns (0, 0) when the page holds no items, e.g. the single page of an
    empty list.
    """

    if page <= 0:
        raise ValueError("page must be >= 1")
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    if total_items < 0:
        raise ValueError("total_items must be >= 0")

    first = (page - 1) * page_size + 1
    if first > total_items:
        return 0, 0
    return first, min(total_items, page * page_size)
