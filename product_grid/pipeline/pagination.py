"""
Pagination helpers: contiguous fixed-size slices over the sorted rows.

There is always at least one page, even when it is empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from product_grid.domain.errors import InvalidInputError
from product_grid.pipeline.abstract import Row


@dataclass(frozen=True)
class PageSlice:
    rows: List[Row]
    page_index: int
    page_count: int


def page_count(row_count: int, page_size: int) -> int:
    """ceil(row_count / page_size), never less than 1."""
    if page_size <= 0:
        raise InvalidInputError(f"page_size must be positive, got {page_size}")
    return max(1, -(-row_count // page_size))


def clamp_page_index(page_index: int, pages: int) -> int:
    return min(max(page_index, 0), pages - 1)


def paginate(rows: List[Row], page_index: int, page_size: int) -> PageSlice:
    pages = page_count(len(rows), page_size)
    index = clamp_page_index(page_index, pages)
    start = index * page_size
    return PageSlice(rows=rows[start : start + page_size], page_index=index, page_count=pages)


__all__ = ["PageSlice", "clamp_page_index", "page_count", "paginate"]
