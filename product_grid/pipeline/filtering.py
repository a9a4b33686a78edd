"""
Global filter stage: case-insensitive substring match across every column.
"""

from __future__ import annotations

from typing import Any, List, Optional

from product_grid.domain.models import ViewParameters
from product_grid.pipeline.abstract import Row


def cell_text(value: Any) -> str:
    """String form of a cell as the filter and text sort see it."""
    if value is None:
        return ""
    return str(value)


def row_matches(row: Row, needle: Optional[str]) -> bool:
    """
    True when any cell of `row` contains `needle`, ignoring case.

    An empty or missing needle matches every row.
    """
    if not needle:
        return True
    folded = needle.casefold()
    return any(folded in cell_text(value).casefold() for value in row.values())


class GlobalFilterStage:
    name: str = "global_filter"

    def apply(self, rows: List[Row], params: ViewParameters) -> List[Row]:
        if not params.filter_text:
            return list(rows)
        return [row for row in rows if row_matches(row, params.filter_text)]


__all__ = ["GlobalFilterStage", "cell_text", "row_matches"]
