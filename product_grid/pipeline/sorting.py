"""
Single-column sort stage and the header toggle cycle.

Sort keys are picked from a small registry by column type: numeric columns
compare as numbers, everything else compares as text. Values in a numeric
column that do not parse as numbers sort after every number, ordered as text.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from product_grid.domain.models import (
    NUMERIC_COLUMNS,
    SortDirection,
    SortSpec,
    ViewParameters,
    attribute_name,
    column_name,
)
from product_grid.pipeline.abstract import Row
from product_grid.pipeline.filtering import cell_text

SortKey = Callable[[Any], Tuple[Any, ...]]


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(cell_text(value).strip())
        except ValueError:
            return None
    if math.isnan(number):
        return None
    return number


def _numeric_key(value: Any) -> Tuple[Any, ...]:
    number = _as_number(value)
    if number is None:
        return (1, 0.0, cell_text(value).casefold(), cell_text(value))
    return (0, number, "", "")


def _text_key(value: Any) -> Tuple[Any, ...]:
    text = cell_text(value)
    return (text.casefold(), text)


def _sort_key_factories() -> Dict[str, SortKey]:
    """Registry of available sort key types."""
    return {
        "numeric": _numeric_key,
        "text": _text_key,
    }


def sort_type_for(field: str, rows: Sequence[Row] = ()) -> str:
    """
    Key type for a column.

    Declared columns use their fixed type. Extra seed columns sort numerically
    when every non-empty value in `rows` parses as a number.
    """
    field = column_name(field)
    if field in NUMERIC_COLUMNS:
        return "numeric"
    if attribute_name(field) is not None:
        return "text"
    values = [row.get(field) for row in rows if cell_text(row.get(field)).strip()]
    if values and all(_as_number(value) is not None for value in values):
        return "numeric"
    return "text"


def sort_rows(rows: List[Row], sort: Optional[SortSpec]) -> List[Row]:
    """
    Stable sort of `rows` by `sort.field`; `None` keeps the incoming order.

    Descending is the exact reverse of ascending, ties included.
    """
    if sort is None:
        return list(rows)
    field = column_name(sort.field)
    key = _sort_key_factories()[sort_type_for(field, rows)]
    ordered = sorted(rows, key=lambda row: key(row.get(field)))
    if sort.descending:
        ordered.reverse()
    return ordered


def toggle_sort(current: Optional[SortSpec], field: str) -> Optional[SortSpec]:
    """
    Next sort state after the header of `field` is selected.

    A new column starts ascending; the same column cycles
    ascending -> descending -> unsorted.
    """
    field = column_name(field)
    if current is None or current.field != field:
        return SortSpec(field=field, direction=SortDirection.ASC)
    if current.direction is SortDirection.ASC:
        return SortSpec(field=field, direction=SortDirection.DESC)
    return None


class SortStage:
    name: str = "sort"

    def apply(self, rows: List[Row], params: ViewParameters) -> List[Row]:
        return sort_rows(rows, params.sort)


__all__ = ["SortStage", "sort_rows", "sort_type_for", "toggle_sort"]
