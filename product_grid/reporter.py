from __future__ import annotations

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from product_grid.domain.models import COLUMNS, DerivedPage, SortDirection

HEADERS: Dict[str, str] = {
    "id": "ID",
    "productName": "Product Name",
    "category": "Category",
    "subcategory": "Subcategory",
    "createdAt": "Created At",
    "updatedAt": "Updated At",
    "price": "Price",
    "salePrice": "Sale Price",
}

_SORT_MARKERS = {SortDirection.ASC: " ▲", SortDirection.DESC: " ▼"}
_RIGHT_ALIGNED = {"id", "price", "salePrice"}


def _columns_for(page: DerivedPage) -> List[str]:
    """Declared columns first, then any extra seed columns in first-seen order."""
    columns = list(COLUMNS)
    for row in page.rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    return columns


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def pager_caption(page: DerivedPage) -> str:
    """Footer text mirroring the pager controls, e.g. `Page 2 of 5`."""
    parts = [f"Page {page.page_index + 1} of {page.page_count}"]
    parts.append(f"{page.filtered_count} of {page.total_count} rows")
    parts.append(f"Show {page.page_size}")
    if page.can_previous:
        parts.append("« prev")
    if page.can_next:
        parts.append("next »")
    return " │ ".join(parts)


def render_page(page: DerivedPage, title: str = "Products") -> Table:
    """
    Build a rich table for one derived page.

    Sorted columns carry an arrow in their header; the caption shows the
    pager state.
    """
    if page.filter_text:
        title = f"{title}\n[dim]Filter: {escape(repr(page.filter_text))}[/dim]"

    table = Table(title=title, box=box.ROUNDED, caption=pager_caption(page))
    columns = _columns_for(page)
    for column in columns:
        header = HEADERS.get(column, column)
        direction = page.sort_indicator(column)
        if direction is not None:
            header += _SORT_MARKERS[direction]
        table.add_column(
            header,
            justify="right" if column in _RIGHT_ALIGNED else "left",
            style="cyan" if column == "id" else None,
            no_wrap=column == "id",
        )

    for row in page.rows:
        table.add_row(*(_cell(row.get(column)) for column in columns))
    return table


def print_page(page: DerivedPage, console: Optional[Console] = None) -> None:
    console = console or Console()
    if not page.rows:
        console.print("[yellow]No rows to display.[/yellow]")
    console.print(render_page(page))


__all__ = ["HEADERS", "pager_caption", "print_page", "render_page"]
