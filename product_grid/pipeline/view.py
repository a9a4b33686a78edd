"""
Derived page computation: filter -> sort -> paginate.

`compute_page` is a pure function of a record snapshot and the view
parameters. Callers recompute it explicitly after every mutation or
parameter change; nothing here is cached.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from product_grid.domain.models import DerivedPage, ProductRecord, ViewParameters
from product_grid.pipeline.abstract import Row, ViewStage
from product_grid.pipeline.filtering import GlobalFilterStage
from product_grid.pipeline.pagination import paginate
from product_grid.pipeline.sorting import SortStage
from product_grid.utils.logging import get_logger

log = get_logger(__name__)


def default_stages() -> List[ViewStage]:
    """Row-shaping stages in the order they run."""
    return [GlobalFilterStage(), SortStage()]


def shape_rows(
    rows: List[Row],
    params: ViewParameters,
    stages: Optional[Sequence[ViewStage]] = None,
) -> List[Row]:
    """Run the filter and sort stages, returning the full unpaginated view."""
    for stage in stages if stages is not None else default_stages():
        rows = stage.apply(rows, params)
    return rows


def compute_page(
    records: Iterable[ProductRecord],
    params: ViewParameters,
    stages: Optional[Sequence[ViewStage]] = None,
) -> DerivedPage:
    """
    Build the page the presentation layer should render.

    Parameters
    ----------
    records : iterable[ProductRecord]
        Snapshot of the record store in canonical order.
    params : ViewParameters
        Filter, sort, and pagination settings. An out-of-range page index is
        clamped to the last page.
    stages : sequence[ViewStage] | None
        Row-shaping stages; defaults to filter then sort.
    """
    rows = [record.as_row() for record in records]
    shaped = shape_rows(rows, params, stages)
    page = paginate(shaped, params.page_index, params.page_size)

    log.debug(
        "Derived page recomputed",
        extra={
            "total": len(rows),
            "filtered": len(shaped),
            "page_index": page.page_index,
            "page_count": page.page_count,
        },
    )
    return DerivedPage(
        rows=page.rows,
        page_index=page.page_index,
        page_size=params.page_size,
        page_count=page.page_count,
        filtered_count=len(shaped),
        total_count=len(rows),
        filter_text=params.filter_text,
        sort=params.sort,
    )


__all__ = ["compute_page", "default_stages", "shape_rows"]
