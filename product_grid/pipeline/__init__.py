"""
View pipeline package for the product grid engine.

This module re-exports the stage interface, the concrete stages, and the page
computation so downstream code can import from `product_grid.pipeline`
directly.
"""

from product_grid.pipeline.abstract import Row, ViewStage
from product_grid.pipeline.filtering import GlobalFilterStage, row_matches
from product_grid.pipeline.pagination import PageSlice, clamp_page_index, page_count, paginate
from product_grid.pipeline.sorting import SortStage, sort_rows, toggle_sort
from product_grid.pipeline.view import compute_page, default_stages, shape_rows

__all__ = [
    # Abstracts
    "Row",
    "ViewStage",
    # Stages
    "GlobalFilterStage",
    "SortStage",
    # Helpers
    "PageSlice",
    "clamp_page_index",
    "compute_page",
    "default_stages",
    "page_count",
    "paginate",
    "row_matches",
    "shape_rows",
    "sort_rows",
    "toggle_sort",
]
