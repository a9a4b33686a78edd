"""
Product Grid - an editable, sortable, filterable, paginated data grid engine.

This package provides the presentation-agnostic core of a product table:

- A record store owning the canonical rows and id allocation
- A pure view pipeline (global filter, single-column sort, pagination)
- An edit session holding per-cell drafts with commit-on-blur
- A grid facade exposing mutations and view events to any renderer

Rendering is left to the caller; a rich-based terminal renderer and a small
CLI are included for inspection.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from product_grid.config import Settings, get_settings
from product_grid.domain import (
    COLUMNS,
    DerivedPage,
    GridError,
    InvalidInputError,
    NotFoundError,
    ProductRecord,
    SortDirection,
    SortSpec,
    ViewParameters,
)
from product_grid.edit_session import EditBuffer, EditSession
from product_grid.grid import ProductGrid
from product_grid.pipeline import compute_page, toggle_sort
from product_grid.seed import load_seed, sample_products
from product_grid.store import RecordStore
from product_grid.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "COLUMNS",
    "DerivedPage",
    "ProductRecord",
    "SortDirection",
    "SortSpec",
    "ViewParameters",
    # Errors
    "GridError",
    "InvalidInputError",
    "NotFoundError",
    # Engine
    "EditBuffer",
    "EditSession",
    "ProductGrid",
    "RecordStore",
    "compute_page",
    "toggle_sort",
    # Seed data
    "load_seed",
    "sample_products",
    # Logging
    "configure_logging",
    "get_logger",
]
