"""
Domain package for the product grid engine.

Exports the record schema, view models, and error taxonomy used across the
store, the view pipeline, and the grid facade. Keep this package focused on
data definitions and validation concerns.
"""

from product_grid.domain.errors import GridError, InvalidInputError, NotFoundError
from product_grid.domain.models import (
    COLUMNS,
    DerivedPage,
    ProductRecord,
    SortDirection,
    SortSpec,
    ViewParameters,
)

__all__ = [
    "COLUMNS",
    "DerivedPage",
    "GridError",
    "InvalidInputError",
    "NotFoundError",
    "ProductRecord",
    "SortDirection",
    "SortSpec",
    "ViewParameters",
]
