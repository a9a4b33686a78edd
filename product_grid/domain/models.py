"""
Domain models for the product grid engine.

Defines the product record schema, the view parameters a presentation layer
controls (filter, sort, pagination), and the derived page handed back for
rendering. Records use snake_case attributes with camelCase aliases so callers
can address fields by either spelling.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

# Cells are free text or numbers; numeric columns are not validated on edit.
CellValue = Union[str, int, float, None]


class ProductRecord(BaseModel):
    """
    One row of the product grid.
    """

    id: int = Field(..., description="Unique, stable row identifier.")
    product_name: CellValue = Field("", description="Display name of the product.")
    category: CellValue = Field("", description="Top-level category.")
    subcategory: CellValue = Field("", description="Category refinement.")
    created_at: CellValue = Field("", description="Creation date, stored as text.")
    updated_at: CellValue = Field("", description="Last update date, stored as text.")
    price: CellValue = Field("", description="List price.")
    sale_price: CellValue = Field("", description="Discounted price.")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def as_row(self) -> Dict[str, Any]:
        """Plain dict copy keyed by column name (camelCase)."""
        return self.model_dump(by_alias=True)


# Column names in display order, as the presentation layer addresses them.
COLUMNS: List[str] = [
    info.alias or name for name, info in ProductRecord.model_fields.items()
]

_ALIAS_TO_ATTR: Dict[str, str] = {
    info.alias or name: name for name, info in ProductRecord.model_fields.items()
}
_ATTR_TO_ALIAS: Dict[str, str] = {attr: alias for alias, attr in _ALIAS_TO_ATTR.items()}

NUMERIC_COLUMNS = frozenset({"id", "price", "salePrice"})


def column_name(field: str) -> str:
    """
    Normalize a field reference to its column name.

    Accepts either the camelCase column name or the snake_case attribute.
    Unknown names are returned unchanged so extra seed columns stay usable.
    """
    return _ATTR_TO_ALIAS.get(field, field)


def attribute_name(field: str) -> Optional[str]:
    """Model attribute for a declared column, or None for undeclared ones."""
    if field in _ALIAS_TO_ATTR:
        return _ALIAS_TO_ATTR[field]
    if field in _ATTR_TO_ALIAS:
        return field
    return None


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortSpec(BaseModel):
    """
    Single-column sort. No sort means canonical (insertion) order.
    """

    field: str
    direction: SortDirection = SortDirection.ASC

    model_config = {"frozen": True}

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


class ViewParameters(BaseModel):
    """
    Transient view state controlled by the presentation layer.
    """

    filter_text: str = Field("", description="Case-insensitive substring filter.")
    sort: Optional[SortSpec] = Field(None, description="Active sort, if any.")
    page_index: int = Field(0, ge=0, description="Zero-based page index.")
    page_size: int = Field(10, gt=0, description="Rows per page.")

    model_config = {"frozen": True}


class DerivedPage(BaseModel):
    """
    One page of the filtered and sorted view, ready to render.

    `rows` are copies; mutating them never touches the record store.
    """

    rows: List[Dict[str, Any]]
    page_index: int
    page_size: int
    page_count: int
    filtered_count: int
    total_count: int
    filter_text: str = ""
    sort: Optional[SortSpec] = None

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def can_previous(self) -> bool:
        return self.page_index > 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def can_next(self) -> bool:
        return self.page_index < self.page_count - 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def page_options(self) -> List[int]:
        return list(range(self.page_count))

    def record_id_at(self, row_pos: int) -> Optional[int]:
        """Id of the record shown at `row_pos` on this page, or None."""
        if 0 <= row_pos < len(self.rows):
            return self.rows[row_pos]["id"]
        return None

    def sort_indicator(self, field: str) -> Optional[SortDirection]:
        """Direction for the column header, None when the column is not sorted."""
        if self.sort is not None and self.sort.field == column_name(field):
            return self.sort.direction
        return None


__all__ = [
    "COLUMNS",
    "CellValue",
    "DerivedPage",
    "NUMERIC_COLUMNS",
    "ProductRecord",
    "SortDirection",
    "SortSpec",
    "ViewParameters",
    "attribute_name",
    "column_name",
]
