"""
Grid facade: the API a presentation layer drives.

Wires the record store, the view pipeline, and the edit session together.
Every mutation or view-parameter change is followed by an explicit
recomputation of the derived page, so `grid.page` is always current before
the next render.

Usage:
    from product_grid.grid import ProductGrid

    grid = ProductGrid([{"id": 1, "productName": "Laptop", "price": 999.99}])
    grid.set_filter("lap")
    grid.toggle_sort("price")
    grid.add_row({"productName": "Mouse"})
    for row in grid.page.rows:
        print(row)
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from product_grid.config import Settings, get_settings
from product_grid.domain.errors import InvalidInputError, NotFoundError
from product_grid.domain.models import DerivedPage, ViewParameters
from product_grid.edit_session import EditBuffer, EditSession
from product_grid.pipeline.pagination import clamp_page_index
from product_grid.pipeline.sorting import toggle_sort
from product_grid.pipeline.view import compute_page
from product_grid.store import RecordStore
from product_grid.utils.logging import get_logger

log = get_logger(__name__)


class ProductGrid:
    """
    Editable, sortable, filterable, paginated product grid.

    Parameters
    ----------
    records : iterable[mapping] | RecordStore | None
        Seed rows, or an existing store to bind to.
    settings : Settings | None
        Page size defaults and allowed sizes. Defaults to `get_settings()`.
    """

    def __init__(
        self,
        records: Optional[Iterable[Mapping[str, Any]] | RecordStore] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.store = records if isinstance(records, RecordStore) else RecordStore(records)
        self._params = ViewParameters(page_size=self.settings.default_page_size)
        self.edits = EditSession(self.store)
        self._page: DerivedPage = self._recompute()

    # ------------------------------------------------------------------
    # Derived view
    # ------------------------------------------------------------------

    @property
    def page(self) -> DerivedPage:
        return self._page

    @property
    def params(self) -> ViewParameters:
        return self._params

    @property
    def page_size_options(self) -> List[int]:
        return list(self.settings.page_size_options)

    def _recompute(self, params: Optional[ViewParameters] = None) -> DerivedPage:
        params = params if params is not None else self._params
        page = compute_page(self.store.get_all(), params)
        if page.page_index != params.page_index:
            params = params.model_copy(update={"page_index": page.page_index})
        self._params = params
        self._page = page
        self.edits.sync(page)
        return page

    def _update_params(self, **changes: Any) -> DerivedPage:
        try:
            params = ViewParameters.model_validate({**self._params.model_dump(), **changes})
        except ValidationError as exc:
            raise InvalidInputError(f"Invalid view parameters {changes!r}: {exc}") from exc
        log.debug("View parameters changed", extra=changes)
        return self._recompute(params)

    # ------------------------------------------------------------------
    # View events
    # ------------------------------------------------------------------

    def set_filter(self, text: Optional[str]) -> DerivedPage:
        return self._update_params(filter_text=text or "", page_index=0)

    def toggle_sort(self, field: str) -> DerivedPage:
        return self._update_params(sort=toggle_sort(self._params.sort, field), page_index=0)

    def set_page_size(self, size: int) -> DerivedPage:
        """
        Change rows per page and return to the first page.

        Raises InvalidInputError when `size` is not an allowed option.
        """
        if size not in self.settings.page_size_options:
            raise InvalidInputError(
                f"Page size {size} is not one of {self.settings.page_size_options}"
            )
        return self._update_params(page_size=size, page_index=0)

    def goto_page(self, index: int) -> DerivedPage:
        try:
            index = clamp_page_index(index, self._page.page_count)
        except TypeError as exc:
            raise InvalidInputError(f"Page index must be an integer, got {index!r}") from exc
        return self._update_params(page_index=index)

    def next_page(self) -> DerivedPage:
        return self.goto_page(self._page.page_index + 1)

    def previous_page(self) -> DerivedPage:
        return self.goto_page(self._page.page_index - 1)

    def first_page(self) -> DerivedPage:
        return self.goto_page(0)

    def last_page(self) -> DerivedPage:
        return self.goto_page(self._page.page_count - 1)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def update_cell(self, record_id: Any, field: str, value: Any) -> bool:
        """Overwrite one cell. Returns False when the record does not exist."""
        try:
            self.store.replace(record_id, field, value)
        except NotFoundError:
            log.info("Update ignored, record not found", extra={"record_id": record_id})
            return False
        self._recompute()
        return True

    def delete_row(self, record_id: Any) -> bool:
        """Remove a row. Returns False when the record does not exist."""
        try:
            self.store.remove(record_id)
        except NotFoundError:
            log.info("Delete ignored, record not found", extra={"record_id": record_id})
            return False
        self._recompute()
        return True

    def add_row(self, partial: Optional[Mapping[str, Any]] = None) -> dict:
        """
        Append a row built from `partial`; returns the stored row.

        Raises InvalidInputError for a duplicate id or invalid values.
        """
        record = self.store.insert(partial)
        self._recompute()
        return record.as_row()

    # ------------------------------------------------------------------
    # Cell editing
    # ------------------------------------------------------------------

    def begin_edit(self, row_pos: int, field: str, current_value: Any = None) -> EditBuffer:
        if current_value is None:
            current_value = self.edits.draft(row_pos, field)
        return self.edits.begin_edit(row_pos, field, current_value)

    def update_draft(self, row_pos: int, field: str, value: Any) -> EditBuffer:
        return self.edits.update_draft(row_pos, field, value)

    def commit_edit(self, row_pos: int, field: str) -> bool:
        """Blur handler: commit the cell's draft and refresh the page."""
        committed = self.edits.commit(row_pos, field)
        if committed:
            self._recompute()
        return committed


__all__ = ["ProductGrid"]
