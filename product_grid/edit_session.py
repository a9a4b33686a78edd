"""
Edit session controller: per-cell edit buffers with commit-on-blur.

A buffer holds the working value of one cell on the current page, keyed by
(row position, column). Drafts never reach the record store until `commit`
runs, which the presentation layer calls when the editing control loses
focus.

Each time the derived page is recomputed, `sync` reconciles the buffers with
it:
- a buffer whose row position is gone, or now shows a different record, is
  dropped without commit;
- a buffer whose canonical value changed underneath it is re-seeded with the
  new value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from product_grid.domain.errors import NotFoundError
from product_grid.domain.models import DerivedPage, column_name
from product_grid.store import RecordStore
from product_grid.utils.logging import get_logger

log = get_logger(__name__)

CellKey = Tuple[int, str]


@dataclass
class EditBuffer:
    row_pos: int
    field: str
    record_id: Optional[int]
    seed: Any
    draft: Any


class EditSession:
    """
    Owns the edit buffers for the cells of the current page.
    """

    def __init__(self, store: RecordStore, page: Optional[DerivedPage] = None) -> None:
        self._store = store
        self._page = page
        self._buffers: Dict[CellKey, EditBuffer] = {}

    def __len__(self) -> int:
        return len(self._buffers)

    def _canonical(self, row_pos: int, field: str) -> Tuple[Optional[int], Any]:
        if self._page is None:
            return None, None
        record_id = self._page.record_id_at(row_pos)
        if record_id is None:
            return None, None
        return record_id, self._page.rows[row_pos].get(field)

    def buffers(self) -> List[EditBuffer]:
        return list(self._buffers.values())

    def get(self, row_pos: int, field: str) -> Optional[EditBuffer]:
        return self._buffers.get((row_pos, column_name(field)))

    def draft(self, row_pos: int, field: str) -> Any:
        """Working value of a cell: its draft when buffered, else the page value."""
        buffer = self.get(row_pos, field)
        if buffer is not None:
            return buffer.draft
        return self._canonical(row_pos, column_name(field))[1]

    def begin_edit(self, row_pos: int, field: str, current_value: Any) -> EditBuffer:
        """Create or overwrite the buffer for a cell, seeded with `current_value`."""
        field = column_name(field)
        record_id, canonical = self._canonical(row_pos, field)
        buffer = EditBuffer(
            row_pos=row_pos,
            field=field,
            record_id=record_id,
            seed=canonical if record_id is not None else current_value,
            draft=current_value,
        )
        self._buffers[(row_pos, field)] = buffer
        return buffer

    def update_draft(self, row_pos: int, field: str, value: Any) -> EditBuffer:
        """Change the working value only; the record store is not touched."""
        buffer = self.get(row_pos, field)
        if buffer is None:
            buffer = self.begin_edit(row_pos, field, value)
        buffer.draft = value
        return buffer

    def commit(self, row_pos: int, field: str) -> bool:
        """
        Write a cell's draft into the record store and drop its buffer.

        Returns True when the store was updated. A missing buffer, or a row
        that vanished since the edit began, is a silent no-op returning False.
        """
        field = column_name(field)
        buffer = self._buffers.get((row_pos, field))
        if buffer is None:
            return False

        record_id = self._page.record_id_at(row_pos) if self._page is not None else None
        if record_id is None:
            record_id = buffer.record_id
        if record_id is None:
            del self._buffers[(row_pos, field)]
            log.debug("Commit dropped, no row at position", extra={"row_pos": row_pos})
            return False

        try:
            self._store.replace(record_id, field, buffer.draft)
        except NotFoundError:
            del self._buffers[(row_pos, field)]
            log.debug(
                "Commit dropped, record no longer exists",
                extra={"record_id": record_id, "field": field},
            )
            return False

        del self._buffers[(row_pos, field)]
        return True

    def discard(self, row_pos: int, field: str) -> None:
        self._buffers.pop((row_pos, column_name(field)), None)

    def clear(self) -> None:
        self._buffers.clear()

    def sync(self, page: DerivedPage) -> None:
        """
        Reconcile buffers with a freshly computed page.
        """
        self._page = page
        dropped = 0
        for key, buffer in list(self._buffers.items()):
            record_id, canonical = self._canonical(buffer.row_pos, buffer.field)
            if record_id is None or record_id != buffer.record_id:
                del self._buffers[key]
                dropped += 1
                continue
            if canonical != buffer.seed:
                buffer.seed = canonical
                buffer.draft = canonical
        if dropped:
            log.debug("Edit buffers discarded on page change", extra={"discarded": dropped})


__all__ = ["EditBuffer", "EditSession"]
