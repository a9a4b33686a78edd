"""
Record store for the product grid engine.

Owns the canonical, insertion-ordered collection of product records and the
id allocation policy. Readers always receive copies; the only way to change a
record is through `replace`, `remove`, or `insert`.

Usage:
    from product_grid.store import RecordStore

    store = RecordStore([{"id": 1, "productName": "Laptop"}])
    created = store.insert({"productName": "Mouse"})   # id == 2
    store.replace(2, "price", "19.99")
    store.remove(1)
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from product_grid.domain.errors import InvalidInputError, NotFoundError
from product_grid.domain.models import ProductRecord, attribute_name, column_name
from product_grid.utils.logging import get_logger

log = get_logger(__name__)


def _build_record(data: Mapping[str, Any]) -> ProductRecord:
    try:
        return ProductRecord.model_validate(dict(data))
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid record {dict(data)!r}: {exc}") from exc


class RecordStore:
    """
    Ordered product records with unique integer ids.

    Ids are allocated as max(existing) + 1, or 1 when the store is empty, so a
    deleted id is only ever handed out again once every higher id is gone too.
    """

    def __init__(self, records: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        self._records: List[ProductRecord] = []
        for data in records or ():
            record = _build_record(data)
            if self._index_of(record.id) is not None:
                raise InvalidInputError(f"Duplicate id={record.id} in seed records")
            self._records.append(record)
        log.debug("Record store seeded", extra={"records": len(self._records)})

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return self._index_of(record_id) is not None

    def _index_of(self, record_id: object) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _require(self, record_id: Any) -> int:
        index = self._index_of(record_id)
        if index is None:
            raise NotFoundError(record_id)
        return index

    def ids(self) -> List[int]:
        """Live ids in canonical order."""
        return [record.id for record in self._records]

    def next_id(self) -> int:
        """Id the next `insert` without an explicit id will receive."""
        return max(self.ids(), default=0) + 1

    def get_all(self) -> List[ProductRecord]:
        """
        Return copies of all records in canonical order.
        """
        return [record.model_copy(deep=True) for record in self._records]

    def get(self, record_id: Any) -> ProductRecord:
        return self._records[self._require(record_id)].model_copy(deep=True)

    def replace(self, record_id: Any, field: str, value: Any) -> None:
        """
        Overwrite one field of a record in place.

        Raises
        ------
        NotFoundError
            No record has `record_id`.
        InvalidInputError
            `field` is `id` (ids are stable) or names no column of the record.
        """
        record = self._records[self._require(record_id)]
        column = column_name(field)
        if column == "id":
            raise InvalidInputError("Record ids cannot be edited")

        attr = attribute_name(column)
        if attr is None:
            if column not in (record.model_extra or {}):
                raise InvalidInputError(f"Unknown field '{field}'")
            attr = column
        setattr(record, attr, value)
        log.info(
            "Record updated",
            extra={"record_id": record.id, "field": column},
        )

    def remove(self, record_id: Any) -> None:
        """
        Remove a record; later records shift up so positions stay contiguous.

        Raises NotFoundError when no record has `record_id`.
        """
        index = self._require(record_id)
        del self._records[index]
        log.info("Record removed", extra={"record_id": record_id, "records": len(self._records)})

    def insert(self, partial: Optional[Mapping[str, Any]] = None) -> ProductRecord:
        """
        Append a new record built from `partial` over a blank record.

        A supplied `id` is kept when it is free; otherwise the id is allocated
        as max(existing) + 1. Returns a copy of the stored record.

        Raises
        ------
        InvalidInputError
            The supplied id collides with a live record or the values do not
            validate. The store is left unchanged.
        """
        data = dict(partial or {})
        if data.get("id") is None:
            data["id"] = self.next_id()
        record = _build_record(data)
        if self._index_of(record.id) is not None:
            raise InvalidInputError(f"Duplicate id={record.id}")

        self._records.append(record)
        log.info("Record inserted", extra={"record_id": record.id, "records": len(self._records)})
        return record.model_copy(deep=True)


__all__ = ["RecordStore"]
