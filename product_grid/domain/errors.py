"""
Error taxonomy for the product grid engine.

Every failure in the engine is locally recoverable: a failed operation leaves
the record store and the derived page in a consistent state.
"""
from __future__ import annotations

from typing import Any


class GridError(Exception):
    """Base class for all grid engine errors."""


class NotFoundError(GridError, LookupError):
    """A mutation targeted a record id that is not in the store."""

    def __init__(self, record_id: Any) -> None:
        super().__init__(f"No record with id={record_id!r}")
        self.record_id = record_id


class InvalidInputError(GridError, ValueError):
    """Malformed input: duplicate id, unknown field, page size outside the allowed set."""


__all__ = ["GridError", "InvalidInputError", "NotFoundError"]
