"""
Seed data for the product grid.

Provides the built-in sample product list and a JSON loader for seed files
(a top-level array of row objects, as written by
`scripts/generate_products.py`).
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from product_grid.domain.errors import InvalidInputError
from product_grid.utils.logging import get_logger

log = get_logger(__name__)

SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "productName": "Laptop",
        "category": "Electronics",
        "subcategory": "Computers",
        "createdAt": "2024-07-15",
        "updatedAt": "2024-07-20",
        "price": 999.99,
        "salePrice": 899.99,
    },
]

_ROWS_ADAPTER = TypeAdapter(List[Dict[str, Any]])


def sample_products() -> List[Dict[str, Any]]:
    """Fresh copy of the built-in sample rows."""
    return [dict(row) for row in SAMPLE_PRODUCTS]


def load_seed(path: Optional[Path | str] = None) -> List[Dict[str, Any]]:
    """
    Load seed rows from a JSON file, or the sample rows when `path` is None.

    Raises
    ------
    FileNotFoundError
        `path` does not exist.
    InvalidInputError
        The file is not a JSON array of objects.
    """
    if path is None:
        return sample_products()

    seed_path = Path(path)
    raw = seed_path.read_bytes()
    try:
        rows = _ROWS_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise InvalidInputError(f"Seed file {seed_path} is not a JSON array of rows: {exc}") from exc

    log.info("Seed loaded", extra={"path": str(seed_path), "rows": len(rows)})
    return rows


__all__ = ["SAMPLE_PRODUCTS", "load_seed", "sample_products"]
