"""
Pytest configuration for the product grid engine.

Provides fixtures for:
- Settings isolated from the process environment
- Seed rows (the single sample product and a larger catalog)
- Ready-made record stores and grids
"""

from __future__ import annotations

from typing import Any, Dict, Generator, List

import pytest

from product_grid.config import Settings, get_settings
from product_grid.grid import ProductGrid
from product_grid.seed import sample_products
from product_grid.store import RecordStore

CATEGORIES = ["Electronics", "Home", "Sports"]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear cached settings and grid-related env vars around every test.
    """
    for name in (
        "GRID_DEFAULT_PAGE_SIZE",
        "GRID_PAGE_SIZE_OPTIONS",
        "GRID_SEED_PATH",
        "LOG_LEVEL",
        "LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def sample_rows() -> List[Dict[str, Any]]:
    return sample_products()


@pytest.fixture
def catalog_rows() -> List[Dict[str, Any]]:
    """
    25 products with ids 1..25; every third row is a "Lamp", prices descend.
    """
    rows = []
    for i in range(1, 26):
        rows.append(
            {
                "id": i,
                "productName": "Lamp" if i % 3 == 0 else f"Widget {i:02d}",
                "category": CATEGORIES[i % len(CATEGORIES)],
                "subcategory": "Misc",
                "createdAt": f"2024-01-{i:02d}",
                "updatedAt": f"2024-02-{i:02d}",
                "price": round(300.0 - i * 10, 2),
                "salePrice": str(200 - i),
            }
        )
    return rows


@pytest.fixture
def store(sample_rows: List[Dict[str, Any]]) -> RecordStore:
    return RecordStore(sample_rows)


@pytest.fixture
def grid(sample_rows: List[Dict[str, Any]], test_settings: Settings) -> ProductGrid:
    return ProductGrid(sample_rows, settings=test_settings)


@pytest.fixture
def catalog_grid(catalog_rows: List[Dict[str, Any]], test_settings: Settings) -> ProductGrid:
    return ProductGrid(catalog_rows, settings=test_settings)
