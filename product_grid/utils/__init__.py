"""
Utilities package for the product grid engine.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of grid-specific logic.
"""

from product_grid.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
