"""
Seed generation script for the product grid.

Implements deterministic pseudo-random product generation and writes the rows
as a JSON array that `product-grid show --seed` and `GRID_SEED_PATH` accept.
"""

from __future__ import annotations

import json
import random
import sys
import time
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Dict, List

import typer

app = typer.Typer(help="Generate synthetic product rows as a JSON seed file.")

CATALOG: Dict[str, List[str]] = {
    "Electronics": ["Computers", "Phones", "Audio", "Accessories"],
    "Home": ["Kitchen", "Furniture", "Lighting"],
    "Sports": ["Outdoor", "Fitness", "Cycling"],
    "Books": ["Fiction", "Science", "Travel"],
}
NAMES = ["Laptop", "Mouse", "Keyboard", "Lamp", "Chair", "Kettle", "Tent", "Bike", "Novel", "Atlas"]
START_DATE = date(2024, 1, 1)


def _generate_rows(rows: int, seed: int) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    generated: List[Dict[str, Any]] = []
    for i in range(1, rows + 1):
        category = rng.choice(sorted(CATALOG))
        created = START_DATE + timedelta(days=rng.randint(0, 365))
        updated = created + timedelta(days=rng.randint(0, 30))
        price = round(rng.uniform(5, 2_000), 2)
        generated.append(
            {
                "id": i,
                "productName": f"{rng.choice(NAMES)} {rng.randint(100, 999)}",
                "category": category,
                "subcategory": rng.choice(CATALOG[category]),
                "createdAt": created.isoformat(),
                "updatedAt": updated.isoformat(),
                "price": price,
                "salePrice": round(price * rng.uniform(0.6, 1.0), 2),
            }
        )
    return generated


def _write_seed(path: Path, rows: List[Dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(rows, f, indent=2)


@app.command()
def main(
    rows: int = typer.Option(
        100,
        "--rows",
        "-r",
        help="Number of products to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data/products.json"),
        "--output",
        "-o",
        help="JSON output path.",
    ),
) -> None:
    """
    Generate synthetic products and write them as a JSON seed file.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {rows:,} products -> {output} (seed={seed})")
    _write_seed(output, _generate_rows(rows, seed))
    duration = time.perf_counter() - start
    typer.echo(f"Seed written in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
