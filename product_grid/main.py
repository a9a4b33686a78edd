from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer

from product_grid.config import get_settings
from product_grid.domain.errors import GridError
from product_grid.grid import ProductGrid
from product_grid.reporter import print_page
from product_grid.seed import load_seed
from product_grid.utils.logging import configure_logging

app = typer.Typer(help="Product grid CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    seed = settings.seed_path or "built-in sample"
    typer.echo(
        f"env={settings.app_env} | page_size={settings.default_page_size} "
        f"options={settings.page_size_options} | seed={seed} | log={settings.log_level}"
    )


@app.command()
def show(
    seed: Optional[Path] = typer.Option(
        None,
        "--seed",
        help="JSON seed file (array of rows). Defaults to GRID_SEED_PATH or the sample rows.",
    ),
    filter_text: str = typer.Option("", "--filter", "-f", help="Case-insensitive search text."),
    sort: List[str] = typer.Option(
        [],
        "--sort",
        "-s",
        help="Column header to select; repeat to cycle asc -> desc -> unsorted.",
    ),
    page: int = typer.Option(1, "--page", "-p", help="1-based page number (clamped)."),
    page_size: Optional[int] = typer.Option(None, "--page-size", "-n", help="Rows per page."),
    as_json: bool = typer.Option(False, "--json", help="Emit the derived page as JSON."),
) -> None:
    """
    Render one page of the grid after applying filter, sort, and pagination.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        grid = ProductGrid(load_seed(seed or settings.seed_path), settings=settings)
        if page_size is not None:
            grid.set_page_size(page_size)
        grid.set_filter(filter_text)
        for field in sort:
            grid.toggle_sort(field)
        grid.goto_page(page - 1)
    except (GridError, OSError) as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(grid.page.model_dump(mode="json"), indent=2))
        return
    print_page(grid.page)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
