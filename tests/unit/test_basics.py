import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from product_grid import config
from product_grid.domain.errors import InvalidInputError
from product_grid.main import app
from product_grid.seed import load_seed, sample_products
from scripts import generate_products

runner = CliRunner()


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.default_page_size == 10
    assert settings.page_size_options == [10, 20, 30, 40, 50]
    assert settings.seed_path is None
    assert settings.log_json is False


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GRID_DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("GRID_PAGE_SIZE_OPTIONS", "[5, 25]")

    settings = config.Settings(_env_file=None)

    assert settings.default_page_size == 25
    assert settings.page_size_options == [5, 25]


def test_settings_reject_default_outside_options():
    with pytest.raises(ValidationError):
        config.Settings(_env_file=None, default_page_size=15)


def test_load_seed_defaults_to_sample():
    rows = load_seed()
    assert rows == sample_products()
    assert rows[0]["productName"] == "Laptop"


def test_load_seed_rejects_non_array(tmp_path: Path):
    path = tmp_path / "seed.json"
    path.write_text('{"id": 1}', encoding="utf-8")
    with pytest.raises(InvalidInputError):
        load_seed(path)


def test_generate_products_writes_seed(tmp_path: Path):
    path = tmp_path / "products.json"
    generate_products._write_seed(path, generate_products._generate_rows(5, seed=123))

    rows = json.loads(path.read_text(encoding="utf-8"))
    assert [row["id"] for row in rows] == [1, 2, 3, 4, 5]
    assert set(rows[0]) == {
        "id",
        "productName",
        "category",
        "subcategory",
        "createdAt",
        "updatedAt",
        "price",
        "salePrice",
    }
    assert load_seed(path) == rows


def test_generate_products_is_deterministic():
    assert generate_products._generate_rows(3, seed=7) == generate_products._generate_rows(3, seed=7)


def test_cli_info():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "page_size=10" in result.stdout
    assert "built-in sample" in result.stdout


def test_cli_show_json_applies_view_events(tmp_path: Path):
    path = tmp_path / "products.json"
    generate_products._write_seed(path, generate_products._generate_rows(30, seed=1))

    result = runner.invoke(
        app,
        ["show", "--seed", str(path), "--sort", "price", "--sort", "price", "--page", "2"],
    )
    assert result.exit_code == 0

    result = runner.invoke(
        app,
        ["show", "--seed", str(path), "--sort", "price", "--page", "3", "--json"],
    )
    assert result.exit_code == 0
    page = json.loads(result.stdout)
    assert page["page_index"] == 2
    assert page["page_count"] == 3
    assert page["can_next"] is False
    assert page["sort"] == {"field": "price", "direction": "asc"}
    prices = [row["price"] for row in page["rows"]]
    assert prices == sorted(prices)


def test_cli_show_renders_sample_table(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("COLUMNS", "200")
    result = runner.invoke(app, ["show", "--filter", "laptop"])
    assert result.exit_code == 0
    assert "Laptop" in result.stdout
    assert "Page 1 of 1" in result.stdout


def test_cli_show_rejects_bad_page_size():
    result = runner.invoke(app, ["show", "--page-size", "15"])
    assert result.exit_code == 1


def test_cli_show_reports_unreadable_seed(tmp_path: Path):
    result = runner.invoke(app, ["show", "--seed", str(tmp_path)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, IsADirectoryError)
