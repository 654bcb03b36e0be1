from pathlib import Path

import pytest
from rich.console import Console

from warehouse import config
from warehouse.catalog import Catalog
from warehouse.driver import parse_commands, replay
from warehouse.reporter import print_catalog, summarize
from scripts import generate_commands

GENERATED_ROWS = 60


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "WAREHOUSE_INPUT", "WAREHOUSE_OUTPUT", "WAREHOUSE_PLACEMENT"):
        monkeypatch.delenv(name, raising=False)
    settings = config.Settings(_env_file=None)
    assert settings.app_env == "development"
    assert settings.log_level == "INFO"
    assert settings.log_json is False
    assert settings.input_path == "everything.in"
    assert settings.output_path == "everything.out"
    assert settings.placement == "standard"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WAREHOUSE_PLACEMENT", "probing")
    monkeypatch.setenv("LOG_JSON", "true")
    settings = config.Settings(_env_file=None)
    assert settings.placement == "probing"
    assert settings.log_json is True


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_generate_commands_is_deterministic():
    first = generate_commands._generate_commands(GENERATED_ROWS, seed=7)
    second = generate_commands._generate_commands(GENERATED_ROWS, seed=7)
    assert first == second
    assert len(first) == GENERATED_ROWS
    assert first[0].startswith("add ")


def test_generated_file_replays_with_invariants(tmp_path: Path):
    path = tmp_path / "everything.in"
    generate_commands._write_commands(path, generate_commands._generate_commands(GENERATED_ROWS, seed=11))

    commands = parse_commands(path.read_text(encoding="utf-8"))
    catalog = replay(commands)

    assert len(commands) == GENERATED_ROWS
    assert catalog.check_invariants()
    for index, bucket in enumerate(catalog.buckets):
        assert all(p.id % 10 == index for p in bucket.records())


def test_print_catalog_renders_products():
    catalog = Catalog()
    catalog.add_product(7, "widget", 10, 1, 2)
    console = Console(record=True, width=120)

    print_catalog(catalog, console=console)

    text = console.export_text()
    assert "Warehouse Catalog" in text
    assert "widget" in text
    assert summarize(catalog)[7] == 1


def test_print_catalog_empty():
    console = Console(record=True, width=120)
    print_catalog(Catalog(), console=console)
    assert "Catalog is empty." in console.export_text()


def test_generate_commands_never_adds_a_resident_id():
    lines = generate_commands._generate_commands(400, seed=1, max_id=20)

    resident = set()
    for line in lines:
        action, *args = line.split()
        if action == "add":
            product_id = int(args[1])
            assert product_id not in resident, f"id {product_id} added while resident"
            resident.add(product_id)
        elif action == "delete":
            resident.discard(int(args[0]))
    assert len(lines) == 400
    assert all(0 < i <= 20 for i in resident)
