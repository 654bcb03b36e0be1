"""
Pytest configuration for the warehouse catalog.

Provides fixtures for:
- Fresh and pre-populated catalogs
- Settings isolation (environment + cached settings)
- Sample command files for driver and CLI tests
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Generator, Iterable, Tuple

import pytest

from warehouse.catalog import Catalog
from warehouse.config import get_settings


SAMPLE_COMMANDS = """\
9
add 1 7 widget 10 2
add 1 17 gadget 4 0
add 2 3 bolt 50 1
purchase 5 7 4
purchase 6 7 100
restock 7 20
restock 99 5
delete 17
delete 42
"""


@pytest.fixture()
def catalog() -> Catalog:
    """An empty catalog."""
    return Catalog()


@pytest.fixture()
def fill_bucket() -> Callable[[Catalog, Iterable[Tuple[int, int]]], Catalog]:
    """
    Add (id, demand) pairs with the standard placement.

    Stock is 10 and the day is 1 for every product; names are `p<id>`.
    """

    def _fill(target: Catalog, pairs: Iterable[Tuple[int, int]]) -> Catalog:
        for product_id, demand in pairs:
            target.add_product(product_id, f"p{product_id}", 10, 1, demand)
        return target

    return _fill


@pytest.fixture()
def full_catalog(catalog: Catalog, fill_bucket) -> Catalog:
    """Every bucket at capacity: ids 0..49 with demand equal to id // 10 + 1."""
    return fill_bucket(catalog, ((i, i // 10 + 1) for i in range(50)))


@pytest.fixture()
def sample_commands() -> str:
    return SAMPLE_COMMANDS


@pytest.fixture()
def sample_commands_file(tmp_path: Path) -> Path:
    path = tmp_path / "everything.in"
    path.write_text(SAMPLE_COMMANDS, encoding="utf-8")
    return path


@pytest.fixture()
def quiet_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Keep CLI output free of INFO logs and make sure cached settings
    pick up the patched environment. The CLI reconfigures root logging,
    so the original handlers are restored afterwards.
    """
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("WAREHOUSE_PLACEMENT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root.handlers[:] = handlers
    root.setLevel(level)
