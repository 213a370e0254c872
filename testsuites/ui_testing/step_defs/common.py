"""
Helpers shared by the step modules.
"""

from __future__ import annotations

import re
from typing import Dict, List, Sequence, Type, TypeVar

from e2e_framework.core.playwright_world import PlaywrightWorld, WorldNotInitializedError
from e2e_framework.test_data import FactoryRegistry, build_default_registry
from testsuites.ui_testing.framework.page_base import BasePage

P = TypeVar("P", bound=BasePage)

SAUCEDEMO_URL = "https://www.saucedemo.com"
DEMOQA_URL = "https://demoqa.com"


def column_key(header: str) -> str:
    """'Postal Code' -> 'postal_code'"""
    return re.sub(r"\W+", "_", header.strip().lower()).strip("_")


def table_rows(datatable: Sequence[Sequence[str]]) -> List[Dict[str, str]]:
    """
    Convert a pytest-bdd data table (header row first) into one dict per row,
    keyed by the snake_cased column headers.
    """
    if not datatable:
        return []
    header, *rows = datatable
    keys = [column_key(cell) for cell in header]
    return [dict(zip(keys, row)) for row in rows]


def saucedemo_page(world: PlaywrightWorld, page_class: Type[P]) -> P:
    return page_class(_page(world), world.config.get("ui.saucedemo.base_url", SAUCEDEMO_URL))


def demoqa_page(world: PlaywrightWorld, page_class: Type[P]) -> P:
    return page_class(_page(world), world.config.get("ui.demoqa.base_url", DEMOQA_URL))


def factories(world: PlaywrightWorld) -> FactoryRegistry:
    """Factory registry for the scenario, built once and kept in shared data."""
    if "factories" not in world.shared_data:
        world.shared_data["factories"] = build_default_registry(world.config)
    return world.shared_data["factories"]


def _page(world: PlaywrightWorld):
    if world.page is None:
        raise WorldNotInitializedError("Page not initialized. Call init() first.")
    return world.page
