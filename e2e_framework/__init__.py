"""
================================================================================
E2E Framework
================================================================================

Browser end-to-end automation built on Playwright, pytest-bdd and Allure.

Modules:
    - core: configuration, logging, browser adapter, scenario world
    - plugins: event-driven extensions for a scenario's browser session
    - test_data: seeded test data factories
    - reporting: Allure attachments and report generation

Example:
    from e2e_framework import GlobalProperties, PlaywrightWorld

    config = GlobalProperties()
    with PlaywrightWorld("smoke", config=config) as world:
        world.goto(config.get("ui.saucedemo.base_url"))

================================================================================
"""

from e2e_framework.core import GlobalProperties, PlaywrightWorld

__version__ = "1.0.0"

__all__ = [
    "GlobalProperties",
    "PlaywrightWorld",
    "core",
    "plugins",
    "test_data",
    "reporting",
]
