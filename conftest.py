"""
Repository-level pytest configuration.

  - Registers the ``--config-override`` option consumed by the BDD World
  - Loads the step definition modules so every scenario module sees every step
"""

from __future__ import annotations

from pathlib import Path

import pytest

from testsuites.ui_testing.step_defs import STEP_MODULES

pytest_plugins = STEP_MODULES


def pytest_addoption(parser):
    group = parser.getgroup("e2e", "end-to-end framework")
    group.addoption(
        "--config-override",
        action="append",
        default=[],
        metavar="PATH=VALUE",
        help="Override a configuration value, e.g. --config-override=browser.name=firefox (repeatable)",
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent

