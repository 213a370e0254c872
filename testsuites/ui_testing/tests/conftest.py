"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Lifecycle hooks for the BDD scenarios: one PlaywrightWorld per scenario,
screenshots on failure (and optionally after every step), console capture.

Key Features:
- Results directories created once per session
- Function-scoped ``world`` fixture (init before, cleanup after)
- Screenshot capture on failure
- Per-step screenshots when ``reporting.screenshots.each_step`` is true

Configuration overrides reach the World through
``--config-override=<dotted.path>=<value>`` (repeatable).

================================================================================
"""

from pathlib import Path
from typing import Generator

import pytest
from loguru import logger

from e2e_framework.core.global_properties import GlobalProperties
from e2e_framework.core.playwright_world import PlaywrightWorld
from e2e_framework.plugins import ConsoleCapturePlugin

RESULTS_DIRS = (
    "results",
    "results/traces",
    "results/screenshots",
    "results/videos",
    "results/logs",
)


# ================================================================================
# Session Setup
# ================================================================================

@pytest.fixture(scope="session", autouse=True)
def results_dirs() -> None:
    """Create the output directories used by traces, screenshots and videos."""
    for directory in RESULTS_DIRS:
        Path(directory).mkdir(parents=True, exist_ok=True)
    logger.debug(f"Results directories ready: {', '.join(RESULTS_DIRS)}")


@pytest.fixture(scope="session")
def config_overrides(pytestconfig) -> list:
    """``--config-override`` values rendered as resolver CLI arguments."""
    return [f"--{override}" for override in pytestconfig.getoption("config_override") or []]


# ================================================================================
# World Fixture
# ================================================================================

@pytest.fixture(autouse=True)
def world(request, config_overrides) -> Generator[PlaywrightWorld, None, None]:
    """
    Fresh browser, context and page for every scenario. Autouse: the failure
    hooks read it from the item's funcargs.

    Cleanup always runs; a cleanup failure is logged rather than masking the
    scenario result.
    """
    config = GlobalProperties(argv=config_overrides)
    scenario_world = PlaywrightWorld(scenario_name=request.node.name, config=config)

    if config.get("monitoring.console.capture"):
        scenario_world.register_plugin(
            ConsoleCapturePlugin({"types": config.get("monitoring.console.types", ["error", "warning"])})
        )

    try:
        scenario_world.init()
        yield scenario_world
    finally:
        try:
            scenario_world.cleanup()
        except Exception as e:
            logger.warning(f"World cleanup failed for {request.node.name}: {e}")


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Capture a screenshot when a scenario fails and attach it to Allure.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed:
        return

    scenario_world = getattr(item, "funcargs", {}).get("world")
    if scenario_world is None or scenario_world.page is None:
        return
    if not scenario_world.config.get("reporting.screenshots.on_failure", True):
        return

    try:
        scenario_world.capture_screenshot("failure_screenshot")
    except Exception as e:
        # Log but don't fail if screenshot capture fails
        logger.warning(f"Failed to capture screenshot on failure: {e}")


def pytest_bdd_after_step(request, feature, scenario, step, step_func, step_func_args):
    """Screenshot after every step when ``reporting.screenshots.each_step`` is on."""
    scenario_world = request.getfixturevalue("world")
    if not scenario_world.config.get("reporting.screenshots.each_step", False):
        return

    try:
        scenario_world.capture_screenshot(f"{step.keyword} {step.name}".strip())
    except Exception as e:
        logger.warning(f"Failed to capture step screenshot: {e}")


def pytest_bdd_step_error(request, feature, scenario, step, step_func, step_func_args, exception):
    logger.error(f"Step failed: {step.keyword} {step.name} ({scenario.name}): {exception}")
