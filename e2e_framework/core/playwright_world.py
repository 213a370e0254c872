"""
================================================================================
Playwright World
================================================================================

Per-scenario resource bag shared by all step definitions.

Lifecycle:
    world = PlaywrightWorld("Checkout happy path")
    world.init()          # playwright -> browser -> context -> page
    ...steps...
    world.cleanup()       # trace -> plugins -> page -> context -> browser

The world owns at most one browser, one context and one page at a time.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from playwright.sync_api import (
    Browser,
    BrowserContext,
    Locator,
    Page,
    Playwright,
    sync_playwright,
)

from e2e_framework.reporting.allure_utils import attach_png

from .global_properties import GlobalProperties
from .logger import get_logger, init_logger_from_config
from .playwright_adapter import PlaywrightAdapter


TRACE_DIR = Path("results/traces")


class WorldNotInitializedError(RuntimeError):
    """Raised when a page operation is used before ``init()``."""
    pass


class PlaywrightWorld:
    """
    Integrates Playwright with pytest-bdd scenarios.

    Attributes:
        config: Resolved GlobalProperties for this scenario
        logger: Loguru logger bound with the scenario name
        playwright: PlaywrightAdapter building browser objects from config
        shared_data: Free-form data passed between steps
        screenshots: (name, png bytes) captured during the scenario
    """

    def __init__(
        self,
        scenario_name: str = "unknown",
        config: Optional[GlobalProperties] = None,
        plugins: Optional[Iterable[Any]] = None,
    ) -> None:
        self.scenario_name = scenario_name
        self.config = config or GlobalProperties()
        init_logger_from_config(self.config)
        self.logger = get_logger(scenario=scenario_name)

        self.playwright = PlaywrightAdapter(self.config, self.logger)
        self.plugins: List[Any] = list(plugins or [])

        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None
        self.shared_data: Dict[str, Any] = {}
        self.screenshots: List[Tuple[str, bytes]] = []

        self._playwright: Optional[Playwright] = None

        self.logger.info(f"PlaywrightWorld initialized: {scenario_name}")

    def __enter__(self) -> "PlaywrightWorld":
        self.init()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cleanup()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def register_plugin(self, plugin) -> None:
        """Add a plugin; registered against the page on ``init()``."""
        self.plugins.append(plugin)
        if self.page is not None and plugin.is_enabled():
            plugin.register(self.page, self.context, self.browser)

    def init(self) -> None:
        """
        Create browser, context and page. Call before the first step.

        On failure whatever was already started is released before the error
        propagates.
        """
        self.logger.info("Initializing Playwright resources")

        try:
            self._playwright = sync_playwright().start()
            self.browser = self.playwright.create_browser(self._playwright)
            self.context = self.playwright.create_context(self.browser)
            self.page = self.playwright.create_page(self.context)

            for plugin in self.plugins:
                if plugin.is_enabled():
                    plugin.register(self.page, self.context, self.browser)
        except Exception as e:
            self.logger.error(f"Failed to initialize Playwright resources: {e}")
            try:
                self.cleanup()
            except Exception as cleanup_error:
                self.logger.warning(f"Cleanup after failed init also failed: {cleanup_error}")
            raise

        self.logger.info("Playwright resources initialized successfully")

    def cleanup(self) -> None:
        """
        Release resources in reverse acquisition order.

        Every handle is dropped even when closing one of them fails; the first
        failure is logged and re-raised.
        """
        self.logger.info("Cleaning up Playwright resources")
        first_error: Optional[Exception] = None

        steps = [
            ("trace", self._stop_tracing),
            ("plugins", self._cleanup_plugins),
            ("page", lambda: self.page and self.page.close()),
            ("context", lambda: self.context and self.context.close()),
            ("browser", lambda: self.browser and self.browser.close()),
            ("playwright", lambda: self._playwright and self._playwright.stop()),
        ]
        for name, step in steps:
            try:
                step()
            except Exception as e:
                self.logger.error(f"Failed to clean up {name}: {e}")
                first_error = first_error or e

        self.page = None
        self.context = None
        self.browser = None
        self._playwright = None

        if first_error is not None:
            raise first_error

        self.logger.info("Playwright resources cleaned up successfully")

    def _stop_tracing(self) -> None:
        if self.context is None or not self.config.get("execution.trace", False):
            return
        TRACE_DIR.mkdir(parents=True, exist_ok=True)
        trace_path = TRACE_DIR / f"trace-{int(time.time() * 1000)}.zip"
        self.context.tracing.stop(path=str(trace_path))
        self.logger.info(f"Trace saved: {trace_path}")

    def _cleanup_plugins(self) -> None:
        for plugin in self.plugins:
            if plugin.is_enabled():
                plugin.cleanup()

    # =========================================================================
    # Page helpers
    # =========================================================================

    def _require_page(self) -> Page:
        if self.page is None:
            raise WorldNotInitializedError("Page not initialized. Call init() first.")
        return self.page

    def capture_screenshot(self, name: str) -> bytes:
        """
        Capture a PNG screenshot, keep it and attach it to Allure.

        Args:
            name: Screenshot name used in the report
        """
        page = self._require_page()
        self.logger.info(f"Capturing screenshot: {name}")

        screenshot = page.screenshot(
            full_page=self.config.get("reporting.screenshots.full_page", True),
            type="png",
        )
        self.screenshots.append((name, screenshot))
        attach_png(screenshot, name=name)

        self.logger.info(f"Screenshot captured: {name} ({len(screenshot)} bytes)")
        return screenshot

    def get_locator(self, selector: str) -> Locator:
        page = self._require_page()
        self.logger.debug(f"Creating locator: {selector}")
        return page.locator(selector)

    def goto(self, url: str, **options: Any) -> None:
        """Navigate with logging. Options are passed to ``page.goto``."""
        page = self._require_page()
        self.logger.info(f"Navigating to URL: {url}")
        page.goto(url, **options)

    def wait(self, milliseconds: int) -> None:
        self.logger.debug(f"Waiting {milliseconds}ms")
        time.sleep(milliseconds / 1000)


__all__ = [
    "PlaywrightWorld",
    "WorldNotInitializedError",
]
