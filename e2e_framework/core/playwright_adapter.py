"""
================================================================================
Playwright Adapter
================================================================================

Creates browsers, contexts and pages from GlobalProperties.

The adapter only threads configuration into Playwright's own factories and
attaches event listeners for logging; it never overrides Playwright behavior.

Configuration keys:
    browser.name, browser.headless, browser.args, browser.launch_options
    browser.viewport, browser.ignore_https_errors
    execution.timeout, execution.trace
    reporting.video.enabled, reporting.trace.{screenshots,snapshots,sources}
    ui.timeout, ui.navigation_timeout
    monitoring.network.enabled, monitoring.console.enabled

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict

from playwright.sync_api import Browser, BrowserContext, Page, Playwright

from .global_properties import DEFAULT_VIEWPORT, GlobalProperties


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

VIDEO_DIR = "results/videos"


class UnsupportedBrowserError(ValueError):
    """Raised when browser.name is not a Playwright browser type."""
    pass


class PlaywrightAdapter:
    """
    Factory for configured Playwright objects.

    Usage:
        adapter = PlaywrightAdapter(config, logger)
        browser = adapter.create_browser(playwright)
        context = adapter.create_context(browser)
        page = adapter.create_page(context)
    """

    def __init__(self, config: GlobalProperties, logger) -> None:
        self.config = config
        self.logger = logger

    def create_browser(self, playwright: Playwright) -> Browser:
        """
        Launch chromium, firefox or webkit according to ``browser.name``.

        Raises:
            UnsupportedBrowserError: for any other browser name
        """
        browser_type = self.config.get("browser.name", "chromium")
        if browser_type not in SUPPORTED_BROWSERS:
            raise UnsupportedBrowserError(f"Unsupported browser: {browser_type}")

        launch_options: Dict[str, Any] = {
            "headless": self.config.get("browser.headless", True),
            "args": self.config.get("browser.args", []),
            "timeout": self.config.get("execution.timeout", 30000),
        }
        extra_options = self.config.get("browser.launch_options", {})
        if isinstance(extra_options, dict):
            launch_options.update(extra_options)
        self.logger.debug(f"Creating browser: {browser_type} (headless={launch_options['headless']})")

        browser = getattr(playwright, browser_type).launch(**launch_options)

        self.logger.info(f"Browser created successfully: {browser_type}")
        return browser

    def create_context(self, browser: Browser, **options: Any) -> BrowserContext:
        """
        Create an isolated browser context.

        Args:
            browser: Launched browser
            **options: Context options overriding the configured ones
        """
        self.logger.debug("Creating browser context")

        context_options: Dict[str, Any] = {
            "viewport": self.config.get("browser.viewport", dict(DEFAULT_VIEWPORT)),
            "ignore_https_errors": self.config.get("browser.ignore_https_errors", True),
        }
        if self.config.get("reporting.video.enabled", False):
            context_options["record_video_dir"] = VIDEO_DIR
        context_options.update(options)

        context = browser.new_context(**context_options)

        if self.config.get("execution.trace", False):
            self.logger.debug("Starting tracing")
            context.tracing.start(
                screenshots=self.config.get("reporting.trace.screenshots", True),
                snapshots=self.config.get("reporting.trace.snapshots", True),
                sources=self.config.get("reporting.trace.sources", True),
            )

        self.logger.info("Browser context created successfully")
        return context

    def create_page(self, context: BrowserContext) -> Page:
        """Open a page with configured timeouts and monitoring listeners."""
        self.logger.debug("Creating page")

        page = context.new_page()
        page.set_default_timeout(self.config.get("ui.timeout", 30000))
        page.set_default_navigation_timeout(self.config.get("ui.navigation_timeout", 60000))

        self._setup_page_monitoring(page)

        self.logger.info("Page created successfully")
        return page

    def _setup_page_monitoring(self, page: Page) -> None:
        """Attach logging listeners without interfering with the page."""
        log = self.logger

        page.on("load", lambda loaded: log.debug(f"Page loaded: {loaded.url}"))

        if self.config.get("monitoring.network.enabled", False):
            page.on(
                "request",
                lambda request: log.debug(
                    f"Network request: {request.method} {request.url} ({request.resource_type})"
                ),
            )
            page.on(
                "response",
                lambda response: log.debug(
                    f"Network response: {response.status} {response.status_text} {response.url}"
                ),
            )

        if self.config.get("monitoring.console.enabled", False):
            page.on("console", lambda msg: log.debug(f"Console [{msg.type}]: {msg.text}"))

        page.on("pageerror", lambda error: log.error(f"Page error: {error}"))
        page.on("crash", lambda crashed: log.error(f"Page crashed: {crashed.url}"))


__all__ = [
    "PlaywrightAdapter",
    "UnsupportedBrowserError",
    "SUPPORTED_BROWSERS",
]
