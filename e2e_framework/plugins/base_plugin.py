"""
================================================================================
Playwright Plugin Base
================================================================================

Base class for plugins that extend a scenario's browser session.

Plugins hook into Playwright's event system to add behavior (capturing,
auditing, instrumentation) without overriding native Playwright calls.

Usage:
    class DialogAutoAccept(PlaywrightPlugin):
        def setup_page_events(self, page):
            page.on("dialog", lambda dialog: dialog.accept())

    plugin = DialogAutoAccept("dialog-auto-accept", {"enabled": True})
    world.register_plugin(plugin)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from playwright.sync_api import Browser, BrowserContext, Page

from e2e_framework.core.logger import get_logger


class PlaywrightPlugin:
    """
    Base plugin. Override any of the ``setup_*_events`` hooks.

    The ``config`` mapping is plugin-specific; only ``enabled`` is read here.
    """

    def __init__(self, name: str, config: Optional[Dict[str, Any]] = None) -> None:
        self._name = name
        self.config: Dict[str, Any] = dict(config or {})
        self.logger = get_logger(plugin=name)

        self.page: Optional[Page] = None
        self.context: Optional[BrowserContext] = None
        self.browser: Optional[Browser] = None

        self.logger.debug(f"Plugin created: {name}")

    @property
    def name(self) -> str:
        return self._name

    def is_enabled(self) -> bool:
        """Enabled unless the config explicitly sets ``enabled`` to False."""
        return self.config.get("enabled") is not False

    def register(self, page: Page, context: BrowserContext, browser: Browser) -> None:
        """
        Attach the plugin to a live session.

        Raises:
            Whatever a ``setup_*_events`` hook raised, after logging it
        """
        self.page = page
        self.context = context
        self.browser = browser

        self.logger.info(f"Registering plugin: {self.name}")

        try:
            self.setup_page_events(page)
            self.setup_context_events(context)
            self.setup_browser_events(browser)
        except Exception as e:
            self.logger.error(f"Failed to register plugin: {self.name}: {e}")
            raise

        self.logger.info(f"Plugin registered successfully: {self.name}")

    def setup_page_events(self, page: Page) -> None:
        """Page-level listeners."""

    def setup_context_events(self, context: BrowserContext) -> None:
        """Context-level listeners."""

    def setup_browser_events(self, browser: Browser) -> None:
        """Browser-level listeners."""

    def cleanup(self) -> None:
        """Drop session handles. Subclasses call super() after their own cleanup."""
        self.logger.info(f"Cleaning up plugin: {self.name}")
        self.page = None
        self.context = None
        self.browser = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, enabled={self.is_enabled()})"


__all__ = [
    "PlaywrightPlugin",
]
