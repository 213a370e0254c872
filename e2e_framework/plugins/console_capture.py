"""
Console capture plugin.

Collects browser console errors and uncaught page errors during a scenario
and attaches them to the Allure report when the scenario ends.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from playwright.sync_api import Page

from e2e_framework.plugins.base_plugin import PlaywrightPlugin
from e2e_framework.reporting.allure_utils import attach_json


class ConsoleCapturePlugin(PlaywrightPlugin):
    """
    Records console messages of the configured types plus page errors.

    Config:
        enabled: bool (default True)
        types: console message types to keep (default ["error", "warning"])
        attach: attach collected entries to Allure on cleanup (default True)
    """

    DEFAULT_TYPES = ("error", "warning")

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("console-capture", config)
        self.types = tuple(self.config.get("types", self.DEFAULT_TYPES))
        self.entries: List[Dict[str, Any]] = []

    def setup_page_events(self, page: Page) -> None:
        page.on("console", self._on_console)
        page.on("pageerror", self._on_page_error)

    def _on_console(self, message) -> None:
        if message.type in self.types:
            self.entries.append({"source": "console", "type": message.type, "text": message.text})

    def _on_page_error(self, error) -> None:
        self.entries.append({"source": "pageerror", "type": "error", "text": str(error)})

    @property
    def errors(self) -> List[Dict[str, Any]]:
        return [entry for entry in self.entries if entry["type"] == "error"]

    def cleanup(self) -> None:
        if self.entries and self.config.get("attach", True):
            attach_json(self.entries, name="Browser console")
        self.logger.debug(f"Captured {len(self.entries)} console entries ({len(self.errors)} errors)")
        super().cleanup()


__all__ = [
    "ConsoleCapturePlugin",
]
