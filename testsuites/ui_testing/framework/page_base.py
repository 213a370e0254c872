"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and load-state waits
    - Selector-based interactions wrapped in Allure steps
    - Screenshot utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import allure
from loguru import logger
from playwright.sync_api import Locator, Page


# Default output directory for screenshots
SCREENSHOT_DIR = Path("results/screenshots")


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"

            def login(self, username: str, password: str):
                self.fill("#user-name", username)
                self.fill("#password", password)
                self.click("#login-button")
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(self, page: Page, base_url: str = ""):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL of the application under test
        """
        self.page = page
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        """Full URL of this page."""
        return f"{self.base_url}{self.URL_PATH}"

    def get_url(self) -> str:
        """URL the browser is currently on."""
        return self.page.url

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate(self, url: Optional[str] = None, **options: Any) -> None:
        """
        Navigate to ``url`` (this page's URL by default) and wait for load.

        Args:
            url: Absolute URL
            **options: Passed to ``page.goto`` (timeout, wait_until)
        """
        target = url or self.url
        with allure.step(f"Navigate to {target}"):
            self.page.goto(target, **options)
            self.wait_for_page_load()
            logger.debug(f"Navigated to: {target}")

    def wait_for_page_load(self) -> None:
        """Wait until the network is idle."""
        self.page.wait_for_load_state("networkidle")

    def wait_for_dom_load(self) -> None:
        self.page.wait_for_load_state("domcontentloaded")

    def wait_for_navigation(self) -> None:
        self.page.wait_for_load_state("networkidle")

    # =========================================================================
    # Element Interactions
    # =========================================================================

    def get_locator(self, selector: str) -> Locator:
        return self.page.locator(selector)

    def click(self, selector: str, **options: Any) -> None:
        with allure.step(f"Click: {selector}"):
            self.get_locator(selector).click(**options)

    def fill(self, selector: str, value: str) -> None:
        masked = "*" * len(value) if "password" in selector.lower() else value
        with allure.step(f"Fill {selector}: {masked}"):
            self.get_locator(selector).fill(value)

    def get_text(self, selector: str) -> Optional[str]:
        return self.get_locator(selector).text_content()

    def is_visible(self, selector: str) -> bool:
        return self.get_locator(selector).is_visible()

    def wait_for_element(self, selector: str, timeout: Optional[float] = None) -> None:
        """
        Wait for element to become visible.

        Args:
            selector: CSS selector
            timeout: Timeout in milliseconds (page default when None)
        """
        self.get_locator(selector).wait_for(state="visible", timeout=timeout)

    # =========================================================================
    # Screenshot Utilities
    # =========================================================================

    def screenshot(self, name: Optional[str] = None, full_page: bool = True) -> bytes:
        """
        Take screenshot, saving it under SCREENSHOT_DIR when ``name`` is given.

        Returns:
            PNG bytes
        """
        path = None
        if name:
            SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            path = str(SCREENSHOT_DIR / f"{name}_{timestamp}.png")

        image = self.page.screenshot(full_page=full_page, path=path)
        if path:
            logger.debug(f"Screenshot saved: {path}")
        return image


__all__ = [
    "BasePage",
]
