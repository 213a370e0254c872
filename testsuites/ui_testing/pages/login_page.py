"""
================================================================================
SauceDemo Login Page Object
================================================================================
"""

from __future__ import annotations

import re
from typing import Optional

import allure
from playwright.sync_api import expect

from testsuites.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """SauceDemo login page."""

    URL_PATH = "/"

    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_MESSAGE = "[data-test='error']"

    @allure.step("Login (username={username})")
    def login(self, username: str, password: str) -> None:
        self.fill(self.USERNAME_INPUT, username)
        self.fill(self.PASSWORD_INPUT, password)
        self.click(self.LOGIN_BUTTON)
        self.wait_for_navigation()

    def get_error_message(self) -> Optional[str]:
        return self.get_text(self.ERROR_MESSAGE)

    def is_error_visible(self) -> bool:
        return self.is_visible(self.ERROR_MESSAGE)

    @allure.step("Verify on login page")
    def verify_on_page(self) -> None:
        expect(self.page).to_have_url(re.compile(rf"^{re.escape(self.base_url)}/?$"))
        self.wait_for_element(self.LOGIN_BUTTON)

    @allure.step("Verify login error: {expected_message}")
    def verify_error_message(self, expected_message: str) -> None:
        expect(self.get_locator(self.ERROR_MESSAGE)).to_contain_text(expected_message)
