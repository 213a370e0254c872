"""
================================================================================
SauceDemo Checkout Page Object
================================================================================

Covers the three checkout screens: information, overview, complete.

================================================================================
"""

from __future__ import annotations

import re
from typing import Optional

import allure
from playwright.sync_api import expect

from testsuites.ui_testing.framework.page_base import BasePage


class CheckoutPage(BasePage):
    """SauceDemo checkout flow."""

    URL_PATH = "/checkout-step-one.html"

    FIRST_NAME_INPUT = "[data-test='firstName']"
    LAST_NAME_INPUT = "[data-test='lastName']"
    POSTAL_CODE_INPUT = "[data-test='postalCode']"
    CONTINUE_BUTTON = "[data-test='continue']"
    FINISH_BUTTON = "[data-test='finish']"
    ERROR_MESSAGE = "[data-test='error']"
    SUMMARY_TOTAL = ".summary_total_label"
    CHECKOUT_COMPLETE = ".checkout_complete_container"
    COMPLETE_HEADER = ".complete-header"

    @allure.step("Verify on checkout step one")
    def verify_on_step_one(self) -> None:
        expect(self.page).to_have_url(re.compile(r"checkout-step-one\.html"))

    @allure.step("Verify on checkout step two")
    def verify_on_step_two(self) -> None:
        expect(self.page).to_have_url(re.compile(r"checkout-step-two\.html"))

    @allure.step("Verify on checkout complete")
    def verify_on_complete(self) -> None:
        expect(self.page).to_have_url(re.compile(r"checkout-complete\.html"))
        self.wait_for_element(self.CHECKOUT_COMPLETE)

    @allure.step("Fill checkout information")
    def fill_checkout_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        self.fill(self.FIRST_NAME_INPUT, first_name)
        self.fill(self.LAST_NAME_INPUT, last_name)
        self.fill(self.POSTAL_CODE_INPUT, postal_code)

    def click_continue(self) -> None:
        self.click(self.CONTINUE_BUTTON)
        self.wait_for_navigation()

    def click_finish(self) -> None:
        self.click(self.FINISH_BUTTON)
        self.wait_for_navigation()

    def get_error_message(self) -> Optional[str]:
        return self.get_text(self.ERROR_MESSAGE)

    @allure.step("Verify checkout error: {expected_message}")
    def verify_error_message(self, expected_message: str) -> None:
        error = self.get_locator(self.ERROR_MESSAGE)
        expect(error).to_be_visible()
        expect(error).to_have_text(expected_message)

    def verify_order_summary_visible(self) -> None:
        expect(self.get_locator(self.SUMMARY_TOTAL)).to_be_visible()

    def get_order_total(self) -> Optional[str]:
        return self.get_text(self.SUMMARY_TOTAL)

    @allure.step("Verify confirmation: {expected_message}")
    def verify_confirmation_message(self, expected_message: str) -> None:
        expect(self.get_locator(self.COMPLETE_HEADER)).to_have_text(expected_message)
