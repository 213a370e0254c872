"""
================================================================================
DemoQA Elements Page Object
================================================================================

Interactions with the DemoQA "Elements" section: Text Box and Web Tables.

================================================================================
"""

from __future__ import annotations

from typing import Dict

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import expect

from testsuites.ui_testing.framework.page_base import BasePage


class ElementsPage(BasePage):
    """DemoQA home page, cards and the Elements section."""

    URL_PATH = "/"

    # External site: generous navigation timeout
    NAVIGATION_TIMEOUT = 60000

    CARD = ".card-body"
    MENU_ITEM = ".menu-list .btn"

    # Text Box
    FULL_NAME_INPUT = "#userName"
    EMAIL_INPUT = "#userEmail"
    CURRENT_ADDRESS_INPUT = "#currentAddress"
    PERMANENT_ADDRESS_INPUT = "#permanentAddress"
    SUBMIT_BUTTON = "#submit"
    OUTPUT = "#output"
    OUTPUT_NAME = "#output #name"
    OUTPUT_EMAIL = "#output #email"
    OUTPUT_CURRENT_ADDRESS = "#output p#currentAddress"
    OUTPUT_PERMANENT_ADDRESS = "#output p#permanentAddress"

    # Web Tables
    ADD_RECORD_BUTTON = "#addNewRecordButton"
    FIRST_NAME_INPUT = "#firstName"
    LAST_NAME_INPUT = "#lastName"
    AGE_INPUT = "#age"
    SALARY_INPUT = "#salary"
    DEPARTMENT_INPUT = "#department"
    TABLE_ROW = ".rt-tr-group"
    DELETE_BUTTON = "[title='Delete']"

    def navigate(self, url=None, **options) -> None:
        """Open the home page, retrying once when the first attempt fails."""
        options.setdefault("timeout", self.NAVIGATION_TIMEOUT)
        try:
            super().navigate(url, **options)
        except PlaywrightError as e:
            logger.warning(f"DemoQA navigation failed, retrying once: {e}")
            super().navigate(url, **options)

    @allure.step("Open card: {card_name}")
    def navigate_to_card(self, card_name: str) -> None:
        self.get_locator(self.CARD).filter(has_text=card_name).click()
        self.wait_for_dom_load()

    @allure.step("Open menu item: {menu_item}")
    def open_menu_item(self, menu_item: str) -> None:
        self.get_locator(self.MENU_ITEM).filter(has_text=menu_item).click()
        self.wait_for_dom_load()

    # =========================================================================
    # Text Box
    # =========================================================================

    @allure.step("Fill text box form")
    def fill_text_box_form(self, data: Dict[str, str]) -> None:
        """
        Args:
            data: full_name, email, current_address, permanent_address
        """
        self.fill(self.FULL_NAME_INPUT, data["full_name"])
        self.fill(self.EMAIL_INPUT, data["email"])
        self.fill(self.CURRENT_ADDRESS_INPUT, data["current_address"])
        self.fill(self.PERMANENT_ADDRESS_INPUT, data["permanent_address"])

    def submit_text_box_form(self) -> None:
        self.click(self.SUBMIT_BUTTON)

    @allure.step("Verify text box output")
    def verify_text_box_output(self, expected: Dict[str, str]) -> None:
        """
        Args:
            expected: name, email, current_address, permanent_address
        """
        expect(self.get_locator(self.OUTPUT)).to_be_visible()
        expect(self.get_locator(self.OUTPUT_NAME)).to_contain_text(expected["name"])
        expect(self.get_locator(self.OUTPUT_EMAIL)).to_contain_text(expected["email"])
        expect(self.get_locator(self.OUTPUT_CURRENT_ADDRESS)).to_contain_text(expected["current_address"])
        expect(self.get_locator(self.OUTPUT_PERMANENT_ADDRESS)).to_contain_text(expected["permanent_address"])

    # =========================================================================
    # Web Tables
    # =========================================================================

    def _row(self, email: str):
        return self.get_locator(self.TABLE_ROW).filter(has_text=email)

    @allure.step("Add web table record")
    def add_web_table_record(self, data: Dict[str, str]) -> None:
        """
        Args:
            data: first_name, last_name, email, age, salary, department
        """
        self.click(self.ADD_RECORD_BUTTON)
        self.fill(self.FIRST_NAME_INPUT, data["first_name"])
        self.fill(self.LAST_NAME_INPUT, data["last_name"])
        self.fill(self.EMAIL_INPUT, data["email"])
        self.fill(self.AGE_INPUT, data["age"])
        self.fill(self.SALARY_INPUT, data["salary"])
        self.fill(self.DEPARTMENT_INPUT, data["department"])
        self.click(self.SUBMIT_BUTTON)

    def is_web_table_row_visible(self, email: str) -> bool:
        try:
            self._row(email).wait_for(state="visible", timeout=2000)
        except PlaywrightError:
            return False
        return True

    @allure.step("Delete web table row: {email}")
    def delete_web_table_row(self, email: str) -> None:
        self._row(email).locator(self.DELETE_BUTTON).click()

    def verify_web_table_row_exists(self, email: str) -> None:
        expect(self._row(email)).to_be_visible()

    def verify_web_table_row_not_exists(self, email: str) -> None:
        expect(self._row(email)).not_to_be_visible()
