"""
================================================================================
SauceDemo Inventory Page Object
================================================================================

Product browsing, sorting and adding to cart.

================================================================================
"""

from __future__ import annotations

import re
from typing import List, Optional

import allure
from playwright.sync_api import expect

from testsuites.ui_testing.framework.page_base import BasePage


def product_slug(product_name: str) -> str:
    """'Sauce Labs Backpack' -> 'sauce-labs-backpack' (SauceDemo data-test ids)."""
    return re.sub(r"\s+", "-", product_name.strip().lower())


def parse_price(text: Optional[str]) -> float:
    """'$29.99' -> 29.99"""
    return float((text or "0").replace("$", "").strip())


class InventoryPage(BasePage):
    """SauceDemo inventory (product list) page."""

    URL_PATH = "/inventory.html"

    CONTAINER = ".inventory_container"
    ITEM = ".inventory_item"
    ITEM_NAME = ".inventory_item_name"
    ITEM_PRICE = ".inventory_item_price"
    SORT_DROPDOWN = "[data-test='product-sort-container']"
    CART_BADGE = ".shopping_cart_badge"
    MENU_BUTTON = "#react-burger-menu-btn"
    LOGOUT_LINK = "#logout_sidebar_link"

    @staticmethod
    def add_to_cart_button(product_name: str) -> str:
        return f"[data-test='add-to-cart-{product_slug(product_name)}']"

    @staticmethod
    def remove_button(product_name: str) -> str:
        return f"[data-test='remove-{product_slug(product_name)}']"

    @allure.step("Verify on inventory page")
    def verify_on_page(self) -> None:
        expect(self.page).to_have_url(re.compile(r"inventory\.html"))
        self.wait_for_element(self.CONTAINER)

    @allure.step("Add to cart: {product_name}")
    def add_to_cart(self, product_name: str) -> None:
        self.click(self.add_to_cart_button(product_name))

    def _add_item(self, item) -> str:
        name = item.locator(self.ITEM_NAME).text_content()
        item.locator("button").filter(has_text="Add to cart").click()
        return name

    @allure.step("Add first product to cart")
    def add_first_product(self) -> str:
        """Returns the product name."""
        return self._add_item(self.get_locator(self.ITEM).first) or "First Product"

    @allure.step("Add last product to cart")
    def add_last_product(self) -> str:
        return self._add_item(self.get_locator(self.ITEM).last) or "Last Product"

    @allure.step("Sort products by {option}")
    def sort_products(self, option: str) -> None:
        self.page.select_option(self.SORT_DROPDOWN, label=option)
        self.wait_for_navigation()

    def get_product_prices(self) -> List[float]:
        return [parse_price(text) for text in self.get_locator(self.ITEM_PRICE).all_text_contents()]

    def is_first_product_cheapest(self) -> bool:
        prices = self.get_product_prices()
        return bool(prices) and prices[0] == min(prices)

    @allure.step("Verify cart badge shows {expected_count}")
    def verify_cart_badge_count(self, expected_count: str) -> None:
        expect(self.get_locator(self.CART_BADGE)).to_have_text(expected_count)

    @allure.step("Verify cart badge is not visible")
    def verify_cart_badge_not_visible(self) -> None:
        expect(self.get_locator(self.CART_BADGE)).not_to_be_visible()

    @allure.step("Verify '{product_name}' shows '{expected_text}' button")
    def verify_product_button_text(self, product_name: str, expected_text: str) -> None:
        button = self.get_locator(self.ITEM).filter(has_text=product_name).locator("button")
        expect(button).to_have_text(expected_text)

    @allure.step("Open menu")
    def open_menu(self) -> None:
        self.click(self.MENU_BUTTON)
        # Menu slides in
        self.get_locator(self.LOGOUT_LINK).wait_for(state="visible")

    @allure.step("Logout")
    def logout(self) -> None:
        self.click(self.LOGOUT_LINK)
        self.wait_for_navigation()
