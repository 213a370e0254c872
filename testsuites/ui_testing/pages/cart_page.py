"""
================================================================================
SauceDemo Cart Page Object
================================================================================
"""

from __future__ import annotations

import re
from typing import Iterable, List

import allure
from playwright.sync_api import expect

from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.inventory_page import parse_price


class CartPage(BasePage):
    """SauceDemo cart page."""

    URL_PATH = "/cart.html"

    CART_ITEM = ".cart_item"
    CART_ITEM_NAME = ".inventory_item_name"
    CART_ITEM_PRICE = ".inventory_item_price"
    REMOVE_BUTTON = ".cart_button"
    CHECKOUT_BUTTON = "[data-test='checkout']"
    CONTINUE_SHOPPING_BUTTON = "[data-test='continue-shopping']"
    CART_ICON = ".shopping_cart_link"

    @allure.step("Open cart")
    def open(self) -> None:
        """Open the cart through the header icon."""
        self.click(self.CART_ICON)
        self.wait_for_navigation()

    @allure.step("Verify on cart page")
    def verify_on_page(self) -> None:
        expect(self.page).to_have_url(re.compile(r"cart\.html"))

    def get_cart_item_names(self) -> List[str]:
        return self.get_locator(self.CART_ITEM_NAME).all_text_contents()

    def verify_cart_contains(self, product_names: Iterable[str]) -> None:
        cart_items = self.get_cart_item_names()
        for product_name in product_names:
            assert product_name in cart_items, f"{product_name!r} not in cart: {cart_items}"

    @allure.step("Remove most expensive item")
    def remove_most_expensive_item(self) -> str:
        """Remove the highest-priced cart item and return its name."""
        items = self.get_locator(self.CART_ITEM)
        prices = [
            parse_price(items.nth(i).locator(self.CART_ITEM_PRICE).text_content())
            for i in range(items.count())
        ]
        if not prices:
            raise AssertionError("Cart is empty")

        index = prices.index(max(prices))
        item = items.nth(index)
        name = item.locator(self.CART_ITEM_NAME).text_content()
        item.locator(self.REMOVE_BUTTON).click()
        return name

    @allure.step("Proceed to checkout")
    def proceed_to_checkout(self) -> None:
        self.click(self.CHECKOUT_BUTTON)
        self.wait_for_navigation()

    @allure.step("Continue shopping")
    def continue_shopping(self) -> None:
        self.click(self.CONTINUE_SHOPPING_BUTTON)
        self.wait_for_navigation()
