"""
SauceDemo inventory and cart steps.

Products added during a scenario are tracked in ``world.shared_data["cart"]``.
"""

from pytest_bdd import parsers, then, when

from testsuites.ui_testing.pages import CartPage, InventoryPage
from testsuites.ui_testing.step_defs.common import saucedemo_page


def _remember(world, product_name: str) -> None:
    world.shared_data.setdefault("cart", []).append(product_name)


@when(parsers.parse('I add the SauceDemo product "{product_name}" to cart'))
def add_product(world, product_name):
    saucedemo_page(world, InventoryPage).add_to_cart(product_name)
    _remember(world, product_name)


@when("I add the first SauceDemo product to cart")
def add_first_product(world):
    _remember(world, saucedemo_page(world, InventoryPage).add_first_product())


@when("I add the last SauceDemo product to cart")
def add_last_product(world):
    _remember(world, saucedemo_page(world, InventoryPage).add_last_product())


@when(parsers.parse('I sort SauceDemo products by "{option}"'))
def sort_products(world, option):
    saucedemo_page(world, InventoryPage).sort_products(option)


@when("I click the SauceDemo cart icon")
def open_cart(world):
    saucedemo_page(world, CartPage).open()


@when("I remove the most expensive SauceDemo item from cart")
def remove_most_expensive(world):
    removed = saucedemo_page(world, CartPage).remove_most_expensive_item()
    world.logger.info(f"Removed most expensive item: {removed}")
    cart = world.shared_data.get("cart", [])
    if removed in cart:
        cart.remove(removed)


@when("I click the SauceDemo continue shopping button")
def continue_shopping(world):
    saucedemo_page(world, CartPage).continue_shopping()


@then(parsers.parse('the SauceDemo cart badge should show "{count}" items'))
def verify_badge_count(world, count):
    saucedemo_page(world, InventoryPage).verify_cart_badge_count(count)


@then("the SauceDemo cart badge should not be visible")
def verify_badge_hidden(world):
    saucedemo_page(world, InventoryPage).verify_cart_badge_not_visible()


@then(parsers.parse('the SauceDemo product "{product_name}" should show "{button_text}" button'))
def verify_product_button(world, product_name, button_text):
    saucedemo_page(world, InventoryPage).verify_product_button_text(product_name, button_text)


@then("the first SauceDemo product should be the cheapest")
def verify_sorted_by_price(world):
    inventory = saucedemo_page(world, InventoryPage)
    prices = inventory.get_product_prices()
    assert inventory.is_first_product_cheapest(), f"First product is not the cheapest: {prices}"


@then("I should be on the SauceDemo cart page")
def verify_cart_page(world):
    saucedemo_page(world, CartPage).verify_on_page()
