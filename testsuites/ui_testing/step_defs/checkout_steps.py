"""
SauceDemo checkout steps.
"""

from pytest_bdd import parsers, then, when

from testsuites.ui_testing.pages import CartPage, CheckoutPage
from testsuites.ui_testing.step_defs.common import factories, saucedemo_page, table_rows


@when("I click the SauceDemo checkout button")
def proceed_to_checkout(world):
    saucedemo_page(world, CartPage).proceed_to_checkout()


@when("I fill the SauceDemo checkout information:")
def fill_checkout_information(world, datatable):
    info = table_rows(datatable)[0]
    saucedemo_page(world, CheckoutPage).fill_checkout_info(
        info.get("first_name", ""),
        info.get("last_name", ""),
        info.get("postal_code", ""),
    )
    world.shared_data["checkout_info"] = info


@when("I fill the SauceDemo checkout information with generated data")
def fill_generated_checkout_information(world):
    info = factories(world).get("checkout_info").create()
    world.logger.debug(f"Generated checkout info: {info}")
    saucedemo_page(world, CheckoutPage).fill_checkout_info(
        info["first_name"], info["last_name"], info["postal_code"]
    )
    world.shared_data["checkout_info"] = info


@when("I click the SauceDemo continue button")
def click_continue(world):
    saucedemo_page(world, CheckoutPage).click_continue()


@when("I click the SauceDemo finish button")
def click_finish(world):
    saucedemo_page(world, CheckoutPage).click_finish()


@then("I should see the following SauceDemo cart items:")
def verify_cart_items(world, datatable):
    expected = [row["product_name"] for row in table_rows(datatable)]
    saucedemo_page(world, CartPage).verify_cart_contains(expected)


@then("I should be on the SauceDemo checkout step one page")
def verify_step_one(world):
    saucedemo_page(world, CheckoutPage).verify_on_step_one()


@then("I should be on the SauceDemo checkout step two page")
def verify_step_two(world):
    saucedemo_page(world, CheckoutPage).verify_on_step_two()


@then("I should be on the SauceDemo checkout complete page")
def verify_complete(world):
    saucedemo_page(world, CheckoutPage).verify_on_complete()


@then("I should see the SauceDemo order summary with total")
def verify_order_summary(world):
    checkout = saucedemo_page(world, CheckoutPage)
    checkout.verify_order_summary_visible()
    world.shared_data["order_total"] = checkout.get_order_total()
    world.logger.info(f"Order total: {world.shared_data['order_total']}")


@then(parsers.parse('I should see the SauceDemo order confirmation message "{message}"'))
def verify_confirmation(world, message):
    saucedemo_page(world, CheckoutPage).verify_confirmation_message(message)


@then(parsers.parse('I should see the SauceDemo error message "{message}"'))
def verify_checkout_error(world, message):
    saucedemo_page(world, CheckoutPage).verify_error_message(message)
