"""
SauceDemo authentication steps.
"""

from pytest_bdd import given, parsers, then, when

from testsuites.ui_testing.pages import InventoryPage, LoginPage
from testsuites.ui_testing.step_defs.common import factories, saucedemo_page


@given("I am on the SauceDemo login page")
def open_login_page(world):
    saucedemo_page(world, LoginPage).navigate()


@when(parsers.parse('I login to SauceDemo with username "{username}" and password "{password}"'))
def login_with_credentials(world, username, password):
    saucedemo_page(world, LoginPage).login(username, password)
    world.shared_data["username"] = username


@when(parsers.parse('I login to SauceDemo as the "{kind}" user'))
def login_as_known_user(world, kind):
    user = factories(world).get("user").known(kind)
    login_with_credentials(world, user["username"], user["password"])


@when("I login to SauceDemo with random invalid credentials")
def login_with_invalid_credentials(world):
    user = factories(world).get("user").invalid()
    world.logger.debug(f"Generated invalid username: {user['username']}")
    login_with_credentials(world, user["username"], user["password"])


@when("I click the SauceDemo menu button")
def open_menu(world):
    saucedemo_page(world, InventoryPage).open_menu()


@when("I click the SauceDemo logout link")
def logout(world):
    saucedemo_page(world, InventoryPage).logout()
    world.shared_data.pop("username", None)


@then("I should be on the SauceDemo login page")
def verify_login_page(world):
    saucedemo_page(world, LoginPage).verify_on_page()


@then("I should be on the SauceDemo inventory page")
def verify_inventory_page(world):
    saucedemo_page(world, InventoryPage).verify_on_page()


@then(parsers.parse('I should see the SauceDemo login error "{message}"'))
def verify_login_error(world, message):
    saucedemo_page(world, LoginPage).verify_error_message(message)
