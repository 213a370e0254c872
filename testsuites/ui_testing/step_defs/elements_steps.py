"""
DemoQA Elements steps (Text Box, Web Tables).
"""

from pytest_bdd import given, parsers, then, when

from testsuites.ui_testing.pages import ElementsPage
from testsuites.ui_testing.step_defs.common import demoqa_page, factories, table_rows


@given("I am on the DemoQA home page")
def open_home_page(world):
    demoqa_page(world, ElementsPage).navigate()


@when(parsers.parse('I navigate to the DemoQA card "{card_name}"'))
def open_card(world, card_name):
    demoqa_page(world, ElementsPage).navigate_to_card(card_name)


@when(parsers.parse('I open the DemoQA menu item "{menu_item}"'))
def open_menu_item(world, menu_item):
    demoqa_page(world, ElementsPage).open_menu_item(menu_item)


@when("I fill the DemoQA text box form with:")
def fill_text_box(world, datatable):
    data = table_rows(datatable)[0]
    demoqa_page(world, ElementsPage).fill_text_box_form(data)
    world.shared_data["text_box"] = data


@when("I submit the DemoQA form")
def submit_form(world):
    demoqa_page(world, ElementsPage).submit_text_box_form()


@then("I should see the DemoQA text box output with:")
def verify_text_box_output(world, datatable):
    demoqa_page(world, ElementsPage).verify_text_box_output(table_rows(datatable)[0])


@when("I add a DemoQA web table record:")
def add_record(world, datatable):
    record = table_rows(datatable)[0]
    demoqa_page(world, ElementsPage).add_web_table_record(record)
    world.shared_data["web_table_record"] = record


@when("I add a generated DemoQA web table record")
def add_generated_record(world):
    record = factories(world).get("web_table_record").create()
    world.logger.debug(f"Generated web table record: {record['email']}")
    demoqa_page(world, ElementsPage).add_web_table_record(record)
    world.shared_data["web_table_record"] = record


@when(parsers.parse('I delete the DemoQA web table row for "{email}"'))
def delete_record(world, email):
    demoqa_page(world, ElementsPage).delete_web_table_row(email)


@then(parsers.parse('I should see the DemoQA web table row for "{email}"'))
def verify_row_exists(world, email):
    demoqa_page(world, ElementsPage).verify_web_table_row_exists(email)


@then(parsers.parse('I should not see the DemoQA web table row for "{email}"'))
def verify_row_not_exists(world, email):
    demoqa_page(world, ElementsPage).verify_web_table_row_not_exists(email)


@then("I should see the generated DemoQA web table row")
def verify_generated_row(world):
    verify_row_exists(world, world.shared_data["web_table_record"]["email"])
