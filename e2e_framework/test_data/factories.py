"""
================================================================================
Concrete Test Data Factories
================================================================================

Factories for the data the bundled feature suites type into forms.

- UserFactory: SauceDemo credentials (known accounts + random invalid ones)
- CheckoutInfoFactory: checkout step-one form
- WebTableRecordFactory: DemoQA web table rows

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict

from .base_factory import BaseFactory, FactoryRegistry


FIRST_NAMES = ["Ada", "Grace", "Linus", "Margaret", "Alan", "Barbara", "Dennis", "Katherine"]
LAST_NAMES = ["Lovelace", "Hopper", "Torvalds", "Hamilton", "Turing", "Liskov", "Ritchie", "Johnson"]
DEPARTMENTS = ["Engineering", "Quality", "Legal", "Compliance", "Insurance"]
STREETS = ["Main St", "High St", "Station Rd", "Park Ave", "Church Ln"]


class UserFactory(BaseFactory[Dict[str, str]]):
    """
    SauceDemo users.

    Known accounts come from ``test_data.users.<kind>`` with built-in
    fallbacks; ``create()`` returns the standard account.
    """

    KNOWN_USERS = {
        "standard": "standard_user",
        "locked_out": "locked_out_user",
        "problem": "problem_user",
        "performance_glitch": "performance_glitch_user",
    }
    DEFAULT_PASSWORD = "secret_sauce"

    def create(self, **overrides: Any) -> Dict[str, str]:
        return self.known("standard", **overrides)

    def known(self, kind: str, **overrides: Any) -> Dict[str, str]:
        """Credentials for one of the pre-provisioned accounts."""
        if kind not in self.KNOWN_USERS:
            raise ValueError(f"Unknown user kind: {kind}. Expected one of {sorted(self.KNOWN_USERS)}")
        data = {
            "username": self.get_config_value(f"users.{kind}", self.KNOWN_USERS[kind]),
            "password": self.get_config_value("password", self.DEFAULT_PASSWORD),
        }
        data.update(overrides)
        return data

    def invalid(self, **overrides: Any) -> Dict[str, str]:
        """Random credentials that no account matches."""
        data = {
            "username": f"invalid_{self.generate_unique_id()}",
            "password": f"wrong_{self.random.randint(100000, 999999)}",
        }
        data.update(overrides)
        return data


class CheckoutInfoFactory(BaseFactory[Dict[str, str]]):
    """Checkout information form (first name, last name, postal code)."""

    def create(self, **overrides: Any) -> Dict[str, str]:
        data = {
            "first_name": self.random.choice(FIRST_NAMES),
            "last_name": self.random.choice(LAST_NAMES),
            "postal_code": f"{self.random.randint(10000, 99999)}",
        }
        data.update(overrides)
        return data


class WebTableRecordFactory(BaseFactory[Dict[str, str]]):
    """DemoQA web table row. Emails are unique per record."""

    def create(self, **overrides: Any) -> Dict[str, str]:
        first_name = self.random.choice(FIRST_NAMES)
        last_name = self.random.choice(LAST_NAMES)
        domain = self.get_config_value("email_domain", "example.com")
        data = {
            "first_name": first_name,
            "last_name": last_name,
            "email": f"{first_name}.{last_name}.{self.generate_unique_id()}@{domain}".lower(),
            "age": str(self.random.randint(18, 65)),
            "salary": str(self.random.randrange(30000, 150000, 1000)),
            "department": self.random.choice(DEPARTMENTS),
        }
        data.update(overrides)
        return data

    def create_text_box(self, **overrides: Any) -> Dict[str, str]:
        """DemoQA text box form derived from a generated record."""
        record = self.create()
        data = {
            "full_name": f"{record['first_name']} {record['last_name']}",
            "email": record["email"],
            "current_address": f"{self.random.randint(1, 999)} {self.random.choice(STREETS)}",
            "permanent_address": f"{self.random.randint(1, 999)} {self.random.choice(STREETS)}",
        }
        data.update(overrides)
        return data


def build_default_registry(config) -> FactoryRegistry:
    """Registry with every bundled factory registered under its short name."""
    registry = FactoryRegistry()
    registry.register("user", UserFactory(config))
    registry.register("checkout_info", CheckoutInfoFactory(config))
    registry.register("web_table_record", WebTableRecordFactory(config))
    return registry


__all__ = [
    "UserFactory",
    "CheckoutInfoFactory",
    "WebTableRecordFactory",
    "build_default_registry",
]
