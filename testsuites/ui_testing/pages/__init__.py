"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the applications under test.

Each page class encapsulates:
    - Element selectors
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .cart_page import CartPage
from .checkout_page import CheckoutPage
from .elements_page import ElementsPage
from .inventory_page import InventoryPage
from .login_page import LoginPage

__all__ = [
    "CartPage",
    "CheckoutPage",
    "ElementsPage",
    "InventoryPage",
    "LoginPage",
]
