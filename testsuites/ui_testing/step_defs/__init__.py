"""
================================================================================
Step Definitions
================================================================================

pytest-bdd step implementations bound to the feature files under
``testsuites/ui_testing/features``. The modules are loaded as pytest plugins
from the repository conftest so every scenario module sees every step.

Components:
    - common: data table helpers and page object builders
    - auth_steps: SauceDemo login / logout
    - shopping_steps: SauceDemo inventory and cart
    - checkout_steps: SauceDemo checkout flow
    - elements_steps: DemoQA Elements section

Author: Automation Team
License: MIT
================================================================================
"""

STEP_MODULES = [
    "testsuites.ui_testing.step_defs.auth_steps",
    "testsuites.ui_testing.step_defs.shopping_steps",
    "testsuites.ui_testing.step_defs.checkout_steps",
    "testsuites.ui_testing.step_defs.elements_steps",
]
