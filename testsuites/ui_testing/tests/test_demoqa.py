"""
DemoQA Elements scenarios.
"""

import pytest
from pytest_bdd import scenarios

pytestmark = [pytest.mark.ui, pytest.mark.e2e]

scenarios("../features/demoqa")
