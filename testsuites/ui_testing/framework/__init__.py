"""
================================================================================
UI Testing Framework
================================================================================

Page-object support for the BDD suites.

Components:
    - page_base: Base page object for common operations

Browser lifecycle lives in ``e2e_framework.core.playwright_world``.

Author: Automation Team
License: MIT
================================================================================
"""

from .page_base import BasePage

__all__ = [
    "BasePage",
]
