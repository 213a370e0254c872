"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers, including the Gherkin tags used by the feature
files, and auto-marks tests by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "negative: Invalid input and error path scenarios"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser-driven tests"
    )
    config.addinivalue_line(
        "markers", "unit: Framework unit tests, no browser required"
    )

    # Application markers
    config.addinivalue_line(
        "markers", "saucedemo: Scenarios against SauceDemo"
    )
    config.addinivalue_line(
        "markers", "demoqa: Scenarios against DemoQA"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds the ``ui`` / ``unit`` marker based on where the test lives.
    """
    for item in items:
        parts = item.path.parts

        # Auto-add 'ui' marker to tests in ui_testing directory
        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)

        # Auto-add 'unit' marker to tests in unit directory
        if "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Playwright BDD End-to-End Framework",
        "=" * 60,
        "",
    ]
