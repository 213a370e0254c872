"""
Reporting helpers for Allure.
"""

from .allure_utils import (
    AllureReportProcessor,
    attach_json,
    attach_png,
    attach_text,
    generate_allure_report,
    write_environment_properties,
)

__all__ = [
    "AllureReportProcessor",
    "attach_json",
    "attach_png",
    "attach_text",
    "generate_allure_report",
    "write_environment_properties",
]
