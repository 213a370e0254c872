"""
Playwright plugins.

    - PlaywrightPlugin: base class with page/context/browser event hooks
    - ConsoleCapturePlugin: collects console and page errors for the report
"""

from .base_plugin import PlaywrightPlugin
from .console_capture import ConsoleCapturePlugin

__all__ = [
    "PlaywrightPlugin",
    "ConsoleCapturePlugin",
]
