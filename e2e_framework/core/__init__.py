"""
================================================================================
Framework Core
================================================================================

Components:
    - global_properties: layered configuration (defaults -> env file -> CI file
      -> environment variables -> CLI arguments)
    - logger: Loguru setup and contextual loggers
    - playwright_adapter: configured browser/context/page creation
    - playwright_world: per-scenario resource lifecycle

Author: Automation Team
License: MIT
================================================================================
"""

from .global_properties import GlobalProperties
from .logger import get_logger, init_logger
from .playwright_adapter import PlaywrightAdapter, UnsupportedBrowserError
from .playwright_world import PlaywrightWorld, WorldNotInitializedError

__all__ = [
    "GlobalProperties",
    "get_logger",
    "init_logger",
    "PlaywrightAdapter",
    "UnsupportedBrowserError",
    "PlaywrightWorld",
    "WorldNotInitializedError",
]
