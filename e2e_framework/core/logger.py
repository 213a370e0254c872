"""
================================================================================
Framework Logging
================================================================================

Centralized Loguru configuration for the framework.

Features:
    - One-time logger initialization (idempotent)
    - Text or JSON (serialized) output
    - Optional rotating file output
    - Child loggers carrying scenario/plugin context via ``bind``

Usage:
    init_logger(level="DEBUG")
    log = get_logger(scenario="Checkout happy path")
    log.info("Navigating to cart")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized = False


def _normalize_level(level: str) -> str:
    level = (level or "INFO").upper()
    if level == "WARN":
        level = "WARNING"
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}. Expected one of {LOG_LEVELS}")
    return level


def init_logger(
    level: str = "INFO",
    fmt: str = "text",
    console: bool = True,
    output_dir: Optional[str] = None,
    sink: Any = None,
    force: bool = False,
) -> None:
    """
    Initializes the global Loguru logger.

    Args:
        level: Minimum level - DEBUG, INFO, WARN(ING), ERROR
        fmt: "text" for human-readable lines, "json" for one JSON object per record
        console: Write to stderr (ignored when ``sink`` is given)
        output_dir: Directory for a rotating ``framework.log`` file
        sink: Custom Loguru sink (file object, callable, path)
        force: Re-initialize even if already configured
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    log_level = _normalize_level(level)
    serialize = fmt == "json"

    logger.remove()

    if sink is not None:
        logger.add(sink, level=log_level, format=TEXT_FORMAT, serialize=serialize, colorize=False)
    elif console:
        logger.add(
            sys.stderr,
            level=log_level,
            format=TEXT_FORMAT,
            serialize=serialize,
            colorize=not serialize,
            backtrace=True,
            diagnose=False,
        )

    if output_dir:
        log_dir = Path(output_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "framework.log",
            level=log_level,
            format=TEXT_FORMAT.replace("{level: <8}", "{level}"),
            serialize=serialize,
            rotation="10 MB",
            retention="7 days",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level} (format={fmt})")


def init_logger_from_config(config, force: bool = False) -> None:
    """Initialize logging from the ``logging.*`` section of GlobalProperties."""
    init_logger(
        level=config.get("logging.level", "INFO"),
        fmt=config.get("logging.format", "text"),
        console=config.get("logging.console", True),
        output_dir=config.get("logging.output_dir"),
        force=force,
    )


def get_logger(**context: Any):
    """
    Returns a logger bound with the given context.

    Example:
        log = get_logger(scenario="Login", browser="firefox")
        log.info("Started")  # context travels in record["extra"]
    """
    if not _logger_initialized:
        init_logger()
    return logger.bind(**context)


def reset_logger() -> None:
    """Forget the initialization flag so the next call reconfigures handlers."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "LOG_LEVELS",
    "init_logger",
    "init_logger_from_config",
    "get_logger",
    "reset_logger",
]
