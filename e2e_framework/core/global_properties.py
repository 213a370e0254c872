"""
================================================================================
Global Properties
================================================================================

Hierarchical configuration for the framework.

Priority order (highest to lowest):
    1. Command-line arguments (--browser.name=firefox)
    2. Environment variables (BROWSER_NAME=firefox)
    3. CI/CD configuration (configs/global/ci-cd.json)
    4. Environment-specific configuration (configs/global/{ENVIRONMENT}.json)
    5. Default configuration (configs/global/defaults.json)

Missing or malformed files are skipped silently. Pass ``on_error`` to get
notified about skipped files without changing that behavior.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import copy
import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Optional


# Environment variables with these prefixes are imported into the store
FRAMEWORK_ENV_PREFIXES = ("BROWSER", "EXECUTION", "UI", "REPORTING", "MONITORING")

# Presence of any of these marks a CI run
CI_PLATFORM_VARIABLES = ("GITHUB_ACTIONS", "GITLAB_CI", "JENKINS_URL", "TRAVIS", "CIRCLECI")

ENVIRONMENT_VARIABLE = "ENVIRONMENT"
DEFAULT_ENVIRONMENT = "dev"

DEFAULT_VIEWPORT = {"width": 1920, "height": 1080}

_MISSING = object()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unsupported JSON constant: {name}")


def parse_value(value: str) -> Any:
    """
    Parse an environment or CLI string into a JSON value.

    "true" -> True, "30000" -> 30000, '{"a": 1}' -> {"a": 1}.
    Anything that is not valid JSON is returned unchanged.
    """
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except ValueError:
        return value


def deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep merges two dictionaries, with override taking precedence.

    Lists are replaced, never merged element by element.
    """
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def env_var_to_config_key(name: str) -> str:
    """BROWSER_VIEWPORT_WIDTH -> browser.viewport.width"""
    return name.lower().replace("_", ".")


class GlobalProperties:
    """
    Layered configuration store with dot-notation access.

    Usage:
        >>> config = GlobalProperties()
        >>> config.get("browser.name", "chromium")
        'firefox'
        >>> config.set("execution.timeout", 45000)
        >>> config.get_playwright_use_options()
        {'headless': True, 'viewport': {...}, 'ignore_https_errors': True}

    Environment and arguments are read once, at construction. Inject
    ``environ``/``argv`` to build a resolver independent of process state.
    """

    def __init__(
        self,
        config_dir: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        argv: Optional[Iterable[str]] = None,
        on_error: Optional[Callable[[str, Exception], None]] = None,
    ) -> None:
        """
        Initialize and load every configuration layer.

        Args:
            config_dir: Root config directory. Defaults to ``<cwd>/configs``.
            environ: Environment snapshot. Defaults to a copy of ``os.environ``.
            argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.
            on_error: Called with (file path, exception) for each skipped file.
        """
        self.config_dir = Path(config_dir) if config_dir else Path.cwd() / "configs"
        self._environ: Dict[str, str] = dict(os.environ if environ is None else environ)
        self._argv = list(sys.argv[1:] if argv is None else argv)
        self._on_error = on_error
        self._properties: Dict[str, Any] = {}

        self._load_configuration()

    # =========================================================================
    # Loading
    # =========================================================================

    def _load_configuration(self) -> None:
        self._load_file("defaults.json")
        self._load_file(f"{self.get_environment()}.json")
        if self.is_ci():
            self._load_file("ci-cd.json")
        self._load_environment_variables()
        self._load_cli_arguments()

    def _load_file(self, filename: str) -> None:
        """Merge ``<config_dir>/global/<filename>`` if it exists and parses."""
        file_path = self.config_dir / "global" / filename
        if not file_path.is_file():
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = json.load(f)
            if not isinstance(content, dict):
                raise ValueError(f"Top-level value must be an object, got {type(content).__name__}")
        except (OSError, ValueError) as e:
            if self._on_error is not None:
                self._on_error(str(file_path), e)
            return

        self._properties = deep_merge(self._properties, content)

    def _load_environment_variables(self) -> None:
        for name, value in self._environ.items():
            if name.startswith(FRAMEWORK_ENV_PREFIXES):
                self.set(env_var_to_config_key(name), parse_value(value))

    def _load_cli_arguments(self) -> None:
        """Apply ``--key.nested=value`` arguments; anything else is ignored."""
        for arg in self._argv:
            if not arg.startswith("--"):
                continue
            key, sep, value = arg[2:].partition("=")
            if key and sep:
                self.set(key, parse_value(value))

    # =========================================================================
    # Access
    # =========================================================================

    def _lookup(self, key: str) -> Any:
        current: Any = self._properties
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return _MISSING
        return current

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        Args:
            key: Dot-notation path (e.g., "browser.viewport.width")
            default: Returned when the path is absent

        Returns:
            The stored value (an explicit null included) or ``default``
        """
        value = self._lookup(key)
        return default if value is _MISSING else value

    def has(self, key: str) -> bool:
        """True if the path is present, even when it holds null."""
        return self._lookup(key) is not _MISSING

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value by dot-notation path.

        Intermediate nodes are created as needed; a non-mapping intermediate
        value is replaced by an empty mapping.
        """
        *parents, last = key.split(".")
        current = self._properties
        for part in parents:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[last] = value

    def get_all(self) -> Dict[str, Any]:
        """Return a deep copy of the merged configuration."""
        return copy.deepcopy(self._properties)

    # =========================================================================
    # Derived queries
    # =========================================================================

    def is_ci(self) -> bool:
        """Check if running in a CI environment."""
        if self._environ.get("CI", "").lower() in ("true", "1"):
            return True
        return any(self._environ.get(name) for name in CI_PLATFORM_VARIABLES)

    def get_environment(self) -> str:
        """Active environment name (``ENVIRONMENT``, default "dev")."""
        return self._environ.get(ENVIRONMENT_VARIABLE) or DEFAULT_ENVIRONMENT

    def get_playwright_use_options(self) -> Dict[str, Any]:
        """
        Bundle the browser options shared by launch and context creation.

        ``browser.use_options`` overrides the three named keys.
        """
        overrides = self.get("browser.use_options", {})
        return {
            "headless": self.get("browser.headless", True),
            "viewport": self.get("browser.viewport", dict(DEFAULT_VIEWPORT)),
            "ignore_https_errors": self.get("browser.ignore_https_errors", True),
            **(overrides if isinstance(overrides, dict) else {}),
        }

    def __repr__(self) -> str:
        return f"GlobalProperties(environment={self.get_environment()!r}, ci={self.is_ci()})"


__all__ = [
    "GlobalProperties",
    "deep_merge",
    "parse_value",
    "env_var_to_config_key",
    "FRAMEWORK_ENV_PREFIXES",
    "CI_PLATFORM_VARIABLES",
]
