"""
================================================================================
Test Data Factory Base
================================================================================

This module provides the base class and registry for test data factories.

Features:
- Reproducible data when ``test_data.seed`` is configured
- Per-factory configuration under the ``test_data.`` namespace
- Registry for looking factories up by name from step definitions

================================================================================
"""

from __future__ import annotations

import random
import string
import time
from typing import Any, Dict, Generic, List, TypeVar

from e2e_framework.core.logger import get_logger


T = TypeVar("T")

BASE36_ALPHABET = string.digits + string.ascii_lowercase


class FactoryNotFoundError(KeyError):
    """Raised when a factory name is not registered."""
    pass


# ================================================================================
# Factory Base
# ================================================================================

class BaseFactory(Generic[T]):
    """
    Base class for test data factories.

    Subclasses implement ``create``; ``create_many`` builds on it.
    Every factory owns a ``random.Random`` so seeding one factory does not
    affect another.
    """

    def __init__(self, config) -> None:
        """
        Initialize factory.

        Args:
            config: GlobalProperties; ``test_data.seed`` seeds the generator
        """
        self.config = config
        self.logger = get_logger(factory=type(self).__name__)

        seed = self.config.get("test_data.seed")
        self.random = random.Random(seed)
        if seed is not None:
            self.logger.debug(f"Factory seeded with {seed}")

    def create(self, **overrides: Any) -> T:
        """Create one record; ``overrides`` replace generated fields."""
        raise NotImplementedError

    def create_many(self, count: int, **overrides: Any) -> List[T]:
        """Create ``count`` records sharing the same overrides."""
        return [self.create(**overrides) for _ in range(count)]

    def generate_unique_id(self) -> str:
        """Millisecond timestamp plus 9 random base36 characters."""
        suffix = "".join(self.random.choice(BASE36_ALPHABET) for _ in range(9))
        return f"{int(time.time() * 1000)}-{suffix}"

    def get_config_value(self, key: str, default: Any = None) -> Any:
        """Read ``test_data.<key>``."""
        return self.config.get(f"test_data.{key}", default)


# ================================================================================
# Registry
# ================================================================================

class FactoryRegistry:
    """
    Named factory lookup.

    Usage:
        registry = FactoryRegistry()
        registry.register("user", UserFactory(config))
        user = registry.get("user").create()
    """

    def __init__(self) -> None:
        self._factories: Dict[str, BaseFactory] = {}

    def register(self, name: str, factory: BaseFactory) -> None:
        self._factories[name] = factory

    def get(self, name: str) -> BaseFactory:
        """
        Raises:
            FactoryNotFoundError: if ``name`` was never registered
        """
        try:
            return self._factories[name]
        except KeyError:
            raise FactoryNotFoundError(f"Factory not found: {name}") from None

    def has(self, name: str) -> bool:
        return name in self._factories

    def unregister(self, name: str) -> bool:
        """Returns True if a factory was removed."""
        return self._factories.pop(name, None) is not None

    def registered_names(self) -> List[str]:
        return list(self._factories)

    def cleanup(self) -> None:
        self._factories.clear()


__all__ = [
    "BaseFactory",
    "FactoryRegistry",
    "FactoryNotFoundError",
]
