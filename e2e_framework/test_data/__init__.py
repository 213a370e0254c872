"""
Test data factories.
"""

from .base_factory import BaseFactory, FactoryNotFoundError, FactoryRegistry
from .factories import (
    CheckoutInfoFactory,
    UserFactory,
    WebTableRecordFactory,
    build_default_registry,
)

__all__ = [
    "BaseFactory",
    "FactoryRegistry",
    "FactoryNotFoundError",
    "UserFactory",
    "CheckoutInfoFactory",
    "WebTableRecordFactory",
    "build_default_registry",
]
