"""Infrastructure patterns package."""

from pattern_catalog.infrastructure.patterns.lazy import Lazy
from pattern_catalog.infrastructure.patterns.singleton_access import get_singleton
from pattern_catalog.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["Lazy", "SingletonRegistry", "get_singleton"]
