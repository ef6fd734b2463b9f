"""
Singleton variants.

Three ways of guaranteeing one shared instance:

1. ``EagerSingleton``: created when this module is imported.
2. ``LazySingleton``: created on first access with double-checked locking.
3. ``LazyValueSingleton``: created on first access through a ``Lazy`` value.

Each class rejects direct construction; use ``get_instance()``.

If construction raises, the error propagates to the caller of
``get_instance()`` and no instance is published; the next call retries.
"""

import threading
from datetime import datetime
from typing import List, Optional

from pattern_catalog.domain.core.exceptions import SingletonAccessError
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.patterns.lazy import Lazy

logger = get_logger(__name__)

# Only the accessors below hold this token.
_ACCESSOR_TOKEN = object()


def _check_token(token: object, class_name: str) -> None:
    if token is not _ACCESSOR_TOKEN:
        raise SingletonAccessError(class_name)


class EagerSingleton:
    """Instance built at import time; access is a plain read."""

    _instance: "EagerSingleton"

    def __init__(self, _token: object = None):
        _check_token(_token, "EagerSingleton")
        self.created_at = datetime.now()

    @classmethod
    def get_instance(cls) -> "EagerSingleton":
        return cls._instance


EagerSingleton._instance = EagerSingleton(_ACCESSOR_TOKEN)


class LazySingleton:
    """Instance built on first access using check-lock-check."""

    _instance: Optional["LazySingleton"] = None
    _lock = threading.Lock()
    instances_created = 0

    def __init__(self, _token: object = None):
        _check_token(_token, "LazySingleton")
        self.created_at = datetime.now()
        LazySingleton.instances_created += 1

    @classmethod
    def get_instance(cls) -> "LazySingleton":
        """Return the shared instance, creating it on the first call."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    logger.debug("Creating lazy singleton instance")
                    cls._instance = cls(_ACCESSOR_TOKEN)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the shared instance. Intended for tests."""
        with cls._lock:
            cls._instance = None
            cls.instances_created = 0


class LazyValueSingleton:
    """Instance held in a ``Lazy`` value created on first access."""

    _lazy: Lazy["LazyValueSingleton"]

    def __init__(self, _token: object = None):
        _check_token(_token, "LazyValueSingleton")
        self.created_at = datetime.now()

    @classmethod
    def get_instance(cls) -> "LazyValueSingleton":
        return cls._lazy.value

    @classmethod
    def is_created(cls) -> bool:
        return cls._lazy.is_value_created

    @classmethod
    def reset(cls) -> None:
        """Replace the lazy holder with a fresh one. Intended for tests."""
        cls._lazy = Lazy(lambda: cls(_ACCESSOR_TOKEN), name=cls.__name__)


LazyValueSingleton.reset()


def demo() -> List[str]:
    lines = []
    for singleton_class in (EagerSingleton, LazySingleton, LazyValueSingleton):
        first = singleton_class.get_instance()
        second = singleton_class.get_instance()
        lines.append(
            f"{singleton_class.__name__}: same instance on repeated access: {first is second}"
        )

    try:
        LazySingleton()
    except SingletonAccessError as e:
        lines.append(f"Direct construction rejected: {e}")
    return lines


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
