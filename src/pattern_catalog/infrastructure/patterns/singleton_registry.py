"""Registry holding one instance per class, created on first request."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Process-wide registry of singleton instances.

    Thread-safe singleton implementation. Instances are constructed at most
    once per class; a constructor that raises leaves no entry behind, so the
    next ``get`` retries construction.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __init__(self):
        """Initialize singleton registry."""
        self._instances: Dict[Type, Any] = {}
        # Re-entrant: a singleton's constructor may request another singleton.
        self._instances_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get singleton instance of the registry itself."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance for ``singleton_class``, creating it if needed.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, used only on first creation
            **kwargs: Constructor keyword arguments, used only on first creation

        Returns:
            The shared instance
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._instances_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    try:
                        instance = singleton_class(*args, **kwargs)
                    except Exception:
                        self._logger.warning(
                            "Singleton construction failed; will retry on next request",
                            singleton=singleton_class.__name__,
                        )
                        raise
                    self._instances[singleton_class] = instance
                    self._logger.debug(
                        "Created singleton instance", singleton=singleton_class.__name__
                    )
        return cast(T, instance)

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register an existing instance, replacing any previous one."""
        with self._instances_lock:
            self._instances[singleton_class] = instance
            self._logger.debug("Registered singleton instance", singleton=singleton_class.__name__)

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance exists for the class."""
        return singleton_class in self._instances

    def remove(self, singleton_class: Type) -> bool:
        """Remove the instance for a class. Returns True if one was removed."""
        with self._instances_lock:
            return self._instances.pop(singleton_class, None) is not None

    def clear(self) -> None:
        """Drop every registered instance."""
        with self._instances_lock:
            self._instances.clear()

    @classmethod
    def reset(cls) -> None:
        """Discard the registry itself. Intended for tests."""
        with cls._lock:
            cls._instance = None
