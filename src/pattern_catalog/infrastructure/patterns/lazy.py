"""Deferred, thread-safe, once-only value initialization."""

import threading
from typing import Callable, Generic, Optional, TypeVar

from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class Lazy(Generic[T]):
    """
    A value produced by ``factory`` on first access and shared afterwards.

    Initialization follows the check-lock-check idiom: the fast path reads the
    created flag without locking; the slow path re-checks under the lock before
    calling the factory. The value is stored before the flag is set, so any
    reader that sees the flag also sees the value.

    Failure policy: if the factory raises, the exception propagates to the
    caller that triggered construction and nothing is cached. The next access,
    including one from a thread that was waiting on the lock, calls the
    factory again.
    """

    def __init__(self, factory: Callable[[], T], name: Optional[str] = None):
        self._factory = factory
        self._name = name or getattr(factory, "__qualname__", repr(factory))
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._created = False
        self._logger = get_logger(__name__)

    @property
    def is_value_created(self) -> bool:
        """Whether the factory has completed successfully."""
        return self._created

    @property
    def value(self) -> T:
        """Return the shared value, constructing it on first access."""
        if not self._created:
            with self._lock:
                if not self._created:
                    self._logger.debug("Creating lazy value", name=self._name)
                    try:
                        value = self._factory()
                    except Exception:
                        self._logger.warning(
                            "Lazy value construction failed; will retry on next access",
                            name=self._name,
                        )
                        raise
                    self._value = value
                    self._created = True
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        state = "created" if self._created else "pending"
        return f"Lazy({self._name}, {state})"
