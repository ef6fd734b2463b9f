"""Example Registry - registry pattern for runnable pattern demos.

Each pattern module registers its demo under a unique name together with its
family and a one-line summary. The CLI looks demos up here instead of
hard-coding the catalog.
"""

import threading
from enum import Enum
from typing import Callable, Dict, List, Optional

from pattern_catalog.config.schemas import CatalogConfig
from pattern_catalog.domain.core.exceptions import ConfigurationError, UnknownExampleError
from pattern_catalog.infrastructure.logging.logger import get_logger

DemoFunction = Callable[[CatalogConfig], List[str]]


class PatternFamily(str, Enum):
    """Pattern family enumeration."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class ExampleRegistration:
    """Container for example registration information."""

    def __init__(self, name: str, family: PatternFamily, summary: str, demo: DemoFunction):
        """
        Initialize example registration.

        Args:
            name: Unique example name (e.g., 'singleton', 'chain-of-responsibility')
            family: Pattern family the example belongs to
            summary: One-line description shown by the CLI
            demo: Callable producing the demo output lines
        """
        self.name = name
        self.family = family
        self.summary = summary
        self.demo = demo

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "family": self.family.value, "summary": self.summary}

    def __repr__(self) -> str:
        return f"ExampleRegistration(name='{self.name}', family='{self.family.value}')"


class ExampleRegistry:
    """
    Registry of runnable pattern examples.

    Thread-safe singleton implementation.
    """

    _instance: Optional["ExampleRegistry"] = None
    _lock = threading.Lock()

    def __init__(self):
        """Initialize example registry."""
        self._registrations: Dict[str, ExampleRegistration] = {}
        self._registration_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "ExampleRegistry":
        """Get singleton instance of example registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Discard the singleton instance. Intended for tests."""
        with cls._lock:
            cls._instance = None

    def register_example(self,
                         name: str,
                         family: PatternFamily,
                         summary: str,
                         demo: DemoFunction) -> None:
        """
        Register an example.

        Raises:
            ConfigurationError: If an example with this name is already registered
        """
        with self._registration_lock:
            if name in self._registrations:
                raise ConfigurationError(f"Example '{name}' is already registered")

            registration = ExampleRegistration(name, PatternFamily(family), summary, demo)
            self._registrations[name] = registration
            self._logger.debug("Registered example", example=name, family=registration.family.value)

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def get_registration(self, name: str) -> ExampleRegistration:
        """
        Get registration for an example.

        Raises:
            UnknownExampleError: If no example with this name is registered
        """
        registration = self._registrations.get(name)
        if registration is None:
            raise UnknownExampleError(name, self.get_registered_names())
        return registration

    def get_registered_names(self) -> List[str]:
        return list(self._registrations.keys())

    def list_examples(self, family: Optional[PatternFamily] = None) -> List[ExampleRegistration]:
        """List registrations in registration order, optionally for one family."""
        registrations = list(self._registrations.values())
        if family is not None:
            family = PatternFamily(family)
            registrations = [r for r in registrations if r.family == family]
        return registrations

    def run_example(self, name: str, config: Optional[CatalogConfig] = None) -> List[str]:
        """
        Run an example and return its output lines.

        Raises:
            UnknownExampleError: If no example with this name is registered
        """
        registration = self.get_registration(name)
        self._logger.info("Running example", example=name)
        return registration.demo(config or CatalogConfig())

    def clear_registrations(self) -> None:
        """Clear all registrations (mainly for testing)."""
        with self._registration_lock:
            self._registrations.clear()


def get_example_registry() -> ExampleRegistry:
    """Get the global example registry instance."""
    return ExampleRegistry.get_instance()
