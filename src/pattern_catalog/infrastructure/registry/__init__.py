"""Registry package."""

from pattern_catalog.infrastructure.registry.example_registry import (
    ExampleRegistration,
    ExampleRegistry,
    PatternFamily,
    get_example_registry,
)

__all__ = [
    "ExampleRegistration",
    "ExampleRegistry",
    "PatternFamily",
    "get_example_registry",
]
