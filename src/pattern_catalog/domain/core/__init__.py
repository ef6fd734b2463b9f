"""Core domain types shared across the catalog."""

from pattern_catalog.domain.core.exceptions import (
    CatalogException,
    ConfigurationError,
    ExpressionSyntaxError,
    SingletonAccessError,
    StrategyNotSelectedError,
    UnknownExampleError,
    ValidationError,
)

__all__ = [
    "CatalogException",
    "ConfigurationError",
    "ExpressionSyntaxError",
    "SingletonAccessError",
    "StrategyNotSelectedError",
    "UnknownExampleError",
    "ValidationError",
]
