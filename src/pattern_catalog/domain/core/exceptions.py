# src/pattern_catalog/domain/core/exceptions.py
from typing import Any, Optional, List


class CatalogException(Exception):
    """Base exception for all catalog-specific errors."""
    pass


class ValidationError(CatalogException):
    """Raised when input validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(CatalogException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class UnknownExampleError(CatalogException):
    """Raised when a requested example is not registered."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        super().__init__(f"Example '{name}' is not registered")
        self.name = name
        self.available = available or []


class SingletonAccessError(CatalogException):
    """Raised when a singleton class is instantiated outside its accessor."""
    def __init__(self, class_name: str):
        super().__init__(
            f"{class_name} is a singleton; use {class_name}.get_instance()"
        )
        self.class_name = class_name


class StrategyNotSelectedError(CatalogException):
    """Raised when a context is used before a strategy was selected."""
    pass


class ExpressionSyntaxError(ValidationError):
    """Raised when an arithmetic expression cannot be parsed."""
    def __init__(self, expression: str, position: int, reason: str):
        super().__init__(
            f"Invalid expression at position {position}: {reason}",
            {"expression": expression, "position": position},
        )
        self.expression = expression
        self.position = position
        self.reason = reason
