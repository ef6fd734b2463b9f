"""Configuration schemas package."""

from .app_schema import CatalogConfig, validate_config
from .example_schema import LoanApprovalConfig, NotificationConfig
from .logging_schema import LoggingConfig

__all__ = [
    "CatalogConfig",
    "LoanApprovalConfig",
    "LoggingConfig",
    "NotificationConfig",
    "validate_config",
]
