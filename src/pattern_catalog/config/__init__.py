"""Configuration package for the pattern catalog."""

from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import (
    CatalogConfig,
    LoanApprovalConfig,
    LoggingConfig,
    NotificationConfig,
    validate_config,
)

__all__ = [
    "CatalogConfig",
    "ConfigurationManager",
    "LoanApprovalConfig",
    "LoggingConfig",
    "NotificationConfig",
    "validate_config",
]
