"""Main catalog configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from pattern_catalog.config.schemas.example_schema import (
    LoanApprovalConfig,
    NotificationConfig,
)
from pattern_catalog.config.schemas.logging_schema import LoggingConfig
from pattern_catalog.domain.core.exceptions import ConfigurationError


class CatalogConfig(BaseModel):
    """Catalog configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    notification: NotificationConfig = Field(
        default_factory=lambda: NotificationConfig()
    )
    loan: LoanApprovalConfig = Field(default_factory=lambda: LoanApprovalConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogConfig":
        """Create configuration from a raw dictionary."""
        return validate_config(data)


def validate_config(data: Dict[str, Any]) -> CatalogConfig:
    """
    Validate raw configuration data.

    Args:
        data: Configuration dictionary

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    try:
        return CatalogConfig.model_validate(data)
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", fields) from e
