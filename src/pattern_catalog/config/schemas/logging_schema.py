"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_DESTINATIONS = ["console", "file", "both"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field(
        "console", description="Where log records are written; console means stderr"
    )
    file_path: str = Field(
        "logs/pattern_catalog.log", description="Log file path when logging to a file"
    )
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(3, description="Number of rotated files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Upper-cased log level

        Raises:
            ValueError: If log level is invalid
        """
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        destination = v.lower()
        if destination not in VALID_DESTINATIONS:
            raise ValueError(f"Log destination must be one of {VALID_DESTINATIONS}")
        return destination

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 1:
            raise ValueError("Rotation settings must be at least 1")
        return v
