"""Unified configuration management for the catalog."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml

from pattern_catalog.config.schemas import (
    CatalogConfig,
    LoanApprovalConfig,
    LoggingConfig,
    NotificationConfig,
)
from pattern_catalog.domain.core.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)

ENV_PREFIX = "PATTERN_CATALOG_"

# Environment variable suffix -> (section, key)
ENV_OVERRIDES = {
    "LOG_LEVEL": ("logging", "level"),
    "LOG_DESTINATION": ("logging", "destination"),
    "LOG_FILE": ("logging", "file_path"),
    "DEFAULT_CHANNEL": ("notification", "default_channel"),
}

SECTION_MAPPING = {
    LoggingConfig: "logging",
    NotificationConfig: "notification",
    LoanApprovalConfig: "loan",
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Provides:
    - Type safety through pydantic schemas
    - YAML or JSON configuration files
    - Environment variable overrides
    - Lazy loading guarded by a lock
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[CatalogConfig] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def app_config(self) -> CatalogConfig:
        """Lazy load catalog configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> CatalogConfig:
        """Load configuration from file and environment."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = self.apply_environment_overrides(config_data)
        config = CatalogConfig.from_dict(config_data)
        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return config

    @staticmethod
    def load_from_file(path: str) -> Dict[str, Any]:
        """
        Load raw configuration data from a YAML or JSON file.

        Args:
            path: Path to the configuration file

        Returns:
            Configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with file_path.open("r", encoding="utf-8") as f:
                if file_path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping at the top level"
            )
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply PATTERN_CATALOG_* environment variables on top of file values."""
        result = {key: dict(value) if isinstance(value, dict) else value
                  for key, value in config_data.items()}
        for suffix, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(f"{ENV_PREFIX}{suffix}")
            if value:
                result.setdefault(section, {})[key] = value
                logger.debug("Applied environment override %s%s", ENV_PREFIX, suffix)
        return result

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return self._config_cache[config_type]

    def _create_typed_config(self, config_type: Type[T]) -> T:
        """Resolve a section type to the matching attribute of the catalog config."""
        if config_type is CatalogConfig:
            return self.app_config  # type: ignore[return-value]
        attr = SECTION_MAPPING.get(config_type)
        if attr is None:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, attr)

    def reload(self) -> None:
        """Drop cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()
