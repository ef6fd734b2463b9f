import json

import pytest

from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import (
    CatalogConfig,
    LoanApprovalConfig,
    LoggingConfig,
    NotificationConfig,
)
from pattern_catalog.domain.core.exceptions import ConfigurationError

YAML_CONFIG = """
logging:
  level: debug
notification:
  default_channel: sms
loan:
  clerk_limit: 500
  senior_clerk_limit: 5000
"""


def test_defaults_without_file():
    manager = ConfigurationManager()

    assert manager.app_config == CatalogConfig()


def test_load_yaml_file(config_file):
    manager = ConfigurationManager(config_file(YAML_CONFIG))

    assert manager.get_typed(LoggingConfig).level == "DEBUG"
    assert manager.get_typed(NotificationConfig).default_channel == "sms"
    assert manager.get_typed(LoanApprovalConfig).senior_clerk_limit == 5000


def test_load_json_file(config_file):
    path = config_file(json.dumps({"logging": {"destination": "both"}}), name="catalog.json")

    assert ConfigurationManager(path).app_config.logging.destination == "both"


def test_empty_file_uses_defaults(config_file):
    assert ConfigurationManager(config_file("")).app_config == CatalogConfig()


def test_missing_file_raises(tmp_path):
    manager = ConfigurationManager(str(tmp_path / "missing.yml"))

    with pytest.raises(ConfigurationError, match="not found"):
        manager.app_config


def test_unparseable_file_raises(config_file):
    manager = ConfigurationManager(config_file("logging: [unclosed"))

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        manager.app_config


def test_non_mapping_file_raises(config_file):
    manager = ConfigurationManager(config_file("- just\n- a list\n"))

    with pytest.raises(ConfigurationError, match="mapping"):
        manager.app_config


def test_invalid_values_raise(config_file):
    manager = ConfigurationManager(config_file("loan:\n  clerk_limit: 900\n  senior_clerk_limit: 100\n"))

    with pytest.raises(ConfigurationError):
        manager.app_config


def test_environment_overrides_file(config_file, monkeypatch):
    monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "error")
    monkeypatch.setenv("PATTERN_CATALOG_DEFAULT_CHANNEL", "push")

    manager = ConfigurationManager(config_file(YAML_CONFIG))

    assert manager.app_config.logging.level == "ERROR"
    assert manager.app_config.notification.default_channel == "push"


def test_apply_environment_overrides_does_not_mutate_input(monkeypatch):
    monkeypatch.setenv("PATTERN_CATALOG_LOG_DESTINATION", "file")
    original = {"logging": {"level": "INFO"}}

    result = ConfigurationManager.apply_environment_overrides(original)

    assert result == {"logging": {"level": "INFO", "destination": "file"}}
    assert original == {"logging": {"level": "INFO"}}


def test_get_typed_caches_sections():
    manager = ConfigurationManager()

    assert manager.get_typed(LoggingConfig) is manager.get_typed(LoggingConfig)
    assert manager.get_typed(CatalogConfig) is manager.app_config


def test_get_typed_unknown_type_raises():
    with pytest.raises(ConfigurationError, match="Unknown configuration type"):
        ConfigurationManager().get_typed(dict)


def test_reload_picks_up_changes(config_file, monkeypatch):
    manager = ConfigurationManager()
    assert manager.app_config.logging.level == "WARNING"

    monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "INFO")
    manager.reload()

    assert manager.app_config.logging.level == "INFO"
