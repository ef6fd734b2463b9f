import logging
import os
from logging.handlers import RotatingFileHandler

import pytest

from pattern_catalog.creational.singleton import LazySingleton, LazyValueSingleton
from pattern_catalog.infrastructure.patterns.singleton_registry import SingletonRegistry
from pattern_catalog.infrastructure.registry.example_registry import ExampleRegistry


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test fresh singletons and registries."""
    LazySingleton.reset()
    LazyValueSingleton.reset()
    SingletonRegistry.reset()
    ExampleRegistry.reset()
    yield
    LazySingleton.reset()
    LazyValueSingleton.reset()
    SingletonRegistry.reset()
    ExampleRegistry.reset()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove catalog overrides that may be set in the developer's shell."""
    for key in list(os.environ):
        if key.startswith("PATTERN_CATALOG_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; remove the ones it added."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers and type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def config_file(tmp_path):
    """Write a configuration file and return its path."""
    def _write(content: str, name: str = "catalog.yml") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
