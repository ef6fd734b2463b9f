import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from pattern_catalog.infrastructure.patterns import SingletonRegistry, get_singleton


class Counter:
    created = 0

    def __init__(self, start=0):
        Counter.created += 1
        self.value = start


class SlowService:
    created = 0

    def __init__(self):
        time.sleep(0.02)
        SlowService.created += 1


class FlakyService:
    attempts = 0

    def __init__(self):
        FlakyService.attempts += 1
        if FlakyService.attempts == 1:
            raise ConnectionError("not yet")


class TestSingletonRegistry:
    """Test singleton registry behaviour."""

    def setup_method(self):
        Counter.created = 0
        SlowService.created = 0
        FlakyService.attempts = 0

    def test_registry_is_itself_a_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_get_creates_once_and_reuses(self):
        registry = SingletonRegistry.get_instance()

        first = registry.get(Counter, 5)
        second = registry.get(Counter, 99)

        assert first is second
        assert first.value == 5
        assert Counter.created == 1
        assert registry.has(Counter)

    def test_get_singleton_uses_global_registry(self):
        instance = get_singleton(Counter)

        assert SingletonRegistry.get_instance().get(Counter) is instance

    def test_concurrent_get_constructs_once(self):
        barrier = threading.Barrier(10)

        def worker():
            barrier.wait()
            return get_singleton(SlowService)

        with ThreadPoolExecutor(max_workers=10) as executor:
            results = list(executor.map(lambda _: worker(), range(10)))

        assert SlowService.created == 1
        assert all(result is results[0] for result in results)

    def test_failed_construction_leaves_no_entry(self):
        registry = SingletonRegistry.get_instance()

        with pytest.raises(ConnectionError):
            registry.get(FlakyService)
        assert registry.has(FlakyService) is False

        assert isinstance(registry.get(FlakyService), FlakyService)
        assert FlakyService.attempts == 2

    def test_failed_construction_is_logged_and_reraised_unchanged(self):
        registry = SingletonRegistry.get_instance()
        registry._logger = Mock()

        with pytest.raises(ConnectionError, match="not yet"):
            registry.get(FlakyService)

        registry._logger.warning.assert_called_once()
        assert registry._logger.warning.call_args.kwargs["singleton"] == "FlakyService"

    def test_register_remove_and_clear(self):
        registry = SingletonRegistry.get_instance()
        counter = Counter()

        registry.register(Counter, counter)
        assert registry.get(Counter) is counter

        assert registry.remove(Counter) is True
        assert registry.remove(Counter) is False

        registry.get(Counter)
        registry.clear()
        assert registry.has(Counter) is False

    def test_constructor_may_request_another_singleton(self):
        class Outer:
            def __init__(self):
                self.inner = get_singleton(Counter)

        outer = get_singleton(Outer)

        assert outer.inner is get_singleton(Counter)
