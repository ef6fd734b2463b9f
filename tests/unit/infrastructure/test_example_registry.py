from unittest.mock import Mock

import pytest

from pattern_catalog.config.schemas import CatalogConfig
from pattern_catalog.domain.core.exceptions import ConfigurationError, UnknownExampleError
from pattern_catalog.infrastructure.registry import (
    ExampleRegistry,
    PatternFamily,
    get_example_registry,
)
from pattern_catalog.registration import BUILTIN_EXAMPLES, register_builtin_examples


class TestExampleRegistry:
    """Test example registry functionality."""

    def setup_method(self):
        self.registry = ExampleRegistry.get_instance()
        self.mock_demo = Mock(return_value=["line one", "line two"])

    def test_singleton_access(self):
        assert get_example_registry() is self.registry

    def test_register_and_run_example(self):
        self.registry.register_example("sample", PatternFamily.BEHAVIORAL, "Sample", self.mock_demo)

        assert self.registry.is_registered("sample")
        assert self.registry.run_example("sample") == ["line one", "line two"]
        assert isinstance(self.mock_demo.call_args[0][0], CatalogConfig)

    def test_run_example_passes_config(self):
        config = CatalogConfig()
        self.registry.register_example("sample", "creational", "Sample", self.mock_demo)

        self.registry.run_example("sample", config)

        self.mock_demo.assert_called_once_with(config)

    def test_duplicate_registration_raises(self):
        self.registry.register_example("sample", PatternFamily.BEHAVIORAL, "Sample", self.mock_demo)

        with pytest.raises(ConfigurationError, match="already registered"):
            self.registry.register_example("sample", PatternFamily.BEHAVIORAL, "Again", self.mock_demo)

    def test_unknown_example_raises(self):
        self.registry.register_example("sample", PatternFamily.BEHAVIORAL, "Sample", self.mock_demo)

        with pytest.raises(UnknownExampleError) as exc_info:
            self.registry.run_example("missing")

        assert exc_info.value.name == "missing"
        assert exc_info.value.available == ["sample"]

    def test_invalid_family_is_rejected(self):
        with pytest.raises(ValueError):
            self.registry.register_example("sample", "functional", "Sample", self.mock_demo)

    def test_list_examples_by_family(self):
        self.registry.register_example("one", PatternFamily.CREATIONAL, "One", self.mock_demo)
        self.registry.register_example("two", PatternFamily.STRUCTURAL, "Two", self.mock_demo)

        assert [r.name for r in self.registry.list_examples()] == ["one", "two"]
        assert [r.name for r in self.registry.list_examples(PatternFamily.STRUCTURAL)] == ["two"]

    def test_registration_to_dict(self):
        self.registry.register_example("one", PatternFamily.CREATIONAL, "One", self.mock_demo)

        assert self.registry.get_registration("one").to_dict() == {
            "name": "one",
            "family": "creational",
            "summary": "One",
        }

    def test_clear_registrations(self):
        self.registry.register_example("one", PatternFamily.CREATIONAL, "One", self.mock_demo)

        self.registry.clear_registrations()

        assert self.registry.get_registered_names() == []


class TestBuiltinExamples:
    """Test registration of the built-in catalog."""

    def test_every_pattern_is_registered(self):
        registry = register_builtin_examples()

        assert len(registry.get_registered_names()) == len(BUILTIN_EXAMPLES) == 17
        families = {r.family for r in registry.list_examples()}
        assert families == set(PatternFamily)

    def test_registering_twice_is_idempotent(self):
        register_builtin_examples()
        registry = register_builtin_examples()

        assert len(registry.get_registered_names()) == 17

    def test_family_counts(self):
        registry = register_builtin_examples()

        assert len(registry.list_examples(PatternFamily.CREATIONAL)) == 2
        assert len(registry.list_examples(PatternFamily.STRUCTURAL)) == 7
        assert len(registry.list_examples(PatternFamily.BEHAVIORAL)) == 8

    @pytest.mark.parametrize("name", [entry[0] for entry in BUILTIN_EXAMPLES])
    def test_every_example_runs(self, name):
        registry = register_builtin_examples()

        lines = registry.run_example(name)

        assert lines
        assert all(isinstance(line, str) for line in lines)

    def test_configured_examples_use_config(self):
        registry = register_builtin_examples()
        config = CatalogConfig.from_dict({
            "notification": {"default_channel": "push"},
            "loan": {"clerk_limit": 100, "senior_clerk_limit": 200},
        })

        factory_lines = registry.run_example("factory", config)
        chain_lines = registry.run_example("chain-of-responsibility", config)

        assert factory_lines[-1].startswith("Push Notification:")
        assert chain_lines[0] == "Loan Approved by Loan Manager"
