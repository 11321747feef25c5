import pytest

from keysmith.core.binding import AlgorithmBinding
from keysmith.core.errors import UnknownAlgorithm
from keysmith.core.generator import KeyGeneratorConfig
from keysmith.core.registry import ProviderRegistry


DEMO = KeyGeneratorConfig(algorithm_name="Demo", default_key_size=128)
OTHER = KeyGeneratorConfig(algorithm_name="Other", default_key_size=64, aliases=("Alt",))


def test_registries_are_independent():
    first = ProviderRegistry()
    second = ProviderRegistry()
    first.register(DEMO)

    assert "Demo" in first
    assert "Demo" not in second


def test_registry_operations():
    registry = ProviderRegistry()
    registry.register(OTHER)
    registry.register(DEMO)

    # Registration order is kept
    assert registry.list_algorithms() == ["Other", "Demo"]
    assert list(registry) == ["Other", "Demo"]
    assert len(registry) == 2

    binding = registry.create("Demo")
    assert isinstance(binding, AlgorithmBinding)
    assert binding.algorithm == "Demo"
    assert registry.describe("Demo") is DEMO

    # Each call builds a new binding
    assert registry.create("Demo") is not binding


def test_lookup_is_case_insensitive_and_resolves_aliases():
    registry = ProviderRegistry()
    registry.register(OTHER)

    assert "other" in registry
    assert "ALT" in registry
    assert registry.create("alt").algorithm == "Other"
    assert registry.describe("Alt") is OTHER
    assert registry.list_algorithms() == ["Other"]


def test_register_with_custom_factory():
    registry = ProviderRegistry()
    calls = []

    def factory():
        calls.append(1)
        return AlgorithmBinding(DEMO)

    registry.register("Custom", factory)
    binding = registry.create("custom")

    assert calls == [1]
    assert binding.algorithm == "Demo"
    assert registry.describe("Custom") is None


def test_registry_error_handling():
    registry = ProviderRegistry()
    registry.register(OTHER)

    # Unknown algorithm
    with pytest.raises(UnknownAlgorithm, match="Unknown algorithm"):
        registry.create("unknown")
    assert registry.get_factory("unknown") is None
    assert registry.describe("unknown") is None

    # Duplicate name or alias
    with pytest.raises(ValueError, match="already registered"):
        registry.register(KeyGeneratorConfig(algorithm_name="OTHER", default_key_size=128))
    with pytest.raises(ValueError, match="already registered"):
        registry.register(KeyGeneratorConfig(algorithm_name="New", default_key_size=128, aliases=("alt",)))
    assert registry.list_algorithms() == ["Other"]

    # Name without factory, and a non-callable factory
    with pytest.raises(ValueError, match="factory is required"):
        registry.register("Bare")
    with pytest.raises(ValueError, match="must be callable"):
        registry.register("Broken", "not a factory")
