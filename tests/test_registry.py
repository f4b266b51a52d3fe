import pytest

from genkit import QuarkusGenerator
from genkit.exceptions import GeneratorNotFoundError
from genkit.registry import GeneratorRegistry, generator_registry


class TestGeneratorRegistry:

    def test_discovers_quarkus(self):
        registry = GeneratorRegistry()
        registry.discover()
        assert registry.get("quarkus") is QuarkusGenerator
        assert "quarkus" in registry.get_supports()

    def test_lookup_discovers_lazily(self):
        assert GeneratorRegistry().generator("quarkus") is QuarkusGenerator

    def test_unknown_generator(self):
        with pytest.raises(GeneratorNotFoundError, match="spring-boot"):
            generator_registry.generator("spring-boot")
