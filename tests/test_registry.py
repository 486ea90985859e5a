"""Tests for the generator registry."""

import pytest

from json2freezed.codegen.core.config import GeneratorConfig
from json2freezed.codegen.languages.dart import DartFreezedGenerator
from json2freezed.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)


class TestGlobalRegistry:
    """The registry shipped with the package."""

    def test_dart_is_registered(self):
        assert list_supported_languages() == ["dart"]

    @pytest.mark.parametrize("name", ["dart", "Dart", "freezed", "flutter"])
    def test_aliases(self, name):
        assert is_language_supported(name)
        assert isinstance(get_generator(name), DartFreezedGenerator)

    def test_unsupported_language(self):
        assert not is_language_supported("go")
        with pytest.raises(RegistryError, match="Available: dart"):
            get_generator("go")

    def test_config_variants(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text('{"root_name": "FromFile"}', encoding="utf-8")

        assert get_generator(config=GeneratorConfig(root_name="A")).config.root_name == "A"
        assert get_generator(config={"root_name": "B"}).config.root_name == "B"
        assert get_generator(config=str(path)).config.root_name == "FromFile"

    def test_bad_config_is_wrapped(self):
        with pytest.raises(RegistryError, match="Failed to create"):
            get_generator(config={"nullability": "bogus"})

    def test_invalid_config_type(self):
        with pytest.raises(RegistryError, match="Invalid config type"):
            get_generator(config=42)

    def test_language_info(self):
        info = get_language_info("freezed")

        assert info["name"] == "dart"
        assert info["file_extension"] == ".dart"
        assert info["class"] == "DartFreezedGenerator"
        assert info["aliases"] == ["flutter", "freezed"]


class TestGeneratorRegistry:
    """A private registry instance."""

    def test_register_requires_generator_subclass(self):
        registry = GeneratorRegistry()

        with pytest.raises(RegistryError):
            registry.register("text", str)

    def test_private_registry_aliases(self):
        registry = GeneratorRegistry()
        registry.register("Dart", DartFreezedGenerator, aliases=["Freezed"])

        assert registry.list_languages() == ["dart"]
        assert registry.resolve("FREEZED") == "dart"
        assert registry.get_aliases_for_language("dart") == ["freezed"]
        assert isinstance(registry.create_generator("freezed"), DartFreezedGenerator)

    def test_empty_registry(self):
        registry = GeneratorRegistry()

        assert not registry.is_supported("dart")
        with pytest.raises(RegistryError, match="No generator registered"):
            registry.resolve("dart")
