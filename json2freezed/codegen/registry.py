"""
Generator registry.

Maps target language names and their aliases to generator classes.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class GeneratorRegistry:
    """Language name and alias lookup for code generators."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator under a primary name and optional aliases.

        Raises:
            RegistryError: If generator_class is not a CodeGenerator subclass
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()
        self._generators[language_key] = generator_class
        for alias in aliases or []:
            self._aliases[alias.lower()] = language_key

    def resolve(self, language: str) -> str:
        """
        Resolve a language name or alias to the primary name.

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()
        language_key = self._aliases.get(language_key, language_key)

        if language_key not in self._generators:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            )
        return language_key

    def create_generator(
        self, language: str, config: ConfigSource = None
    ) -> CodeGenerator:
        """
        Create a configured generator.

        Args:
            language: Language name or alias
            config: GeneratorConfig, dict of overrides, or config file path

        Raises:
            RegistryError: If the language is unknown or the config is invalid
        """
        primary = self.resolve(language)
        generator_class = self._generators[primary]

        if isinstance(config, GeneratorConfig):
            return generator_class(config)
        if config is not None and not isinstance(config, (dict, str, Path)):
            raise RegistryError(f"Invalid config type: {type(config)}")

        try:
            if isinstance(config, dict):
                final_config = load_config(primary, custom_config=config)
            else:
                final_config = load_config(primary, config_file=config)
        except Exception as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

        return generator_class(final_config)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._generators)

    def get_aliases_for_language(self, language: str) -> List[str]:
        language_key = language.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == language_key
        )

    def is_supported(self, language: str) -> bool:
        """Check if a language name or alias is supported."""
        language_key = language.lower()
        return language_key in self._generators or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a registered language.

        Raises:
            RegistryError: If language not found
        """
        language_key = self.resolve(language)
        generator_class = self._generators[language_key]
        generator = generator_class(load_config(language_key))

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(language_key),
            "module": generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, registering Dart on first use."""
    global _global_registry
    if _global_registry is None:
        from .languages.dart import DartFreezedGenerator

        _global_registry = GeneratorRegistry()
        _global_registry.register(
            "dart", DartFreezedGenerator, aliases=["freezed", "flutter"]
        )
    return _global_registry


def get_generator(language: str = "dart", config: ConfigSource = None) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    return {
        language: get_language_info(language)
        for language in list_supported_languages()
    }
