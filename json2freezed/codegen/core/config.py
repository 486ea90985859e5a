"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields
from enum import Enum

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class NullabilityMode(Enum):
    """How fields are marked nullable."""

    ALL_NULLABLE = "all_nullable"  # every field gets `?`
    SMART = "smart"  # only fields whose sample value was null


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_file: Optional[str] = None
    root_name: str = "Model"

    # Type handling
    all_fields_nullable: bool = True

    # Serialization settings
    emit_serialization_hooks: bool = True

    # Class declaration style, fixed for Freezed
    abstract_class: bool = True

    # First line of the generated file
    header_comment: str = "Generated by json2freezed"

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def nullability(self) -> NullabilityMode:
        if self.all_fields_nullable:
            return NullabilityMode.ALL_NULLABLE
        return NullabilityMode.SMART


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["dart"] = {
            "root_name": "Model",
            "all_fields_nullable": True,
            "emit_serialization_hooks": True,
            "abstract_class": True,
        }

    def get_config(
        self,
        language: str = "dart",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        # Start with defaults
        base_config = self._configs.get(language, {}).copy()

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(self._normalize(file_config))

        # Apply custom overrides
        if custom_config:
            base_config.update(self._normalize(custom_config))

        return self._dict_to_config(base_config)

    def _normalize(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """Translate the ``nullability`` shorthand into ``all_fields_nullable``."""
        config_dict = dict(config_dict)
        if "nullability" in config_dict:
            mode = config_dict.pop("nullability")
            try:
                mode = NullabilityMode(mode)
            except ValueError:
                valid = ", ".join(m.value for m in NullabilityMode)
                raise ConfigError(f"Invalid nullability mode: {mode} (expected {valid})")
            config_dict["all_fields_nullable"] = mode == NullabilityMode.ALL_NULLABLE
        return config_dict

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys are kept in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = {
            "output_file": config.output_file,
            "root_name": config.root_name,
            "nullability": config.nullability.value,
            "emit_serialization_hooks": config.emit_serialization_hooks,
            "abstract_class": config.abstract_class,
            "header_comment": config.header_comment,
        }

        # Add custom settings
        config_dict.update(config.custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> list[str]:
        """Get list of languages with defaults."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not config.root_name or not config.root_name.strip():
            warnings.append("Empty root_name; the root class will be called 'Model'")

        if not config.abstract_class:
            warnings.append(
                "abstract_class is disabled; Freezed 3 requires abstract classes"
            )

        if "\n" in config.header_comment:
            warnings.append("header_comment spans several lines; only use one line")

        for key in config.custom:
            warnings.append(f"Unknown configuration key: {key}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "dart",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)

