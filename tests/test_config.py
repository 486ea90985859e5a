"""Tests for configuration loading."""

import json

import pytest

from json2freezed.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    NullabilityMode,
    load_config,
)
from json2freezed.codegen.languages.dart import DART_PRESETS, get_preset_config


class TestDefaults:
    """Built-in defaults."""

    def test_dart_defaults(self):
        config = load_config("dart")

        assert config.root_name == "Model"
        assert config.all_fields_nullable is True
        assert config.emit_serialization_hooks is True
        assert config.abstract_class is True
        assert config.nullability == NullabilityMode.ALL_NULLABLE

    def test_unknown_language_gets_base_defaults(self):
        assert load_config("cobol") == GeneratorConfig()


class TestOverrides:
    """Custom overrides and config files."""

    def test_nullability_alias(self):
        config = load_config(custom_config={"nullability": "smart"})

        assert config.all_fields_nullable is False
        assert config.nullability == NullabilityMode.SMART

    def test_invalid_nullability(self):
        with pytest.raises(ConfigError, match="Invalid nullability mode"):
            load_config(custom_config={"nullability": "sometimes"})

    def test_unknown_keys_go_to_custom(self):
        config = load_config(custom_config={"line_width": 100})

        assert config.custom == {"line_width": 100}

    def test_file_then_overrides(self, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text(
            json.dumps({"root_name": "Order", "nullability": "smart"}), encoding="utf-8"
        )

        config = load_config(config_file=path, custom_config={"root_name": "Invoice"})

        assert config.root_name == "Invoice"
        assert config.all_fields_nullable is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "missing.json")

    def test_non_json_suffix(self, tmp_path):
        path = tmp_path / "codegen.yaml"
        path.write_text("root_name: X", encoding="utf-8")

        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file=path)

    def test_file_must_hold_object(self, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigError, match="JSON object"):
            load_config(config_file=path)


class TestManager:
    """Saving and validating."""

    def test_save_and_reload(self, tmp_path):
        manager = ConfigManager()
        original = GeneratorConfig(root_name="Order", all_fields_nullable=False)
        path = tmp_path / "saved.json"

        manager.save_config(original, path)
        saved = json.loads(path.read_text(encoding="utf-8"))
        reloaded = manager.get_config("dart", config_file=path)

        assert saved["nullability"] == "smart"
        assert reloaded.root_name == "Order"
        assert reloaded.all_fields_nullable is False

    def test_validate_config(self):
        manager = ConfigManager()

        assert manager.validate_config(GeneratorConfig()) == []

        warnings = manager.validate_config(
            GeneratorConfig(root_name=" ", abstract_class=False, custom={"x": 1})
        )
        assert len(warnings) == 3
        assert "Unknown configuration key: x" in warnings

    def test_list_languages(self):
        assert ConfigManager().list_languages() == ["dart"]


class TestPresets:
    """Dart presets."""

    def test_presets(self):
        assert set(DART_PRESETS) == {"null_safe", "smart", "plain"}
        assert get_preset_config("null_safe").all_fields_nullable is True
        assert get_preset_config("smart").all_fields_nullable is False

        plain = get_preset_config("plain", root_name="Row")
        assert plain.emit_serialization_hooks is False
        assert plain.root_name == "Row"

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            get_preset_config("fancy")
