"""Shared fixtures for json2freezed tests."""

import json

import pytest

from json2freezed.codegen.core.config import GeneratorConfig
from json2freezed.codegen.languages.dart import create_dart_sanitizer


@pytest.fixture
def sanitizer():
    return create_dart_sanitizer()


@pytest.fixture
def smart_config():
    return GeneratorConfig(all_fields_nullable=False)


@pytest.fixture
def user_json_file(tmp_path):
    """A small JSON document on disk."""
    path = tmp_path / "user.json"
    path.write_text(json.dumps({"id": 1, "name": "Bob"}), encoding="utf-8")
    return path
