"""
Dart code generator module.

Generates Freezed data classes with @JsonKey annotations from inferred schemas.
"""

from .generator import DartFreezedGenerator, create_dart_generator
from .naming import (
    DART_BUILTIN_TYPES,
    DART_LOWERCASE_TYPES,
    DART_RESERVED_WORDS,
    FREEZED_MEMBER_NAMES,
    create_dart_sanitizer,
)
from .config import DART_PRESETS, get_dart_type, get_preset_config

__all__ = [
    # Generator
    "DartFreezedGenerator",
    "create_dart_generator",
    # Naming
    "DART_RESERVED_WORDS",
    "DART_BUILTIN_TYPES",
    "DART_LOWERCASE_TYPES",
    "FREEZED_MEMBER_NAMES",
    "create_dart_sanitizer",
    # Configuration
    "DART_PRESETS",
    "get_dart_type",
    "get_preset_config",
]
