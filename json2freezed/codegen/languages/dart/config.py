"""
Dart-specific configuration and type mappings.

Maps inferred types to Dart spellings and provides configuration presets
for Freezed generation.
"""

from typing import Dict, Any

from ...core.config import GeneratorConfig, NullabilityMode, load_config
from ...core.schema import ClassRef, ListOf, Primitive, PrimitiveKind, TypeRef


# Dart type mappings
DART_TYPE_MAP = {
    PrimitiveKind.STRING: "String",
    PrimitiveKind.INT: "int",
    PrimitiveKind.DOUBLE: "double",
    PrimitiveKind.BOOL: "bool",
    PrimitiveKind.DATETIME: "DateTime",
    PrimitiveKind.DYNAMIC: "dynamic",
}

FREEZED_ANNOTATION_IMPORT = "package:freezed_annotation/freezed_annotation.dart"

# Files produced by build_runner next to the generated source
PART_SUFFIXES = (".freezed.dart", ".g.dart")


def get_dart_type(type_ref: TypeRef, nullable: bool = False) -> str:
    """Get the Dart spelling of a type, with ``?`` when nullable."""
    if isinstance(type_ref, Primitive):
        dart_type = DART_TYPE_MAP[type_ref.kind]
    elif isinstance(type_ref, ListOf):
        dart_type = f"List<{get_dart_type(type_ref.element)}>"
    elif isinstance(type_ref, ClassRef):
        dart_type = type_ref.name
    else:
        raise TypeError(f"Unsupported type reference: {type_ref!r}")

    return f"{dart_type}?" if nullable else dart_type


# Configuration presets offered by the interactive session
DART_PRESETS: Dict[str, Dict[str, Any]] = {
    "null_safe": {
        "nullability": NullabilityMode.ALL_NULLABLE.value,
        "emit_serialization_hooks": True,
    },
    "smart": {
        "nullability": NullabilityMode.SMART.value,
        "emit_serialization_hooks": True,
    },
    "plain": {
        "nullability": NullabilityMode.SMART.value,
        "emit_serialization_hooks": False,
    },
}


def get_preset_config(name: str, **overrides) -> GeneratorConfig:
    """Build a configuration from a named preset plus overrides."""
    if name not in DART_PRESETS:
        raise ValueError(
            f"Unknown preset: {name}. Available: {', '.join(DART_PRESETS)}"
        )
    custom = dict(DART_PRESETS[name])
    custom.update(overrides)
    return load_config("dart", custom_config=custom)
