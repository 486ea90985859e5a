"""
Schema inference from decoded JSON values.

Walks an arbitrary JSON value and builds the class registry that language
generators render. Every name set used for deduplication lives for a single
call, so the same input always yields the same registry.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from ...logging_config import get_logger
from .naming import (
    NameSanitizer,
    is_iso_datetime,
    make_unique,
    singularize,
    to_title_identifier,
)
from .schema import (
    BOOL,
    DATETIME,
    DOUBLE,
    DYNAMIC,
    INT,
    STRING,
    ClassRef,
    ClassRegistry,
    FieldSpec,
    ListOf,
    TypeRef,
)

logger = get_logger(__name__)

TOP_LEVEL_ARRAY_WARNING = (
    "Top-level JSON is an array; generated a wrapper model with a single list field."
)
TOP_LEVEL_PRIMITIVE_WARNING = (
    "Top-level JSON is a primitive; wrapping as a single dynamic field."
)
PRIMITIVE_ROOT_KEY = "value"


@dataclass
class InferenceResult:
    """Registry of inferred classes plus the warnings raised while walking."""

    root_name: str
    registry: ClassRegistry
    warnings: List[str] = field(default_factory=list)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integral(value: Any) -> bool:
    if isinstance(value, int):
        return True
    return value.is_integer()


def infer_schema(
    json_value: Any,
    root_name_hint: str = "Model",
    all_fields_nullable: bool = True,
    sanitizer: Optional[NameSanitizer] = None,
) -> InferenceResult:
    """
    Infer class specifications from a decoded JSON value.

    Args:
        json_value: Result of ``json.loads``
        root_name_hint: Preferred name of the root class
        all_fields_nullable: Mark every field nullable instead of only
            fields whose value was null
        sanitizer: Target language word lists (defaults to Dart)

    Returns:
        InferenceResult with the root class registered first
    """
    if sanitizer is None:
        from ..languages.dart.naming import create_dart_sanitizer

        sanitizer = create_dart_sanitizer()

    registry = ClassRegistry()
    warnings: List[str] = []
    used_class_names: Set[str] = set()

    def unique_class_name(base: str) -> str:
        return make_unique(sanitizer.class_name(base), used_class_names)

    def infer_list_type(items: List[Any], key_hint: str) -> TypeRef:
        non_null = [item for item in items if item is not None]
        if not non_null:
            return ListOf(DYNAMIC)

        # Objects merge into one class holding the union of their keys
        if all(isinstance(item, dict) for item in non_null):
            child_name = unique_class_name(to_title_identifier(singularize(key_hint)))
            child = registry.ensure(child_name)
            used_field_names: Set[str] = set()

            representatives: Dict[str, Any] = {}
            for item in non_null:
                for key, value in item.items():
                    if key not in representatives:
                        representatives[key] = value

            for key, value in representatives.items():
                child.add_field(infer_field(key, value, used_field_names))

            logger.debug(
                "Merged %d object(s) into %s (%d fields)",
                len(non_null),
                child_name,
                len(child.fields),
            )
            return ListOf(ClassRef(child_name))

        if all(isinstance(item, str) for item in non_null):
            if all(is_iso_datetime(item) for item in non_null):
                return ListOf(DATETIME)
            return ListOf(STRING)

        if all(_is_number(item) for item in non_null):
            if all(_is_integral(item) for item in non_null):
                return ListOf(INT)
            return ListOf(DOUBLE)

        if all(isinstance(item, bool) for item in non_null):
            return ListOf(BOOL)

        return ListOf(DYNAMIC)

    def infer_object_type(value: Dict[str, Any], key: str) -> TypeRef:
        child_name = unique_class_name(to_title_identifier(key))
        child = registry.ensure(child_name)
        used_field_names: Set[str] = set()
        for child_key, child_value in value.items():
            child.add_field(infer_field(child_key, child_value, used_field_names))
        return ClassRef(child_name)

    def infer_value_type(value: Any, key: str) -> TypeRef:
        if value is None:
            return DYNAMIC
        if isinstance(value, list):
            return infer_list_type(value, key)
        if isinstance(value, dict):
            return infer_object_type(value, key)
        if isinstance(value, str):
            return DATETIME if is_iso_datetime(value) else STRING
        if isinstance(value, bool):
            return BOOL
        if _is_number(value):
            return INT if _is_integral(value) else DOUBLE
        return DYNAMIC

    def infer_field(key: str, value: Any, used_field_names: Set[str]) -> FieldSpec:
        # The field name is taken before any child class is named
        field_name = make_unique(sanitizer.field_name(key), used_field_names)
        field_type = infer_value_type(value, key)
        nullable = all_fields_nullable or value is None
        return FieldSpec(
            original_key=key,
            name=field_name,
            type=field_type,
            nullable=nullable,
        )

    root_name = unique_class_name(root_name_hint or "Model")
    root = registry.ensure(root_name)
    root_field_names: Set[str] = set()

    if isinstance(json_value, dict):
        for key, value in json_value.items():
            root.add_field(infer_field(key, value, root_field_names))

    elif isinstance(json_value, list):
        warnings.append(TOP_LEVEL_ARRAY_WARNING)
        item_hint = singularize(root_name)
        field_key = sanitizer.field_name(item_hint)
        root.add_field(
            FieldSpec(
                original_key=field_key,
                name=make_unique(field_key, root_field_names),
                type=infer_list_type(json_value, item_hint),
                nullable=True,
            )
        )

    else:
        warnings.append(TOP_LEVEL_PRIMITIVE_WARNING)
        root.add_field(
            FieldSpec(
                original_key=PRIMITIVE_ROOT_KEY,
                name=make_unique(PRIMITIVE_ROOT_KEY, root_field_names),
                type=DYNAMIC,
                nullable=True,
            )
        )

    logger.debug(
        "Inferred %d class(es) for root %s with %d warning(s)",
        len(registry),
        root_name,
        len(warnings),
    )
    return InferenceResult(root_name=root_name, registry=registry, warnings=warnings)
