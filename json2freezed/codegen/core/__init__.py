"""
Core code generation components.

Provides the schema model, inference engine, naming helpers and base classes
used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    ClassRef,
    ClassRegistry,
    ClassSpec,
    FieldSpec,
    ListOf,
    Primitive,
    PrimitiveKind,
    TypeRef,
    describe_type,
)
from .inference import InferenceResult, infer_schema
from .naming import (
    NameSanitizer,
    is_iso_datetime,
    make_unique,
    sanitize_class_identifier,
    sanitize_field_identifier,
    singularize,
    to_file_identifier,
    to_lower_identifier,
    to_title_identifier,
)
from .config import (
    GeneratorConfig,
    ConfigManager,
    ConfigError,
    NullabilityMode,
    load_config,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Schema system - core data structures
    "ClassRef",
    "ClassRegistry",
    "ClassSpec",
    "FieldSpec",
    "ListOf",
    "Primitive",
    "PrimitiveKind",
    "TypeRef",
    "describe_type",
    # Inference
    "InferenceResult",
    "infer_schema",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "is_iso_datetime",
    "make_unique",
    "sanitize_class_identifier",
    "sanitize_field_identifier",
    "singularize",
    "to_file_identifier",
    "to_lower_identifier",
    "to_title_identifier",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "NullabilityMode",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
