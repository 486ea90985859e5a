"""json2freezed - generate Dart Freezed data classes from JSON documents."""

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    NullabilityMode,
    generate,
    generate_from_text,
    infer_schema,
    load_config,
)
from .utils import JSONLoaderError, ParseError, load_json, parse_json_text

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "JSONLoaderError",
    "NullabilityMode",
    "ParseError",
    "generate",
    "generate_from_text",
    "infer_schema",
    "load_config",
    "load_json",
    "parse_json_text",
]
