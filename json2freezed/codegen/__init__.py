"""
json2freezed Code Generation Module

Infers class schemas from JSON values and renders them as source code.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..logging_config import get_logger
from ..utils import ParseError, parse_json_text
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .core.inference import InferenceResult, infer_schema
from .core.schema import ClassSpec, FieldSpec
from .core.config import GeneratorConfig, ConfigManager, NullabilityMode, load_config

logger = get_logger(__name__)

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]

NESTING_ERROR = "Document nests too deeply to generate classes"


def generate(
    json_value: Any,
    root_name: Optional[str] = None,
    config: ConfigLike = None,
    language: str = "dart",
) -> GenerationResult:
    """
    Generate code from a decoded JSON value.

    Args:
        json_value: Result of ``json.loads``
        root_name: Root class name hint; defaults to ``config.root_name``
        config: Generator configuration, dict of overrides or config file path
        language: Target language name or alias

    Returns:
        GenerationResult with code, classes, warnings and metadata
    """
    generator = get_generator(language, config)
    hint = root_name if root_name is not None else generator.config.root_name

    try:
        inference = infer_schema(
            json_value,
            hint,
            all_fields_nullable=generator.config.all_fields_nullable,
            sanitizer=generator.sanitizer,
        )
    except RecursionError as e:
        logger.error("Document nesting exceeds the recursion limit")
        return GenerationResult.error(NESTING_ERROR, exception=e)
    return generate_code(generator, inference)


def generate_from_text(
    text: str,
    root_name: Optional[str] = None,
    config: ConfigLike = None,
    language: str = "dart",
) -> GenerationResult:
    """
    Parse JSON text and generate code from it.

    Malformed JSON does not raise: the returned result has ``success`` set to
    False, an empty code string and the parser message in ``error_message``.
    """
    try:
        json_value = parse_json_text(text)
    except ParseError as e:
        logger.warning("Invalid JSON input: %s", e)
        return GenerationResult.error(str(e), exception=e)

    return generate(json_value, root_name, config, language)


__version__ = "0.1.0"

__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "InferenceResult",
    "ClassSpec",
    "FieldSpec",
    "GeneratorConfig",
    "ConfigManager",
    "NullabilityMode",
    "generate",
    "generate_code",
    "generate_from_text",
    "get_generator",
    "get_language_info",
    "infer_schema",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
]
