"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from ...logging_config import get_logger
from .config import GeneratorConfig
from .inference import InferenceResult
from .naming import NameSanitizer
from .schema import ClassRegistry, ClassSpec
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self.template_engine: TemplateEngine = create_template_engine(
            self.get_template_directory()
        )

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'dart')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.dart')."""
        pass

    @abstractmethod
    def create_sanitizer(self) -> NameSanitizer:
        """Return the name sanitizer holding this language's word lists."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    @abstractmethod
    def generate(self, registry: ClassRegistry, root_name: str) -> str:
        """
        Generate code for all classes.

        Args:
            registry: Inferred classes in emission order
            root_name: Name of the root class

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def generate_single_class(self, class_spec: ClassSpec) -> str:
        """
        Generate code for a single class.

        Args:
            class_spec: Class to generate code for

        Returns:
            Generated code for this class only
        """
        pass

    def output_file_name(self, root_name: str) -> str:
        """File name the generated code should be saved under."""
        return f"{root_name}{self.file_extension}"

    def validate_classes(self, registry: ClassRegistry) -> List[str]:
        """
        Validate inferred classes for structural issues.

        Language generators can override this to add their own checks.

        Args:
            registry: Classes to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for class_spec in registry:
            if not class_spec.fields:
                warnings.append(
                    f"Class '{class_spec.name}' has no fields; "
                    "generated an empty constructor."
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - strip trailing spaces, cap blank runs at two
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        classes: List[ClassSpec] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            classes: Generated classes in emission order
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.classes = classes or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, inference: InferenceResult
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        inference: Classes and warnings produced by the inference engine

    Returns:
        GenerationResult with code, classes, warnings, and metadata
    """
    try:
        warnings = list(inference.warnings)
        warnings.extend(generator.validate_classes(inference.registry))

        code = generator.generate(inference.registry, inference.root_name)
        formatted_code = generator.format_code(code)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "class_count": len(inference.registry),
            "root_class": inference.root_name,
            "file_name": generator.output_file_name(inference.root_name),
            "nullability": generator.config.nullability.value,
        }

        logger.info(
            "Generated %d %s class(es) for %s",
            len(inference.registry),
            generator.language_name,
            inference.root_name,
        )
        return GenerationResult(
            formatted_code, list(inference.registry), warnings, metadata
        )

    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
