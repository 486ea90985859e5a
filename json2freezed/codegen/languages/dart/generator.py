"""
Dart code generator implementation.

Generates Freezed data classes with json_serializable annotations.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from ....logging_config import get_logger
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer, to_file_identifier
from ...core.schema import ClassRegistry, ClassSpec, FieldSpec
from ...core.config import GeneratorConfig
from .naming import create_dart_sanitizer
from .config import FREEZED_ANNOTATION_IMPORT, PART_SUFFIXES, get_dart_type

logger = get_logger(__name__)


class DartFreezedGenerator(CodeGenerator):
    """Code generator for Dart Freezed classes."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Dart generator with configuration."""
        super().__init__(config)
        self.sanitizer = self.create_sanitizer()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "dart"

    @property
    def file_extension(self) -> str:
        """Return Dart file extension."""
        return ".dart"

    def create_sanitizer(self) -> NameSanitizer:
        return create_dart_sanitizer()

    def get_template_directory(self) -> Path:
        """Return the Dart templates directory."""
        return Path(__file__).parent / "templates"

    def output_file_name(self, root_name: str) -> str:
        """Dart files are snake_case, matching the part directives."""
        return f"{to_file_identifier(root_name)}{self.file_extension}"

    def generate(self, registry: ClassRegistry, root_name: str) -> str:
        """Generate the complete Dart file for all classes."""
        header = self._render_header(root_name)

        class_blocks = []
        for class_spec in registry:
            class_blocks.append(self.generate_single_class(class_spec))

        logger.debug("Rendered %d Freezed class(es)", len(class_blocks))

        # Two blank lines after the header, one between classes
        return header + "\n\n\n" + "\n\n".join(class_blocks)

    def generate_single_class(self, class_spec: ClassSpec) -> str:
        """Generate one Freezed class."""
        context = {
            "class_name": class_spec.name,
            "fields": [self._generate_field_data(f) for f in class_spec.fields],
            "abstract_class": self.config.abstract_class,
            "include_json": self.config.emit_serialization_hooks,
        }
        return self.render_template("class.dart.j2", context)

    def _generate_field_data(self, field: FieldSpec) -> Dict[str, Any]:
        """Generate field data for template."""
        return {
            "name": field.name,
            "json_key": field.original_key,
            "type": get_dart_type(field.type, field.nullable),
        }

    def _render_header(self, root_name: str) -> str:
        """Render comment, import and part directives."""
        context = {
            "header_comment": self.config.header_comment,
            "annotation_import": FREEZED_ANNOTATION_IMPORT,
            "part_suffixes": PART_SUFFIXES,
            "root_name": root_name,
        }
        return self.render_template("file.dart.j2", context).rstrip("\n")


def create_dart_generator(config: Optional[GeneratorConfig] = None) -> DartFreezedGenerator:
    """Create a Dart generator, using the default configuration when none is given."""
    if config is None:
        from ...core.config import load_config

        config = load_config("dart")

    return DartFreezedGenerator(config)
