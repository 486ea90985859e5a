"""Tests for the Dart Freezed generator."""

import pytest

from json2freezed.codegen import generate
from json2freezed.codegen.core.config import GeneratorConfig
from json2freezed.codegen.core.schema import (
    DATETIME,
    DYNAMIC,
    INT,
    STRING,
    ClassRef,
    ClassSpec,
    FieldSpec,
    ListOf,
)
from json2freezed.codegen.languages.dart import (
    DartFreezedGenerator,
    create_dart_generator,
    get_dart_type,
)

HEADER = (
    "// Generated by json2freezed\n"
    "// ignore_for_file: invalid_annotation_target\n"
    "import 'package:freezed_annotation/freezed_annotation.dart';\n"
    "\n"
)


class TestGoldenOutput:
    """Complete files for small documents."""

    def test_flat_object(self):
        result = generate({"id": 1, "name": "Bob"})

        assert result.success
        assert result.code == (
            HEADER
            + "part 'model.freezed.dart';\n"
            "part 'model.g.dart';\n"
            "\n"
            "\n"
            "@freezed\n"
            "abstract class Model with _$Model {\n"
            "  const factory Model({\n"
            "    @JsonKey(name: 'id') int? id,\n"
            "    @JsonKey(name: 'name') String? name,\n"
            "  }) = _Model;\n"
            "\n"
            "  factory Model.fromJson(Map<String, Object?> json) => _$ModelFromJson(json);\n"
            "}"
        )

    def test_nested_smart_mode(self):
        result = generate(
            {"user_id": 7, "friends": [{"id": 1}, {"name": "x"}], "seen": None},
            root_name="UserProfile",
            config=GeneratorConfig(all_fields_nullable=False),
        )

        assert result.code == (
            HEADER
            + "part 'user_profile.freezed.dart';\n"
            "part 'user_profile.g.dart';\n"
            "\n"
            "\n"
            "@freezed\n"
            "abstract class UserProfile with _$UserProfile {\n"
            "  const factory UserProfile({\n"
            "    @JsonKey(name: 'user_id') int userId,\n"
            "    @JsonKey(name: 'friends') List<Friend> friends,\n"
            "    @JsonKey(name: 'seen') dynamic? seen,\n"
            "  }) = _UserProfile;\n"
            "\n"
            "  factory UserProfile.fromJson(Map<String, Object?> json) => _$UserProfileFromJson(json);\n"
            "}\n"
            "\n"
            "@freezed\n"
            "abstract class Friend with _$Friend {\n"
            "  const factory Friend({\n"
            "    @JsonKey(name: 'id') int id,\n"
            "    @JsonKey(name: 'name') String name,\n"
            "  }) = _Friend;\n"
            "\n"
            "  factory Friend.fromJson(Map<String, Object?> json) => _$FriendFromJson(json);\n"
            "}"
        )
        assert result.metadata["file_name"] == "user_profile.dart"
        assert result.metadata["nullability"] == "smart"

    def test_without_from_json(self):
        result = generate(
            {"id": 1}, config=GeneratorConfig(emit_serialization_hooks=False)
        )

        assert result.code.endswith(
            "@freezed\n"
            "abstract class Model with _$Model {\n"
            "  const factory Model({\n"
            "    @JsonKey(name: 'id') int? id,\n"
            "  }) = _Model;\n"
            "}"
        )
        assert "fromJson" not in result.code

    def test_empty_class(self):
        result = generate({"meta": {}})

        assert (
            "@freezed\n"
            "abstract class Meta with _$Meta {\n"
            "  const factory Meta() = _Meta;\n"
            "\n"
            "  factory Meta.fromJson(Map<String, Object?> json) => _$MetaFromJson(json);\n"
            "}"
        ) in result.code
        assert result.warnings == [
            "Class 'Meta' has no fields; generated an empty constructor."
        ]

    def test_no_trailing_newline(self):
        result = generate({"a": 1})

        assert result.code.endswith("}")
        assert "\n\n\n\n" not in result.code


class TestFieldRendering:
    """Single fields and annotations."""

    def test_json_key_is_escaped(self):
        result = generate({"it's $x": "v"})

        assert "@JsonKey(name: 'it\\'s \\$x') String? itSX," in result.code

    def test_reserved_key_keeps_original_json_key(self):
        result = generate({"class": 1})

        assert "@JsonKey(name: 'class') int? classValue," in result.code

    def test_type_named_key_does_not_shadow_type(self):
        result = generate({"int": 1, "count": 2})

        assert "@JsonKey(name: 'int') int? intValue," in result.code
        assert "@JsonKey(name: 'count') int? count," in result.code

    def test_dates_and_lists(self):
        result = generate({"at": "2024-01-15T10:30:00Z", "ids": [1, 2]})

        assert "DateTime? at," in result.code
        assert "List<int>? ids," in result.code

    def test_top_level_array(self):
        result = generate([1, 2, 3])

        assert "@JsonKey(name: 'model') List<int>? model," in result.code
        assert len(result.warnings) == 1


class TestDartTypes:
    """Type spelling."""

    @pytest.mark.parametrize(
        "type_ref, nullable, expected",
        [
            (STRING, False, "String"),
            (INT, True, "int?"),
            (DATETIME, False, "DateTime"),
            (DYNAMIC, True, "dynamic?"),
            (ListOf(ClassRef("Friend")), True, "List<Friend>?"),
            (ListOf(ListOf(INT)), False, "List<List<int>>"),
        ],
    )
    def test_get_dart_type(self, type_ref, nullable, expected):
        assert get_dart_type(type_ref, nullable) == expected

    def test_unknown_type_raises(self):
        with pytest.raises(TypeError):
            get_dart_type("String")


class TestGenerator:
    """Generator object behaviour."""

    def test_properties(self):
        generator = DartFreezedGenerator()

        assert generator.language_name == "dart"
        assert generator.file_extension == ".dart"
        assert generator.output_file_name("UserModel") == "user_model.dart"

    def test_generate_single_class(self):
        generator = DartFreezedGenerator(GeneratorConfig())
        class_spec = ClassSpec(
            name="Point",
            fields=[FieldSpec(original_key="x", name="x", type=INT, nullable=False)],
        )

        assert generator.generate_single_class(class_spec) == (
            "@freezed\n"
            "abstract class Point with _$Point {\n"
            "  const factory Point({\n"
            "    @JsonKey(name: 'x') int x,\n"
            "  }) = _Point;\n"
            "\n"
            "  factory Point.fromJson(Map<String, Object?> json) => _$PointFromJson(json);\n"
            "}"
        )

    def test_non_abstract_class(self):
        generator = DartFreezedGenerator(GeneratorConfig(abstract_class=False))
        code = generator.generate_single_class(ClassSpec(name="Empty"))

        assert code.startswith("@freezed\nclass Empty with _$Empty {")

    def test_factory_uses_loaded_defaults(self):
        generator = create_dart_generator()

        assert generator.config.root_name == "Model"
        assert generator.config.all_fields_nullable is True

    def test_custom_header_comment(self):
        result = generate({}, config=GeneratorConfig(header_comment="Do not edit"))

        assert result.code.startswith("// Do not edit\n")
