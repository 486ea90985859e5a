"""
Dart-specific naming utilities and sanitization.

Handles Dart reserved words, core library types and the members Freezed
generates for every class.
"""

from ...core.naming import NameSanitizer


# Dart keywords, built-in identifiers and contextual keywords
DART_RESERVED_WORDS = {
    "abstract",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "covariant",
    "default",
    "deferred",
    "do",
    "dynamic",
    "else",
    "enum",
    "export",
    "extends",
    "extension",
    "external",
    "factory",
    "false",
    "final",
    "finally",
    "for",
    "Function",
    "get",
    "hide",
    "if",
    "implements",
    "import",
    "in",
    "interface",
    "is",
    "library",
    "mixin",
    "new",
    "null",
    "on",
    "operator",
    "part",
    "rethrow",
    "return",
    "set",
    "show",
    "static",
    "super",
    "switch",
    "sync",
    "this",
    "throw",
    "true",
    "try",
    "typedef",
    "var",
    "void",
    "while",
    "with",
    "yield",
}

# Types from dart:core (and the annotation library) a class must not shadow
DART_BUILTIN_TYPES = {
    "BigInt",
    "DateTime",
    "Duration",
    "Enum",
    "Error",
    "Exception",
    "Future",
    "Iterable",
    "JsonKey",
    "List",
    "Map",
    "Never",
    "Null",
    "Object",
    "Pattern",
    "Record",
    "RegExp",
    "Set",
    "Stream",
    "String",
    "Symbol",
    "Type",
    "Uri",
    "bool",
    "double",
    "int",
    "num",
}

# Core types spelled in lower case; a field with one of these names hides the type
DART_LOWERCASE_TYPES = {"bool", "double", "int", "num"}

# Members every Freezed class already has
FREEZED_MEMBER_NAMES = {
    "copyWith",
    "hashCode",
    "noSuchMethod",
    "runtimeType",
    "toJson",
    "toString",
}


def create_dart_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Dart/Freezed."""
    return NameSanitizer(
        DART_RESERVED_WORDS,
        DART_BUILTIN_TYPES,
        FREEZED_MEMBER_NAMES | DART_LOWERCASE_TYPES,
    )
