"""
Naming utilities for safe code generation.

Pure string transforms used by the inference engine: identifier casing,
reserved word avoidance, singularization, uniqueness within a scope and
the ISO date heuristic.
"""

import re
from typing import Set, Iterable, Optional


CLASS_FALLBACK = "Model"
FIELD_FALLBACK = "field"
TITLE_FALLBACK = "ClassName"

CLASS_CONFLICT_SUFFIX = "Type"
FIELD_CONFLICT_SUFFIX = "Value"
FIELD_DIGIT_PREFIX = "v"

_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]+")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")
_LEADING_DIGITS_RE = re.compile(r"^[0-9]+")
_REPEATED_UNDERSCORE_RE = re.compile(r"__+")
_HAS_ALNUM_RE = re.compile(r"[A-Za-z0-9]")

ISO_DATETIME_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2})"
    r"([Tt ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:?\d{2})?)?",
    re.ASCII,
)


def _split_words(name: str) -> list[str]:
    """Split a raw name on separators and lower/digit-to-upper boundaries."""
    spaced = _NON_ALNUM_RE.sub(" ", name)
    spaced = _CAMEL_BOUNDARY_RE.sub(r"\1 \2", spaced)
    return spaced.split()


def to_title_identifier(name: str) -> str:
    """Convert to PascalCase, e.g. ``email_address`` -> ``EmailAddress``.

    Each word keeps only its first letter upper-cased, so ``userID`` becomes
    ``UserId``. Inputs without letters or digits give ``ClassName``; a
    leading digit run is prefixed with ``N``.
    """
    words = _split_words(name)
    if not words:
        return TITLE_FALLBACK

    joined = "".join(word[0].upper() + word[1:].lower() for word in words)
    return _LEADING_DIGITS_RE.sub(lambda m: f"N{m.group(0)}", joined)


def to_lower_identifier(name: str) -> str:
    """Convert to camelCase."""
    title = to_title_identifier(name)
    return title[0].lower() + title[1:]


def to_file_identifier(name: str) -> str:
    """Convert to snake_case for file names, e.g. ``UserModel`` -> ``user_model``."""
    name = _CAMEL_BOUNDARY_RE.sub(r"\1_\2", name)
    name = _NON_ALNUM_RE.sub("_", name)
    name = _REPEATED_UNDERSCORE_RE.sub("_", name)
    return name.strip("_").lower()


def sanitize_field_identifier(name: str, reserved_words: Iterable[str] = ()) -> str:
    """
    Sanitize a JSON key for use as a field name.

    Args:
        name: Original JSON key
        reserved_words: Words the result must not be equal to

    Returns:
        Non-empty camelCase identifier
    """
    if not _HAS_ALNUM_RE.search(name):
        return FIELD_FALLBACK

    field_name = to_lower_identifier(name)
    if field_name[0].isdigit():
        field_name = f"{FIELD_DIGIT_PREFIX}{field_name}"
    if field_name in reserved_words:
        field_name = f"{field_name}{FIELD_CONFLICT_SUFFIX}"
    return field_name


def sanitize_class_identifier(name: str, reserved_words: Iterable[str] = ()) -> str:
    """
    Sanitize a raw name for use as a class name.

    Args:
        name: Root name hint or JSON key
        reserved_words: Words the result must not be equal to

    Returns:
        Non-empty PascalCase identifier
    """
    if not _HAS_ALNUM_RE.search(name):
        return CLASS_FALLBACK

    class_name = to_title_identifier(name)
    if class_name in reserved_words:
        class_name = f"{class_name}{CLASS_CONFLICT_SUFFIX}"
    return class_name


def singularize(name: str) -> str:
    """Strip a plural suffix: ``ies`` -> ``y``, ``ses`` -> ``s``, ``s`` -> ``''``.

    Only these three rules apply; ``status`` becomes ``statu``.
    """
    lowered = name.lower()
    if lowered.endswith("ies"):
        return name[:-3] + "y"
    if lowered.endswith("ses"):
        return name[:-2]
    if lowered.endswith("s") and not lowered.endswith("ss"):
        return name[:-1]
    return name


def make_unique(base: str, used: Set[str]) -> str:
    """
    Return base, or base with the first free numeric suffix, and mark it used.

    Args:
        base: Preferred name
        used: Names already taken in the current scope; updated in place

    Returns:
        Name absent from ``used`` before the call
    """
    name = base
    counter = 1
    while name in used:
        name = f"{base}{counter}"
        counter += 1
    used.add(name)
    return name


def is_iso_datetime(value: str) -> bool:
    """Check whether a string looks like an ISO-8601 date or date-time."""
    return ISO_DATETIME_RE.fullmatch(value) is not None


class NameSanitizer:
    """Word lists of one target language applied to class and field names."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        builtin_types: Optional[Set[str]] = None,
        member_names: Optional[Set[str]] = None,
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Language keywords, forbidden everywhere
            builtin_types: Builtin type names a class must not shadow
            member_names: Generated member names a field must not shadow
        """
        self.reserved_words = set(reserved_words or ())
        self.builtin_types = set(builtin_types or ())
        self.member_names = set(member_names or ())
        self._class_blocked = self.reserved_words | self.builtin_types
        self._field_blocked = self.reserved_words | self.member_names

    def class_name(self, name: str) -> str:
        """Sanitize name for a class (PascalCase)."""
        return sanitize_class_identifier(name, self._class_blocked)

    def field_name(self, name: str) -> str:
        """Sanitize name for a field (camelCase)."""
        return sanitize_field_identifier(name, self._field_blocked)
