"""
Core schema representation for code generation.

The inference engine fills a ClassRegistry with ClassSpec entries; language
generators only ever read from it.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union
from enum import Enum


class PrimitiveKind(Enum):
    """Leaf types inferred from JSON scalars."""

    STRING = "string"
    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"
    DATETIME = "datetime"
    DYNAMIC = "dynamic"  # null, mixed or otherwise unknown


@dataclass(frozen=True)
class Primitive:
    """A scalar type."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class ListOf:
    """A homogeneous list type."""

    element: "TypeRef"


@dataclass(frozen=True)
class ClassRef:
    """A reference to a generated class by name."""

    name: str


TypeRef = Union[Primitive, ListOf, ClassRef]

STRING = Primitive(PrimitiveKind.STRING)
INT = Primitive(PrimitiveKind.INT)
DOUBLE = Primitive(PrimitiveKind.DOUBLE)
BOOL = Primitive(PrimitiveKind.BOOL)
DATETIME = Primitive(PrimitiveKind.DATETIME)
DYNAMIC = Primitive(PrimitiveKind.DYNAMIC)


def describe_type(type_ref: TypeRef) -> str:
    """Language-neutral spelling of a type, e.g. ``list[int]``."""
    if isinstance(type_ref, Primitive):
        return type_ref.kind.value
    if isinstance(type_ref, ListOf):
        return f"list[{describe_type(type_ref.element)}]"
    if isinstance(type_ref, ClassRef):
        return type_ref.name
    raise TypeError(f"Unsupported type reference: {type_ref!r}")


@dataclass(frozen=True)
class FieldSpec:
    """Represents a single field of a generated class."""

    original_key: str  # JSON key, used for the serialization annotation
    name: str  # generated identifier, unique within the owning class
    type: TypeRef
    nullable: bool = True


@dataclass
class ClassSpec:
    """Represents one generated class."""

    name: str
    fields: List[FieldSpec] = field(default_factory=list)

    def add_field(self, field: FieldSpec) -> None:
        """Add a field to this class."""
        self.fields.append(field)

    def get_field(self, name: str) -> Optional[FieldSpec]:
        """Get field by generated name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def field_names(self) -> List[str]:
        return [field.name for field in self.fields]


class ClassRegistry:
    """Insertion-ordered mapping of class name to ClassSpec, root first."""

    def __init__(self):
        self._classes: Dict[str, ClassSpec] = {}

    def ensure(self, name: str) -> ClassSpec:
        """Return the class called name, creating it on first use."""
        if name not in self._classes:
            self._classes[name] = ClassSpec(name=name)
        return self._classes[name]

    def get(self, name: str) -> Optional[ClassSpec]:
        return self._classes.get(name)

    def names(self) -> List[str]:
        return list(self._classes)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __iter__(self) -> Iterator[ClassSpec]:
        return iter(list(self._classes.values()))

    def __len__(self) -> int:
        return len(self._classes)
