"""Typed Java syntax tree nodes read by javaprint.

The tree is built elsewhere (by a Java parser front end); this module only
defines the shape javaprint reads. All nodes are frozen dataclasses with
slots, so a tree is an immutable snapshot safe to share across threads and
works naturally with ``match`` statements.

Node Hierarchy:
Node (base)
├── TypeNode
│   ├── PrimitiveType
│   ├── ClassOrInterfaceType
│   ├── ArrayType
│   ├── VoidType
│   └── WildcardType
├── TypeDeclaration
│   ├── ClassOrInterfaceDeclaration
│   ├── AnnotationTypeDeclaration
│   ├── EnumDeclaration
│   ├── RecordDeclaration
│   └── AnonymousClassDeclaration
├── MethodOrConstructorDeclaration
│   ├── MethodDeclaration
│   └── ConstructorDeclaration
├── FieldDeclaration
├── Resource
├── FormalParameters
├── FormalParameter
├── VariableDeclaratorId
└── ImportDeclaration

Any node may carry an ``image``, the raw token text the parser attached to
it. Constructors use it for the declaring class name.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from javaprint.location import SourceLocation

_UNKNOWN_LOCATION = SourceLocation.unknown()


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class Node:
    """Base class for all tree nodes.

    Also stands in for node kinds javaprint has no dedicated rule for
    (statements, expressions, annotations, ...).

    """

    location: SourceLocation = _UNKNOWN_LOCATION
    image: str | None = None


# =============================================================================
# Type Nodes
# =============================================================================


class PrimitiveKind(Enum):
    """The eight primitive types. The value is the keyword spelling."""

    BOOLEAN = "boolean"
    CHAR = "char"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"

    @property
    def simple_name(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TypeNode(Node):
    """Base class for nodes that spell a type."""


@dataclass(frozen=True, slots=True)
class PrimitiveType(TypeNode):
    """Primitive type, e.g. ``int``."""

    kind: PrimitiveKind


@dataclass(frozen=True, slots=True)
class ClassOrInterfaceType(TypeNode):
    """Reference to a class or interface type.

    ``type_arguments`` is None when the source has no argument list, and an
    empty tuple for the diamond ``<>``.

    """

    simple_name: str
    type_arguments: tuple[JavaType, ...] | None = None


@dataclass(frozen=True, slots=True)
class ArrayType(TypeNode):
    """Array type. ``depth`` counts the bracket pairs attached to this type."""

    element_type: JavaType
    depth: int = 1


@dataclass(frozen=True, slots=True)
class VoidType(TypeNode):
    """The ``void`` result type."""


@dataclass(frozen=True, slots=True)
class WildcardType(TypeNode):
    """Wildcard type argument.

    Java: ``?``, ``? extends Bound`` or ``? super Bound``.
    ``lower_bound`` is only meaningful when ``bound`` is set.

    """

    bound: JavaType | None = None
    lower_bound: bool = False


# PEP 695 type alias for type nodes
JavaType: TypeAlias = PrimitiveType | ClassOrInterfaceType | ArrayType | VoidType | WildcardType


# =============================================================================
# Variables and Parameters
# =============================================================================


@dataclass(frozen=True, slots=True)
class VariableDeclaratorId(Node):
    """Declared variable name.

    ``extra_dimensions`` counts bracket pairs written after the name, as in
    ``int x[]``.

    """

    name: str
    extra_dimensions: int = 0


@dataclass(frozen=True, slots=True)
class FormalParameter(Node):
    type_node: JavaType
    var_id: VariableDeclaratorId


@dataclass(frozen=True, slots=True)
class FormalParameters(Node):
    """Parameter list of a method or constructor, in declaration order."""

    params: tuple[FormalParameter, ...] = ()

    def __iter__(self) -> Iterator[FormalParameter]:
        return iter(self.params)

    def __len__(self) -> int:
        return len(self.params)


# =============================================================================
# Type Declarations
# =============================================================================


@dataclass(frozen=True, slots=True)
class TypeDeclaration(Node):
    """Base class for class, interface, enum, record and annotation declarations."""

    simple_name: str


@dataclass(frozen=True, slots=True)
class ClassOrInterfaceDeclaration(TypeDeclaration):
    """Class or interface declaration. Interfaces set ``interface``."""

    interface: bool = False


@dataclass(frozen=True, slots=True)
class AnnotationTypeDeclaration(TypeDeclaration):
    """Annotation type declaration, ``@interface Name``."""


@dataclass(frozen=True, slots=True)
class EnumDeclaration(TypeDeclaration):
    pass


@dataclass(frozen=True, slots=True)
class RecordDeclaration(TypeDeclaration):
    pass


@dataclass(frozen=True, slots=True)
class AnonymousClassDeclaration(TypeDeclaration):
    """Body of an anonymous class. Its simple name is the empty string."""


# =============================================================================
# Members
# =============================================================================


@dataclass(frozen=True, slots=True)
class MethodOrConstructorDeclaration(Node):
    """Base class for methods and constructors."""

    formal_parameters: FormalParameters


@dataclass(frozen=True, slots=True)
class MethodDeclaration(MethodOrConstructorDeclaration):
    name: str


@dataclass(frozen=True, slots=True)
class ConstructorDeclaration(MethodOrConstructorDeclaration):
    """Constructor declaration. ``image`` holds the declaring class name."""


@dataclass(frozen=True, slots=True)
class FieldDeclaration(Node):
    """Field declaration, possibly declaring several variables (``int a, b;``)."""

    type_node: JavaType
    var_ids: tuple[VariableDeclaratorId, ...]


@dataclass(frozen=True, slots=True)
class Resource(Node):
    """Resource of a try-with-resources statement.

    Either declares a variable (``try (var in = open())``) or names an
    existing one by expression (``try (this.in)``).

    """

    var_id: VariableDeclaratorId | None = None
    expression: str | None = None

    @property
    def stable_name(self) -> str:
        """Name of the resource, independent of source formatting."""
        if self.var_id is not None:
            return self.var_id.name
        return "".join((self.expression or "").split())


@dataclass(frozen=True, slots=True)
class ImportDeclaration(Node):
    """Import declaration. ``on_demand`` is set for ``import a.b.*;``."""

    imported_name: str
    on_demand: bool = False
