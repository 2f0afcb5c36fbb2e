"""
javaprint: stable display text for Java syntax tree nodes

Renders type names, method and constructor signatures, declaration kinds,
node names and imports into canonical text for diagnostics and reports.
Works on a typed, immutable tree built by a Java front end; never parses
or resolves anything itself.

Quick Start:
    >>> from javaprint import (
    ...     ArrayType, ClassOrInterfaceType, FormalParameter, FormalParameters,
    ...     PrimitiveKind, PrimitiveType, VariableDeclaratorId, display_signature,
    ... )
    >>> params = FormalParameters((
    ...     FormalParameter(PrimitiveType(PrimitiveKind.INT), VariableDeclaratorId("n")),
    ...     FormalParameter(ClassOrInterfaceType("String"), VariableDeclaratorId("args", 1)),
    ... ))
    >>> display_signature("run", params)
    'run(int, String[])'

Installation:
    pip install javaprint            # zero runtime dependencies
"""

from javaprint.config import (
    PrintConfig,
    get_print_config,
    print_config_context,
    reset_print_config,
    set_print_config,
)
from javaprint.errors import (
    EmptyDeclaredIdentifiersError,
    JavaPrintError,
    SerializationError,
    UnsupportedNodeKindError,
)
from javaprint.location import SourceLocation
from javaprint.nodes import (
    AnnotationTypeDeclaration,
    AnonymousClassDeclaration,
    ArrayType,
    ClassOrInterfaceDeclaration,
    ClassOrInterfaceType,
    ConstructorDeclaration,
    EnumDeclaration,
    FieldDeclaration,
    FormalParameter,
    FormalParameters,
    ImportDeclaration,
    JavaType,
    MethodDeclaration,
    MethodOrConstructorDeclaration,
    Node,
    PrimitiveKind,
    PrimitiveType,
    RecordDeclaration,
    Resource,
    TypeDeclaration,
    TypeNode,
    VariableDeclaratorId,
    VoidType,
    WildcardType,
)
from javaprint.printing import (
    declaration_signature,
    display_signature,
    node_name,
    pretty_import,
    pretty_print_type,
    pretty_print_type_with_targs,
    printable_node_kind,
    printable_type_kind,
)
from javaprint.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"

__all__ = [
    # Renderers
    "declaration_signature",
    "display_signature",
    "node_name",
    "pretty_import",
    "pretty_print_type",
    "pretty_print_type_with_targs",
    "printable_node_kind",
    "printable_type_kind",
    # Nodes
    "AnnotationTypeDeclaration",
    "AnonymousClassDeclaration",
    "ArrayType",
    "ClassOrInterfaceDeclaration",
    "ClassOrInterfaceType",
    "ConstructorDeclaration",
    "EnumDeclaration",
    "FieldDeclaration",
    "FormalParameter",
    "FormalParameters",
    "ImportDeclaration",
    "JavaType",
    "MethodDeclaration",
    "MethodOrConstructorDeclaration",
    "Node",
    "PrimitiveKind",
    "PrimitiveType",
    "RecordDeclaration",
    "Resource",
    "SourceLocation",
    "TypeDeclaration",
    "TypeNode",
    "VariableDeclaratorId",
    "VoidType",
    "WildcardType",
    # Errors
    "EmptyDeclaredIdentifiersError",
    "JavaPrintError",
    "SerializationError",
    "UnsupportedNodeKindError",
    # Configuration
    "PrintConfig",
    "get_print_config",
    "print_config_context",
    "reset_print_config",
    "set_print_config",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
