"""Display kinds and display names of declarations.

Reports describe a node as "<kind> '<name>'", e.g. ``field 'count'`` or
``constructor 'Point(int, int)'``. The kind is a closed classification:
asking for the kind of a node outside it is an error. The name has a loose
fallback to the node image.

Thread Safety:
Pure functions over immutable nodes.

"""

from javaprint.errors import EmptyDeclaredIdentifiersError, UnsupportedNodeKindError
from javaprint.nodes import (
    AnnotationTypeDeclaration,
    ClassOrInterfaceDeclaration,
    ConstructorDeclaration,
    EnumDeclaration,
    FieldDeclaration,
    MethodDeclaration,
    MethodOrConstructorDeclaration,
    Node,
    RecordDeclaration,
    Resource,
    TypeDeclaration,
    VariableDeclaratorId,
)
from javaprint.printing.signatures import declaration_signature
from javaprint.utils.logger import get_logger

logger = get_logger(__name__)


def printable_type_kind(decl: TypeDeclaration) -> str:
    """Return the generic kind of declaration this is, eg "enum" or "class"."""
    match decl:
        case ClassOrInterfaceDeclaration(interface=True):
            return "interface"
        case AnnotationTypeDeclaration():
            return "annotation"
        case EnumDeclaration():
            return "enum"
        case RecordDeclaration():
            return "record"
    # Classes, interfaces without the flag, anonymous classes
    return "class"


def printable_node_kind(node: Node) -> str:
    """Return the kind of node this is, for instance "field".

    Raises:
        UnsupportedNodeKindError: If the node is not a type declaration,
            method, constructor, field or resource
    """
    match node:
        case TypeDeclaration():
            return printable_type_kind(node)
        case MethodDeclaration():
            return "method"
        case ConstructorDeclaration():
            return "constructor"
        case FieldDeclaration():
            return "field"
        case Resource():
            return "resource specification"
    raise UnsupportedNodeKindError(node)


def node_name(node: Node) -> str | None:
    """Return the display name of a node.

    Methods are named by their simple name. Constructors all share the
    class name, so they are named by their full display signature.

    Raises:
        EmptyDeclaredIdentifiersError: If a field declaration declares no
            variables
    """
    match node:
        case MethodDeclaration():
            return node.name
        case MethodOrConstructorDeclaration():
            return declaration_signature(node)
        case FieldDeclaration():
            if not node.var_ids:
                raise EmptyDeclaredIdentifiersError(node)
            return node.var_ids[0].name
        case Resource():
            return node.stable_name
        case TypeDeclaration():
            return node.simple_name
        case VariableDeclaratorId():
            return node.name
    logger.debug("No display name rule for %s, using its image", type(node).__name__)
    return node.image
