"""Exception classes for javaprint.

Both rendering failures are contract violations by the caller (or by the
tree builder upstream). They are never caught inside the package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from javaprint.nodes import FieldDeclaration, Node


class JavaPrintError(Exception):
    """Base exception for all javaprint errors."""

    pass


class UnsupportedNodeKindError(JavaPrintError):
    """A node has no printable kind.

    Raised by ``printable_node_kind`` for nodes outside its closed set of
    type declarations, methods, constructors, fields and resources.
    """

    def __init__(self, node: Node) -> None:
        """Initialize with the offending node.

        Args:
            node: Node that could not be classified
        """
        self.node = node
        super().__init__(f"Node {type(node).__name__} at {node.location} is unaccounted for")


class EmptyDeclaredIdentifiersError(JavaPrintError):
    """A field declaration declares no variables.

    The grammar never produces such a node, so this points at a broken
    tree builder.
    """

    def __init__(self, node: FieldDeclaration) -> None:
        self.node = node
        super().__init__(f"Field declaration at {node.location} declares no variables")


class SerializationError(JavaPrintError, ValueError):
    """Serialized tree data has a missing or unknown node type."""

    pass
