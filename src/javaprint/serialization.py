"""Tree serialization: JSON round-trip for javaprint nodes.

The Java front end that builds trees usually lives in another process (or
another language). It hands trees over as JSON in the shape produced here:
every node is an object with a ``_type`` discriminator and its fields.

All output is deterministic (sorted keys).

Example:
    from javaprint.serialization import to_json, from_json

    text = to_json(MethodDeclaration(FormalParameters(), name="run"))
    assert from_json(text) == MethodDeclaration(FormalParameters(), name="run")

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from javaprint.errors import SerializationError
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
    MethodDeclaration,
    Node,
    PrimitiveKind,
    PrimitiveType,
    RecordDeclaration,
    Resource,
    VariableDeclaratorId,
    VoidType,
    WildcardType,
)
from javaprint.utils.logger import get_logger

logger = get_logger(__name__)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Node,
        PrimitiveType,
        ClassOrInterfaceType,
        ArrayType,
        VoidType,
        WildcardType,
        VariableDeclaratorId,
        FormalParameter,
        FormalParameters,
        ClassOrInterfaceDeclaration,
        AnnotationTypeDeclaration,
        EnumDeclaration,
        RecordDeclaration,
        AnonymousClassDeclaration,
        MethodDeclaration,
        ConstructorDeclaration,
        FieldDeclaration,
        Resource,
        ImportDeclaration,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Primitive kinds are stored by their spelling.

    Args:
        node: Any javaprint node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {"_type": "SourceLocation", **{f.name: getattr(value, f.name) for f in fields(value)}}
    if isinstance(value, PrimitiveKind):
        return value.value
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Fields missing from ``data`` take their defaults.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or the fields
            do not fit the node type.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])

    try:
        if node_cls is PrimitiveType and "kind" in kwargs:
            kwargs["kind"] = PrimitiveKind(kwargs["kind"])
        return node_cls(**kwargs)
    except (TypeError, ValueError) as exc:
        msg = f"Invalid fields for {type_name}: {exc}"
        raise SerializationError(msg) from exc


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        if value.get("_type") == "SourceLocation":
            try:
                return SourceLocation(**{k: v for k, v in value.items() if k != "_type"})
            except TypeError as exc:
                msg = f"Invalid fields for SourceLocation: {exc}"
                raise SerializationError(msg) from exc
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node (and its subtree) to a JSON string.

    Args:
        node: Node to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize a node from a JSON string.

    Raises:
        SerializationError: If the JSON does not describe a known node.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a serialized node object, got {type(raw).__name__}"
        raise SerializationError(msg)
    node = from_dict(raw)
    logger.debug("Deserialized %s", type(node).__name__)
    return node
