"""Display signatures for methods and constructors.

A display signature is the name followed by the parameter types, without
generic arguments: ``foo(int, List, String[])``. Overloads and
constructors are told apart by it in reports.

Thread Safety:
Pure functions. The StringBuilder is local to each call.

"""

from javaprint.nodes import FormalParameters, MethodDeclaration, MethodOrConstructorDeclaration
from javaprint.printing.types import render_type
from javaprint.stringbuilder import StringBuilder


def display_signature(method_name: str, params: FormalParameters) -> str:
    """Return a normalized signature from a name and a parameter list.

    Only the spelling of parameter types is used. Brackets declared on the
    parameter name (``String args[]``) are added after the type's own.

    Args:
        method_name: Name printed before the parenthesis
        params: Parameters in declaration order

    Returns:
        Signature such as ``"main(String[])"``
    """
    sb = StringBuilder()
    sb.append(method_name).append("(")

    first = True
    for param in params:
        if not first:
            sb.append(", ")
        first = False

        render_type(param.type_node, sb, with_targs=False)
        sb.append_repeated("[]", param.var_id.extra_dimensions)

    sb.append(")")
    return sb.build()


def declaration_signature(node: MethodOrConstructorDeclaration) -> str:
    """Return the display signature of a method or constructor declaration.

    Methods use their name, constructors their image (the class name).
    """
    name = node.name if isinstance(node, MethodDeclaration) else node.image
    return display_signature(name or "", node.formal_parameters)
