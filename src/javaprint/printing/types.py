"""Type renderer: spells a type node the way it is written in source.

Generic type arguments are optional at the top level; once inside an
argument list they are always printed, so ``List<Map<K, V>>[]`` printed
without arguments is ``List[]`` and with arguments keeps the nested map.

Example:
    >>> t = ArrayType(ClassOrInterfaceType("List", (ClassOrInterfaceType("String"),)))
    >>> pretty_print_type(t)
    'List[]'
    >>> pretty_print_type_with_targs(t)
    'List<String>[]'

Thread Safety:
Pure functions. The StringBuilder is local to each call.

"""

from typing import assert_never

from javaprint.config import get_print_config
from javaprint.nodes import (
    ArrayType,
    ClassOrInterfaceType,
    JavaType,
    PrimitiveType,
    VoidType,
    WildcardType,
)
from javaprint.stringbuilder import StringBuilder


def pretty_print_type(t: JavaType) -> str:
    """Render a type without generic type arguments."""
    sb = StringBuilder()
    render_type(t, sb, with_targs=False)
    return sb.build()


def pretty_print_type_with_targs(t: JavaType) -> str:
    """Render a type including generic type arguments."""
    sb = StringBuilder()
    render_type(t, sb, with_targs=True)
    return sb.build()


def render_type(t: JavaType, sb: StringBuilder, *, with_targs: bool) -> None:
    """Append the spelling of ``t`` to ``sb``.

    Args:
        t: Type node to render
        sb: Builder shared by the whole rendering call
        with_targs: Whether class types print their argument list
    """
    match t:
        case PrimitiveType():
            sb.append(t.kind.simple_name)
        case ClassOrInterfaceType():
            sb.append(t.simple_name)
            if with_targs:
                _render_type_arguments(t, sb)
        case ArrayType():
            render_type(t.element_type, sb, with_targs=with_targs)
            sb.append_repeated("[]", t.depth)
        case VoidType():
            sb.append("void")
        case WildcardType():
            sb.append("?")
            if t.bound is not None:
                sb.append(" super " if t.lower_bound else " extends ")
                render_type(t.bound, sb, with_targs=with_targs)
        case _:
            assert_never(t)


def _render_type_arguments(t: ClassOrInterfaceType, sb: StringBuilder) -> None:
    targs = t.type_arguments
    if targs is None:
        return

    legacy = get_print_config().legacy_type_argument_join
    sb.append("<")
    if legacy:
        # The separator goes after each argument but the first: <AB, C, >
        first = True
        for targ in targs:
            render_type(targ, sb, with_targs=True)
            if not first:
                sb.append(", ")
            first = False
    else:
        for i, targ in enumerate(targs):
            if i:
                sb.append(", ")
            render_type(targ, sb, with_targs=True)
    sb.append(">")
