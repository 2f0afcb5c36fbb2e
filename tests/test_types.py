"""Tests for the type renderer."""

import pytest

from javaprint import (
    ArrayType,
    ClassOrInterfaceType,
    PrimitiveKind,
    PrimitiveType,
    PrintConfig,
    VoidType,
    WildcardType,
    print_config_context,
    pretty_print_type,
    pretty_print_type_with_targs,
)

INT = PrimitiveType(PrimitiveKind.INT)
STRING = ClassOrInterfaceType("String")
INTEGER = ClassOrInterfaceType("Integer")


def _generic(name: str, *targs) -> ClassOrInterfaceType:  # type: ignore[no-untyped-def]
    return ClassOrInterfaceType(name, tuple(targs))


class TestPrimitiveAndVoid:
    @pytest.mark.parametrize("kind", list(PrimitiveKind))
    def test_primitive_spelling(self, kind: PrimitiveKind) -> None:
        t = PrimitiveType(kind)
        assert pretty_print_type(t) == kind.value
        assert pretty_print_type_with_targs(t) == kind.value

    def test_void(self) -> None:
        assert pretty_print_type(VoidType()) == "void"
        assert pretty_print_type_with_targs(VoidType()) == "void"


class TestClassOrInterfaceType:
    def test_simple_name(self) -> None:
        assert pretty_print_type(STRING) == "String"

    def test_type_arguments_dropped_by_default(self) -> None:
        assert pretty_print_type(_generic("List", STRING)) == "List"

    def test_single_type_argument(self) -> None:
        assert pretty_print_type_with_targs(_generic("List", STRING)) == "List<String>"

    def test_no_argument_list(self) -> None:
        """A raw type prints no brackets at all."""
        assert pretty_print_type_with_targs(ClassOrInterfaceType("List")) == "List"

    def test_diamond(self) -> None:
        assert pretty_print_type_with_targs(_generic("ArrayList")) == "ArrayList<>"

    def test_nested_arguments_always_printed(self) -> None:
        t = _generic("List", _generic("Set", STRING))
        assert pretty_print_type_with_targs(t) == "List<Set<String>>"


class TestTypeArgumentSeparator:
    """The separator is appended after every non-first argument.

    Report keys depend on this spelling, so it is pinned here.
    """

    def test_two_arguments(self) -> None:
        t = _generic("Map", ClassOrInterfaceType("A"), ClassOrInterfaceType("B"))
        assert pretty_print_type_with_targs(t) == "Map<AB, >"

    def test_three_arguments(self) -> None:
        t = _generic("Fn", *(ClassOrInterfaceType(n) for n in "ABC"))
        assert pretty_print_type_with_targs(t) == "Fn<AB, C, >"

    def test_nested_two_arguments(self) -> None:
        t = _generic("List", _generic("Map", STRING, INTEGER))
        assert pretty_print_type_with_targs(t) == "List<Map<StringInteger, >>"

    def test_plain_join_opt_in(self) -> None:
        t = _generic("Map", STRING, _generic("List", INTEGER))
        with print_config_context(PrintConfig(legacy_type_argument_join=False)):
            assert pretty_print_type_with_targs(t) == "Map<String, List<Integer>>"

    def test_plain_join_three_arguments(self) -> None:
        t = _generic("Fn", *(ClassOrInterfaceType(n) for n in "ABC"))
        with print_config_context(PrintConfig(legacy_type_argument_join=False)):
            assert pretty_print_type_with_targs(t) == "Fn<A, B, C>"


class TestArrayType:
    def test_single_dimension(self) -> None:
        assert pretty_print_type(ArrayType(INT)) == "int[]"

    def test_depth(self) -> None:
        assert pretty_print_type(ArrayType(STRING, depth=3)) == "String[][][]"

    def test_generic_element(self) -> None:
        t = ArrayType(_generic("List", STRING), depth=2)
        assert pretty_print_type(t) == "List[][]"
        assert pretty_print_type_with_targs(t) == "List<String>[][]"

    def test_array_as_type_argument(self) -> None:
        t = _generic("List", ArrayType(INT))
        assert pretty_print_type_with_targs(t) == "List<int[]>"


class TestWildcardType:
    def test_unbounded(self) -> None:
        assert pretty_print_type(WildcardType()) == "?"

    def test_upper_bound(self) -> None:
        t = WildcardType(ClassOrInterfaceType("Number"))
        assert pretty_print_type(t) == "? extends Number"

    def test_lower_bound(self) -> None:
        t = WildcardType(INTEGER, lower_bound=True)
        assert pretty_print_type(t) == "? super Integer"

    def test_lower_bound_flag_ignored_without_bound(self) -> None:
        assert pretty_print_type(WildcardType(lower_bound=True)) == "?"

    def test_bound_follows_outer_flag(self) -> None:
        t = WildcardType(_generic("List", STRING))
        assert pretty_print_type(t) == "? extends List"
        assert pretty_print_type_with_targs(t) == "? extends List<String>"

    def test_wildcard_argument(self) -> None:
        t = _generic("Class", WildcardType(_generic("Comparable", ClassOrInterfaceType("T"))))
        assert pretty_print_type_with_targs(t) == "Class<? extends Comparable<T>>"
