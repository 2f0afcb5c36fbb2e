"""Tests for import declaration rendering."""

from javaprint import ImportDeclaration, pretty_import


class TestPrettyImport:
    def test_single_type_import(self) -> None:
        assert pretty_import(ImportDeclaration("java.util.List")) == "java.util.List"

    def test_on_demand_import(self) -> None:
        assert pretty_import(ImportDeclaration("java.util", on_demand=True)) == "java.util.*"

    def test_on_demand_type_members(self) -> None:
        decl = ImportDeclaration("java.util.Map", on_demand=True)
        assert pretty_import(decl) == "java.util.Map.*"
