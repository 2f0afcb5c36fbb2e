"""Import declaration renderer."""

from javaprint.nodes import ImportDeclaration


def pretty_import(import_decl: ImportDeclaration) -> str:
    """Return the imported name, with ``.*`` for on-demand imports.

    Example:
        >>> pretty_import(ImportDeclaration("java.util", on_demand=True))
        'java.util.*'
    """
    name = import_decl.imported_name
    if import_decl.on_demand:
        return name + ".*"
    return name
