"""javaprint renderers.

Renderers turn tree nodes into the stable text used in reports.

Available Renderers:
- types: type spelling, with or without generic arguments
- signatures: method and constructor display signatures
- kinds: display kind and display name of declarations
- imports: import declaration text

Thread Safety:
All renderers are pure functions using a StringBuilder local to each call.
Safe for concurrent use from multiple threads.

"""

from javaprint.printing.imports import pretty_import
from javaprint.printing.kinds import node_name, printable_node_kind, printable_type_kind
from javaprint.printing.signatures import declaration_signature, display_signature
from javaprint.printing.types import pretty_print_type, pretty_print_type_with_targs

__all__ = [
    "declaration_signature",
    "display_signature",
    "node_name",
    "pretty_import",
    "pretty_print_type",
    "pretty_print_type_with_targs",
    "printable_node_kind",
    "printable_type_kind",
]
