"""Rendering for usage text."""

from typing import Callable, List, Sequence

from . import _strings
from ._usage import FieldDescriptor

INDENT = "    "


def render_usage(fields: Sequence[FieldDescriptor], force_indent: bool = False) -> str:
    """One line per field: mandatory fields first, then optional fields wrapped in
    brackets. Declaration order is kept within each group.

    If any field has an alias (or `force_indent` is set), lines without an alias are
    indented to line up with the `-v, ` prefix of aliased lines.
    """
    has_aliases = any(field.alias is not None for field in fields)
    indent = INDENT if force_indent or has_aliases else ""

    mandatory = [field for field in fields if not field.optional]
    optional = [field for field in fields if field.optional]

    return _render_fields(mandatory, indent, lambda name: name) + _render_fields(
        optional, indent, lambda name: f"[{name}]"
    )


def _render_fields(
    fields: List[FieldDescriptor], indent: str, format: Callable[[str], str]
) -> str:
    out: List[str] = []
    for field in fields:
        prefix = indent
        if field.alias is not None:
            prefix = _strings.short_flag(field.alias) + ", "
        out.append(f"{prefix}{format(field.canonical)}\n")
    return "".join(out)
