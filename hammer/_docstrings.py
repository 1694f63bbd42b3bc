"""Helpers for pulling a description out of a dataclass docstring."""

import inspect
from typing import Optional, Type

import docstring_parser

from . import _strings


def get_dataclass_description(cls: Type) -> Optional[str]:
    """Get the description from a dataclass docstring, but only if it is
    hand-specified. Parameter sections (`Args:`, `Attributes:`, ...) are dropped.

    Note that `dataclasses.dataclass` will automatically populate __doc__ based on the
    fields of the class if a docstring is not specified; this helper will ignore these
    docstrings."""
    docstring = cls.__doc__
    if docstring is None:
        return None

    # Ignore any default docstrings, as generated by `dataclasses.dataclass`.
    try:
        default_doc = cls.__name__ + str(inspect.signature(cls)).replace(" -> None", "")
    except (TypeError, ValueError):
        default_doc = None
    if docstring == default_doc:
        return None

    parsed = docstring_parser.parse(_strings.dedent(docstring))
    parts = [
        part
        for part in (parsed.short_description, parsed.long_description)
        if part is not None and len(part) > 0
    ]
    if len(parts) == 0:
        return None
    return "\n\n".join(parts)
