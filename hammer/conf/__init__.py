"""The :mod:`hammer.conf` submodule contains markers for attaching decoding-specific
metadata to field types via [PEP 593](https://peps.python.org/pep-0593/) runtime
annotations.
"""

from ._markers import F32, I8, I16, I32, I64, U8, U16, U32, U64, Char, IntWidth

__all__ = [
    "Char",
    "F32",
    "I8",
    "I16",
    "I32",
    "I64",
    "IntWidth",
    "U8",
    "U16",
    "U32",
    "U64",
]
