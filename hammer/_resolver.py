"""Utilities for resolving types and forward references."""

import collections.abc
import copy
import dataclasses
import sys
import types
from typing import Any, ClassVar, List, Optional, Tuple, Type, TypeVar, Union

from typing_extensions import get_args, get_origin, get_type_hints

NoneType = type(None)

MetadataType = TypeVar("MetadataType")

_UNION_ORIGINS: Tuple[Any, ...] = (Union,)
if sys.version_info >= (3, 10):
    _UNION_ORIGINS += (types.UnionType,)

_SEQUENCE_ORIGINS = (
    list,
    tuple,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
)


def is_dataclass(cls: Any) -> bool:
    """Same as `dataclasses.is_dataclass`, but ignores `Annotated[]` and returns False
    for instances."""
    cls = unwrap_annotated(cls)[0]
    return isinstance(cls, type) and dataclasses.is_dataclass(cls)


def resolved_fields(cls: Type) -> List[dataclasses.Field]:
    """Similar to dataclasses.fields(), but resolves forward references and skips
    fields that aren't passed into the constructor."""

    assert dataclasses.is_dataclass(cls)
    fields = []
    annotations = get_type_hints(cls, include_extras=True)
    for field in dataclasses.fields(cls):
        if not field.init:
            continue

        # Avoid mutating original field.
        field = copy.copy(field)

        # Resolve forward references.
        field.type = annotations[field.name]

        # Skip ClassVars.
        if get_origin(field.type) is ClassVar:
            continue

        fields.append(field)

    return fields


def unwrap_annotated(
    typ: Any, search_type: Optional[Type[MetadataType]] = None
) -> Tuple[Any, Tuple[MetadataType, ...]]:
    """Helper for parsing typing.Annotated types.

    Examples:
    - int, int => (int, ())
    - Annotated[int, 1], int => (int, (1,))
    - Annotated[int, "1"], int => (int, ())
    """
    if not hasattr(typ, "__metadata__"):
        return typ, ()

    args = get_args(typ)
    assert len(args) >= 2

    # Don't search for a specific metadata type if `None` is passed in.
    if search_type is None:
        return args[0], ()

    # Look through metadata for desired metadata type.
    targets = tuple(x for x in args[1:] if isinstance(x, search_type))
    return args[0], targets


def unwrap_optional(typ: Any) -> Optional[Any]:
    """Returns `T` for `Optional[T]`, or None if `typ` isn't optional.

    `Optional[Union[A, B]]` unwraps to `Union[A, B]`, which the driver will reject.
    """
    if get_origin(typ) not in _UNION_ORIGINS:
        return None
    args = get_args(typ)
    if NoneType not in args:
        return None
    others = tuple(arg for arg in args if arg is not NoneType)
    if len(others) != 1:
        return Union.__getitem__(others)  # type: ignore
    return others[0]


def sequence_element_type(typ: Any) -> Optional[Tuple[Any, type]]:
    """For variable-length sequences, returns the element type and the container type
    to build. `List[int]` => `(int, list)`, `Tuple[str, ...]` => `(str, tuple)`.

    Returns None for anything that isn't a variable-length sequence."""
    origin = get_origin(typ)
    if origin not in _SEQUENCE_ORIGINS:
        return None

    args = get_args(typ)
    if origin is tuple:
        if len(args) != 2 or args[1] is not Ellipsis:
            return None
        return args[0], tuple

    if len(args) == 0:
        return str, list
    return args[0], list


def is_fixed_length_tuple(typ: Any) -> bool:
    return get_origin(typ) is tuple and sequence_element_type(typ) is None


def is_mapping(typ: Any) -> bool:
    origin = get_origin(typ)
    if origin is None:
        origin = typ
    return isinstance(origin, type) and issubclass(origin, collections.abc.Mapping)


def is_union(typ: Any) -> bool:
    return get_origin(typ) in _UNION_ORIGINS
