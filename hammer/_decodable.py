"""Generic driver for decoding a record type through a `RecordVisitor`.

The driver maps each field annotation to a reader: a function that makes the matching
calls on the visitor. Readers are built before the visitor is touched, so annotations
that can't be decoded at all are reported before any token is consumed.

Some examples of annotations and the reads they turn into:
```
    bool                ->  v.read_bool()
    hammer.conf.U8      ->  v.read_int(IntWidth("U8", 8, False))
    Optional[str]       ->  v.read_option(lambda v, present: v.read_str() if present else None)
    List[int]           ->  v.read_seq(lambda v, n: [v.read_seq_elt(i, read_int) ...])
```
"""

import enum
from typing import Any, Callable, List, Tuple, Type, TypeVar

from typing_extensions import get_args

from . import _resolver, _strings
from ._errors import UnsupportedShapeError
from ._visitor import RecordVisitor
from .conf import _markers

T = TypeVar("T")

Reader = Callable[[RecordVisitor], Any]


def decode_record(cls: Type[T], visitor: RecordVisitor) -> T:
    """Visit every field of the dataclass `cls`, in declaration order, and build an
    instance from the values the visitor returns."""
    cls = _resolver.unwrap_annotated(cls)[0]
    if not _resolver.is_dataclass(cls):
        raise UnsupportedShapeError(f"Expected a dataclass type, but got {cls}.")

    rest_field_name = visitor.rest_field_name()
    readers: List[Tuple[str, Reader]] = []
    for field in _resolver.resolved_fields(cls):
        reader = reader_from_type(field.type)
        if field.name == rest_field_name and not _is_sequence(field.type):
            raise UnsupportedShapeError(
                f"{field.name} is the rest field, so it must be a variable-length"
                f" sequence, but got {field.type}.",
                field=_strings.canonical_field_name(field.name),
            )
        readers.append((field.name, reader))

    def read_fields(v: RecordVisitor) -> T:
        kwargs = {}
        for index, (name, reader) in enumerate(readers):
            kwargs[name] = v.read_struct_field(name, index, reader)
        return cls(**kwargs)  # type: ignore

    return visitor.read_struct(cls.__name__, len(readers), read_fields)


def reader_from_type(typ: Any) -> Reader:
    """Recursive helper for mapping a field annotation to a reader."""
    typ, markers = _resolver.unwrap_annotated(typ, _markers.Marker)

    inner = _resolver.unwrap_optional(typ)
    if inner is not None:
        # An absent rest field is already an empty sequence.
        if _is_sequence(inner):
            raise UnsupportedShapeError(
                f"Optional sequence {typ} can't be decoded from flags; use a plain"
                " sequence instead."
            )
        inner_reader = reader_from_type(inner)
        return lambda v: v.read_option(
            lambda v, present: inner_reader(v) if present else None
        )

    # Note that bool is checked before int; bool is a subclass of int.
    if typ is bool:
        return lambda v: v.read_bool()

    if typ is str:
        if _markers.CHAR in markers:
            return lambda v: v.read_char()
        return lambda v: v.read_str()

    if typ is int:
        widths = [m for m in markers if isinstance(m, _markers.IntWidth)]
        width = widths[-1] if len(widths) > 0 else None
        return lambda v: v.read_int(width)

    if typ is float:
        single_precision = _markers.SINGLE_PRECISION in markers
        return lambda v: v.read_float(single_precision)

    sequence = _resolver.sequence_element_type(typ)
    if sequence is not None:
        element_type, container_type = sequence
        return _sequence_reader(element_type, container_type)

    if _resolver.is_dataclass(typ):
        return lambda v: decode_record(typ, v)

    if isinstance(typ, type) and issubclass(typ, enum.Enum):
        return lambda v: v.read_enum(typ.__name__)

    if _resolver.is_fixed_length_tuple(typ):
        length = len(get_args(typ))
        return lambda v: v.read_tuple(length)

    if _resolver.is_mapping(typ):
        return lambda v: v.read_map()

    if _resolver.is_union(typ):
        raise UnsupportedShapeError(
            f"Union type {typ} can't be decoded from flags; only Optional[T] is"
            " supported."
        )

    raise UnsupportedShapeError(f"{typ} is not a supported field type.")


def _sequence_reader(element_type: Any, container_type: type) -> Reader:
    element_type_unwrapped = _resolver.unwrap_annotated(element_type)[0]
    if element_type_unwrapped not in (str, int, float):
        raise UnsupportedShapeError(
            f"Sequence elements must be str, int, or float, but got {element_type}."
        )
    element_reader = reader_from_type(element_type)

    def read_elements(v: RecordVisitor, length: int) -> Any:
        return container_type(
            v.read_seq_elt(index, element_reader) for index in range(length)
        )

    return lambda v: v.read_seq(read_elements)


def _is_sequence(typ: Any) -> bool:
    return (
        _resolver.sequence_element_type(_resolver.unwrap_annotated(typ)[0])
        is not None
    )
