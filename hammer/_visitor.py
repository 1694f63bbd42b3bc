"""The field-traversal protocol shared by the value decoder and the usage decoder.

A decode pass is driven by `hammer._decodable`, which walks a record's fields in
declaration order and calls one `read_*` method per field shape. Implementations decide
what a read means: `FlagDecoder` consumes tokens and converts them, `UsageDecoder`
records a description of the field and returns a placeholder.
"""

import abc
from typing import Callable, Optional, TypeVar

from ._errors import UnsupportedShapeError
from .conf._markers import IntWidth

T = TypeVar("T")


class RecordVisitor(abc.ABC):
    """One method per primitive shape. The `f` callbacks passed into the compound reads
    (`read_option`, `read_seq`, `read_struct`, ...) are supplied by the driver and read
    the inner value; visitors decide whether and how to call them."""

    @abc.abstractmethod
    def read_bool(self) -> bool:
        ...

    @abc.abstractmethod
    def read_str(self) -> str:
        ...

    @abc.abstractmethod
    def read_int(self, width: Optional[IntWidth]) -> int:
        ...

    @abc.abstractmethod
    def read_float(self, single_precision: bool) -> float:
        ...

    @abc.abstractmethod
    def read_char(self) -> str:
        ...

    @abc.abstractmethod
    def read_option(self, f: Callable[["RecordVisitor", bool], T]) -> T:
        """`f` is called with a flag indicating whether the field is present."""

    @abc.abstractmethod
    def read_seq(self, f: Callable[["RecordVisitor", int], T]) -> T:
        """`f` is called with the number of elements to read."""

    @abc.abstractmethod
    def read_seq_elt(self, index: int, f: Callable[["RecordVisitor"], T]) -> T:
        ...

    @abc.abstractmethod
    def read_struct(
        self, name: str, length: int, f: Callable[["RecordVisitor"], T]
    ) -> T:
        ...

    @abc.abstractmethod
    def read_struct_field(
        self, name: str, index: int, f: Callable[["RecordVisitor"], T]
    ) -> T:
        ...

    # Shapes that can't be expressed as flags. Both decoders decline these.

    def read_enum(self, name: str) -> None:
        raise UnsupportedShapeError(
            f"Enum {name} can't be decoded from flags.", field=self.current_flag()
        )

    def read_tuple(self, length: int) -> None:
        raise UnsupportedShapeError(
            f"Fixed-length tuples ({length} elements) can't be decoded from flags.",
            field=self.current_flag(),
        )

    def read_map(self) -> None:
        raise UnsupportedShapeError(
            "Mappings can't be decoded from flags.", field=self.current_flag()
        )

    @abc.abstractmethod
    def current_flag(self) -> Optional[str]:
        """Canonical long form of the field being visited, if any."""

    @abc.abstractmethod
    def rest_field_name(self) -> str:
        """Name of the field that captures leftover tokens."""
