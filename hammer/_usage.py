"""Usage decoder: walks a record type with the same protocol as `FlagDecoder`, but
describes each field instead of consuming tokens."""

import dataclasses
from typing import Callable, List, Optional, TypeVar

from . import _strings
from ._config import FlagConfiguration
from ._errors import UnsupportedShapeError
from ._visitor import RecordVisitor
from .conf._markers import IntWidth

T = TypeVar("T")


@dataclasses.dataclass
class FieldDescriptor:
    canonical: str
    alias: Optional[str] = None
    optional: bool = False


class UsageDecoder(RecordVisitor):
    def __init__(self, config: FlagConfiguration) -> None:
        self.config = config
        self.fields: List[FieldDescriptor] = []
        self._current: Optional[FieldDescriptor] = None

    def current_flag(self) -> Optional[str]:
        return None if self._current is None else self._current.canonical

    def rest_field_name(self) -> str:
        return self.config.rest_field_name

    def _optional(self) -> None:
        if self._current is not None:
            self._current.optional = True

    def _field(self) -> None:
        """Finalize the current descriptor. No-op while the rest field is being
        swallowed."""
        if self._current is None:
            return
        self.fields.append(self._current)
        self._current = None

    # Booleans are presence flags, so they're always shown as optional.
    def read_bool(self) -> bool:
        self._optional()
        self._field()
        return False

    def read_str(self) -> str:
        self._field()
        return ""

    def read_int(self, width: Optional[IntWidth]) -> int:
        self._field()
        return 0

    def read_float(self, single_precision: bool) -> float:
        self._field()
        return 0.0

    def read_char(self) -> str:
        self._field()
        return ""

    def read_option(self, f: Callable[[RecordVisitor, bool], T]) -> T:
        self._optional()
        return f(self, True)

    def read_seq(self, f: Callable[[RecordVisitor, int], T]) -> T:
        # Only reached with a descriptor when the field isn't being swallowed as the
        # rest field.
        if self._current is not None:
            raise UnsupportedShapeError(
                f"{self._current.canonical} is a sequence, but only the rest field"
                f" ({self.config.rest_field_name}) can hold a sequence.",
                field=self._current.canonical,
            )
        return f(self, 0)

    def read_seq_elt(self, index: int, f: Callable[[RecordVisitor], T]) -> T:
        raise UnsupportedShapeError(
            "Sequences are only supported on the rest field.",
            field=self.current_flag(),
        )

    def read_struct(
        self, name: str, length: int, f: Callable[[RecordVisitor], T]
    ) -> T:
        if self._current is not None:
            raise UnsupportedShapeError(
                f"{self._current.canonical} is a nested record ({name}), which can't"
                " be decoded from flags.",
                field=self._current.canonical,
            )
        return f(self)

    def read_struct_field(
        self, name: str, index: int, f: Callable[[RecordVisitor], T]
    ) -> T:
        # The rest field has no usage text of its own. Its reads go to a fresh decoder
        # with an empty configuration, and are discarded.
        if name == self.config.rest_field_name:
            self._current = None
            return f(UsageDecoder(FlagConfiguration.new()))

        self._current = FieldDescriptor(
            _strings.canonical_field_name(name), alias=self.config.short_for(name)
        )
        return f(self)
