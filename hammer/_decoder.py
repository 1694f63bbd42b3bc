"""Value decoder: consumes command-line tokens and converts them into field values."""

import dataclasses
import logging
import struct
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar, Union

from . import _strings
from ._config import FlagConfiguration
from ._errors import (
    ConversionError,
    InvalidCharacterError,
    MissingRequiredFieldError,
    MissingValueError,
    UnsupportedShapeError,
)
from ._visitor import RecordVisitor
from .conf._markers import IntWidth

T = TypeVar("T")

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Processing:
    """Normal field-by-field mode."""


@dataclasses.dataclass(frozen=True)
class CapturingRest:
    """Rest-field mode. `index` is the position of the last element emitted from the
    frozen snapshot of remaining tokens; -1 before the first element."""

    index: int


DecoderState = Union[Processing, CapturingRest]


class FlagDecoder(RecordVisitor):
    """Stateful engine for one value-decode pass.

    The token sequence is held as a tuple and rebuilt whenever a token is claimed, so
    snapshots taken earlier (the rest capture, `remaining()`) are never affected by
    later claims. A decoder should be driven to completion once, then discarded.
    """

    def __init__(self, args: Sequence[str], config: FlagConfiguration) -> None:
        self._tokens: Tuple[str, ...] = tuple(args)
        self._config = config
        self._current_field: Optional[str] = None
        self._state: DecoderState = Processing()
        self._rest_snapshot: Tuple[str, ...] = ()
        self._done = False

    def remaining(self) -> List[str]:
        """Tokens that no named field has claimed."""
        return list(self._tokens)

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def done(self) -> bool:
        return self._done

    # Field resolution. Every read goes through `_field_pos()`, so the long form and
    # the short alias behave the same way for booleans, values, and optionals.

    def current_flag(self) -> Optional[str]:
        if self._current_field is None:
            return None
        return _strings.canonical_field_name(self._current_field)

    def rest_field_name(self) -> str:
        return self._config.rest_field_name

    def _canonical(self) -> str:
        flag = self.current_flag()
        assert flag is not None, "No field is being visited."
        return flag

    def _field_pos(self) -> Optional[int]:
        """Position of the first token matching the current field, or None."""
        canonical = self._canonical()
        if canonical in self._tokens:
            return self._tokens.index(canonical)

        assert self._current_field is not None
        alias = self._config.short_for(self._current_field)
        if alias is not None:
            short = _strings.short_flag(alias)
            if short in self._tokens:
                return self._tokens.index(short)
        return None

    def _claim(self, pos: int, count: int) -> None:
        claimed = self._tokens[pos : pos + count]
        self._tokens = self._tokens[:pos] + self._tokens[pos + count :]
        log.debug("%s claimed %s", self._canonical(), list(claimed))

    def _read_value(self, kind: str, convert: Callable[[str], T]) -> T:
        """Base conversion primitive. In rest mode, reads the next element of the
        snapshot; otherwise finds the flag, converts the token after it, and claims
        both. Nothing is claimed if conversion fails."""
        if isinstance(self._state, CapturingRest):
            return convert(self._rest_snapshot[self._state.index])

        pos = self._field_pos()
        if pos is None:
            raise MissingRequiredFieldError(
                f"{self._canonical()} is required", field=self._canonical()
            )
        if pos + 1 >= len(self._tokens):
            raise MissingValueError(
                f"{self._canonical()} is missing a following {kind}",
                field=self._canonical(),
            )

        value = convert(self._tokens[pos + 1])
        self._claim(pos, 2)
        return value

    def _converter(self, kind: str, parse: Callable[[str], T]) -> Callable[[str], T]:
        def convert(token: str) -> T:
            try:
                return parse(token)
            except ValueError:
                raise ConversionError(
                    f"could not convert {token} to {_strings.with_article(kind)}",
                    field=self.current_flag(),
                ) from None

        return convert

    # Scalar reads.

    def read_bool(self) -> bool:
        if isinstance(self._state, CapturingRest):
            raise UnsupportedShapeError(
                "Booleans can't be captured as rest elements.", field=self._canonical()
            )
        pos = self._field_pos()
        if pos is None:
            return False
        self._claim(pos, 1)
        return True

    def read_str(self) -> str:
        return self._read_value("string", str)

    def read_int(self, width: Optional[IntWidth]) -> int:
        value = self._read_value("integer", self._converter("integer", int))
        if width is not None:
            value = width.wrap(value)
        return value

    def read_float(self, single_precision: bool) -> float:
        value = self._read_value("float", self._converter("float", float))
        if single_precision:
            value = struct.unpack("f", struct.pack("f", value))[0]
        return value

    def read_char(self) -> str:
        def convert(token: str) -> str:
            if len(token) != 1:
                raise InvalidCharacterError(
                    f"{token} is not a single character", field=self.current_flag()
                )
            return token

        return self._read_value("character", convert)

    # Compound reads.

    def read_option(self, f: Callable[[RecordVisitor, bool], T]) -> T:
        if isinstance(self._state, CapturingRest):
            raise UnsupportedShapeError(
                "Optionals can't be captured as rest elements.",
                field=self._canonical(),
            )
        return f(self, self._field_pos() is not None)

    def read_seq(self, f: Callable[[RecordVisitor, int], T]) -> T:
        assert self._current_field is not None
        if self._current_field != self._config.rest_field_name:
            raise UnsupportedShapeError(
                f"{self._canonical()} is a sequence, but only the rest field"
                f" ({self._config.rest_field_name}) can hold a sequence.",
                field=self._canonical(),
            )

        self._rest_snapshot = self._tokens
        self._state = CapturingRest(-1)
        log.debug("%s capturing %s", self._canonical(), list(self._rest_snapshot))
        out = f(self, len(self._rest_snapshot))
        self._done = True
        return out

    def read_seq_elt(self, index: int, f: Callable[[RecordVisitor], T]) -> T:
        assert isinstance(self._state, CapturingRest)
        self._state = CapturingRest(self._state.index + 1)
        assert self._state.index == index
        return f(self)

    def read_struct(
        self, name: str, length: int, f: Callable[[RecordVisitor], T]
    ) -> T:
        if self._current_field is not None:
            raise UnsupportedShapeError(
                f"{self._canonical()} is a nested record ({name}), which can't be"
                " decoded from flags.",
                field=self._canonical(),
            )
        return f(self)

    def read_struct_field(
        self, name: str, index: int, f: Callable[[RecordVisitor], T]
    ) -> T:
        self._current_field = name
        if self._done:
            raise UnsupportedShapeError(
                f"{self._canonical()} is declared after the rest field"
                f" ({self._config.rest_field_name}); the rest field must be declared"
                " last.",
                field=self._canonical(),
            )
        return f(self)
