import dataclasses

from typing_extensions import Annotated


@dataclasses.dataclass(frozen=True)
class Marker:
    description: str

    def __repr__(self):
        return self.description


@dataclasses.dataclass(frozen=True)
class IntWidth(Marker):
    bits: int
    signed: bool

    def wrap(self, value: int) -> int:
        """Truncate `value` into this width, two's-complement style. Out-of-range
        values wrap silently instead of raising."""
        value &= (1 << self.bits) - 1
        if self.signed and value >= 1 << (self.bits - 1):
            value -= 1 << self.bits
        return value


CHAR = Marker("Char")
Char = Annotated[str, CHAR]
"""A field annotated as `Char` is decoded from a token that must be exactly one
character long."""

SINGLE_PRECISION = Marker("F32")
F32 = Annotated[float, SINGLE_PRECISION]
"""A float field that is rounded through single precision after parsing."""

# Fixed-width integers. Values that don't fit are truncated, not rejected.
U8 = Annotated[int, IntWidth("U8", 8, False)]
U16 = Annotated[int, IntWidth("U16", 16, False)]
U32 = Annotated[int, IntWidth("U32", 32, False)]
U64 = Annotated[int, IntWidth("U64", 64, False)]
I8 = Annotated[int, IntWidth("I8", 8, True)]
I16 = Annotated[int, IntWidth("I16", 16, True)]
I32 = Annotated[int, IntWidth("I32", 32, True)]
I64 = Annotated[int, IntWidth("I64", 64, True)]
