import dataclasses
import enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

import hammer
from hammer import _decodable
from hammer.conf import U8, Char


@dataclasses.dataclass
class MixedOptions:
    color: Optional[str]
    line_count: str
    verbose: bool
    rest: List[str]


def test_mixed_usage() -> None:
    config = hammer.FlagConfiguration.new().short("verbose", "v")
    description, options = hammer.usage(MixedOptions, config=config)
    assert description is None
    assert options == "    --line-count\n    [--color]\n-v, [--verbose]\n"


def test_no_shorthand_usage() -> None:
    _, options = hammer.usage(MixedOptions)
    assert options == "--line-count\n[--color]\n[--verbose]\n"


def test_force_indent() -> None:
    _, options = hammer.usage(MixedOptions, force_indent=True)
    assert options == "    --line-count\n    [--color]\n    [--verbose]\n"


def test_descriptors() -> None:
    config = hammer.FlagConfiguration.new().short("verbose", "v")
    decoder = hammer.UsageDecoder(config)
    _decodable.decode_record(MixedOptions, decoder)
    assert decoder.fields == [
        hammer.FieldDescriptor("--color", alias=None, optional=True),
        hammer.FieldDescriptor("--line-count", alias=None, optional=False),
        hammer.FieldDescriptor("--verbose", alias="v", optional=True),
    ]


def test_scalar_kinds_are_mandatory() -> None:
    @dataclasses.dataclass
    class A:
        count: int
        small: U8
        ratio: float
        letter: Char
        maybe_count: Optional[int]

    _, options = hammer.usage(A)
    assert options == "--count\n--small\n--ratio\n--letter\n[--maybe-count]\n"


def test_configured_rest_field_is_swallowed() -> None:
    @dataclasses.dataclass
    class A:
        verbose: bool
        files: List[str]

    config = hammer.FlagConfiguration.new().rest_field("files")
    assert hammer.usage(A, config=config)[1] == "[--verbose]\n"

    # A field literally named `rest` is an ordinary field once the rest field has
    # been renamed.
    @dataclasses.dataclass
    class B:
        rest: str
        files: List[str]

    assert hammer.usage(B, config=config)[1] == "--rest\n"


def test_description_from_config() -> None:
    @dataclasses.dataclass
    class A:
        """Docstring description."""

        verbose: bool

    config = hammer.FlagConfiguration.new().desc("Configured description.")
    assert hammer.usage(A, config=config)[0] == "Configured description."


def test_description_from_docstring() -> None:
    @dataclasses.dataclass
    class A:
        """Compile some files.

        Args:
            verbose: Print more.
        """

        verbose: bool

    assert hammer.usage(A)[0] == "Compile some files."


def test_no_description_for_generated_docstring() -> None:
    @dataclasses.dataclass
    class A:
        verbose: bool

    assert hammer.usage(A)[0] is None


def test_usage_registry() -> None:
    registry = hammer.ConfigRegistry()
    registry.register(MixedOptions, lambda c: c.short("line_count", "l").desc("Mixed."))
    assert hammer.usage(MixedOptions, registry=registry) == (
        "Mixed.",
        "-l, --line-count\n    [--color]\n    [--verbose]\n",
    )


def test_usage_nested_record() -> None:
    @dataclasses.dataclass
    class Inner:
        x: int

    @dataclasses.dataclass
    class Outer:
        inner: Inner

    with pytest.raises(hammer.UnsupportedShapeError):
        hammer.usage(Outer)


def test_render_usage() -> None:
    fields = [
        hammer.FieldDescriptor("--b", optional=True),
        hammer.FieldDescriptor("--a"),
        hammer.FieldDescriptor("--c", alias="c", optional=True),
        hammer.FieldDescriptor("--d"),
    ]
    assert hammer.render_usage(fields) == "    --a\n    --d\n    [--b]\n-c, [--c]\n"
    assert hammer.render_usage(fields[:2]) == "--a\n[--b]\n"
    assert hammer.render_usage([]) == ""


class Color(enum.Enum):
    RED = enum.auto()
    GREEN = enum.auto()


@pytest.mark.parametrize(
    "annotation", [Color, Dict[str, str], Tuple[int, int], List[str], Sequence[int]]
)
def test_usage_declines_unsupported_shapes(annotation: Any) -> None:
    @dataclasses.dataclass
    class A:
        verbose: bool
        value: annotation  # type: ignore

    with pytest.raises(hammer.UnsupportedShapeError) as excinfo:
        hammer.usage(A)
    assert excinfo.value.field == "--value"

    # The value decoder declines the same records.
    with pytest.raises(hammer.UnsupportedShapeError):
        hammer.decode(A, [])


def test_usage_sequence_outside_rest_field() -> None:
    @dataclasses.dataclass
    class A:
        verbose: bool
        names: List[str]

    with pytest.raises(hammer.UnsupportedShapeError) as excinfo:
        hammer.usage(A)
    assert excinfo.value.message == (
        "--names is a sequence, but only the rest field (rest) can hold a sequence."
    )

    config = hammer.FlagConfiguration.new().rest_field("names")
    assert hammer.usage(A, config=config)[1] == "[--verbose]\n"


def test_usage_scalar_rest_field() -> None:
    @dataclasses.dataclass
    class A:
        verbose: bool
        rest: str

    with pytest.raises(hammer.UnsupportedShapeError):
        hammer.usage(A)
