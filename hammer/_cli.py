"""Core public API."""

import sys
from typing import List, NoReturn, Optional, Sequence, Tuple, Type, TypeVar

import termcolor

from . import _decodable, _docstrings, _formatting, _resolver
from ._config import ConfigRegistry, FlagConfiguration, resolve_configuration
from ._decoder import FlagDecoder
from ._errors import HammerError, UnsupportedShapeError
from ._usage import UsageDecoder

T = TypeVar("T")


def decode(
    cls: Type[T],
    args: Sequence[str],
    *,
    config: Optional[FlagConfiguration] = None,
    registry: Optional[ConfigRegistry] = None,
) -> Tuple[T, List[str]]:
    """Run one value-decode pass of `args` against the dataclass `cls`.

    Args:
        cls: Dataclass type to instantiate.
        args: Command-line tokens, not including the program name.

    Keyword Args:
        config: Configuration to use for `cls`. Takes precedence over `registry`.
        registry: Registration table to look up the configuration for `cls` in.

    Returns:
        The decoded instance, and the tokens that no named field claimed. Tokens
        captured by the rest field are included in the latter.

    Raises:
        HammerError: If a required field is missing or a value can't be converted.
            `UnsupportedShapeError` is raised for field types that can't be decoded.
    """
    decoder = FlagDecoder(args, resolve_configuration(cls, config, registry))
    out = _decodable.decode_record(cls, decoder)
    return out, decoder.remaining()


def usage(
    cls: Type,
    force_indent: bool = False,
    *,
    config: Optional[FlagConfiguration] = None,
    registry: Optional[ConfigRegistry] = None,
) -> Tuple[Optional[str], str]:
    """Describe the flags accepted by the dataclass `cls`.

    Returns the description, and the options text: one line per field, mandatory
    fields first. If no description has been configured, the dataclass docstring is
    used instead.
    """
    flag_config = resolve_configuration(cls, config, registry)
    decoder = UsageDecoder(flag_config)
    _decodable.decode_record(cls, decoder)

    description = flag_config.description()
    if description is None:
        description = _docstrings.get_dataclass_description(
            _resolver.unwrap_annotated(cls)[0]
        )
    return description, _formatting.render_usage(decoder.fields, force_indent)


def cli(
    cls: Type[T],
    *,
    args: Optional[Sequence[str]] = None,
    config: Optional[FlagConfiguration] = None,
    registry: Optional[ConfigRegistry] = None,
    prog: Optional[str] = None,
) -> T:
    """Decode command-line arguments into an instance of `cls`, or exit with a usage
    message.

    Args:
        cls: Dataclass type to instantiate.

    Keyword Args:
        args: If set, decode from a sequence of strings instead of `sys.argv[1:]`.
        config: Configuration to use for `cls`. Takes precedence over `registry`.
        registry: Registration table to look up the configuration for `cls` in.
        prog: Program name to show in the usage message.

    Returns:
        Instantiated dataclass.
    """
    if args is None:
        args = sys.argv[1:]
    if prog is None:
        prog = sys.argv[0] if len(sys.argv) > 0 else "main.py"
    flag_config = resolve_configuration(cls, config, registry)

    try:
        out, remaining = decode(cls, args, config=flag_config)
    except UnsupportedShapeError:
        # Programmer errors should not be reported as bad input.
        raise
    except HammerError as e:
        _exit_with_error(cls, flag_config, prog, e.message)

    claims_rest = any(
        field.name == flag_config.rest_field_name
        for field in _resolver.resolved_fields(_resolver.unwrap_annotated(cls)[0])
    )
    if not claims_rest and len(remaining) > 0:
        _exit_with_error(
            cls, flag_config, prog, f"unrecognized arguments: {' '.join(remaining)}"
        )

    return out


def _exit_with_error(
    cls: Type, flag_config: FlagConfiguration, prog: str, message: str
) -> NoReturn:
    description, options = usage(cls, config=flag_config)
    print(f"usage: {prog} [options]", file=sys.stderr)
    if description is not None:
        print(description, file=sys.stderr)
    print(file=sys.stderr)
    print(options, end="", file=sys.stderr)
    print(file=sys.stderr)
    print(
        termcolor.colored("error:", "red", attrs=["bold"]), message, file=sys.stderr
    )
    raise SystemExit(2)
