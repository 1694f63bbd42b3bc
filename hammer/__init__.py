from . import conf
from ._cli import cli, decode, usage
from ._config import ConfigRegistry, FlagConfiguration
from ._decoder import CapturingRest, FlagDecoder, Processing
from ._errors import (
    ConversionError,
    HammerError,
    HammerWarning,
    InvalidCharacterError,
    MissingRequiredFieldError,
    MissingValueError,
    UnsupportedShapeError,
)
from ._formatting import render_usage
from ._usage import FieldDescriptor, UsageDecoder
from ._visitor import RecordVisitor

__all__ = [
    "conf",
    "cli",
    "decode",
    "usage",
    "ConfigRegistry",
    "FlagConfiguration",
    "CapturingRest",
    "FlagDecoder",
    "Processing",
    "ConversionError",
    "HammerError",
    "HammerWarning",
    "InvalidCharacterError",
    "MissingRequiredFieldError",
    "MissingValueError",
    "UnsupportedShapeError",
    "render_usage",
    "FieldDescriptor",
    "UsageDecoder",
    "RecordVisitor",
]
