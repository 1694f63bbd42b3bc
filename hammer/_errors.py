"""Exceptions and warnings raised while decoding records."""

from typing import Optional


class HammerError(Exception):
    """Base class for errors raised during a decode pass."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class MissingRequiredFieldError(HammerError):
    """Exception raised when no token matches a mandatory field."""


class MissingValueError(HammerError):
    """Exception raised when a value flag is the final token, with no operand after
    it."""


class ConversionError(HammerError):
    """Exception raised when an operand can't be converted to the field's type."""


class InvalidCharacterError(ConversionError):
    """Exception raised when a character field is given a token that isn't exactly one
    character long."""


class UnsupportedShapeError(HammerError, TypeError):
    """Exception raised when a record declares a field shape that can't be decoded from
    flags: nested records, enums, maps, fixed-length tuples, or fields declared after
    the rest field."""


class HammerWarning(UserWarning):
    """Warning category for hammer-specific warnings.

    This can be used to filter hammer warnings:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=HammerWarning)
    """
