"""Utilities and constants for working with strings."""

import textwrap

SHORT_PREFIX = "-"
LONG_PREFIX = "--"


def canonical_field_name(name: str) -> str:
    """Long form of a flag, as typed on the command-line.

    'line_count' => '--line-count'
    """
    return LONG_PREFIX + name.replace("_", "-")


def short_flag(alias: str) -> str:
    """'v' => '-v'"""
    return SHORT_PREFIX + alias


def with_article(noun: str) -> str:
    """'integer' => 'an integer', 'float' => 'a float'"""
    return ("an " if noun[:1] in "aeiou" else "a ") + noun


def dedent(text: str) -> str:
    """Same as textwrap.dedent, but ignores the first line."""
    first_line, line_break, rest = text.partition("\n")
    if line_break == "":
        return textwrap.dedent(text)
    return f"{first_line.strip()}\n{textwrap.dedent(rest)}"
