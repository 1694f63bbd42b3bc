"""Usage Text

:func:`hammer.usage()` walks the same dataclass without consuming any tokens, and
returns a description plus one line per flag. Mandatory flags come first; optional
flags are wrapped in brackets.

Usage:

    python ./03_usage.py

"""

import dataclasses
from typing import List, Optional

import hammer


@dataclasses.dataclass
class MixedOptions:
    """Print some lines."""

    color: Optional[str]
    line_count: str
    verbose: bool
    rest: List[str]


if __name__ == "__main__":
    config = hammer.FlagConfiguration.new().short("verbose", "v")
    description, options = hammer.usage(MixedOptions, config=config)
    print(description)
    print()
    print(options, end="")
