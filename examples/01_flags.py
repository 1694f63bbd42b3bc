"""Flags

:func:`hammer.cli()` decodes command-line tokens into a dataclass. Booleans are
presence flags; every other field reads the token that follows its flag.

Usage:

    python ./01_flags.py --count 3
    python ./01_flags.py --count 3 --dry-run --label release
    python ./01_flags.py --dry-run

"""

import dataclasses
from typing import Optional

import hammer


@dataclasses.dataclass
class Args:
    """Count some things."""

    count: int
    dry_run: bool
    label: Optional[str]


if __name__ == "__main__":
    args = hammer.cli(Args)
    print(args)
