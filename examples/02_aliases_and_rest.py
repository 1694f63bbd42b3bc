"""Aliases and Rest Fields

Short aliases are registered on a :class:`hammer.ConfigRegistry`. The field named
``rest`` is declared last, and collects whatever tokens no other field claimed.

Usage:

    python ./02_aliases_and_rest.py -j 4 -l O a.c b.c
    python ./02_aliases_and_rest.py --color --jobs 4 --level 2 a.c
    python ./02_aliases_and_rest.py -c -j 300 -l 2 a.c

"""

import dataclasses
from typing import List

import hammer
from hammer.conf import U8, Char


@dataclasses.dataclass
class CompileFlags:
    color: bool
    jobs: U8
    level: Char
    rest: List[str]


registry = hammer.ConfigRegistry()
registry.register(
    CompileFlags,
    lambda c: c.short("color", "c")
    .short("jobs", "j")
    .short("level", "l")
    .desc("Compile some files."),
)


if __name__ == "__main__":
    flags = hammer.cli(CompileFlags, registry=registry)
    print(flags)
