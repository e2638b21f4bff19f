"""matcher — the glob primitive used to classify module paths.

Patterns follow micromatch conventions: ``*`` stays inside one path
segment, ``**`` spans segments, ``!(a|b)`` negates an extglob and
``{a,b}`` expands braces.  ``wcmatch`` provides all of these; the flag
names are read from ``matching.flags`` in defaults.yaml.
"""

from __future__ import annotations

import functools

from wcmatch import glob

from groupimports.lib import config


@functools.lru_cache(maxsize=None)
def _flags(names: tuple[str, ...]) -> int:
    flags = 0
    for name in names:
        flags |= getattr(glob, name)
    return flags


def glob_flags() -> int:
    """Return the wcmatch flag mask configured in defaults.yaml."""
    return _flags(tuple(config.get_list("matching.flags")))


def matches(path: str, pattern: str) -> bool:
    """Return True if the module path ``path`` matches the glob ``pattern``."""
    return glob.globmatch(path, pattern, flags=glob_flags())
