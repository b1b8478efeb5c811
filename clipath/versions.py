"""Ordering of version-named directories, newest first.

Version managers keep one directory per installed version (``v20.8.0``,
``18.0.0`` ...). Only the dotted-integer prefix matters here; segments that
are not plain integers are ignored, so ``v20.0.0-rc1`` sorts as ``20.0``.
"""

import re
from collections.abc import Iterable
from functools import cmp_to_key

_INTEGER_SEGMENT = re.compile(r"[+-]?[0-9]+")


def parse_version(name: str) -> list[int]:
    """Return the numeric components of a version-like directory name.

    Args:
        name: Directory name, optionally prefixed with ``v``

    Returns:
        Integer components in order; empty when nothing parses

    """
    trimmed = name[1:] if name.startswith("v") else name
    return [int(segment) for segment in trimmed.split(".") if _INTEGER_SEGMENT.fullmatch(segment)]


def compare_versions_descending(lhs: str, rhs: str) -> int:
    """Three-way compare that puts the higher version first.

    Missing components count as zero. Numerically equal names fall back to
    ascending lexical order so the result is a total order.
    """
    a = parse_version(lhs)
    b = parse_version(rhs)
    for idx in range(max(len(a), len(b))):
        av = a[idx] if idx < len(a) else 0
        bv = b[idx] if idx < len(b) else 0
        if av != bv:
            return -1 if av > bv else 1

    if lhs == rhs:
        return 0
    return -1 if lhs < rhs else 1


def sort_versions_descending(names: Iterable[str]) -> list[str]:
    """Sort version-like names newest first."""
    return sorted(names, key=cmp_to_key(compare_versions_descending))
