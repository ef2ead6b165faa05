"""
sanity - String Splitting.
"""

from __future__ import annotations

import re
from typing import List

from sanity.errors import InvalidArgumentError


def split(text: str, pattern: str) -> List[str]:
    """
    Split text on every match of a regular expression.

    Only the segments between matches are returned; capture groups in the
    pattern do not leak into the result.

    Example:
        split("a, b,c", r",\\s*") -> ["a", "b", "c"]
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise InvalidArgumentError(f"Invalid pattern {pattern!r}: {e}", "split") from e

    result: List[str] = []
    pos = 0
    for match in regex.finditer(text):
        result.append(text[pos : match.start()])
        pos = match.end()
    result.append(text[pos:])
    return result
