"""Symbol-case derivation for generated import names."""

from __future__ import annotations

import re

_SEGMENT = re.compile(r"(^\w|-\w)")


def to_pascal_case(value: str) -> str:
    """Turn a hyphenated icon name into a PascalCase symbol.

    Uppercases the first character and every character that follows a
    hyphen, dropping those hyphens. A trailing hyphen is kept.

    >>> to_pascal_case("arrow-left")
    'ArrowLeft'
    >>> to_pascal_case("home")
    'Home'
    """
    return _SEGMENT.sub(lambda m: m.group(0).replace("-", "", 1).upper(), value)
