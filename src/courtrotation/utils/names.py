"""Display name helpers."""

import re
from typing import Sequence

from courtrotation.constants import DEFAULT_HONORIFIC, HONORIFIC_SUFFIXES


def with_honorific(
    raw: str,
    suffix: str = DEFAULT_HONORIFIC,
    known_suffixes: Sequence[str] = HONORIFIC_SUFFIXES,
) -> str:
    """Return ``raw`` with an honorific appended unless it already has one.

    Whitespace is trimmed and collapsed first; a blank name stays blank.

    >>> with_honorific("  Sato  Taro ")
    'Sato Taroさん'
    >>> with_honorific("Sato様")
    'Sato様'
    """
    name = re.sub(r"\s+", " ", raw.strip())
    if not name:
        return ""
    if any(name.endswith(sfx) for sfx in known_suffixes):
        return name
    return f"{name}{suffix}"
