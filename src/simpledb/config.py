"""Shared format constants.

The text format:
    <token><sep><token><sep>...<token><newline>
    ...

No escaping, no header, no types. Lines end in \\r\\n, \\r or \\n.
"""

from __future__ import annotations
import os
import re
from typing import Optional


DEFAULT_SEPARATOR = ";"
DEFAULT_ENCODING = "utf-8"
# Reading drops a leading BOM, as written by Notepad and friends.
READ_ENCODING = "utf-8-sig"

# Longest first so "\r\n" is never seen as two terminators.
LINE_TERMINATORS = ("\r\n", "\r", "\n")
NEWLINE = os.linesep

_LINE_SPLIT = re.compile("|".join(re.escape(t) for t in LINE_TERMINATORS))


def split_lines(text: str) -> list[str]:
    """Split text on any line terminator, dropping empty lines.

    str.splitlines() is not used: it also breaks on \\v, \\f, \\x85 and the
    unicode line/paragraph separators, which are ordinary token characters here.
    """
    return [line for line in _LINE_SPLIT.split(text) if line]


def resolve_separator(separator: Optional[str]) -> str:
    """Map None to the default separator; anything else is used as given."""
    return DEFAULT_SEPARATOR if separator is None else separator
