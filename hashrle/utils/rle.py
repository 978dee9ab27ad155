# hashrle/utils/rle.py
from __future__ import annotations

from typing import Iterable, Optional, Protocol, Union

__all__ = [
    "MARKER",
    "LONG_SEQUENCE_MIN",
    "LINE_TERMINATORS",
    "is_ascii_digit",
    "is_trailing_terminator",
    "concatenate",
]

MARKER = "#"
LONG_SEQUENCE_MIN = 10
LINE_TERMINATORS = ("\n", "\r\n")

_DIGITS = frozenset("0123456789")


class HasText(Protocol):
    def text(self) -> str: ...


def is_ascii_digit(ch: Optional[str]) -> bool:
    """
    True only for '0'..'9'. str.isdigit() also accepts things like '²',
    which int() refuses, so run counts are restricted to ASCII.
    """
    return ch is not None and ch in _DIGITS


def is_trailing_terminator(text: str, pos: int) -> bool:
    """True if text[pos:] is exactly one line terminator closing the buffer."""
    return text[pos:] in LINE_TERMINATORS


def concatenate(items: Iterable[Union[str, HasText]]) -> str:
    """
    Join runs, tokens or plain strings, in order, into one text buffer.
    """
    return "".join(x if isinstance(x, str) else x.text() for x in items)
