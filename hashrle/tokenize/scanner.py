# hashrle/tokenize/scanner.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from hashrle.errors import MalformedEncodingError
from hashrle.models.encoded_token import EncodedToken
from hashrle.utils.rle import MARKER, is_ascii_digit, is_trailing_terminator

__all__ = ["ScanState", "iter_tokens", "scan"]


class ScanState(Enum):
    NORMAL = "normal"                # expecting a short token, a marker or the end
    LONG_SEQUENCE = "long_sequence"  # a leading '#' was consumed


@dataclass(slots=True)
class _Cursor:
    text: str
    pos: int = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> Optional[str]:
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else None

    def digit_span(self) -> int:
        """Number of consecutive ASCII digits starting at the cursor."""
        n = 0
        while is_ascii_digit(self.peek(n)):
            n += 1
        return n

    def advance(self, n: int) -> None:
        self.pos += n


# =========================
# Token builders
# =========================

def _digit_run_token(digits: str, marker_pos: int) -> EncodedToken:
    """
    An escaped token whose character is itself a digit: the last digit is the
    character, the rest is the count. Such a token is always followed by
    another marker or by the end of the buffer.
    """
    if len(digits) < 2:
        raise MalformedEncodingError(marker_pos, "escaped run needs a count and a character")
    return _checked(EncodedToken(digits=digits[:-1], character=digits[-1], leading_marker=True), marker_pos)


def _checked(token: EncodedToken, pos: int) -> EncodedToken:
    if token.count == 0:
        raise MalformedEncodingError(pos, "run count must be >= 1")
    return token


# =========================
# State steps
# =========================

def _step_normal(cur: _Cursor) -> tuple[Optional[EncodedToken], ScanState]:
    c = cur.peek()

    if c == MARKER:
        cur.advance(1)
        return None, ScanState.LONG_SEQUENCE

    if is_ascii_digit(c):
        lit = cur.peek(1)
        if lit is None:
            raise MalformedEncodingError(cur.pos, "run count without a character")
        # "d##": a hash run always carries its trailing marker
        trailing = lit == MARKER and cur.peek(2) == MARKER
        token = _checked(EncodedToken(digits=c, character=lit, trailing_marker=trailing), cur.pos)
        cur.advance(3 if trailing else 2)
        return token, ScanState.NORMAL

    if is_trailing_terminator(cur.text, cur.pos):
        cur.advance(len(cur.text) - cur.pos)
        return None, ScanState.NORMAL

    raise MalformedEncodingError(cur.pos, f"character {c!r} is not preceded by a run count")


def _step_long_sequence(cur: _Cursor, marker_pos: int) -> tuple[EncodedToken, ScanState]:
    n = cur.digit_span()
    digits = cur.text[cur.pos:cur.pos + n]
    c = cur.peek(n)

    # digit run closing the buffer
    if c is None:
        token = _digit_run_token(digits, marker_pos)
        cur.advance(n)
        return token, ScanState.NORMAL

    if c == MARKER:
        if cur.peek(n + 1) == MARKER:
            # hash run with a leading marker: "#<count>##"
            if not digits:
                raise MalformedEncodingError(marker_pos, "escaped run has no count")
            token = _checked(
                EncodedToken(digits=digits, character=MARKER, leading_marker=True, trailing_marker=True),
                marker_pos,
            )
            cur.advance(n + 2)
            return token, ScanState.NORMAL

        # digit run; this '#' is the next token's leading marker
        token = _digit_run_token(digits, marker_pos)
        cur.advance(n + 1)
        return token, ScanState.LONG_SEQUENCE

    if not digits:
        raise MalformedEncodingError(marker_pos, "escaped run has no count")
    token = _checked(EncodedToken(digits=digits, character=c, leading_marker=True), marker_pos)
    cur.advance(n + 1)
    return token, ScanState.NORMAL


# =========================
# Public API
# =========================

def iter_tokens(text: str) -> Iterator[EncodedToken]:
    """
    Scan run-length encoded text into EncodedTokens, left to right.

    Raises MalformedEncodingError (with the offending position) on the first
    character that cannot start or finish a token. A single line terminator
    closing the buffer outside a token is tolerated and dropped.
    """
    cur = _Cursor(text)
    state = ScanState.NORMAL

    while not cur.at_end():
        if state is ScanState.NORMAL:
            token, state = _step_normal(cur)
        else:
            # every transition into LONG_SEQUENCE steps just past its marker
            token, state = _step_long_sequence(cur, marker_pos=cur.pos - 1)
        if token is not None:
            yield token

    if state is ScanState.LONG_SEQUENCE:
        raise MalformedEncodingError(cur.pos - 1, "marker is not followed by a run")


def scan(text: str) -> List[EncodedToken]:
    """Materialized iter_tokens(); nothing is returned if the buffer is malformed."""
    return list(iter_tokens(text))
