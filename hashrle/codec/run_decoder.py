# hashrle/codec/run_decoder.py
from __future__ import annotations

from typing import Iterable, Iterator, List, Union

from hashrle.errors import MalformedEncodingError
from hashrle.models.encoded_token import EncodedToken
from hashrle.models.run import Run
from hashrle.utils.rle import MARKER, is_ascii_digit

__all__ = ["parse_token", "decode_token", "iter_decoded", "decode_tokens"]

TokenLike = Union[EncodedToken, str]


def parse_token(text: str) -> EncodedToken:
    """
    Parse the serialized text of exactly one token.

    Shapes, after an optional leading '#' is set aside:
      "dc"          short token: count d, character c
      "<digits>##"  hash run: count <digits>, character '#'
      "<digits>c"   anything else: count <digits>, character c

    Raises MalformedEncodingError with the offset inside `text`.
    """
    if not text:
        raise MalformedEncodingError(0, "empty token")

    leading = text[0] == MARKER
    body = text[1:] if leading else text

    if len(body) < 2:
        raise MalformedEncodingError(0, "token needs a count and a character")

    if not leading and len(body) == 2:
        digits, character, trailing = body[0], body[1], False
    elif len(body) >= 3 and body[-2:] == MARKER * 2:
        digits, character, trailing = body[:-2], MARKER, True
    else:
        digits, character, trailing = body[:-1], body[-1], False

    for i, d in enumerate(digits):
        if not is_ascii_digit(d):
            raise MalformedEncodingError(i + leading, f"character {d!r} is not part of a run count")

    return EncodedToken(digits=digits, character=character, leading_marker=leading, trailing_marker=trailing)


def decode_token(token: TokenLike) -> Run:
    if isinstance(token, str):
        token = parse_token(token)
    if token.count == 0:
        raise MalformedEncodingError(0, "run count must be >= 1")
    return Run(character=token.character, count=token.count)


def iter_decoded(tokens: Iterable[TokenLike]) -> Iterator[Run]:
    for t in tokens:
        yield decode_token(t)


def decode_tokens(tokens: Iterable[TokenLike]) -> List[Run]:
    return list(iter_decoded(tokens))
