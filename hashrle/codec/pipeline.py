# hashrle/codec/pipeline.py
from __future__ import annotations

from hashrle.codec.run_decoder import decode_tokens
from hashrle.codec.run_encoder import encode_runs
from hashrle.tokenize.decomposer import decompose
from hashrle.tokenize.scanner import scan
from hashrle.utils.rle import concatenate

__all__ = ["encode_text", "decode_text"]


def encode_text(text: str) -> str:
    """
    text -> runs -> tokens -> encoded text.

    Encoding an already encoded buffer is valid; it simply needs as many
    decode passes as there were encode passes.
    """
    return concatenate(encode_runs(decompose(text)))


def decode_text(text: str) -> str:
    """
    encoded text -> tokens -> runs -> text.

    All-or-nothing: the whole buffer is scanned before any run is expanded,
    so a MalformedEncodingError leaves no partial output behind.
    """
    tokens = scan(text)
    return concatenate(decode_tokens(tokens))
