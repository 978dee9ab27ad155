# hashrle/formats/rle_text.py
from __future__ import annotations

import os
from typing import Optional, TextIO, Union

from hashrle.codec.pipeline import decode_text, encode_text

__all__ = ["Source", "Sink", "encode", "decode"]

# -------------------------
# Source / sink helpers
# -------------------------

# str is always treated as the buffer itself; pass a Path to read a file.
Source = Union[str, "os.PathLike[str]", TextIO]
Sink = Optional[Union[str, "os.PathLike[str]", TextIO]]


def _read_source(source: Source) -> str:
    """
    Materialize the whole input buffer from:
      - a text buffer (str),
      - a path (os.PathLike),
      - a file-like with .read().
    """
    if isinstance(source, str):
        return source
    if isinstance(source, os.PathLike):
        with open(source, "r", encoding="utf-8", newline="") as fh:
            return fh.read()
    if hasattr(source, "read"):
        return source.read()
    raise TypeError("source must be a text string, a path, or a file-like with .read()")


def _write_sink(text: str, sink: Sink) -> str:
    if sink is None:
        return text

    if isinstance(sink, (str, os.PathLike)):
        with open(sink, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        return text

    if hasattr(sink, "write"):
        sink.write(text)
        return text

    raise TypeError("sink must be a path, a file-like with .write, or None")


# -------------------------
# Public API
# -------------------------

def encode(source: Source, *, sink: Sink = None) -> str:
    """
    Run-length encode `source`. Returns the encoded text; also writes it to
    `sink` (path or file-like) if provided.
    """
    return _write_sink(encode_text(_read_source(source)), sink)


def decode(source: Source, *, sink: Sink = None) -> str:
    """
    Decode run-length encoded `source`. Returns the decoded text; also writes
    it to `sink` if provided. Nothing is written when the input is malformed.
    """
    return _write_sink(decode_text(_read_source(source)), sink)

