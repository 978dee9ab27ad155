# hashrle/formats/text_file.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from hashrle.errors import ConfigurationError

__all__ = ["TEXT_EXTENSION", "validate_path", "read_text_file", "write_text_file"]

TEXT_EXTENSION = ".txt"

PathLike = Union[str, "os.PathLike[str]"]


def validate_path(path: PathLike, extension: str = TEXT_EXTENSION) -> Path:
    """
    Check the file extension before any I/O happens.
    Matching is exact and case-sensitive ('.TXT' is rejected).
    """
    p = Path(path)
    if not str(p).endswith(extension):
        raise ConfigurationError(
            f"Invalid file path '{path}' - path must end with the file extension '{extension}'"
        )
    return p


def read_text_file(path: PathLike, extension: str = TEXT_EXTENSION) -> str:
    """
    Return the whole file as one text buffer.

    Line terminators are returned verbatim (newline=""), so a CRLF file
    encodes its '\\r' runs and decodes back byte for byte. OSError propagates.
    """
    p = validate_path(path, extension)
    with open(p, "r", encoding="utf-8", newline="") as fh:
        return fh.read()


def write_text_file(path: PathLike, text: str, extension: str = TEXT_EXTENSION) -> None:
    """Overwrite `path` with `text`, verbatim."""
    p = validate_path(path, extension)
    with open(p, "w", encoding="utf-8", newline="") as fh:
        fh.write(text)
