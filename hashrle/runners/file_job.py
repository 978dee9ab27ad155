# hashrle/runners/file_job.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from hashrle.codec.pipeline import decode_text, encode_text
from hashrle.errors import ConfigurationError
from hashrle.formats.text_file import TEXT_EXTENSION, read_text_file, validate_path, write_text_file
from hashrle.metrics.compression import CompressionReport, Mode

__all__ = ["CodecJobOptions", "run_file_job"]

_MODES = ("encode", "decode")


@dataclass(slots=True)
class CodecJobOptions:
    # Required
    mode: Mode
    path: Union[str, Path]

    # File handling
    extension: str = TEXT_EXTENSION

    # Output
    report: bool = True

    def __post_init__(self) -> None:
        if self.mode not in _MODES:
            raise ConfigurationError(f"mode must be one of {_MODES}, got {self.mode!r}")
        self.path = validate_path(self.path, self.extension)


def run_file_job(opts: CodecJobOptions) -> CompressionReport:
    """
    Encode or decode `opts.path` in place and describe the size change.

    The file is read whole, transformed in memory, and only then rewritten,
    so a malformed encoding or a read failure leaves it untouched.
    """
    before = read_text_file(opts.path, opts.extension)
    after = encode_text(before) if opts.mode == "encode" else decode_text(before)
    write_text_file(opts.path, after, opts.extension)
    return CompressionReport.from_texts(opts.mode, before, after)
