# hashrle/metrics/compression.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

__all__ = ["Mode", "byte_length", "compression_ratio", "CompressionReport"]

Mode = Literal["encode", "decode"]


def byte_length(text: str) -> int:
    """Length of `text` as stored on disk (UTF-8 bytes)."""
    return len(text.encode("utf-8"))


def compression_ratio(plain_length: int, encoded_length: int) -> float:
    """
    plain / encoded. Above 1.0 the encoding saved space, below 1.0 it grew.
    Only an empty plain text has an empty encoding; that reports 1.0.
    """
    if encoded_length == 0:
        return 1.0 if plain_length == 0 else float("inf")
    return plain_length / encoded_length


@dataclass(frozen=True, slots=True)
class CompressionReport:
    mode: Mode
    original_length: int   # bytes before the job ran
    new_length: int        # bytes written back

    @classmethod
    def from_texts(cls, mode: Mode, before: str, after: str) -> "CompressionReport":
        return cls(mode=mode, original_length=byte_length(before), new_length=byte_length(after))

    @property
    def ratio(self) -> float:
        if self.mode == "encode":
            return compression_ratio(self.original_length, self.new_length)
        return compression_ratio(self.new_length, self.original_length)

    def format(self) -> str:
        return (
            f"Original file length: {self.original_length}\n"
            f"New length: {self.new_length}\n"
            f"Compression ratio: {self.ratio:.6f}"
        )
