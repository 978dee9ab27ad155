# hashrle/models/run.py
from __future__ import annotations

from dataclasses import dataclass

from hashrle.utils.rle import is_ascii_digit

__all__ = ["Run"]


@dataclass(frozen=True, slots=True)
class Run:
    """
    A maximal substring of one repeated character.

      character : exactly one symbol
      count     : number of repetitions (>= 1)

    Runs are plain values; a run sequence produced by the decomposer never
    holds two adjacent runs with the same character.
    """
    character: str
    count: int

    def __post_init__(self) -> None:
        if len(self.character) != 1:
            raise ValueError("Run.character must be exactly one character.")
        if self.count < 1:
            raise ValueError("Run.count must be >= 1.")

    @property
    def is_digit(self) -> bool:
        return is_ascii_digit(self.character)

    def text(self) -> str:
        return self.character * self.count
