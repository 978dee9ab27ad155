# hashrle/tokenize/decomposer.py
from __future__ import annotations

from typing import Iterator, List

from hashrle.models.run import Run

__all__ = ["iter_runs", "decompose"]


def iter_runs(text: str) -> Iterator[Run]:
    """
    Yield the maximal same-character runs of `text`, left to right.
    A run ends where the next character differs or the buffer ends.
    """
    n = len(text)
    start = 0
    for i in range(n):
        if i == n - 1 or text[i] != text[i + 1]:
            yield Run(character=text[i], count=i - start + 1)
            start = i + 1


def decompose(text: str) -> List[Run]:
    return list(iter_runs(text))
