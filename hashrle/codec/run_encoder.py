# hashrle/codec/run_encoder.py
from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator, List

from hashrle.models.encoded_token import EncodedToken, EscapeCase
from hashrle.models.run import Run
from hashrle.utils.rle import LONG_SEQUENCE_MIN, MARKER

__all__ = ["escape_cases", "encode_run", "iter_encoded", "encode_runs"]


def escape_cases(run: Run, previous_was_digit: bool = False) -> FrozenSet[EscapeCase]:
    """
    Classify which escapes a run needs:
      LONG_SEQUENCE : count >= 10 (multi-digit count)
      HASH_RUN      : the run's character is the marker itself
      AFTER_DIGIT   : the previous run was digits, so this count must not
                      touch them. Applies to any digit run, even a short one.
    """
    cases = set()
    if run.count >= LONG_SEQUENCE_MIN:
        cases.add(EscapeCase.LONG_SEQUENCE)
    if run.character == MARKER:
        cases.add(EscapeCase.HASH_RUN)
    if previous_was_digit:
        cases.add(EscapeCase.AFTER_DIGIT)
    return frozenset(cases)


def encode_run(run: Run, previous_was_digit: bool = False) -> EncodedToken:
    cases = escape_cases(run, previous_was_digit)
    return EncodedToken(
        digits=str(run.count),
        character=run.character,
        leading_marker=EscapeCase.LONG_SEQUENCE in cases or EscapeCase.AFTER_DIGIT in cases,
        trailing_marker=EscapeCase.HASH_RUN in cases,
    )


def iter_encoded(runs: Iterable[Run]) -> Iterator[EncodedToken]:
    """Encode runs in order, carrying "previous run was a digit" forward."""
    previous_was_digit = False
    for run in runs:
        yield encode_run(run, previous_was_digit)
        previous_was_digit = run.is_digit


def encode_runs(runs: Iterable[Run]) -> List[EncodedToken]:
    return list(iter_encoded(runs))
