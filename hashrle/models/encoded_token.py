# hashrle/models/encoded_token.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hashrle.utils.rle import MARKER, is_ascii_digit

__all__ = ["EscapeCase", "EncodedToken"]


class EscapeCase(Enum):
    LONG_SEQUENCE = "long_sequence"  # count >= 10      -> leading '#'
    HASH_RUN = "hash_run"            # character == '#' -> trailing '#'
    AFTER_DIGIT = "after_digit"      # previous run was digits -> leading '#'


@dataclass(frozen=True, slots=True)
class EncodedToken:
    """
    Serialized form of exactly one Run.

    Layout of text():

        ['#'] digits character ['#']
          |                     |
          |                     +-- trailing_marker (hash run)
          +-- leading_marker (long sequence and/or after a digit run)

    The markers only steer the scanner; the decoded value is
    (character, int(digits)).
    """
    digits: str
    character: str
    leading_marker: bool = False
    trailing_marker: bool = False

    def __post_init__(self) -> None:
        if not self.digits or not all(is_ascii_digit(d) for d in self.digits):
            raise ValueError("EncodedToken.digits must be a non-empty ASCII decimal numeral.")
        if len(self.character) != 1:
            raise ValueError("EncodedToken.character must be exactly one character.")
        if self.trailing_marker and self.character != MARKER:
            raise ValueError(f"Only '{MARKER}' runs carry a trailing marker.")

    @property
    def count(self) -> int:
        return int(self.digits)

    def text(self) -> str:
        lead = MARKER if self.leading_marker else ""
        trail = MARKER if self.trailing_marker else ""
        return f"{lead}{self.digits}{self.character}{trail}"
