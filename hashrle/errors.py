# hashrle/errors.py
from __future__ import annotations

__all__ = [
    "HashRleError",
    "MalformedEncodingError",
    "ConfigurationError",
]


class HashRleError(Exception):
    """Base class for every error raised by hashrle."""


class MalformedEncodingError(HashRleError, ValueError):
    """
    An encoded buffer that cannot be scanned back into runs.

    `position` is the 0-based offset of the offending character in the
    buffer handed to the scanner (or in the token text, for parse_token).
    """

    def __init__(self, position: int, reason: str = "invalid encoded sequence") -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid encoded sequence at position {position}: {reason}")


class ConfigurationError(HashRleError, ValueError):
    """Bad job setup (file extension, mode flag) detected before the codec runs."""
