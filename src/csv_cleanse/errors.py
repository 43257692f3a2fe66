"""Exception hierarchy for csv-cleanse.

Every error raised by the library derives from CleanseError so callers can
catch the whole family in one place. Encoding defects inside fields are not
errors; they are repaired and reported through logging.
"""

from __future__ import annotations


class CleanseError(Exception):
    """Base class for all csv-cleanse errors."""


class ConfigError(CleanseError, ValueError):
    """Raised when run options are invalid (e.g. a multi-byte delimiter)."""


class SourceOpenError(CleanseError):
    """Raised when the input file cannot be opened for reading."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open input {path}: {reason}")


class SinkOpenError(CleanseError):
    """Raised when the output file cannot be created or opened for writing."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open output {path}: {reason}")


class RecordParseError(CleanseError):
    """Raised when a record violates delimited-text quoting rules."""

    def __init__(self, message: str, record_number: int, line_number: int) -> None:
        self.record_number = record_number
        self.line_number = line_number
        super().__init__(f"Malformed record {record_number} (input line {line_number}): {message}")


class SinkClosedError(CleanseError):
    """Raised by a record writer when the downstream consumer closed the output."""
