"""Run configuration: delimiter validation and size limits."""

from __future__ import annotations

import os

from csv_cleanse.errors import ConfigError

DEFAULT_DELIMITER = b"\t"

# Default maximum size of a single field (100 MB)
DEFAULT_MAX_FIELD_SIZE = 100 * 1024 * 1024

# Environment variable consulted by the CLI for the log level
LOG_LEVEL_ENVVAR = "CSV_CLEANSE_LOG"
DEFAULT_LOG_LEVEL = "INFO"

# Bytes that would collide with record structure if used as the delimiter
_FORBIDDEN_DELIMITERS = {
    b"\n": "the line terminator",
    b"\r": "the line terminator",
    b'"': "the quote character",
    b" ": "the replacement byte",
}


def parse_delimiter(value: str | bytes | int) -> bytes:
    """Resolve a configured delimiter to exactly one byte.

    Strings go through os.fsencode so that raw bytes passed on the command
    line (decoded by Python with surrogateescape) come back unchanged.

    Args:
        value: Delimiter as text, bytes, or a byte value

    Returns:
        The delimiter as a one-byte bytes object

    Raises:
        ConfigError: If the value is not exactly one byte, or is a byte that
            cannot separate fields

    Example:
        >>> parse_delimiter(",")
        b','
        >>> parse_delimiter(9)
        b'\\t'
    """
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ConfigError(f"Delimiter byte value out of range: {value}")
        raw = bytes([value])
    elif isinstance(value, str):
        raw = os.fsencode(value)
    else:
        raw = bytes(value)

    if len(raw) != 1:
        raise ConfigError(f"Delimiter must be a single byte, got {len(raw)} bytes: {raw!r}")

    if raw in _FORBIDDEN_DELIMITERS:
        raise ConfigError(f"Delimiter cannot be {_FORBIDDEN_DELIMITERS[raw]} ({raw!r})")

    return raw


def field_size_limit_bytes(max_size_mb: int | None) -> int | None:
    """Convert a field size limit in MB to bytes (0 or None = unlimited)."""
    if max_size_mb is None or max_size_mb == 0:
        return None
    if max_size_mb < 0:
        raise ConfigError(f"max-field-size must be >= 0, got {max_size_mb}")
    return max_size_mb * 1024 * 1024
