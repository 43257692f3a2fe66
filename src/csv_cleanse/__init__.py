"""Delimited text cleansing library.

This library streams CSV/TSV data and repairs fields that would break
stricter downstream tools:
- Delimiter bytes inside (quoted) fields are replaced with a space
- Newlines inside (quoted) fields are replaced with a space
- Invalid UTF-8 is replaced with U+FFFD

Core cleansing has ZERO dependencies (only stdlib).
Optional features require: typer (cli).

Example usage:
    from csv_cleanse import cleanse_file, sanitize_field

    # Cleanse one field
    result = sanitize_field(b"a,b", b",")

    # Cleanse a whole file
    cleanse_file("export.csv", "clean.csv", delimiter=",")
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export public API for convenience
from csv_cleanse.errors import (
    CleanseError,
    ConfigError,
    RecordParseError,
    SinkClosedError,
    SinkOpenError,
    SourceOpenError,
)
from csv_cleanse.pipeline import PipelineResult, cleanse_file, run
from csv_cleanse.sanitization import FieldChange, SanitizedField, sanitize_field

__all__ = [
    "__version__",
    "cleanse_file",
    "run",
    "sanitize_field",
    "FieldChange",
    "PipelineResult",
    "SanitizedField",
    "CleanseError",
    "ConfigError",
    "RecordParseError",
    "SinkClosedError",
    "SinkOpenError",
    "SourceOpenError",
]
