"""Field sanitization for delimited text.

This module has ZERO external dependencies (stdlib only).

Exports:
    - sanitize_field: Clean one field's raw bytes
    - describe_changes: Format a change set for logging
    - FieldChange: Categories of change a field can undergo
    - SanitizedField: Result of sanitizing a field
"""

from __future__ import annotations

from csv_cleanse.sanitization.field import (
    ENCODING,
    REPLACEMENT,
    TERMINATOR,
    FieldChange,
    SanitizedField,
    describe_changes,
    sanitize_field,
)

__all__ = [
    "sanitize_field",
    "describe_changes",
    "FieldChange",
    "SanitizedField",
    "ENCODING",
    "REPLACEMENT",
    "TERMINATOR",
]
