"""Field-level sanitization for delimited text.

A field's raw bytes may legitimately contain the delimiter or a newline when
the field was quoted, and may contain bytes that are not valid UTF-8. Either
can break naive downstream parsers, so each field is cleaned in three steps:

    1. Delimiter bytes are replaced with a space
    2. Line terminator bytes are replaced with a space
    3. Invalid UTF-8 is decoded lossily (U+FFFD per maximal invalid subsequence)

The transform is pure. Callers decide what to do with the reported changes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

TERMINATOR = b"\n"
REPLACEMENT = b" "
ENCODING = "utf-8"


class FieldChange(enum.Enum):
    """Categories of change applied to a field, in evaluation order."""

    DELIMITER_REPLACEMENT = "DelimiterReplacement"
    TERMINATOR_REPLACEMENT = "TerminatorReplacement"
    FIXED_ENCODING = "FixedEncoding"


@dataclass(frozen=True)
class SanitizedField:
    """Result of sanitizing one field."""

    text: str
    changes: tuple[FieldChange, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.changes)


def sanitize_field(field: bytes, delimiter: bytes) -> SanitizedField:
    """Clean one field's raw bytes.

    Args:
        field: Raw field content, possibly containing any byte value
        delimiter: The single-byte delimiter of the current file

    Returns:
        SanitizedField with text free of the delimiter and newline, valid
        UTF-8, and the ordered changes that fired

    Example:
        >>> sanitize_field(b"b,c", b",")
        SanitizedField(text='b c', changes=(<FieldChange.DELIMITER_REPLACEMENT: 'DelimiterReplacement'>,))
        >>> sanitize_field(b"plain", b",").changed
        False
    """
    changes: list[FieldChange] = []

    delim_fixed = field.replace(delimiter, REPLACEMENT)
    if delim_fixed != field:
        changes.append(FieldChange.DELIMITER_REPLACEMENT)

    term_fixed = delim_fixed.replace(TERMINATOR, REPLACEMENT)
    if term_fixed != delim_fixed:
        changes.append(FieldChange.TERMINATOR_REPLACEMENT)

    try:
        text = term_fixed.decode(ENCODING)
    except UnicodeDecodeError:
        changes.append(FieldChange.FIXED_ENCODING)
        text = term_fixed.decode(ENCODING, errors="replace")

    return SanitizedField(text, tuple(changes))


def describe_changes(changes: Iterable[FieldChange]) -> str:
    """Render changes for log output, e.g. ``[DelimiterReplacement, FixedEncoding]``."""
    return "[" + ", ".join(change.value for change in changes) + "]"
