"""Streaming cleanse pipeline.

Reads one record at a time, sanitizes each field, and writes the record
back out with the same field count and order. Memory use is bounded by a
single record plus I/O buffering, so inputs larger than memory are fine.

The run ends successfully at end of input, or when the consumer of the
output closes it early (broken pipe). Any other error propagates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Callable

from csv_cleanse.config import DEFAULT_DELIMITER, parse_delimiter
from csv_cleanse.errors import SinkClosedError
from csv_cleanse.pipeline.records import RecordReader, RecordWriter
from csv_cleanse.pipeline.streams import select_input, select_output
from csv_cleanse.sanitization import FieldChange, describe_changes, sanitize_field

if TYPE_CHECKING:
    from pathlib import Path

_LOGGER = logging.getLogger(__name__)

ChangeCallback = Callable[[int, int, tuple[FieldChange, ...]], None]


@dataclass(frozen=True)
class PipelineResult:
    """Summary of a finished run.

    Attributes:
        records: Number of records written
        fields_changed: Number of fields with at least one change
        consumer_closed: True if the run stopped because the output was closed
    """

    records: int
    fields_changed: int
    consumer_closed: bool = False


def log_change(record_number: int, field_number: int, changes: tuple[FieldChange, ...]) -> None:
    """Default change callback: one INFO line per changed field."""
    _LOGGER.info(
        "Record number %d, field number %d: %s",
        record_number,
        field_number,
        describe_changes(changes),
    )


def run(
    source: IO[bytes],
    sink: IO[bytes],
    delimiter: bytes = DEFAULT_DELIMITER,
    *,
    on_change: ChangeCallback | None = None,
) -> PipelineResult:
    """Cleanse every field of every record from source into sink.

    Args:
        source: Readable byte stream of delimited records
        sink: Writable byte stream for the cleansed records
        delimiter: Single-byte field delimiter
        on_change: Called as on_change(record_number, field_number, changes)
            for each field that changed. Defaults to logging at INFO.

    Returns:
        PipelineResult for the run

    Raises:
        RecordParseError: If a record has malformed quoting
        OSError: If reading the source or writing the sink fails for any
            reason other than the consumer closing the output

    Example:
        >>> import io
        >>> out = io.BytesIO()
        >>> run(io.BytesIO(b'1,"2,3"\\n'), out, b",").fields_changed
        1
        >>> out.getvalue()
        b'1,2 3\\n'
    """
    delimiter = parse_delimiter(delimiter)
    report = on_change or log_change

    reader = RecordReader(source, delimiter)
    writer = RecordWriter(sink, delimiter)
    fields_changed = 0
    consumer_closed = False

    try:
        for record_number, record in enumerate(reader):
            cleansed = []
            for field_number, field in enumerate(record):
                result = sanitize_field(field, delimiter)
                if result.changed:
                    fields_changed += 1
                    report(record_number, field_number, result.changes)
                cleansed.append(result.text)
            writer.write_record(cleansed)
        writer.flush()
    except SinkClosedError:
        _LOGGER.debug("Output closed by consumer after %d records", writer.records_written)
        consumer_closed = True
    finally:
        reader.detach()

    _LOGGER.debug(
        "Processed %d records, %d fields changed",
        writer.records_written,
        fields_changed,
    )
    return PipelineResult(
        records=writer.records_written,
        fields_changed=fields_changed,
        consumer_closed=consumer_closed,
    )


def cleanse_file(
    input_path: str | Path | None,
    output_path: str | Path | None,
    *,
    delimiter: bytes | str = DEFAULT_DELIMITER,
    on_change: ChangeCallback | None = None,
) -> PipelineResult:
    """Cleanse a delimited file into another file.

    Either path may be ``-`` or None to use stdin/stdout.

    Args:
        input_path: File to read
        output_path: File to write (created or truncated)
        delimiter: Single-byte field delimiter (default: tab)
        on_change: Optional change callback, see run()

    Returns:
        PipelineResult for the run

    Raises:
        ConfigError: If the delimiter is not a single usable byte
        SourceOpenError: If the input cannot be opened
        SinkOpenError: If the output cannot be opened
        RecordParseError: If a record has malformed quoting

    Example:
        >>> # cleanse_file("export.tsv", "clean.tsv")
        >>> # cleanse_file("export.csv", "-", delimiter=",")
    """
    delimiter = parse_delimiter(delimiter)
    with select_input(input_path) as source, select_output(output_path) as sink:
        result = run(source, sink, delimiter, on_change=on_change)
    _LOGGER.debug("Cleansed output written to: %s", output_path or "<stdout>")
    return result
