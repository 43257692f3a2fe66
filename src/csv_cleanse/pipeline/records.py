"""Delimited record reading and writing over byte streams.

Both sides are built on the stdlib csv module. The reader decodes input as
latin-1, which maps every byte to exactly one character, so fields can be
encoded back to their original raw bytes regardless of the file's encoding.
The writer emits UTF-8 with a ``\\n`` terminator and minimal quoting.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import IO, Iterator, Sequence

from csv_cleanse.errors import RecordParseError, SinkClosedError

_LOGGER = logging.getLogger(__name__)

QUOTE_CHAR = '"'
LINE_TERMINATOR = "\n"

# csv only quotes \r and \n when they appear in the writer's lineterminator,
# so rows are serialized with CRLF and the terminator swapped afterwards
_QUOTING_TERMINATOR = "\r\n"

# Byte-transparent codec for reading raw fields
_RAW_CODEC = "latin-1"
_OUTPUT_CODEC = "utf-8"

# Upper bound accepted by csv.field_size_limit on every platform
_UNLIMITED_FIELD_SIZE = 2**31 - 1


def set_field_size_limit(limit: int | None) -> int:
    """Set the maximum field size accepted by the reader.

    The csv module default (128 KiB) is far too small for real exports.

    Args:
        limit: Maximum field size in bytes, or None for no limit

    Returns:
        The previous limit
    """
    return csv.field_size_limit(_UNLIMITED_FIELD_SIZE if limit is None else limit)


def _writer_delimiter(delimiter: bytes) -> str:
    """Map the delimiter byte to the character that encodes back to that byte."""
    value = delimiter[0]
    if value < 0x80:
        return chr(value)
    # Lone surrogate, written back as the raw byte by surrogateescape
    return chr(0xDC00 + value)


class RecordReader:
    """Iterate over the records of a delimited byte stream.

    Each record is a list of raw byte fields. Quoted fields may contain the
    delimiter, quotes (doubled) and line terminators. Malformed quoting
    raises RecordParseError.

    The reader does not own the stream; call detach() when done so the
    underlying stream is left open.
    """

    def __init__(self, stream: IO[bytes], delimiter: bytes) -> None:
        self._text = io.TextIOWrapper(stream, encoding=_RAW_CODEC, newline="")
        self._reader = csv.reader(
            self._text,
            delimiter=delimiter.decode(_RAW_CODEC),
            quotechar=QUOTE_CHAR,
            doublequote=True,
            strict=True,
        )
        self.records_read = 0

    def __iter__(self) -> Iterator[list[bytes]]:
        return self

    def __next__(self) -> list[bytes]:
        row: list[str] = []
        # Blank lines are not records
        while not row:
            try:
                row = next(self._reader)
            except csv.Error as e:
                raise RecordParseError(str(e), self.records_read, self._reader.line_num) from e
        self.records_read += 1
        return [field.encode(_RAW_CODEC) for field in row]

    def detach(self) -> None:
        """Release the underlying stream without closing it."""
        self._text.detach()


class RecordWriter:
    """Serialize records to a byte stream, one record per write.

    Fields are re-quoted where needed so the output stays parseable by the
    same grammar. A broken pipe on the underlying stream is reported as
    SinkClosedError; any other OSError propagates unchanged.
    """

    def __init__(self, stream: IO[bytes], delimiter: bytes) -> None:
        self._stream = stream
        self._buffer = io.StringIO()
        self._writer = csv.writer(
            self._buffer,
            delimiter=_writer_delimiter(delimiter),
            quotechar=QUOTE_CHAR,
            doublequote=True,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator=_QUOTING_TERMINATOR,
        )
        self.records_written = 0

    def write_record(self, fields: Sequence[str]) -> None:
        """Write one record.

        Raises:
            SinkClosedError: If the consumer closed the output
        """
        self._buffer.seek(0)
        self._buffer.truncate()
        self._writer.writerow(fields)
        row = self._buffer.getvalue()[: -len(_QUOTING_TERMINATOR)] + LINE_TERMINATOR
        data = row.encode(_OUTPUT_CODEC, errors="surrogateescape")
        try:
            self._stream.write(data)
        except BrokenPipeError as e:
            raise SinkClosedError("Output closed by consumer") from e
        self.records_written += 1

    def flush(self) -> None:
        """Flush buffered output.

        Raises:
            SinkClosedError: If the consumer closed the output
        """
        try:
            self._stream.flush()
        except BrokenPipeError as e:
            raise SinkClosedError("Output closed by consumer") from e
        _LOGGER.debug("Flushed %d records", self.records_written)
