"""Tests for sanitization guarantees over assorted inputs."""

from __future__ import annotations

import pytest

from csv_cleanse.config import parse_delimiter
from csv_cleanse.errors import ConfigError
from csv_cleanse.sanitization import sanitize_field

SAMPLES = [
    b"",
    b" ",
    b"plain",
    b"a,b,c",
    b"a\tb",
    b"line one\nline two\n",
    b"\n\n\n",
    b"\r\n",
    b"\xff",
    b"\xff\xfe\xfd",
    b"\xc3",
    b"\xc3\x28",
    b"\xed\xa0\x80",
    b"\x00\x01\x02",
    b'"quoted"',
    "naïve café".encode(),
    "naïve café".encode("latin-1"),
    "日本語,テキスト".encode(),
    "日本語".encode("shift_jis"),
    bytes(range(256)),
]

DELIMITERS = [b",", b"\t", b";", b"|", b"\x00", b"\xa7"]


@pytest.mark.parametrize("delimiter", DELIMITERS)
@pytest.mark.parametrize("field", SAMPLES)
class TestGuarantees:
    """Properties that hold for every field and delimiter."""

    def test_no_delimiter_or_terminator_in_output(self, field: bytes, delimiter: bytes) -> None:
        """Test output never contains the delimiter or a newline byte."""
        encoded = sanitize_field(field, delimiter).text.encode("utf-8")

        assert delimiter not in encoded
        assert b"\n" not in encoded

    def test_idempotent(self, field: bytes, delimiter: bytes) -> None:
        """Test sanitizing sanitized output changes nothing."""
        first = sanitize_field(field, delimiter)
        second = sanitize_field(first.text.encode("utf-8"), delimiter)

        assert second.text == first.text
        assert not second.changed


class TestIdentity:
    """Clean valid text is returned unchanged."""

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "with spaces", "émoji 🎉", "tab-free, comma ok", 'quote " ok'],
    )
    def test_valid_text_identity(self, text: str) -> None:
        """Test valid UTF-8 without delimiter or newline is untouched."""
        result = sanitize_field(text.encode("utf-8"), b"\t")

        assert result.text == text
        assert result.changes == ()


class TestLargeFields:
    """Tests for large field content."""

    def test_large_field(self) -> None:
        """Test a multi-megabyte field is sanitized completely."""
        field = (b"x" * 1023 + b",") * 4096

        result = sanitize_field(field, b",")

        assert len(result.text) == len(field)
        assert "," not in result.text


class TestDelimiterChoice:
    """The guarantees above only hold for delimiters the config accepts."""

    @pytest.mark.parametrize("delimiter", DELIMITERS)
    def test_sampled_delimiters_accepted(self, delimiter: bytes) -> None:
        assert parse_delimiter(delimiter) == delimiter

    def test_space_rejected(self) -> None:
        """Test a space delimiter, which replacement would reintroduce, is refused."""
        field = b"a b"
        # Replacing the delimiter with itself leaves it in the output
        assert b" " in sanitize_field(field, b" ").text.encode("utf-8")

        with pytest.raises(ConfigError, match="replacement byte"):
            parse_delimiter(b" ")
