"""Pytest configuration and fixtures for csv-cleanse tests."""

from __future__ import annotations

import errno
import io
import os
from pathlib import Path

import pytest


class ClosingSink(io.BytesIO):
    """Byte sink whose consumer goes away after a number of writes."""

    def __init__(self, fail_after: int = 0, error: OSError | None = None) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.error = error or BrokenPipeError(errno.EPIPE, "Broken pipe")
        self.writes = 0

    def write(self, data) -> int:  # type: ignore[override]
        if self.writes >= self.fail_after:
            raise self.error
        self.writes += 1
        return super().write(data)


@pytest.fixture
def closing_sink():
    """Create a sink that fails with a broken pipe (or a given error)."""

    def _create_sink(fail_after: int = 0, error: OSError | None = None) -> ClosingSink:
        return ClosingSink(fail_after, error)

    return _create_sink


@pytest.fixture
def delimited_file(tmp_path: Path):
    """Create a delimited file with raw byte content."""

    def _create_file(content: bytes, name: str = "input.csv") -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _create_file


@pytest.fixture
def gross_csv() -> bytes:
    """Comma-delimited input exercising every kind of field repair."""
    return b'a,b,c,d\n1,"2,3",4,5\nthis,is,"a\nvery gross",li\xffe\n'


@pytest.fixture
def closed_pipe():
    """Path to the write end of a pipe whose reader has already gone away."""
    if not os.path.isdir("/dev/fd"):
        pytest.skip("/dev/fd not available")
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    try:
        yield f"/dev/fd/{write_fd}"
    finally:
        os.close(write_fd)
