"""Input and output endpoint selection.

An endpoint is either a standard stream or a file on disk, chosen once at
startup from a path or the ``-`` sentinel. The pipeline only sees the byte
stream an endpoint opens. Standard streams are never closed here.
"""

from __future__ import annotations

import abc
import logging
import sys
from pathlib import Path
from typing import IO

from csv_cleanse.errors import SinkOpenError, SourceOpenError

_LOGGER = logging.getLogger(__name__)

# Path sentinel meaning "use the standard stream"
STDIO = "-"


def _is_stdio(path: str | Path | None) -> bool:
    return path is None or str(path) == STDIO


class _Endpoint(abc.ABC):
    """Shared open/close/context-manager behavior."""

    name: str

    def __init__(self) -> None:
        self._stream: IO[bytes] | None = None

    @abc.abstractmethod
    def _open(self) -> IO[bytes]:
        """Return the underlying byte stream."""

    def _release(self, stream: IO[bytes]) -> None:
        """Release a stream previously returned by _open."""

    def open(self) -> IO[bytes]:
        if self._stream is None:
            self._stream = self._open()
            _LOGGER.debug("Opened %s", self.name)
        return self._stream

    def close(self) -> None:
        if self._stream is not None:
            stream, self._stream = self._stream, None
            self._release(stream)

    def __enter__(self) -> IO[bytes]:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class InputEndpoint(_Endpoint):
    """A readable byte source."""


class OutputEndpoint(_Endpoint):
    """A writable byte sink."""

    @property
    def is_stdout(self) -> bool:
        return False


class StdinInput(InputEndpoint):
    """Read from the process's standard input."""

    name = "<stdin>"

    def _open(self) -> IO[bytes]:
        return sys.stdin.buffer


class FileInput(InputEndpoint):
    """Read from a file on disk."""

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)
        self.name = str(self.path)

    def _open(self) -> IO[bytes]:
        try:
            return open(self.path, "rb")
        except FileNotFoundError as e:
            raise SourceOpenError(self.name, "file not found") from e
        except PermissionError as e:
            raise SourceOpenError(self.name, "permission denied") from e
        except OSError as e:
            raise SourceOpenError(self.name, e.strerror or str(e)) from e

    def _release(self, stream: IO[bytes]) -> None:
        stream.close()


class StdoutOutput(OutputEndpoint):
    """Write to the process's standard output."""

    name = "<stdout>"

    @property
    def is_stdout(self) -> bool:
        return True

    def _open(self) -> IO[bytes]:
        return sys.stdout.buffer


class FileOutput(OutputEndpoint):
    """Write to a file on disk, replacing any existing content."""

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)
        self.name = str(self.path)

    def _open(self) -> IO[bytes]:
        try:
            return open(self.path, "wb")
        except FileNotFoundError as e:
            raise SinkOpenError(self.name, "directory not found") from e
        except PermissionError as e:
            raise SinkOpenError(self.name, "permission denied") from e
        except OSError as e:
            raise SinkOpenError(self.name, e.strerror or str(e)) from e

    def _release(self, stream: IO[bytes]) -> None:
        # close() still releases the descriptor when its final flush fails
        try:
            stream.close()
        except BrokenPipeError:
            _LOGGER.debug("Output %s closed by consumer", self.name)


def select_input(path: str | Path | None) -> InputEndpoint:
    """Pick the input endpoint for a path, ``-`` or None (stdin).

    Example:
        >>> select_input("-")
        StdinInput('<stdin>')
        >>> select_input("data.csv")
        FileInput('data.csv')
    """
    if _is_stdio(path):
        return StdinInput()
    return FileInput(path)


def select_output(path: str | Path | None) -> OutputEndpoint:
    """Pick the output endpoint for a path, ``-`` or None (stdout)."""
    if _is_stdio(path):
        return StdoutOutput()
    return FileOutput(path)
