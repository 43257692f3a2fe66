"""Streaming record pipeline.

Exports:
    - run: Cleanse records from a byte source into a byte sink
    - cleanse_file: Cleanse a file (or stdin) into a file (or stdout)
    - RecordReader / RecordWriter: Delimited record I/O over byte streams
    - select_input / select_output: Pick file or standard stream endpoints
"""

from __future__ import annotations

from csv_cleanse.pipeline.records import (
    RecordReader,
    RecordWriter,
    set_field_size_limit,
)
from csv_cleanse.pipeline.runner import (
    ChangeCallback,
    PipelineResult,
    cleanse_file,
    log_change,
    run,
)
from csv_cleanse.pipeline.streams import (
    STDIO,
    FileInput,
    FileOutput,
    InputEndpoint,
    OutputEndpoint,
    StdinInput,
    StdoutOutput,
    select_input,
    select_output,
)

__all__ = [
    # Pipeline
    "run",
    "cleanse_file",
    "log_change",
    "ChangeCallback",
    "PipelineResult",
    # Record I/O
    "RecordReader",
    "RecordWriter",
    "set_field_size_limit",
    # Endpoints
    "STDIO",
    "InputEndpoint",
    "OutputEndpoint",
    "StdinInput",
    "StdoutOutput",
    "FileInput",
    "FileOutput",
    "select_input",
    "select_output",
]
