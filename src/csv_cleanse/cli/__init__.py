"""CLI for csv-cleanse.

This module provides a Typer-based CLI for cleansing delimited files.

Requires the 'cli' optional dependency: pip install csv-cleanse[cli]
"""

from __future__ import annotations
