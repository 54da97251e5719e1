"""Shared fixtures and utilities for CLI tests."""

import io
import re

import pytest
from rich.console import Console

# Regex to strip ANSI escape codes
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_ESCAPE.sub("", text)


@pytest.fixture
def console() -> Console:
    """Console writing to an in-memory buffer, wide enough for tables."""
    return Console(file=io.StringIO(), width=160, force_terminal=False)


@pytest.fixture
def console_output(console: Console):
    """Return a function reading what was printed to the console fixture."""

    def read() -> str:
        return strip_ansi(console.file.getvalue())

    return read
