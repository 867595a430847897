"""Shared test fixtures and helpers."""

from __future__ import annotations

import io
from dataclasses import dataclass

import pytest

from mathfont.cli import main


@dataclass
class CliResult:
    code: int
    out: str
    err: str


@pytest.fixture
def run_cli():
    """Return a helper that runs main() on argv and optional stdin text."""

    def _run(argv: list[str], stdin_text: str = "") -> CliResult:
        stdout = io.StringIO()
        stderr = io.StringIO()
        code = main(argv, stdin=io.StringIO(stdin_text), stdout=stdout, stderr=stderr)
        return CliResult(code, stdout.getvalue(), stderr.getvalue())

    return _run


def styled(base: int, text: str, first: str) -> str:
    """Apply a plain affine offset from *first* to every char of *text*."""
    return "".join(chr(base + ord(ch) - ord(first)) for ch in text)
