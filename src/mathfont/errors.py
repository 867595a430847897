"""Error types for the command-line front end."""

from __future__ import annotations


class UnknownOptionError(Exception):
    """Raised for a flag that names no registered style and is not ``-``."""

    def __init__(self, option: str) -> None:
        self.option = option
        self.message = f"{option}: unknown option"
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: {self.message}"
