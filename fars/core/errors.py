"""Exceptions raised by the accident pipeline."""

from __future__ import annotations

from pathlib import Path


class FarsError(Exception):
    """Base class for pipeline errors."""


class MissingFileError(FarsError, FileNotFoundError):
    """A yearly input file does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"file '{self.path}' does not exist")


class InvalidStateError(FarsError, ValueError):
    """Requested state code is not a number or has no rows in the loaded year."""

    def __init__(self, code) -> None:
        self.code = code
        super().__init__(f"invalid STATE number: {code}")
