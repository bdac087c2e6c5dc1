"""
Exceptions raised while loading semantic convention documents.

Only index construction can fail.  Classification and variant checks are
total and never raise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ConventionConfigError(Exception):
    """Base class for convention configuration failures."""


class ConfigParseError(ConventionConfigError):
    """Raised when a convention document is malformed or unreadable.

    Fatal to index construction: no partial index is ever returned.
    """

    def __init__(
        self,
        path: Union[str, Path],
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.path = str(path)
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{self.location}: {message}")

    @property
    def location(self) -> str:
        """``path[:line[:column]]`` with 1-based line and column."""
        if self.line is None:
            return self.path
        if self.column is None:
            return f"{self.path}:{self.line}"
        return f"{self.path}:{self.line}:{self.column}"


class ModelPathError(ConventionConfigError):
    """Raised when a convention model root is not a directory."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"{self.path} is not a directory")
