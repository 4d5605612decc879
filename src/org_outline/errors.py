"""Exceptions raised while loading and parsing org outlines."""

from pathlib import Path
from typing import Optional, Union


class OrgError(Exception):
    """Base class for all org outline errors."""


class OrgIOError(OrgError):
    """Raised when an org file cannot be read.

    The underlying OSError is chained as ``__cause__``.

    Attributes:
        path: Path of the file that failed to load
    """

    def __init__(self, path: Union[str, Path], message: str = "unable to read file"):
        self.path = str(path)
        self.message = message
        super().__init__(f"{message}: {self.path}")


class ParseError(OrgError):
    """Raised when the outline text cannot be turned into a document.

    Attributes:
        line_number: Zero-based line the parser was looking at (None if unknown)
        message: Human-readable description
    """

    def __init__(self, line_number: Optional[int], message: str):
        self.line_number = line_number
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line_number is None:
            return f"error parsing line:\n{self.message}"
        return f"error parsing line: {self.line_number}\n{self.message}"


class UnexpectedError(OrgError):
    """Raised when an internal invariant of the parser is violated."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"unexpected error:\n{message}")
