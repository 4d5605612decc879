"""Single-line lookahead cursor over classified outline lines."""

from typing import Callable, Iterator, Optional, Protocol

from org_outline.errors import ParseError
from org_outline.line import Line

LineTransform = Callable[[int, str], Line]


class Cursor(Protocol):
    """Sequential reader that exposes one line of lookahead."""

    @property
    def current_line(self) -> Optional[Line]: ...

    @property
    def current_line_number(self) -> Optional[int]: ...

    def advance(self) -> Optional[Line]: ...


def split_lines(text: str) -> list[str]:
    """Split text on line breaks.

    A trailing line break does not produce an empty final line, and a
    ``\\r`` before each ``\\n`` is dropped.

    Examples:
        >>> split_lines("a\\nb\\n")
        ['a', 'b']
        >>> split_lines("")
        []
    """
    if not text:
        return []

    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class OrgCursor:
    """Cursor that classifies raw lines lazily as it advances.

    Attributes:
        current_line: Classified line at the cursor (None once exhausted)
        current_line_number: Zero-based number of current_line (None once exhausted)
    """

    def __init__(self, text: str, transform: LineTransform):
        """Position the cursor on the first line of ``text``.

        Args:
            text: Outline text
            transform: Classifier called as ``transform(line_number, raw_line)``

        Raises:
            ParseError: If text contains no lines
        """
        self._transform = transform
        self._lines: Iterator[tuple[int, str]] = enumerate(split_lines(text))

        first = next(self._lines, None)
        if first is None:
            raise ParseError(0, "cannot parse empty text")

        self._current_line_number: Optional[int] = first[0]
        self._current_line: Optional[Line] = transform(*first)

    @property
    def current_line(self) -> Optional[Line]:
        return self._current_line

    @property
    def current_line_number(self) -> Optional[int]:
        return self._current_line_number

    def advance(self) -> Optional[Line]:
        """Move to the next line.

        Returns:
            The line that was current before advancing (None if already exhausted)
        """
        last_line = self._current_line

        raw_line = next(self._lines, None)
        if raw_line is None:
            self._current_line_number = None
            self._current_line = None
        else:
            self._current_line_number = raw_line[0]
            self._current_line = self._transform(*raw_line)

        return last_line
