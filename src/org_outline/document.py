"""Parsed org document with traversal and rendering.

This module provides the read-only views over a parsed outline:

- ``headlines()``: every headline group, depth-first, parents before children
- ``objects()``: content blocks and headline groups interleaved in source order
- ``render()``: the outline text rebuilt from the tree
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from org_outline.content import ContentBlock
from org_outline.errors import OrgIOError
from org_outline.headline import HeadlineGroup
OrgObject = Union[HeadlineGroup, ContentBlock]


@dataclass(frozen=True)
class OrgDocument:
    """Parsed representation of an org outline.

    Attributes:
        text: Original source text
        root: Synthetic level 0 group owning the whole document
    """

    text: str
    root: HeadlineGroup

    @classmethod
    def parse(
        cls,
        text: str,
        status_labels: Optional[Iterable[str]] = None,
        max_entries: Optional[int] = None,
    ) -> "OrgDocument":
        """Parse outline text. See ``org_outline.parser.parse_org_text``."""
        from org_outline.parser import DEFAULT_MAX_ENTRIES, parse_org_text
        from org_outline.status_labels import DEFAULT_STATUS_LABELS

        return parse_org_text(
            text,
            DEFAULT_STATUS_LABELS if status_labels is None else status_labels,
            DEFAULT_MAX_ENTRIES if max_entries is None else max_entries,
        )

    @classmethod
    def load(
        cls,
        path: Path,
        status_labels: Optional[Iterable[str]] = None,
        max_entries: Optional[int] = None,
    ) -> "OrgDocument":
        """Read and parse an org file.

        Args:
            path: Path to a UTF-8 encoded org file
            status_labels: Recognized status keywords (default: TODO, STARTED, DONE)
            max_entries: Per-headline cap for content blocks and children

        Returns:
            Parsed OrgDocument

        Raises:
            OrgIOError: If the file cannot be read
            ParseError: If the text cannot be parsed
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise OrgIOError(path) from e

        return cls.parse(text, status_labels, max_entries)

    def headlines(self) -> Iterator[HeadlineGroup]:
        """Iterate over all headline groups in depth-first pre-order.

        The synthetic root is not included. Each call returns a new iterator.

        Example:
            >>> document = OrgDocument.parse("* 1\\n** 2\\n* 3")
            >>> [group.headline.title for group in document.headlines()]
            ['1', '2', '3']
        """
        stack = [self.root.children()]
        while stack:
            group = next(stack[-1], None)
            if group is None:
                stack.pop()
                continue
            yield group
            stack.append(group.children())

    def objects(self) -> Iterator[OrgObject]:
        """Iterate over content blocks and headline groups in source order.

        Each group's own content comes right after the group itself, followed
        by its children expanded in place. Content placed before the first
        headline comes first; the synthetic root is not included.
        """
        yield from self.root.content_blocks()
        for child in self.root.children():
            yield from _expand(child)

    def render(self) -> str:
        """Render the document back to outline text.

        The output is rebuilt from the tree, not copied from the source. A
        trailing newline is added when the source ended with one.
        """
        rendered = "\n".join(self.root.render_lines())
        if self.text.endswith("\n"):
            rendered += "\n"
        return rendered

    def __str__(self) -> str:
        return self.render()


def _expand(group: HeadlineGroup) -> Iterator[OrgObject]:
    yield group
    yield from group.content_blocks()
    for child in group.children():
        yield from _expand(child)
