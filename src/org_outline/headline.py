"""Headlines and the headline groups that form the document tree."""

from dataclasses import dataclass
from typing import Iterator, Optional

from org_outline.content import ContentBlock

HEADLINE_MARKER = "*"
TAG_SEPARATOR = ":"


@dataclass(frozen=True)
class Headline:
    """Single org headline.

    Attributes:
        level: Number of leading ``*`` markers (0 for the synthetic root)
        title: Trimmed title text, without status and tags
        status: Status keyword found at the start of the title (e.g. "TODO")
        tags: Tags parsed from the trailing ``:tag:other:`` token
    """

    level: int
    title: str
    status: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None

    @classmethod
    def new_root(cls) -> "Headline":
        """Create the synthetic level 0 headline that owns a whole document."""
        return cls(level=0, title="root")

    @property
    def is_root(self) -> bool:
        return self.level == 0

    def render(self) -> str:
        """Render the headline line.

        The four combinations of status and tags are rendered as:

        - status only: ``* TODO title``
        - tags only: ``* title tag:other``
        - status and tags: ``* TODO title :tag:other:``
        - neither: ``* title``

        An empty title is left out, so ``* DONE`` has no trailing space.
        """
        parts = [HEADLINE_MARKER * self.level]
        if self.status is not None:
            parts.append(self.status)
        if self.title:
            parts.append(self.title)

        if self.tags:
            tag_string = TAG_SEPARATOR.join(self.tags)
            if self.status is not None:
                tag_string = f"{TAG_SEPARATOR}{tag_string}{TAG_SEPARATOR}"
            parts.append(tag_string)

        return " ".join(parts)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class HeadlineGroup:
    """A headline with the content and child headlines attached below it.

    Attributes:
        headline: The owning headline
        content: Content blocks found before the first child headline
                 (None if the headline has no content)
        sub_headlines: Child groups, all with a strictly greater level
                       (None if the headline has no children)
    """

    headline: Headline
    content: Optional[tuple[ContentBlock, ...]] = None
    sub_headlines: Optional[tuple["HeadlineGroup", ...]] = None

    def content_blocks(self) -> Iterator[ContentBlock]:
        """Iterate over attached content blocks (empty if there are none)."""
        return iter(self.content or ())

    def children(self) -> Iterator["HeadlineGroup"]:
        """Iterate over direct child groups (empty if there are none)."""
        return iter(self.sub_headlines or ())

    def render_lines(self) -> list[str]:
        """Render this group and everything below it as a list of lines.

        The synthetic root has no headline line of its own.
        """
        lines = []
        if not self.headline.is_root:
            lines.append(self.headline.render())

        for block in self.content_blocks():
            lines.extend(block.render_lines())

        for child in self.children():
            lines.extend(child.render_lines())

        return lines

    def __str__(self) -> str:
        return "\n".join(self.render_lines())
