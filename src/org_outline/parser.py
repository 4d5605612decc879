"""Recursive descent parser that builds the headline tree.

The parser walks an ``OrgCursor`` once. Each call of
``parse_headline_objects`` owns one headline and collects, in source order:

- content blocks (text runs and lists) found before its first child headline
- child headline groups, each built by a recursive call

A headline with a level less than or equal to the owning headline's level
ends the call without being consumed, so it is picked up by an ancestor.
"""

from typing import Generic, Iterable, Optional, TypeVar

from org_outline.content import Bullet, ContentBlock, ListBlock, ListItem, TextBlock
from org_outline.cursor import Cursor, OrgCursor
from org_outline.document import OrgDocument
from org_outline.errors import ParseError, UnexpectedError
from org_outline.headline import Headline, HeadlineGroup
from org_outline.line import HeadingLine, ListItemLine, TextLine, parse_line
from org_outline.status_labels import DEFAULT_STATUS_LABELS

DEFAULT_MAX_ENTRIES = 64

T = TypeVar("T")


def parse_org_text(
    text: str,
    status_labels: Iterable[str] = DEFAULT_STATUS_LABELS,
    max_entries: int = DEFAULT_MAX_ENTRIES,
) -> OrgDocument:
    """Parse org outline text into a document.

    Args:
        text: Outline text (must contain at least one line)
        status_labels: Recognized status keywords, in precedence order
        max_entries: Maximum number of content blocks and of child headlines
                     under any single headline

    Returns:
        Parsed OrgDocument

    Raises:
        ParseError: If text is empty, the cursor misbehaves, or a headline
                    holds more than max_entries content blocks or children
        UnexpectedError: If the parse does not produce a root headline group

    Example:
        >>> document = parse_org_text("* 1\\n** 2\\n* 3")
        >>> [group.headline.title for group in document.headlines()]
        ['1', '2', '3']
    """
    labels = list(status_labels)
    cursor = OrgCursor(text, lambda line_number, line: parse_line(line_number, line, labels))
    root = parse_headline_objects(Headline.new_root(), cursor, max_entries)

    if not isinstance(root, HeadlineGroup) or not root.headline.is_root:
        raise UnexpectedError("parse_headline_objects should return the root HeadlineGroup")

    return OrgDocument(text=text, root=root)


def parse_headline_objects(
    headline: Headline,
    cursor: Cursor,
    max_entries: int = DEFAULT_MAX_ENTRIES,
) -> HeadlineGroup:
    """Build the group owned by ``headline`` from the lines at the cursor.

    Args:
        headline: Headline owning this group (already consumed from the cursor)
        cursor: Cursor positioned on the first line below the headline
        max_entries: Cap for the content and child lists of this group

    Returns:
        HeadlineGroup with the collected content and children

    Raises:
        ParseError: On a misbehaving cursor or when a list exceeds max_entries
    """
    content: Optional[LimitedList[ContentBlock]] = None
    sub_headlines: Optional[LimitedList[HeadlineGroup]] = None

    while (line := cursor.current_line) is not None:
        if isinstance(line, HeadingLine):
            if line.headline.level <= headline.level:
                # Sibling or ancestor level, belongs to a caller
                break

            consumed = cursor.advance()
            if not isinstance(consumed, HeadingLine):
                raise ParseError(cursor.current_line_number, "cursor returned a bad value")

            sub_headline = parse_headline_objects(consumed.headline, cursor, max_entries)
            if sub_headlines is None:
                sub_headlines = LimitedList(max_entries)
            sub_headlines.push(sub_headline, line.line_number)

        elif isinstance(line, ListItemLine):
            if content is None:
                content = LimitedList(max_entries)
            content.push(ListBlock(tuple(parse_list(cursor))), line.line_number)

        else:
            if content is None:
                content = LimitedList(max_entries)
            content.push(parse_text(cursor), line.line_number)

    return HeadlineGroup(
        headline=headline,
        content=content.take() if content is not None else None,
        sub_headlines=sub_headlines.take() if sub_headlines is not None else None,
    )


def parse_list(cursor: Cursor) -> list[ListItem]:
    """Consume a run of list items that share the first item's bullet family.

    Stops without consuming at the first line that is not a list item or
    whose bullet belongs to another family.

    Raises:
        ParseError: If the cursor hands back something other than the peeked item
    """
    items: list[ListItem] = []
    first_bullet: Optional[Bullet] = None

    while isinstance(line := cursor.current_line, ListItemLine):
        if first_bullet is None:
            first_bullet = line.item.bullet
        if not line.item.bullet.matches(first_bullet):
            break

        consumed = cursor.advance()
        if not isinstance(consumed, ListItemLine):
            raise ParseError(line.line_number, "cursor returned a bad value while reading a list")
        items.append(consumed.item)

    return items


def parse_text(cursor: Cursor) -> TextBlock:
    """Consume a maximal run of plain text lines.

    Raises:
        ParseError: If the cursor hands back something other than the peeked line
    """
    lines: list[str] = []

    while isinstance(line := cursor.current_line, TextLine):
        consumed = cursor.advance()
        if not isinstance(consumed, TextLine):
            raise ParseError(line.line_number, "cursor returned a bad value while reading text")
        lines.append(consumed.text)

    return TextBlock(tuple(lines))


class LimitedList(Generic[T]):
    """Append-only list that refuses to grow past a fixed limit."""

    def __init__(self, limit: int = DEFAULT_MAX_ENTRIES):
        self.limit = limit
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T, line_number: Optional[int] = None) -> None:
        """Append an item.

        Raises:
            ParseError: If the list already holds ``limit`` items
        """
        if len(self._items) >= self.limit:
            raise ParseError(
                line_number,
                f"capacity reached in limited list: limit == {self.limit}",
            )
        self._items.append(item)

    def take(self) -> tuple[T, ...]:
        return tuple(self._items)
