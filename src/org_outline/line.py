"""Line classification for org outline text.

Every source line is classified as exactly one of:

- ``HeadingLine``: ``*`` markers followed by a title
- ``ListItemLine``: a ``-``, ``+`` or ``N.`` bullet followed by content
- ``TextLine``: anything else, kept verbatim

Headline recognition takes priority over list items.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from org_outline.content import Bullet, ListItem
from org_outline.headline import HEADLINE_MARKER, TAG_SEPARATOR, Headline


@dataclass(frozen=True)
class HeadingLine:
    line_number: int
    headline: Headline


@dataclass(frozen=True)
class ListItemLine:
    line_number: int
    item: ListItem


@dataclass(frozen=True)
class TextLine:
    line_number: int
    text: str


Line = Union[HeadingLine, ListItemLine, TextLine]


def parse_line(line_number: int, line: str, possible_states: Sequence[str]) -> Line:
    """Classify a single line.

    Args:
        line_number: Zero-based position of the line in the source
        line: Raw line text (without the line break)
        possible_states: Recognized status keywords, in precedence order

    Returns:
        HeadingLine, ListItemLine or TextLine
    """
    headline = parse_headline(line, possible_states)
    if headline is not None:
        return HeadingLine(line_number, headline)

    item = parse_list_item(line)
    if item is not None:
        return ListItemLine(line_number, item)

    return TextLine(line_number, line)


def parse_headline(line: str, possible_states: Sequence[str]) -> Optional[Headline]:
    """Parse a headline line.

    Args:
        line: Raw line text
        possible_states: Recognized status keywords, in precedence order

    Returns:
        Parsed Headline, or None if the line has no leading markers or no
        text after them

    Examples:
        >>> parse_headline("** TODO write docs :work:", ["TODO"])
        Headline(level=2, title='write docs', status='TODO', tags=('work',))
    """
    level = len(line) - len(line.lstrip(HEADLINE_MARKER))
    if level == 0:
        return None

    text = line[level:].strip()
    if not text:
        return None

    status = None
    parsed_status = parse_status(text, possible_states)
    if parsed_status is not None:
        status, text = parsed_status

    tags = None
    parsed_tags = parse_tags(text)
    if parsed_tags is not None:
        tags, text = parsed_tags

    return Headline(level=level, title=text, status=status, tags=tags)


def parse_status(text: str, possible_states: Sequence[str]) -> Optional[tuple[str, str]]:
    """Split a status keyword off the front of ``text``.

    The first keyword that ``text`` starts with wins. This is a plain prefix
    match, so "TODOS" starts with "TODO".

    Returns:
        (status, remaining trimmed text), or None if no keyword matches
    """
    for state in possible_states:
        if state and text.startswith(state):
            return state, text[len(state):].strip()
    return None


def parse_tags(text: str) -> Optional[tuple[tuple[str, ...], str]]:
    """Split a trailing tag token off the end of ``text``.

    The final whitespace-delimited token is split on ``:``. Whatever
    precedes the first ``:`` is dropped; the remaining non-empty segments
    are the tags. A title without whitespace never carries tags.

    Returns:
        (tags, remaining trimmed text), or None if there are no tags

    Examples:
        >>> parse_tags("task header: with_tags :tag:anothertag:")
        (('tag', 'anothertag'), 'task header: with_tags')
        >>> parse_tags("a plain title") is None
        True
    """
    text = text.strip()
    split_at = _last_whitespace_index(text)
    if split_at is None:
        return None

    token = text[split_at + 1:]
    segments = token.split(TAG_SEPARATOR)[1:]
    tags = tuple(segment for segment in segments if segment and " " not in segment)
    if not tags:
        return None

    return tags, text[:split_at].strip()


def parse_list_item(line: str) -> Optional[ListItem]:
    """Parse a list item line.

    The line is split at its first space; the leading token must be a
    bullet marker (see ``Bullet.parse``).

    Examples:
        >>> parse_list_item("5. five")
        ListItem(bullet=Bullet(kind=<BulletKind.NUMERIC: 'numeric'>, number=5), content='five')
    """
    token, _, rest = line.partition(" ")
    bullet = Bullet.parse(token)
    if bullet is None:
        return None
    return ListItem(bullet=bullet, content=rest.strip())


def _last_whitespace_index(text: str) -> Optional[int]:
    for index in range(len(text) - 1, -1, -1):
        if text[index].isspace():
            return index
    return None
