"""Org outline parser - Parse and re-render org formatted outlines.

This package parses a lightweight org-style outline markup into a tree of
headlines with attached content, and renders that tree back to text.

Key features:
- Headlines with level markers, status keywords and trailing tags
- Plain text runs and dash, plus or numbered lists grouped into blocks
- Depth-first iteration over headlines, or over headlines and content together
- Rendering back to outline text

Example:
    >>> from org_outline import parse_org_text
    >>> document = parse_org_text("* TODO write docs :work:\\n- first\\n- second")
    >>> next(document.headlines()).headline.status
    'TODO'
    >>> print(document.render())
    * TODO write docs :work:
    - first
    - second
"""

__version__ = "0.1.0"

from org_outline.content import Bullet, BulletKind, ContentBlock, ListBlock, ListItem, TextBlock
from org_outline.document import OrgDocument, OrgObject
from org_outline.errors import OrgError, OrgIOError, ParseError, UnexpectedError
from org_outline.headline import Headline, HeadlineGroup
from org_outline.parser import DEFAULT_MAX_ENTRIES, parse_org_text
from org_outline.status_labels import DEFAULT_STATUS_LABELS, StatusLabels

__all__ = [
    "Bullet",
    "BulletKind",
    "ContentBlock",
    "DEFAULT_MAX_ENTRIES",
    "DEFAULT_STATUS_LABELS",
    "Headline",
    "HeadlineGroup",
    "ListBlock",
    "ListItem",
    "OrgDocument",
    "OrgError",
    "OrgIOError",
    "OrgObject",
    "ParseError",
    "StatusLabels",
    "TextBlock",
    "UnexpectedError",
    "parse_org_text",
]
