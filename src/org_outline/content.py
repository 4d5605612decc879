"""Content blocks that can be attached below a headline.

Two kinds of content exist:

- ``TextBlock``: a contiguous run of raw text lines, kept verbatim
- ``ListBlock``: a run of list items that share one bullet family
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# ASCII digits without a leading zero; int() must render back to the same token
_NUMERIC_BULLET = re.compile(r"(0|[1-9][0-9]*)\.")


class BulletKind(Enum):
    """Family of a list bullet."""

    MINUS = "-"
    PLUS = "+"
    NUMERIC = "numeric"


@dataclass(frozen=True)
class Bullet:
    """List bullet marker.

    Attributes:
        kind: Bullet family
        number: Ordinal value for numeric bullets (None otherwise)
    """

    kind: BulletKind
    number: Optional[int] = None

    @classmethod
    def minus(cls) -> "Bullet":
        return cls(BulletKind.MINUS)

    @classmethod
    def plus(cls) -> "Bullet":
        return cls(BulletKind.PLUS)

    @classmethod
    def numeric(cls, number: int) -> "Bullet":
        return cls(BulletKind.NUMERIC, number)

    @classmethod
    def parse(cls, token: str) -> Optional["Bullet"]:
        """Parse a bullet marker token.

        Accepts ``-``, ``+`` or a run of digits immediately followed by ``.``.

        Args:
            token: First whitespace-free token of a line

        Returns:
            Parsed Bullet, or None if the token is not a bullet

        Examples:
            >>> Bullet.parse("-")
            Bullet(kind=<BulletKind.MINUS: '-'>, number=None)
            >>> Bullet.parse("10.").number
            10
            >>> Bullet.parse("1)") is None
            True
        """
        if token == "-":
            return cls.minus()
        if token == "+":
            return cls.plus()

        match = _NUMERIC_BULLET.fullmatch(token)
        if match:
            return cls.numeric(int(match.group(1)))
        return None

    def matches(self, other: "Bullet") -> bool:
        """Check whether both bullets belong to the same family.

        Numeric ordinals are ignored, so ``5.`` matches ``1.``.
        """
        return self.kind == other.kind

    def render(self) -> str:
        if self.kind is BulletKind.NUMERIC:
            return f"{self.number}."
        return self.kind.value

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ListItem:
    """Single list item.

    Attributes:
        bullet: Bullet marker of the item
        content: Trimmed text after the bullet
    """

    bullet: Bullet
    content: str

    def render(self) -> str:
        return f"{self.bullet.render()} {self.content}"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class TextBlock:
    """Contiguous run of plain text lines, stored exactly as in the source."""

    lines: tuple[str, ...]

    def render_lines(self) -> list[str]:
        return list(self.lines)

    def __str__(self) -> str:
        return "\n".join(self.render_lines())


@dataclass(frozen=True)
class ListBlock:
    """Run of list items sharing one bullet family.

    Numeric ordinals are kept as they appeared in the source; nothing is
    renumbered.
    """

    items: tuple[ListItem, ...]

    @property
    def kind(self) -> Optional[BulletKind]:
        """Bullet family of the list (None for an empty list)."""
        if not self.items:
            return None
        return self.items[0].bullet.kind

    def render_lines(self) -> list[str]:
        return [item.render() for item in self.items]

    def __str__(self) -> str:
        return "\n".join(self.render_lines())


ContentBlock = Union[TextBlock, ListBlock]
