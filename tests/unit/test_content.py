"""Unit tests for bullets, list items and content blocks."""

import pytest

from org_outline.content import Bullet, BulletKind, ListBlock, ListItem, TextBlock


class TestBullet:
    """Tests for Bullet parsing, matching and rendering."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("-", Bullet.minus()),
            ("+", Bullet.plus()),
            ("1.", Bullet.numeric(1)),
            ("42.", Bullet.numeric(42)),
            ("0.", Bullet.numeric(0)),
        ],
    )
    def test_parse(self, token, expected):
        """Test parsing valid bullet tokens."""
        assert Bullet.parse(token) == expected

    @pytest.mark.parametrize("token", ["", "*", "1", ".", "1.2", "a.", "1)", "007.", "00.", "\u0661\u0662.", "\uff11."])
    def test_parse_invalid(self, token):
        """Test that other tokens are not bullets."""
        assert Bullet.parse(token) is None

    def test_numeric_bullets_match_regardless_of_value(self):
        """Test that numeric bullets form one family."""
        assert Bullet.numeric(5).matches(Bullet.numeric(1))

    def test_families_do_not_match(self):
        """Test that different families never match."""
        assert not Bullet.minus().matches(Bullet.plus())
        assert not Bullet.plus().matches(Bullet.numeric(1))
        assert not Bullet.numeric(1).matches(Bullet.minus())

    def test_render(self):
        """Test bullet glyphs."""
        assert Bullet.minus().render() == "-"
        assert Bullet.plus().render() == "+"
        assert str(Bullet.numeric(10)) == "10."


class TestListItem:
    """Tests for ListItem rendering."""

    def test_render(self):
        """Test rendering bullet and content."""
        assert ListItem(Bullet.numeric(3), "third").render() == "3. third"
        assert str(ListItem(Bullet.plus(), "more")) == "+ more"


class TestBlocks:
    """Tests for TextBlock and ListBlock."""

    def test_text_block_renders_lines_verbatim(self):
        """Test that text lines are kept exactly, including whitespace."""
        block = TextBlock(("  indented", "", "trailing  "))

        assert block.render_lines() == ["  indented", "", "trailing  "]

    def test_list_block_kind(self):
        """Test the bullet family of a list block."""
        block = ListBlock((ListItem(Bullet.numeric(5), "five"), ListItem(Bullet.numeric(1), "one")))

        assert block.kind is BulletKind.NUMERIC
        assert ListBlock(()).kind is None

    def test_list_block_renders_without_renumbering(self):
        """Test that numeric values are rendered as stored."""
        block = ListBlock((ListItem(Bullet.numeric(5), "five"), ListItem(Bullet.numeric(1), "one")))

        assert str(block) == "5. five\n1. one"

    def test_blocks_are_immutable(self):
        """Test that blocks cannot be modified after creation."""
        block = TextBlock(("a",))

        with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
            block.lines = ("b",)
