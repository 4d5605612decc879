"""Integration tests for parser round-trip (parse → render).

Well-formed outlines (headlines, single-space lists and text) must render
back to exactly the same text.
"""

from textwrap import dedent

import pytest

from org_outline import OrgDocument, parse_org_text


class TestParsingRoundTrip:
    """Test that parsing and rendering preserves structure."""

    def test_sample_roundtrip(self, sample_text, test_states):
        """Test the sample document renders byte-for-byte."""
        document = parse_org_text(sample_text, test_states)

        assert document.render() == sample_text

    def test_line_for_line(self, sample_text, test_states):
        """Test that every rendered line matches its source line."""
        rendered = parse_org_text(sample_text, test_states).render()

        for original, output in zip(sample_text.splitlines(), rendered.splitlines(), strict=True):
            assert output == original

    def test_nested_roundtrip(self):
        """Test nested headlines with content at each level."""
        original = dedent(
            """\
            #+TITLE: notes
            * Projects
            ** TODO write parser
            - classify lines
            - build tree
            ** DONE ship it
            *** notes
            1. tag release
            2. announce
            * Someday
            free text
              with indentation

            trailing text"""
        )

        assert OrgDocument.parse(original).render() == original

    def test_numbered_list_not_renumbered(self):
        """Test that out of order numbers survive."""
        original = "5. five\n1. one\n"
        document = parse_org_text(original)

        (block,) = document.objects()
        assert [item.bullet.number for item in block.items] == [5, 1]
        assert document.render() == original

    @pytest.mark.parametrize("original", ["١٢. arabic-indic digits", "007. bond", "00. zero"])
    def test_non_canonical_numbers_stay_text(self, original):
        """Test that numbers which would not render back unchanged are kept as text."""
        document = parse_org_text(original)

        (block,) = document.objects()
        assert block.lines == (original,)
        assert document.render() == original

    def test_blank_lines_preserved(self):
        """Test that blank lines are kept as text."""
        original = "* a\n\n\n* b\n\n"

        assert parse_org_text(original).render() == original

    def test_reparse_is_stable(self):
        """Test that rendering is a fixed point after one pass."""
        messy = "*   TODO   spaced    :a:b:\n-   item\n+ other"
        once = parse_org_text(messy).render()
        twice = parse_org_text(once).render()

        assert once == twice

    @pytest.mark.parametrize(
        "line",
        [
            "* plain",
            "** TODO with status",
            "* TODO with status and tags :one:two:",
            "*** DONE x :single:",
            "* DONE",
            "** TODO\n- item",
        ],
    )
    def test_headline_roundtrip(self, line):
        """Test headline lines that render exactly as written."""
        assert parse_org_text(line).render() == line

    def test_tags_without_status_render_bare(self):
        """Test that tags without a status render without enclosing colons."""
        document = parse_org_text("* Projects :work:home:")

        assert document.render() == "* Projects work:home"
