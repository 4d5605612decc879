"""Unit tests for error types."""

from org_outline.errors import OrgError, OrgIOError, ParseError, UnexpectedError


class TestErrors:
    """Test error messages and hierarchy."""

    def test_parse_error_with_line(self):
        """Test message with a line number."""
        error = ParseError(4, "cursor returned a bad value")

        assert str(error) == "error parsing line: 4\ncursor returned a bad value"
        assert error.line_number == 4
        assert error.message == "cursor returned a bad value"

    def test_parse_error_without_line(self):
        """Test message without a line number."""
        assert str(ParseError(None, "oops")) == "error parsing line:\noops"

    def test_unexpected_error(self):
        """Test unexpected error message."""
        assert str(UnexpectedError("broken")) == "unexpected error:\nbroken"

    def test_io_error(self):
        """Test IO error message."""
        error = OrgIOError("/tmp/notes.org")

        assert str(error) == "unable to read file: /tmp/notes.org"

    def test_hierarchy(self):
        """Test that all errors share the OrgError base."""
        assert issubclass(ParseError, OrgError)
        assert issubclass(UnexpectedError, OrgError)
        assert issubclass(OrgIOError, OrgError)
