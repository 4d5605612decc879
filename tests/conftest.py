"""Shared test fixtures for all test modules."""

import pytest

TEST_STATES = ["TODO", "STARTED", "DONE"]

SAMPLE_TEXT = """\
* TODO task header: with_tags :tag:anothertag:
:DEADLINE: 

:PROPERTIES:
:END:

* STARTED started task
* TODO unorodered lists
- not necessarily first
- maybe not second
- doesn't have to be third
* plus sign list
+ unordered lists
+ don't have to start
+ with a - like a sane person
* STARTED ordered lists
1. there
2. needs
3. to
4. be
5. ten
6. of
7. these
8. so
9. here's
10. ten
"""


@pytest.fixture
def test_states():
    """Status keywords used throughout the tests, in precedence order."""
    return list(TEST_STATES)


@pytest.fixture
def sample_text():
    """
    A 26 line outline with five first level headlines.

    The first headline carries status and tags and a run of text lines
    (including blank lines and a trailing space); the others hold dash,
    plus and numbered lists.
    """
    return SAMPLE_TEXT
