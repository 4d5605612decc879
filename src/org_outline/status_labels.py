"""Status keyword sets recognized at the start of a headline title."""

from typing import Iterable, Iterator

DEFAULT_STATUS_LABELS: tuple[str, ...] = ("TODO", "STARTED", "DONE")

LABEL_SEPARATOR = ","


def validate_label(label: str) -> str:
    """Check that a status label is a non-empty alphanumeric word.

    Raises:
        ValueError: If the label is empty or contains other characters
    """
    if not label or not label.isalnum():
        raise ValueError(f"unexpected characters in status label: {label!r}")
    return label


class StatusLabels:
    """Ordered set of status labels.

    Order matters: when several labels are a prefix of a title, the first
    one wins.

    Example:
        >>> labels = StatusLabels.from_string("TODO,WAITING,DONE")
        >>> list(labels)
        ['TODO', 'WAITING', 'DONE']
    """

    def __init__(self, labels: Iterable[str] = DEFAULT_STATUS_LABELS):
        self._labels = tuple(validate_label(label) for label in labels)

    @classmethod
    def from_string(cls, text: str) -> "StatusLabels":
        """Parse comma separated labels, e.g. ``"TODO,STARTED,DONE"``.

        Surrounding whitespace around each label is ignored.

        Raises:
            ValueError: If any label is empty or not alphanumeric
        """
        return cls(label.strip() for label in text.split(LABEL_SEPARATOR))

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusLabels):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self) -> int:
        return hash(self._labels)

    def __repr__(self) -> str:
        return f"StatusLabels({LABEL_SEPARATOR.join(self._labels)!r})"

    def __str__(self) -> str:
        return LABEL_SEPARATOR.join(self._labels)
