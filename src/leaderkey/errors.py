"""Error types raised by the leader-key configuration editor.

Every error here signals a caller bug (a precondition violation), not a
recoverable runtime condition.  The core never catches them; the
interactive session reports them and carries on.
"""
from __future__ import annotations


class EditorError(Exception):
    """Base class for all editor errors."""


class IndexOutOfRangeError(EditorError, IndexError):
    """Raised when a position is not currently valid in a group's children."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(
            f"Index {index} is out of range for a group with {length} item(s). "
            "Re-derive positions after adding, deleting or duplicating items."
        )


class VariantMismatchError(EditorError, TypeError):
    """Raised when an item is read or written as the wrong node kind."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected!r} but found {found!r}")


class ChooserUnavailableError(EditorError, ValueError):
    """Raised when a path chooser is requested for a type that offers none."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(
            f"Actions of type {type_name!r} are edited as text; "
            "only 'application' and 'folder' actions offer a chooser."
        )
