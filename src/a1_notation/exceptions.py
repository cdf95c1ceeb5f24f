"""Custom exceptions for a1-notation."""

from __future__ import annotations


class A1NotationError(ValueError):
    """Base exception for a1-notation.

    Attributes:
        value: The offending substring of the notation being parsed
    """

    kind: str = "A1 notation"

    def __init__(self, value: str, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"Invalid {self.kind}: {value!r}")


class InvalidColumnError(A1NotationError):
    """Raised when column letters cannot be decoded."""

    kind = "column"


class InvalidRowError(A1NotationError):
    """Raised when a row number is zero, negative or not a number."""

    kind = "row"


class InvalidCellError(A1NotationError):
    """Raised when a cell token is not a column followed by a row."""

    kind = "cell"


class InvalidSheetNameError(A1NotationError):
    """Raised when a sheet name prefix is empty or badly quoted."""

    kind = "sheet name"


class InvalidA1Error(A1NotationError):
    """Raised when an area token matches none of the reference shapes."""
