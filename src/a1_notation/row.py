"""Module for spreadsheet rows.

Rows are stored zero-based and displayed one-based, so ``Row(y=0)`` is row "1".
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .exceptions import InvalidRowError

if TYPE_CHECKING:
    from .a1 import A1
    from .reference import RowRange

_ROW_PATTERN = re.compile(r"^(\$?)(\d+)\$?$")


def index_to_number(index: int) -> str:
    """Convert a zero-based row index to its one-based display number."""
    if index < 0:
        error_msg = f"Row index must not be negative: {index}"
        raise ValueError(error_msg)
    return str(index + 1)


def number_to_index(number: str) -> int:
    """Convert a one-based row number to a zero-based index.

    Raises:
        InvalidRowError: If number is not a positive integer
    """
    if not number.isascii() or not number.isdigit():
        raise InvalidRowError(number)
    value = int(number)
    if value < 1:
        raise InvalidRowError(number, f"Row numbers start at 1: {number!r}")
    return value - 1


@dataclass(frozen=True)
class Row:
    """A single spreadsheet row.

    Attributes:
        absolute: True when the row was pinned with ``$`` in notation
        y: Zero-based row index
    """

    absolute: bool = False
    y: int = 0

    @classmethod
    def new(cls, y: int) -> Row:
        """Create a relative row at zero-based index y."""
        if y < 0:
            error_msg = f"Row index must not be negative: {y}"
            raise ValueError(error_msg)
        return cls(absolute=False, y=y)

    @classmethod
    def from_str(cls, text: str) -> Row:
        """Parse a one-based row number with an optional leading ``$``.

        A trailing ``$`` is accepted and ignored.

        Raises:
            InvalidRowError: If text is not a valid row
        """
        match = _ROW_PATTERN.match(text)
        if match is None:
            raise InvalidRowError(text)
        return cls(absolute=bool(match.group(1)), y=number_to_index(match.group(2)))

    def shift_up(self, n: int) -> Row:
        return replace(self, y=max(self.y - n, 0))

    def shift_down(self, n: int) -> Row:
        return replace(self, y=max(self.y + n, 0))

    def to_reference(self) -> RowRange:
        """Widen this row to a reference spanning the whole row."""
        from .reference import RowRange

        return RowRange(from_=self, to=self)

    def to_a1(self, sheet_name: str | None = None) -> A1:
        return self.to_reference().to_a1(sheet_name)

    def __str__(self) -> str:
        prefix = "$" if self.absolute else ""
        return f"{prefix}{index_to_number(self.y)}"
