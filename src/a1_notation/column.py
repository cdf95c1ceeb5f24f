"""Module for spreadsheet columns.

Columns are stored as a zero-based index and displayed as letters using
bijective base-26, where there is no digit for zero:

    A -> 0, Z -> 25, AA -> 26, AB -> 27, ZZ -> 701, AAA -> 702

Example:
    ```python
    col = Column.from_str("$C")
    assert col == Column(absolute=True, x=2)
    assert str(col) == "$C"
    ```
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .exceptions import InvalidColumnError

if TYPE_CHECKING:
    from .a1 import A1
    from .reference import ColumnRange

ALPHA: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_COLUMN_PATTERN = re.compile(r"^(\$?)([A-Za-z]+)\$?$")


def index_to_letters(index: int) -> str:
    """Convert a zero-based column index to Excel-style column letters."""
    if index < 0:
        error_msg = f"Column index must not be negative: {index}"
        raise ValueError(error_msg)
    chunks: list[str] = []
    current = index + 1
    while current > 0:
        current -= 1
        chunks.append(ALPHA[current % 26])
        current //= 26
    return "".join(reversed(chunks))


def letters_to_index(letters: str) -> int:
    """Convert Excel-style column letters (A/AA, any case) to a zero-based index.

    Raises:
        InvalidColumnError: If letters is empty or contains anything but A-Z
    """
    normalized = letters.upper()
    if not normalized or any(char not in ALPHA for char in normalized):
        raise InvalidColumnError(letters)
    index = 0
    for char in normalized:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index - 1


@dataclass(frozen=True)
class Column:
    """A single spreadsheet column.

    Attributes:
        absolute: True when the column was pinned with ``$`` in notation
        x: Zero-based column index
    """

    absolute: bool = False
    x: int = 0

    @classmethod
    def new(cls, x: int) -> Column:
        """Create a relative column at zero-based index x."""
        if x < 0:
            error_msg = f"Column index must not be negative: {x}"
            raise ValueError(error_msg)
        return cls(absolute=False, x=x)

    @classmethod
    def from_str(cls, text: str) -> Column:
        """Parse column letters with an optional leading ``$``.

        A trailing ``$`` is accepted and ignored; only the leading one marks
        the column absolute.

        Raises:
            InvalidColumnError: If text is not a valid column
        """
        match = _COLUMN_PATTERN.match(text)
        if match is None:
            raise InvalidColumnError(text)
        return cls(absolute=bool(match.group(1)), x=letters_to_index(match.group(2)))

    def shift_left(self, n: int) -> Column:
        return replace(self, x=max(self.x - n, 0))

    def shift_right(self, n: int) -> Column:
        return replace(self, x=max(self.x + n, 0))

    def to_reference(self) -> ColumnRange:
        """Widen this column to a reference spanning the whole column."""
        from .reference import ColumnRange

        return ColumnRange(from_=self, to=self)

    def to_a1(self, sheet_name: str | None = None) -> A1:
        return self.to_reference().to_a1(sheet_name)

    def __str__(self) -> str:
        prefix = "$" if self.absolute else ""
        return f"{prefix}{index_to_letters(self.x)}"
