"""Module for single cell addresses."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Union

from .column import Column, letters_to_index
from .exceptions import InvalidCellError
from .row import Row, number_to_index

if TYPE_CHECKING:
    from .a1 import A1
    from .reference import Cell

_ADDRESS_PATTERN = re.compile(r"^(\$?)([A-Za-z]+)(\$?)(\d+)$")


@dataclass(frozen=True)
class Address:
    """A cell coordinate made of a column and a row.

    An address can be narrowed to its column or its row with ``as_column()`` and
    ``as_row()``, and widened to a ``Cell`` reference with ``to_reference()``.

    Example:
        ```python
        addr = Address.from_str("B$3")
        assert addr.as_column() == Column.new(1)
        assert addr.as_row() == Row(absolute=True, y=2)
        ```
    """

    column: Column
    row: Row

    @classmethod
    def new(cls, x: int, y: int) -> Address:
        """Create a relative address from zero-based column and row indices."""
        return cls(column=Column.new(x), row=Row.new(y))

    @classmethod
    def from_tuple(cls, xy: tuple[int, int]) -> Address:
        x, y = xy
        return cls.new(x, y)

    @classmethod
    def from_str(cls, text: str) -> Address:
        """Parse a cell such as ``B7`` or ``$B$7``.

        Raises:
            InvalidCellError: If text is not column letters followed by a row number
            InvalidRowError: If the row number is zero
        """
        match = _ADDRESS_PATTERN.match(text)
        if match is None:
            raise InvalidCellError(text)
        column = Column(absolute=bool(match.group(1)), x=letters_to_index(match.group(2)))
        row = Row(absolute=bool(match.group(3)), y=number_to_index(match.group(4)))
        return cls(column=column, row=row)

    @property
    def x(self) -> int:
        return self.column.x

    @property
    def y(self) -> int:
        return self.row.y

    def as_column(self) -> Column:
        return self.column

    def as_row(self) -> Row:
        return self.row

    def shift_left(self, n: int) -> Address:
        return replace(self, column=self.column.shift_left(n))

    def shift_right(self, n: int) -> Address:
        return replace(self, column=self.column.shift_right(n))

    def shift_up(self, n: int) -> Address:
        return replace(self, row=self.row.shift_up(n))

    def shift_down(self, n: int) -> Address:
        return replace(self, row=self.row.shift_down(n))

    def to_reference(self) -> Cell:
        """Widen this address to a single cell reference."""
        from .reference import Cell

        return Cell(self)

    def to_a1(self, sheet_name: str | None = None) -> A1:
        return self.to_reference().to_a1(sheet_name)

    def __str__(self) -> str:
        return f"{self.column}{self.row}"


AddressLike = Union[Address, tuple[int, int]]
""" An ``Address`` or a zero-based ``(x, y)`` tuple """


def to_address(value: AddressLike) -> Address:
    """Coerce an ``Address`` or ``(x, y)`` tuple to an ``Address``."""
    if isinstance(value, Address):
        return value
    return Address.from_tuple(value)
