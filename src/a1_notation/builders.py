"""Helpers that build ``A1`` values from zero-based coordinates.

Example:
    ```python
    assert str(cell(2, 2)) == "C3"
    assert str(column(5)) == "F:F"
    assert str(row(5)) == "6:6"
    assert str(cell_range((0, 0), (4, 4))) == "A1:E5"
    ```
"""

from __future__ import annotations

from . import reference as ref
from .a1 import A1
from .address import Address, AddressLike, to_address
from .column import Column
from .notation import parse
from .row import Row


def new(text: str) -> A1:
    """Parse A1 notation into an ``A1``."""
    return parse(text)


def cell(x: int, y: int) -> A1:
    """A reference to the cell at zero-based column x and row y."""
    return A1(sheet_name=None, reference=ref.Cell(Address.new(x, y)))


def cell_range(from_: AddressLike, to: AddressLike) -> A1:
    """A rectangular range between two corner cells, given as ``Address`` or ``(x, y)``."""
    return A1(sheet_name=None, reference=ref.Range(from_=to_address(from_), to=to_address(to)))


def column(x: Column | int) -> A1:
    """An entire column."""
    return A1(sheet_name=None, reference=ref.column(x))


def column_range(xa: Column | int, xb: Column | int) -> A1:
    """Every column between xa and xb."""
    return A1(sheet_name=None, reference=ref.column_range(xa, xb))


def row(y: Row | int) -> A1:
    """An entire row."""
    return A1(sheet_name=None, reference=ref.row(y))


def row_range(ya: Row | int, yb: Row | int) -> A1:
    """Every row between ya and yb."""
    return A1(sheet_name=None, reference=ref.row_range(ya, yb))
