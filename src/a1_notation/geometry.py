"""Geometric operations over references: containment, shifting and iteration.

All functions are pure. Containment and iteration work on indices only, so the
``$`` markers never change their outcome; shifting keeps the markers as they are.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Callable

from .address import Address
from .column import Column
from .reference import Area, Cell, ColumnRange, NonContiguous, Range, RangeOrCell, RowRange, column, row
from .row import Row


def contains(outer: RangeOrCell, inner: RangeOrCell) -> bool:
    """Return True when every cell of inner is also a cell of outer.

    A union inner is contained only if each of its areas is contained, while a
    union outer contains inner if any one of its areas does.

    Args:
        outer: The reference that may contain the other
        inner: The reference being tested

    Returns:
        True if inner lies entirely inside outer
    """
    if isinstance(inner, NonContiguous):
        return all(contains(outer, area) for area in inner.areas)
    if isinstance(outer, NonContiguous):
        return any(_area_contains(area, inner) for area in outer.areas)
    return _area_contains(outer, inner)


def _area_contains(outer: Area, inner: Area) -> bool:
    if isinstance(outer, Cell):
        # a single cell only holds a cell at the same coordinate
        return isinstance(inner, Cell) and (outer.address.x, outer.address.y) == (inner.address.x, inner.address.y)
    return outer.bounds().covers(inner.bounds())


def _shift(reference: RangeOrCell, on_column: Callable[[Column], Column], on_row: Callable[[Row], Row]) -> RangeOrCell:
    """Apply per-axis moves to every column and row inside reference."""

    def on_address(address: Address) -> Address:
        return Address(column=on_column(address.column), row=on_row(address.row))

    if isinstance(reference, Cell):
        return Cell(on_address(reference.address))
    if isinstance(reference, Range):
        return Range(from_=on_address(reference.from_), to=on_address(reference.to))
    if isinstance(reference, ColumnRange):
        return ColumnRange(from_=on_column(reference.from_), to=on_column(reference.to))
    if isinstance(reference, RowRange):
        return RowRange(from_=on_row(reference.from_), to=on_row(reference.to))
    return NonContiguous(_shift(area, on_column, on_row) for area in reference.areas)


def shift_left(reference: RangeOrCell, n: int) -> RangeOrCell:
    """Move reference n columns to the left, stopping at column A."""
    return _shift(reference, lambda c: c.shift_left(n), lambda r: r)


def shift_right(reference: RangeOrCell, n: int) -> RangeOrCell:
    """Move reference n columns to the right."""
    return _shift(reference, lambda c: c.shift_right(n), lambda r: r)


def shift_up(reference: RangeOrCell, n: int) -> RangeOrCell:
    """Move reference n rows up, stopping at row 1."""
    return _shift(reference, lambda c: c, lambda r: r.shift_up(n))


def shift_down(reference: RangeOrCell, n: int) -> RangeOrCell:
    """Move reference n rows down."""
    return _shift(reference, lambda c: c, lambda r: r.shift_down(n))


def iterate(reference: RangeOrCell) -> Iterator[RangeOrCell]:
    """Yield the single cells, columns or rows that make up reference.

    - ``Cell``: the cell itself
    - ``ColumnRange``: one ``X:X`` per column, left to right
    - ``RowRange``: one ``N:N`` per row, top to bottom
    - ``Range``: one ``Cell`` per coordinate, row by row and left to right within a row
    - ``NonContiguous``: each area in turn, without removing overlaps

    Example:
        >>> [str(r) for r in iterate(Range(Address.new(0, 0), Address.new(1, 1)))]
        ['A1', 'B1', 'A2', 'B2']
    """
    if isinstance(reference, NonContiguous):
        for area in reference.areas:
            yield from iterate(area)
        return
    if isinstance(reference, Cell):
        yield reference
        return

    if isinstance(reference, ColumnRange):
        left, right = sorted((reference.from_.x, reference.to.x))
        for x in range(left, right + 1):
            yield column(x)
    elif isinstance(reference, RowRange):
        top, bottom = sorted((reference.from_.y, reference.to.y))
        for y in range(top, bottom + 1):
            yield row(y)
    else:
        left, right = sorted((reference.from_.x, reference.to.x))
        top, bottom = sorted((reference.from_.y, reference.to.y))
        for y in range(top, bottom + 1):
            for x in range(left, right + 1):
                yield Cell(Address.new(x, y))


def count(reference: RangeOrCell) -> int:
    """Return how many items ``iterate(reference)`` yields without iterating."""
    if isinstance(reference, NonContiguous):
        return sum(count(area) for area in reference.areas)
    col_min, col_max, row_min, row_max = reference.bounds()
    columns = 1 if col_min is None or col_max is None else col_max - col_min + 1
    rows = 1 if row_min is None or row_max is None else row_max - row_min + 1
    return columns * rows
