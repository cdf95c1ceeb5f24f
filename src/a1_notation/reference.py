"""Module for the shapes an A1 reference can take.

A reference is exactly one of:

- ``Cell``: one cell, e.g. ``B2``
- ``Range``: the rectangle between two corner cells, e.g. ``A1:C3``
- ``ColumnRange``: whole columns, e.g. ``A:C`` (a single column is ``A:A``)
- ``RowRange``: whole rows, e.g. ``1:5`` (a single row is ``6:6``)
- ``NonContiguous``: a comma separated union of the above, e.g. ``C5:D9,G9:H16``

Corners keep the order they were given in; only the geometry normalizes them
through ``bounds()``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, Optional, Union

from .address import Address
from .column import Column
from .row import Row

if TYPE_CHECKING:
    from .a1 import A1


class Bounds(NamedTuple):
    """Normalized inclusive bounds of a single area.

    ``None`` on an axis means the area spans every column (or every row).
    """

    col_min: Optional[int]
    col_max: Optional[int]
    row_min: Optional[int]
    row_max: Optional[int]

    def covers(self, other: Bounds) -> bool:
        """Return True when every cell inside other is also inside these bounds."""
        return _axis_covers(self.col_min, self.col_max, other.col_min, other.col_max) and _axis_covers(
            self.row_min, self.row_max, other.row_min, other.row_max
        )


def _axis_covers(outer_min: int | None, outer_max: int | None, inner_min: int | None, inner_max: int | None) -> bool:
    if outer_min is None or outer_max is None:
        return True
    if inner_min is None or inner_max is None:
        return False
    return outer_min <= inner_min and inner_max <= outer_max


class _Area:
    """Behaviour shared by every reference shape."""

    def to_a1(self, sheet_name: str | None = None) -> A1:
        """Wrap this reference in an ``A1`` with an optional sheet name."""
        from .a1 import A1

        return A1(sheet_name=sheet_name, reference=self)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Cell(_Area):
    """A reference to one cell."""

    address: Address

    def bounds(self) -> Bounds:
        return Bounds(self.address.x, self.address.x, self.address.y, self.address.y)

    def __str__(self) -> str:
        return str(self.address)


@dataclass(frozen=True)
class Range(_Area):
    """The rectangle spanned by two corner cells, in either order."""

    from_: Address
    to: Address

    def bounds(self) -> Bounds:
        xs = (self.from_.x, self.to.x)
        ys = (self.from_.y, self.to.y)
        return Bounds(min(xs), max(xs), min(ys), max(ys))

    def __str__(self) -> str:
        return f"{self.from_}:{self.to}"


@dataclass(frozen=True)
class ColumnRange(_Area):
    """Every row of the columns between two columns, in either order."""

    from_: Column
    to: Column

    def bounds(self) -> Bounds:
        xs = (self.from_.x, self.to.x)
        return Bounds(min(xs), max(xs), None, None)

    def __str__(self) -> str:
        return f"{self.from_}:{self.to}"


@dataclass(frozen=True)
class RowRange(_Area):
    """Every column of the rows between two rows, in either order."""

    from_: Row
    to: Row

    def bounds(self) -> Bounds:
        ys = (self.from_.y, self.to.y)
        return Bounds(None, None, min(ys), max(ys))

    def __str__(self) -> str:
        return f"{self.from_}:{self.to}"


Area = Union[Cell, Range, ColumnRange, RowRange]
""" A reference denoting a single contiguous area """


@dataclass(frozen=True)
class NonContiguous(_Area):
    """An ordered union of areas.

    Nested unions are flattened on construction so members are always single areas.

    Raises:
        ValueError: If fewer than two areas are given
    """

    areas: tuple[Area, ...]

    def __init__(self, areas: Iterable[RangeOrCell]) -> None:
        flattened: list[Area] = []
        for area in areas:
            if isinstance(area, NonContiguous):
                flattened.extend(area.areas)
            else:
                flattened.append(area)
        if len(flattened) < 2:
            error_msg = f"A non-contiguous reference needs at least two areas, got {len(flattened)}"
            raise ValueError(error_msg)
        object.__setattr__(self, "areas", tuple(flattened))

    def __str__(self) -> str:
        return ",".join(str(area) for area in self.areas)


RangeOrCell = Union[Cell, Range, ColumnRange, RowRange, NonContiguous]
""" Any reference shape """


def column(x: Column | int) -> ColumnRange:
    """A reference to one whole column."""
    col = x if isinstance(x, Column) else Column.new(x)
    return ColumnRange(from_=col, to=col)


def column_range(xa: Column | int, xb: Column | int) -> ColumnRange:
    return ColumnRange(
        from_=xa if isinstance(xa, Column) else Column.new(xa),
        to=xb if isinstance(xb, Column) else Column.new(xb),
    )


def row(y: Row | int) -> RowRange:
    """A reference to one whole row."""
    r = y if isinstance(y, Row) else Row.new(y)
    return RowRange(from_=r, to=r)


def row_range(ya: Row | int, yb: Row | int) -> RowRange:
    return RowRange(
        from_=ya if isinstance(ya, Row) else Row.new(ya),
        to=yb if isinstance(yb, Row) else Row.new(yb),
    )
