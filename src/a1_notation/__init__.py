"""Parse, format and manipulate spreadsheet A1 notation.

A1 notation uses letters for columns and a one-based number for rows, so the
top left cell at zero-based ``(0, 0)`` is ``"A1"`` and ``(1, 1)`` is ``"B2"``.

| Reference        | Meaning                   |
|:-----------------|:--------------------------|
| ``A1``           | Cell A1                   |
| ``A1:B5``        | Cells A1 through B5       |
| ``C5:D9,G9:H16`` | A multiple-area selection |
| ``A:A``          | Column A                  |
| ``1:1``          | Row 1                     |
| ``A:C``          | Columns A through C       |
| ``1:5``          | Rows 1 through 5          |
"""

from __future__ import annotations

from loguru import logger

from .a1 import A1, contains, iterate, shift_down, shift_left, shift_right, shift_up
from .address import Address
from .builders import cell, cell_range, column, column_range, new, row, row_range
from .column import Column
from .exceptions import (
    A1NotationError,
    InvalidA1Error,
    InvalidCellError,
    InvalidColumnError,
    InvalidRowError,
    InvalidSheetNameError,
)
from .notation import format_a1, parse
from .reference import Cell, ColumnRange, NonContiguous, Range, RangeOrCell, RowRange
from .row import Row
from .version import __version__

range = cell_range  # noqa: A001

logger.disable("a1_notation")

__all__ = [
    "A1",
    "A1NotationError",
    "Address",
    "Cell",
    "Column",
    "ColumnRange",
    "InvalidA1Error",
    "InvalidCellError",
    "InvalidColumnError",
    "InvalidRowError",
    "InvalidSheetNameError",
    "NonContiguous",
    "Range",
    "RangeOrCell",
    "Row",
    "RowRange",
    "__version__",
    "cell",
    "cell_range",
    "column",
    "column_range",
    "contains",
    "format_a1",
    "iterate",
    "new",
    "parse",
    "range",
    "row",
    "row_range",
    "shift_down",
    "shift_left",
    "shift_right",
    "shift_up",
]
