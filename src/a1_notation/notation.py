"""Module for reading and writing A1 notation.

Parsing turns text such as ``"'My Sheet'!$A$1:C3,E:E"`` into an ``A1`` value and
formatting turns it back into text. The two are inverses for every value the
parser produces.

Each comma separated area is made of one or two parts joined by ``:``. Every
part is classified on its own:

- letters (``A``, ``$AB``) are a column
- digits (``7``, ``$7``) are a row
- letters then digits (``B7``, ``$B$7``) are a cell

Both parts must be of the same kind. One column or row on its own spans the
whole column or row; one cell on its own is a single cell.
"""

from __future__ import annotations

import re
from typing import Union

from loguru import logger

from .a1 import A1
from .address import Address
from .column import Column
from .exceptions import (
    A1NotationError,
    InvalidA1Error,
    InvalidCellError,
    InvalidColumnError,
    InvalidRowError,
    InvalidSheetNameError,
)
from .reference import Cell, ColumnRange, NonContiguous, Range, RangeOrCell, RowRange
from .row import Row

_COLUMN_PART = re.compile(r"^\$?[A-Za-z]+\$?$")
_ROW_PART = re.compile(r"^\$?\d+\$?$")
_CELL_PART = re.compile(r"^\$?[A-Za-z]+\$?\d+$")
_LETTERS_ONLY = re.compile(r"^[$A-Za-z]+$")
_DIGITS_ONLY = re.compile(r"^[$0-9]*\d[$0-9]*$")
_ALNUM_ONLY = re.compile(r"^[$A-Za-z0-9]+$")
_SAFE_SHEET_NAME = re.compile(r"^[A-Za-z0-9_]+$")

Part = Union[Column, Row, Address]


def split_sheet_name(text: str) -> tuple[str | None, str]:
    """Split an optional ``Sheet!`` prefix from the reference body.

    The split happens on the last ``!``. A name wrapped in single quotes is
    unquoted, with ``''`` standing for one literal quote.

    Args:
        text: Full A1 notation

    Returns:
        Tuple of (sheet_name or None, reference body)

    Raises:
        InvalidSheetNameError: If the name is empty or its quotes are unbalanced
    """
    if "!" not in text:
        return None, text

    raw_name, _, body = text.rpartition("!")
    name = raw_name
    if raw_name.startswith("'") or raw_name.endswith("'"):
        if len(raw_name) < 2 or not (raw_name.startswith("'") and raw_name.endswith("'")):
            raise InvalidSheetNameError(raw_name)
        name = raw_name[1:-1].replace("''", "'")
    if not name.strip():
        raise InvalidSheetNameError(raw_name, f"Empty sheet name in {text!r}")
    return name, body


def _invalid_part(part: str, token: str) -> A1NotationError:
    """Pick the most specific error for a part that matches no shape."""
    if _LETTERS_ONLY.match(part) and any(char.isalpha() for char in part):
        return InvalidColumnError(part)
    if _DIGITS_ONLY.match(part):
        return InvalidRowError(part)
    if _ALNUM_ONLY.match(part) and any(char.isalpha() for char in part) and any(char.isdigit() for char in part):
        return InvalidCellError(part)
    return InvalidA1Error(token)


def _parse_part(part: str, token: str) -> Part:
    if _COLUMN_PART.match(part):
        return Column.from_str(part)
    if _ROW_PART.match(part):
        return Row.from_str(part)
    if _CELL_PART.match(part):
        return Address.from_str(part)
    raise _invalid_part(part, token)


def parse_area(token: str) -> RangeOrCell:
    """Parse one comma-free area such as ``A1``, ``A1:B2``, ``A:C`` or ``3:3``.

    Raises:
        A1NotationError: If token is not a valid area
    """
    parts = token.split(":")
    if len(parts) > 2 or not all(parts):
        raise InvalidA1Error(token)

    first = _parse_part(parts[0], token)
    last = _parse_part(parts[1], token) if len(parts) == 2 else None

    if last is None:
        if isinstance(first, Column):
            return ColumnRange(from_=first, to=first)
        if isinstance(first, Row):
            return RowRange(from_=first, to=first)
        return Cell(first)

    if isinstance(first, Column) and isinstance(last, Column):
        return ColumnRange(from_=first, to=last)
    if isinstance(first, Row) and isinstance(last, Row):
        return RowRange(from_=first, to=last)
    if isinstance(first, Address) and isinstance(last, Address):
        return Range(from_=first, to=last)
    raise InvalidA1Error(token, f"Mixed reference kinds in {token!r}")


def parse_reference(body: str) -> RangeOrCell:
    """Parse a reference body (no sheet name), which may hold several areas.

    Raises:
        A1NotationError: On the first area that fails to parse
    """
    tokens = [token.strip() for token in body.split(",")]
    areas = [parse_area(token) for token in tokens]
    if len(areas) == 1:
        return areas[0]
    return NonContiguous(areas)


def parse(text: str) -> A1:
    """Parse A1 notation into an ``A1`` value.

    Args:
        text: Notation such as ``"A1"``, ``"Foo!A:D"`` or ``"C5:D9,G9:H16"``

    Returns:
        The parsed ``A1``

    Raises:
        A1NotationError: If text is not valid A1 notation

    Example:
        >>> parse("Foo!A:D").sheet_name
        'Foo'
    """
    logger.debug(f"Parsing A1 notation: {text!r}")
    sheet_name, body = split_sheet_name(text.strip())
    try:
        reference = parse_reference(body)
    except A1NotationError as e:
        logger.debug(f"Rejected {text!r}: {e}")
        raise
    return A1(sheet_name=sheet_name, reference=reference)


def format_sheet_name(name: str) -> str:
    """Render a sheet name, quoting it unless it is only letters, digits and underscores."""
    if _SAFE_SHEET_NAME.match(name):
        return name
    escaped = name.replace("'", "''")
    return f"'{escaped}'"


def format_reference(reference: RangeOrCell) -> str:
    return str(reference)


def format_a1(a1: A1) -> str:
    """Render an ``A1`` value as canonical A1 notation."""
    body = format_reference(a1.reference)
    if a1.sheet_name is None:
        return body
    return f"{format_sheet_name(a1.sheet_name)}!{body}"
