"""Module for the top-level ``A1`` value: an optional sheet name plus a reference.

Example:
    ```python
    a1 = A1.from_str("Foo!A:D")
    assert a1.sheet_name == "Foo"
    assert a1.contains(A1.from_str("B7"))
    assert str(a1.shift_right(1)) == "Foo!B:E"
    ```
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from . import geometry
from .reference import RangeOrCell


@dataclass(frozen=True)
class A1:
    """A parsed A1 reference.

    Attributes:
        sheet_name: Sheet the reference points into, None when no ``Name!`` prefix was given
        reference: The cell, range, column range, row range or union being referenced
    """

    sheet_name: str | None
    reference: RangeOrCell

    @classmethod
    def from_str(cls, text: str) -> A1:
        """Parse A1 notation.

        Raises:
            A1NotationError: If text is not valid A1 notation
        """
        from .notation import parse

        return parse(text)

    def with_sheet_name(self, sheet_name: str | None) -> A1:
        return replace(self, sheet_name=sheet_name)

    def contains(self, other: A1) -> bool:
        """Return True when every cell of other lies inside this reference.

        Sheet names only matter when both sides carry one; two different names
        never contain each other.
        """
        if self.sheet_name is not None and other.sheet_name is not None and self.sheet_name != other.sheet_name:
            return False
        return geometry.contains(self.reference, other.reference)

    def __contains__(self, other: object) -> bool:
        return isinstance(other, A1) and self.contains(other)

    def shift_left(self, n: int) -> A1:
        return replace(self, reference=geometry.shift_left(self.reference, n))

    def shift_right(self, n: int) -> A1:
        return replace(self, reference=geometry.shift_right(self.reference, n))

    def shift_up(self, n: int) -> A1:
        return replace(self, reference=geometry.shift_up(self.reference, n))

    def shift_down(self, n: int) -> A1:
        return replace(self, reference=geometry.shift_down(self.reference, n))

    def iter(self) -> Iterator[A1]:
        """Yield each cell, column or row of this reference as its own ``A1``.

        The sheet name is carried over to every item.
        """
        for reference in geometry.iterate(self.reference):
            yield A1(sheet_name=self.sheet_name, reference=reference)

    def __iter__(self) -> Iterator[A1]:
        return self.iter()

    def __len__(self) -> int:
        return geometry.count(self.reference)

    def __str__(self) -> str:
        from .notation import format_a1

        return format_a1(self)


def contains(a1: A1, other: A1) -> bool:
    return a1.contains(other)


def shift_left(a1: A1, n: int) -> A1:
    return a1.shift_left(n)


def shift_right(a1: A1, n: int) -> A1:
    return a1.shift_right(n)


def shift_up(a1: A1, n: int) -> A1:
    return a1.shift_up(n)


def shift_down(a1: A1, n: int) -> A1:
    return a1.shift_down(n)


def iterate(a1: A1) -> Iterator[A1]:
    return a1.iter()
