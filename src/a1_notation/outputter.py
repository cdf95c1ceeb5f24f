"""Module for handling command output in various formats.

- Text: one reference (or answer) per line (default)
- JSON: structured output for programmatic use
- CSV: tabular output for spreadsheet analysis

The output format is picked from the command line arguments.
"""

from __future__ import annotations

import argparse
import csv
import json
import sys
from collections.abc import Iterable, Iterator
from typing import Any

from .a1 import A1
from .reference import Cell, ColumnRange, NonContiguous, Range, RangeOrCell, RowRange


def reference_kind(reference: RangeOrCell) -> str:
    """Return a short name for the shape of a reference."""
    if isinstance(reference, Cell):
        return "cell"
    if isinstance(reference, Range):
        return "range"
    if isinstance(reference, ColumnRange):
        return "column" if reference.from_ == reference.to else "column_range"
    if isinstance(reference, RowRange):
        return "row" if reference.from_ == reference.to else "row_range"
    if isinstance(reference, NonContiguous):
        return "non_contiguous"
    error_msg = f"Unknown reference type: {type(reference).__name__}"
    raise TypeError(error_msg)


class ReferenceOutputter:
    """Outputs a sequence of ``A1`` references.

    Text and CSV output consume the references one at a time, so a lazy
    iterable (such as the cells of a whole sheet) is never held in memory.
    JSON output needs the complete list.

    Example:
        ```python
        outputter = ReferenceOutputter([parse("Foo!A:D")])
        outputter.output(args)  # Format determined by args
        ```
    """

    def __init__(self, references: Iterable[A1]) -> None:
        """Initialize ReferenceOutputter.

        Args:
            references: References to output, in order. Iterated once.
        """
        self.references = references

    def iter_dicts(self) -> Iterator[dict[str, Any]]:
        for a1 in self.references:
            yield {
                "reference": str(a1),
                "sheet_name": a1.sheet_name,
                "kind": reference_kind(a1.reference),
                "size": len(a1),
            }

    def to_dicts(self) -> list[dict[str, Any]]:
        return list(self.iter_dicts())

    def _output_json(self) -> None:
        """Output references in JSON format.

        Example output:
            {
              "references": [
                {
                  "reference": "Foo!A:D",
                  "sheet_name": "Foo",
                  "kind": "column_range",
                  "size": 4
                }
              ]
            }
        """
        print(json.dumps({"references": self.to_dicts()}, indent=2))

    def _output_text(self) -> None:
        for a1 in self.references:
            print(a1)

    def _output_csv(self) -> None:
        writer = csv.writer(sys.stdout)
        writer.writerow(["Reference", "Sheet", "Kind", "Size"])
        for item in self.iter_dicts():
            writer.writerow([item["reference"], item["sheet_name"] or "", item["kind"], item["size"]])

    def output(self, args: argparse.Namespace) -> None:
        """Output references in the format selected by args.

        Args:
            args: Command line arguments namespace containing format flags:
                 - args.json: Output in JSON format
                 - args.csv: Output in CSV format
                 - (default): Output in text format
        """
        if getattr(args, "json", False):
            self._output_json()
        elif getattr(args, "csv", False):
            self._output_csv()
        else:
            self._output_text()


class ContainsOutputter:
    """Outputs the answer of a containment test."""

    def __init__(self, outer: A1, inner: A1, result: bool) -> None:
        self.outer = outer
        self.inner = inner
        self.result = result

    def output(self, args: argparse.Namespace) -> None:
        """Output the answer in the format selected by args."""
        if getattr(args, "json", False):
            output: dict[str, Any] = {
                "outer": str(self.outer),
                "inner": str(self.inner),
                "contains": self.result,
            }
            print(json.dumps(output, indent=2))
        elif getattr(args, "csv", False):
            writer = csv.writer(sys.stdout)
            writer.writerow(["Outer", "Inner", "Contains"])
            writer.writerow([str(self.outer), str(self.inner), str(self.result).lower()])
        else:
            print(str(self.result).lower())
