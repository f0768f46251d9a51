"""
Text parsing utilities for grids and points.

Provides three formats:
1. Point literal: "x,y" with non-negative decimal integers
2. Char format: one cell per character, one row per line
3. Delimited format: one cell per delimiter-separated field, one row per line
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from grid_types import Point

__all__ = ["parse_point", "parse_char_rows", "parse_delimited_rows"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_point(text: str) -> Point:
    """
    Parse a point literal of the form "x,y".

    Both fields must be non-negative decimal integers and there must be
    exactly one comma.

    Raises:
        ValueError: If the literal is malformed
    """
    parts = text.split(",")
    if len(parts) < 2:
        raise ValueError(f"Invalid point '{text}': missing y value")
    if len(parts) > 2:
        raise ValueError(f"Invalid point '{text}': received extra coordinates")

    coords: list[int] = []
    for name, field in zip("xy", parts):
        # isdigit alone would accept non-ASCII digits
        if not (field.isascii() and field.isdigit()):
            raise ValueError(
                f"Invalid point '{text}': {name} value '{field}' is not a non-negative integer"
            )
        coords.append(int(field))

    return Point(coords[0], coords[1])


def _parse_cell(
    parse: Callable[[str], T], cell_str: str, kind: str, row_idx: int, col_idx: int, row_str: str
) -> T:
    try:
        return parse(cell_str)
    except Exception as e:
        error_msg = (
            f"Invalid {kind}: '{cell_str}'\n"
            f"  Row {row_idx}: \"{row_str}\"\n"
            f"  Position: column {col_idx}\n"
            f"  Parser error: {e}"
        )
        raise ValueError(error_msg) from e


def _split_rows(text: str) -> list[str]:
    """Split on newlines only; other line-break characters stay in the row as cells."""
    # CRLF endings and a single trailing newline do not produce cells or rows
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _validate_rows(rows: list[list[T]], row_strings: list[str]) -> None:
    """Reject jagged input: all rows must have the same number of cells."""
    if not rows:
        return

    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)


def parse_char_rows(text: str, parse: Callable[[str], T]) -> list[list[T]]:
    """
    Parse a grid where each character is one cell.

    Example:
        parse_char_rows("12\\n34", int) -> [[1, 2], [3, 4]]

    Args:
        text: One row per line
        parse: Parser applied to each single-character string

    Returns:
        Rows of parsed cells

    Raises:
        ValueError: If a character fails to parse or rows differ in length
    """
    row_strings = _split_rows(text)
    rows: list[list[T]] = []

    for row_idx, row_str in enumerate(row_strings):
        rows.append(
            [
                _parse_cell(parse, char, "character", row_idx, col_idx, row_str)
                for col_idx, char in enumerate(row_str)
            ]
        )

    _validate_rows(rows, row_strings)
    logger.debug("parse_char_rows: %d rows x %d columns", len(rows), len(rows[0]) if rows else 0)
    return rows


def parse_delimited_rows(text: str, delimiter: str, parse: Callable[[str], T]) -> list[list[T]]:
    """
    Parse a grid where each line is split into cells by `delimiter`.

    Example:
        parse_delimited_rows("1,20\\n3,4", ",", int) -> [[1, 20], [3, 4]]

    Raises:
        ValueError: If a field fails to parse or rows differ in length
    """
    row_strings = _split_rows(text)
    rows: list[list[T]] = []

    for row_idx, row_str in enumerate(row_strings):
        rows.append(
            [
                _parse_cell(parse, field, "field", row_idx, col_idx, row_str)
                for col_idx, field in enumerate(row_str.split(delimiter))
            ]
        )

    _validate_rows(rows, row_strings)
    logger.debug(
        "parse_delimited_rows: %d rows x %d columns (delimiter=%r)",
        len(rows),
        len(rows[0]) if rows else 0,
        delimiter,
    )
    return rows
