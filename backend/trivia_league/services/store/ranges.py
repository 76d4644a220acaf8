"""A1-notation range addressing for the tabular store.

Supports the forms the app uses: ``Sheet``, ``Sheet!A:P``,
``Sheet!A2:I1000``, ``Sheet!A1`` and ``Sheet!A1:F1``. Rows and columns are
returned zero-based; an unbounded edge is ``None``.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

_ENDPOINT_RE = re.compile(r'^([A-Za-z]*)(\d*)$')


@dataclass(frozen=True)
class SheetRange:
    sheet: str
    start_row: int = 0
    end_row: Optional[int] = None
    start_col: int = 0
    end_col: Optional[int] = None
    # Written as one cell (Sheet!A1): values grow from there, no row bound
    anchor: bool = field(default=False, compare=False)

    def contains_row(self, row: int) -> bool:
        return row >= self.start_row and (self.end_row is None or row <= self.end_row)

    def column_slice(self) -> slice:
        stop = None if self.end_col is None else self.end_col + 1
        return slice(self.start_col, stop)


def column_index(letters: str) -> int:
    """'A' -> 0, 'Z' -> 25, 'AA' -> 26."""
    idx = 0
    for ch in letters.upper():
        idx = idx * 26 + (ord(ch) - ord('A') + 1)
    return idx - 1


def column_letters(index: int) -> str:
    letters = ''
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        letters = chr(ord('A') + rem) + letters
    return letters


def _parse_endpoint(text: str) -> Tuple[Optional[int], Optional[int]]:
    m = _ENDPOINT_RE.match(text.strip())
    if not m or not (m.group(1) or m.group(2)):
        raise ValueError(f'Invalid range endpoint: {text!r}')
    col = column_index(m.group(1)) if m.group(1) else None
    row = int(m.group(2)) - 1 if m.group(2) else None
    if row is not None and row < 0:
        raise ValueError(f'Row numbers start at 1: {text!r}')
    return row, col


def parse_range(a1: str) -> SheetRange:
    if not a1 or not a1.strip():
        raise ValueError('Range must not be empty')
    if '!' not in a1:
        return SheetRange(sheet=a1.strip().strip("'"))

    sheet, _, cells = a1.rpartition('!')
    sheet = sheet.strip().strip("'")
    if not sheet:
        raise ValueError(f'Range has no sheet name: {a1!r}')

    start_text, sep, end_text = cells.partition(':')
    start_row, start_col = _parse_endpoint(start_text)
    if sep:
        end_row, end_col = _parse_endpoint(end_text)
    else:
        # Single cell: read as that cell, written as an anchor
        end_row, end_col = start_row, start_col

    return SheetRange(
        sheet=sheet,
        start_row=start_row or 0,
        end_row=end_row,
        start_col=start_col or 0,
        end_col=end_col,
        anchor=not sep,
    )
