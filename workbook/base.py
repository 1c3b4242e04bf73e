"""
Base class for decoded workbooks.

A ``Workbook`` exposes exactly what the normaliser needs:
  1. **sheet_names** — sheet names in the order stored in the file.
  2. **sheet_grid** — one sheet as a rectangular grid of raw cell values,
     trimmed to its used range.  Raises ``SheetReadError`` when the sheet
     cannot be read; callers decide whether that is fatal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from dto.cell_value import EmptyValue, Grid


class Workbook(ABC):
    """Interface that every format-specific workbook reader implements."""

    @abstractmethod
    def sheet_names(self) -> List[str]:
        ...

    @abstractmethod
    def sheet_grid(self, name: str) -> Grid:
        """Return the raw cell grid for *name* (``[]`` for a blank sheet)."""
        ...

    def close(self) -> None:
        """Release any resources held by the underlying reader."""

    def __enter__(self) -> "Workbook":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def trim_to_used_range(grid: Grid) -> Grid:
    """
    Crop *grid* to the bounding rectangle of its non-empty cells.

    Readers report whatever dimension the file declares, which often
    includes formatted-but-blank rows and columns.  A grid with no values
    at all becomes ``[]``.  Short rows are padded with ``Empty`` so the
    result is rectangular.
    """
    used_rows = [
        r for r, row in enumerate(grid)
        if any(not isinstance(cell, EmptyValue) for cell in row)
    ]
    if not used_rows:
        return []

    used_cols = [
        c
        for row in grid
        for c, cell in enumerate(row)
        if not isinstance(cell, EmptyValue)
    ]
    min_row, max_row = used_rows[0], used_rows[-1]
    min_col, max_col = min(used_cols), max(used_cols)
    width = max_col - min_col + 1

    trimmed: Grid = []
    for row in grid[min_row:max_row + 1]:
        cropped = list(row[min_col:max_col + 1])
        if len(cropped) < width:
            cropped.extend(EmptyValue() for _ in range(width - len(cropped)))
        trimmed.append(cropped)
    return trimmed
