"""
Sheet normaliser — turns one worksheet grid into at most one ``TableBlock``.

Rules:
  1. Rows with zero cells are skipped; they are never represented as
     empty rows.  A grid with no cells at all produces no table.
  2. Every other row is kept, including rows of empty cells.
  3. The first row that is kept becomes a header row if it holds at
     least one string value.  Every later row is a body row.
     A skipped zero-cell row does not count as "the first row".

Header detection is a heuristic: spreadsheets usually label their columns
with text, while an all-numeric first row is more likely data.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from dto.blocks import TableBlock, TableRow
from dto.cell_value import Grid
from extractors.cell import build_table_cell, row_contains_text

logger = logging.getLogger(__name__)


def sheet_to_table(grid: Grid) -> Optional[TableBlock]:
    """
    Normalise *grid* into a ``TableBlock``.

    Returns ``None`` when no row has a cell, instead of an empty table.
    Never raises for well-typed input.
    """
    table_rows: List[TableRow] = []
    is_first_row = True

    for row in grid:
        if not row:
            continue

        cells = [build_table_cell(value) for value in row]

        if is_first_row and row_contains_text(row):
            kind = "header"
        else:
            kind = "body"
        is_first_row = False

        table_rows.append(TableRow(cells=cells, kind=kind))

    if not table_rows:
        return None

    logger.debug(
        "Normalised sheet grid: %d row(s), header=%s",
        len(table_rows),
        table_rows[0].kind == "header",
    )
    return TableBlock(rows=table_rows)
