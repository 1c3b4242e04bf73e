"""
Legacy BIFF workbook reader (.xls) backed by xlrd.
"""

from __future__ import annotations

import logging
import struct
from typing import List

import xlrd
from xlrd.sheet import Cell

from dto.cell_value import (
    EMPTY,
    BooleanValue,
    CellErrorType,
    CellValue,
    DateTimeTextValue,
    DateTimeValue,
    ErrorValue,
    FloatValue,
    Grid,
    StringValue,
)
from errors import DecodeError, SheetReadError
from workbook.base import Workbook, trim_to_used_range

logger = logging.getLogger(__name__)


def convert_cell(cell: Cell, datemode: int = 0) -> CellValue:
    """Map an xlrd cell onto a raw ``CellValue``."""
    ctype = cell.ctype

    if ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return EMPTY
    if ctype == xlrd.XL_CELL_TEXT:
        return StringValue(value=str(cell.value))
    if ctype == xlrd.XL_CELL_NUMBER:
        return FloatValue(value=float(cell.value))
    if ctype == xlrd.XL_CELL_BOOLEAN:
        return BooleanValue(value=bool(cell.value))
    if ctype == xlrd.XL_CELL_DATE:
        try:
            dt = xlrd.xldate.xldate_as_datetime(cell.value, datemode)
        except (xlrd.xldate.XLDateError, ValueError, OverflowError):
            logger.debug("Unconvertible date serial %r, keeping number", cell.value)
            return FloatValue(value=float(cell.value))
        if 0 <= cell.value < 1:
            # Serial values below one day are pure times of day.
            return DateTimeTextValue(value=dt.time().isoformat())
        return DateTimeValue(value=dt)
    if ctype == xlrd.XL_CELL_ERROR:
        text = xlrd.error_text_from_code.get(cell.value, f"#ERR{cell.value}")
        error = CellErrorType.from_code(text)
        if error is not None:
            return ErrorValue(value=error)
        return StringValue(value=text)

    return StringValue(value=str(cell.value))


class XlsWorkbook(Workbook):
    """Workbook reader for Excel 97-2003 binary files."""

    def __init__(self, data: bytes) -> None:
        try:
            self._book = xlrd.open_workbook(file_contents=data, on_demand=True)
        except Exception as exc:
            raise DecodeError(f"Not a valid XLS workbook: {exc}") from exc
        logger.info("Loaded XLS workbook with %d sheet(s)", self._book.nsheets)

    def sheet_names(self) -> List[str]:
        return list(self._book.sheet_names())

    def sheet_grid(self, name: str) -> Grid:
        try:
            sheet = self._book.sheet_by_name(name)
            grid: Grid = [
                [convert_cell(cell, self._book.datemode) for cell in sheet.row(r)]
                for r in range(sheet.nrows)
            ]
        except (xlrd.XLRDError, struct.error, ValueError, KeyError, IndexError) as exc:
            raise SheetReadError(name, str(exc)) from exc

        return trim_to_used_range(grid)

    def close(self) -> None:
        self._book.release_resources()
