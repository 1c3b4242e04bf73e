"""
OOXML workbook reader (.xlsx / .xlsm / .xltx / .xltm) backed by openpyxl.

The workbook is loaded with ``data_only=True`` so formula cells yield the
value Excel cached on last save rather than the formula text.
"""

from __future__ import annotations

import io
import logging
from datetime import date, datetime, time, timedelta
from typing import Any, List

import openpyxl
from openpyxl.cell.cell import TYPE_ERROR
from openpyxl.worksheet.worksheet import Worksheet

from dto.cell_value import (
    EMPTY,
    BooleanValue,
    CellErrorType,
    CellValue,
    DateTimeTextValue,
    DateTimeValue,
    DurationTextValue,
    ErrorValue,
    FloatValue,
    Grid,
    IntegerValue,
    StringValue,
)
from errors import DecodeError, SheetReadError
from workbook.base import Workbook, trim_to_used_range

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Value conversion
# ---------------------------------------------------------------------------


def iso_duration(delta: timedelta) -> str:
    """Render a ``timedelta`` as an ISO 8601 duration, e.g. ``P1DT2H30M``."""
    sign = "-" if delta < timedelta(0) else ""
    delta = abs(delta)

    hours, rem = divmod(delta.seconds, 3600)
    minutes, seconds = divmod(rem, 60)

    date_part = f"{delta.days}D" if delta.days else ""
    time_part = ""
    if hours:
        time_part += f"{hours}H"
    if minutes:
        time_part += f"{minutes}M"
    if seconds or delta.microseconds:
        if delta.microseconds:
            frac = f"{delta.microseconds:06d}".rstrip("0")
            time_part += f"{seconds}.{frac}S"
        else:
            time_part += f"{seconds}S"

    if not date_part and not time_part:
        return "PT0S"
    return f"{sign}P{date_part}" + (f"T{time_part}" if time_part else "")


def convert_value(value: Any, data_type: str = "") -> CellValue:
    """Map an openpyxl cell value onto a raw ``CellValue``."""
    if value is None:
        return EMPTY
    # bool is a subclass of int; check it first.
    if isinstance(value, bool):
        return BooleanValue(value=value)
    if isinstance(value, int):
        return IntegerValue(value=value)
    if isinstance(value, float):
        return FloatValue(value=value)
    if isinstance(value, datetime):
        return DateTimeValue(value=value)
    if isinstance(value, (date, time)):
        return DateTimeTextValue(value=value.isoformat())
    if isinstance(value, timedelta):
        return DurationTextValue(value=iso_duration(value))
    if data_type == TYPE_ERROR and isinstance(value, str):
        error = CellErrorType.from_code(value)
        if error is not None:
            return ErrorValue(value=error)
    return StringValue(value=str(value))


# =====================================================================
# XlsxWorkbook
# =====================================================================


class XlsxWorkbook(Workbook):
    """
    Workbook reader for Office Open XML spreadsheets.

    Usage::

        with XlsxWorkbook(data) as wb:
            for name in wb.sheet_names():
                grid = wb.sheet_grid(name)
    """

    def __init__(self, data: bytes) -> None:
        try:
            self._wb = openpyxl.load_workbook(
                io.BytesIO(data),
                data_only=True,
                keep_links=False,
            )
        except Exception as exc:
            raise DecodeError(f"Not a valid OOXML workbook: {exc}") from exc
        logger.info("Loaded OOXML workbook with %d sheet(s)", len(self._wb.sheetnames))

    def sheet_names(self) -> List[str]:
        return list(self._wb.sheetnames)

    def sheet_grid(self, name: str) -> Grid:
        if name not in self._wb.sheetnames:
            raise SheetReadError(name, "no such sheet")

        ws = self._wb[name]
        if not isinstance(ws, Worksheet):
            # Chartsheets carry no cells.
            raise SheetReadError(name, f"{type(ws).__name__} has no cell grid")

        try:
            grid: Grid = [
                [convert_value(cell.value, cell.data_type) for cell in row]
                for row in ws.iter_rows()
            ]
        except (ValueError, KeyError) as exc:
            raise SheetReadError(name, str(exc)) from exc

        logger.debug("Read sheet '%s': %d raw row(s)", name, len(grid))
        return trim_to_used_range(grid)

    def close(self) -> None:
        self._wb.close()
