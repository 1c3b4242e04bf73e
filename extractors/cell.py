"""
Cell helpers — lower raw cell values into the text that ends up in a
``TableCell``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Sequence

from dto.blocks import ParagraphBlock, TableCell, TextInline
from dto.cell_value import (
    BooleanValue,
    CellValue,
    DateTimeTextValue,
    DateTimeValue,
    DurationTextValue,
    EmptyValue,
    ErrorValue,
    FloatValue,
    IntegerValue,
    StringValue,
)


def format_float(number: float) -> str:
    """
    Render *number* in plain positional notation with the fewest digits
    that round-trip: ``30.0`` gives ``"30"`` and ``1e20`` gives
    ``"100000000000000000000"``.  No exponent is ever produced.
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    return format(Decimal(repr(number)).normalize(), "f")


def cell_to_text(value: CellValue) -> str:
    """Return the display text for a raw cell value.

    No number format from the source workbook is applied.
    """
    if isinstance(value, EmptyValue):
        return ""
    if isinstance(value, (StringValue, DateTimeTextValue, DurationTextValue)):
        return value.value
    if isinstance(value, BooleanValue):
        return "true" if value.value else "false"
    if isinstance(value, FloatValue):
        return format_float(value.value)
    if isinstance(value, (IntegerValue, DateTimeValue)):
        return str(value.value)
    if isinstance(value, ErrorValue):
        return f"Error: {value.value.name}"
    # Unreachable while CellValue stays a closed union.
    raise TypeError(f"Unsupported cell value: {value!r}")


def row_contains_text(row: Sequence[CellValue]) -> bool:
    """True if at least one cell in *row* holds a string value."""
    return any(isinstance(cell, StringValue) for cell in row)


def build_table_cell(value: CellValue) -> TableCell:
    """Wrap a raw value into a 1x1 cell holding a single normal paragraph."""
    paragraph = ParagraphBlock(
        kind="normal",
        inlines=[TextInline(text=cell_to_text(value))],
    )
    return TableCell(blocks=[paragraph], colspan=1, rowspan=1)
