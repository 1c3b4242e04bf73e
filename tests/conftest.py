"""Shared test configuration and fixtures."""

import io
from datetime import datetime
from typing import Callable, Dict, List, NamedTuple

import openpyxl
import pytest
import xlwt
from xlrd.biffh import error_text_from_code


def build_xlsx(sheets: Dict[str, List[list]]) -> bytes:
    """Write *sheets* (name → rows of Python values) into in-memory xlsx bytes."""
    wb = openpyxl.Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        ws = wb.create_sheet(title=name)
        for row in rows:
            ws.append(row)
    buf = io.BytesIO()
    wb.save(buf)
    wb.close()
    return buf.getvalue()


class XlsError(NamedTuple):
    """An error cell for ``build_xls``, e.g. ``XlsError("#DIV/0!")``."""
    text: str


_ERROR_CODES = {text: code for code, text in error_text_from_code.items()}

DATE_STYLE = xlwt.easyxf(num_format_str="YYYY-MM-DD")


def build_xls(sheets: Dict[str, List[list]], dates_1904: bool = False) -> bytes:
    """Write *sheets* (name → rows of Python values) into in-memory xls bytes."""
    wb = xlwt.Workbook(encoding="utf-8")
    wb.dates_1904 = dates_1904
    for name, rows in sheets.items():
        ws = wb.add_sheet(name)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if value is None:
                    continue
                if isinstance(value, XlsError):
                    ws.row(r).set_cell_error(c, _ERROR_CODES[value.text])
                elif isinstance(value, datetime):
                    ws.write(r, c, value, DATE_STYLE)
                else:
                    ws.write(r, c, value)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture
def make_xlsx() -> Callable[[Dict[str, List[list]]], bytes]:
    return build_xlsx


@pytest.fixture
def make_xls() -> Callable[[Dict[str, List[list]]], bytes]:
    return build_xls


@pytest.fixture
def people_xlsx() -> bytes:
    return build_xlsx({"Sheet1": [["Name", "Age"], ["Alice", "30"]]})


@pytest.fixture
def people_xls() -> bytes:
    return build_xls({"Sheet1": [["Name", "Age"], ["Alice", 30]]})
