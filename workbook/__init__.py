"""
Workbook decoding.

``open_workbook`` sniffs the leading bytes of a buffer and dispatches to
the matching reader:
  - ZIP container (``PK\\x03\\x04``)   → XlsxWorkbook  (openpyxl)
  - OLE2 compound file               → XlsWorkbook   (xlrd)
Anything else raises ``DecodeError``.
"""

from errors import DecodeError
from workbook.base import Workbook, trim_to_used_range
from workbook.xls import XlsWorkbook
from workbook.xlsx import XlsxWorkbook

ZIP_SIGNATURE = b"PK\x03\x04"
OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


def open_workbook(data: bytes) -> Workbook:
    """Detect the spreadsheet format of *data* and open it."""
    if data.startswith(ZIP_SIGNATURE):
        return XlsxWorkbook(data)
    if data.startswith(OLE2_SIGNATURE):
        return XlsWorkbook(data)
    raise DecodeError("Unrecognized spreadsheet format")


__all__ = [
    "Workbook",
    "XlsWorkbook",
    "XlsxWorkbook",
    "open_workbook",
    "trim_to_used_range",
]
