"""
ExcelProvider — spreadsheet workbooks to the shared document model.

Pipeline:
  1. Open the workbook (format sniffed from the bytes).  Failure here is
     fatal and surfaces as ``DecodeError``.
  2. For every sheet, in workbook order, read its grid.  A sheet that
     cannot be read is logged and skipped; the others still convert.
  3. Normalise each grid into at most one ``TableBlock``.
  4. Assemble the tables into a ``Document`` with default metadata and no
     notes / comments.
"""

from __future__ import annotations

import logging
from typing import List

from dto.blocks import Block
from dto.document import Document, DocumentMetadata
from errors import SheetReadError
from extractors.sheet import sheet_to_table
from providers.base import DocumentProvider
from workbook import Workbook, open_workbook

logger = logging.getLogger(__name__)


class ExcelProvider(DocumentProvider):
    """
    Converts .xlsx / .xlsm / .xls workbooks.

    Usage::

        document = ExcelProvider().parse_buffer(xlsx_bytes)
    """

    def name(self) -> str:
        return "excel"

    def parse_buffer(self, data: bytes) -> Document:
        with open_workbook(bytes(data)) as workbook:
            blocks = self._collect_tables(workbook)

        return Document(
            blocks=blocks,
            metadata=DocumentMetadata(),
            notes=[],
            comments=[],
        )

    def _collect_tables(self, workbook: Workbook) -> List[Block]:
        blocks: List[Block] = []
        sheet_names = workbook.sheet_names()
        logger.info("Workbook has %d sheet(s)", len(sheet_names))

        for sheet_name in sheet_names:
            try:
                grid = workbook.sheet_grid(sheet_name)
            except SheetReadError:
                logger.warning(
                    "Skipping sheet '%s' — could not be read", sheet_name,
                    exc_info=True,
                )
                continue

            table = sheet_to_table(grid)
            if table is None:
                logger.info("  -> sheet '%s' is empty, no table", sheet_name)
                continue

            blocks.append(table)
            logger.info(
                "  -> sheet '%s': table with %d row(s)", sheet_name, len(table.rows)
            )

        return blocks
