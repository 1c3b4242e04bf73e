"""
Block DTOs for the format-agnostic document model.

Every provider (spreadsheet, word-processor, ...) lowers its source into
these models, so consumers never need to know the original file format.

    Block
      ├─ ParagraphBlock  — kind + inline runs
      └─ TableBlock      — rows
           └─ TableRow   — header / body, cells
                └─ TableCell — nested blocks + spans

All models are frozen once constructed.
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


ParagraphKind = Literal["normal", "heading"]
TableRowKind = Literal["header", "body"]


# -------------------------------------------------------------------
# Inlines
# -------------------------------------------------------------------

class TextInline(BaseModel):
    """A run of plain text."""
    model_config = ConfigDict(frozen=True)

    inline_type: Literal["text"] = "text"
    text: str


Inline = TextInline


# -------------------------------------------------------------------
# Concrete block types
# -------------------------------------------------------------------

class ParagraphBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    block_type: Literal["paragraph"] = "paragraph"
    kind: ParagraphKind = "normal"
    inlines: List[Inline] = []


class TableCell(BaseModel):
    """One grid cell. Spans are always 1x1 for spreadsheet sources."""
    model_config = ConfigDict(frozen=True)

    blocks: List[Block] = []
    colspan: int = Field(default=1, ge=1)
    rowspan: int = Field(default=1, ge=1)


class TableRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    cells: List[TableCell] = Field(min_length=1)
    kind: TableRowKind = "body"


class TableBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    block_type: Literal["table"] = "table"
    rows: List[TableRow] = Field(min_length=1)


# -------------------------------------------------------------------
# Discriminated union  (for serialisation / Pydantic parsing)
# -------------------------------------------------------------------

Block = Annotated[Union[ParagraphBlock, TableBlock], Field(discriminator="block_type")]

TableCell.model_rebuild()
TableRow.model_rebuild()
TableBlock.model_rebuild()
