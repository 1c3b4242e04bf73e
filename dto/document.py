"""
Top-level output DTO for a converted document.

    Document
      ├─ blocks:   List[Block]       (tables / paragraphs, in source order)
      ├─ metadata: DocumentMetadata  (all fields optional)
      ├─ notes:    List[Note]
      └─ comments: List[Comment]
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from dto.blocks import Block


class DocumentMetadata(BaseModel):
    """Descriptive properties; providers that do not extract them leave the defaults."""
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    author: Optional[str] = None
    created: Optional[datetime] = None
    modified: Optional[datetime] = None


class Note(BaseModel):
    """A footnote / endnote body."""
    model_config = ConfigDict(frozen=True)

    id: str
    blocks: List[Block] = []


class Comment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    author: Optional[str] = None
    text: str = ""


class Document(BaseModel):
    model_config = ConfigDict(frozen=True)

    blocks: List[Block] = []
    metadata: DocumentMetadata = DocumentMetadata()
    notes: List[Note] = []
    comments: List[Comment] = []
