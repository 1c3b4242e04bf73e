"""
Raw cell value DTOs — the typed values a workbook decoder hands to the
normaliser.

The set of variants is closed: every decoder maps its native cell types
onto exactly one of the models below, and ``CellValue`` is the
discriminated union over them (keyed by ``kind``).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr


class CellErrorType(str, Enum):
    """Spreadsheet error literals, keyed by the text Excel displays."""

    Div0 = "#DIV/0!"
    NA = "#N/A"
    Name = "#NAME?"
    Null = "#NULL!"
    Num = "#NUM!"
    Ref = "#REF!"
    Value = "#VALUE!"
    GettingData = "#GETTING_DATA"

    @classmethod
    def from_code(cls, code: str) -> Optional["CellErrorType"]:
        """Return the member for an error literal, or ``None`` if unknown."""
        try:
            return cls(code.strip().upper())
        except ValueError:
            return None


class _RawValue(BaseModel):
    model_config = ConfigDict(frozen=True)


class IntegerValue(_RawValue):
    kind: Literal["int"] = "int"
    value: StrictInt


class FloatValue(_RawValue):
    kind: Literal["float"] = "float"
    value: StrictFloat


class StringValue(_RawValue):
    kind: Literal["string"] = "string"
    value: StrictStr


class BooleanValue(_RawValue):
    kind: Literal["bool"] = "bool"
    value: StrictBool


class DateTimeValue(_RawValue):
    kind: Literal["datetime"] = "datetime"
    value: datetime


class DateTimeTextValue(_RawValue):
    """A date / time the decoder could only express as ISO 8601 text."""
    kind: Literal["datetime_text"] = "datetime_text"
    value: StrictStr


class DurationTextValue(_RawValue):
    """An ISO 8601 duration, e.g. ``PT1H30M``."""
    kind: Literal["duration_text"] = "duration_text"
    value: StrictStr


class ErrorValue(_RawValue):
    kind: Literal["error"] = "error"
    value: CellErrorType


class EmptyValue(_RawValue):
    kind: Literal["empty"] = "empty"


EMPTY = EmptyValue()


CellValue = Annotated[
    Union[
        IntegerValue,
        FloatValue,
        StringValue,
        BooleanValue,
        DateTimeValue,
        DateTimeTextValue,
        DurationTextValue,
        ErrorValue,
        EmptyValue,
    ],
    Field(discriminator="kind"),
]

# One sheet: rows of raw values, in row-major order.
Grid = List[List[CellValue]]
