"""
Error taxonomy shared by every document provider.

    ConversionError
      ├─ DecodeError     — the input is not a readable workbook (fatal)
      └─ SheetReadError  — a single sheet could not be read (recovered)
"""


class ConversionError(RuntimeError):
    """Base class for failures surfaced by a document provider."""


class DecodeError(ConversionError):
    """Raised when a byte buffer is not a recognizable or valid workbook."""


class SheetReadError(ConversionError):
    """Raised when one sheet's grid cannot be materialized."""

    def __init__(self, sheet_name: str, reason: str = "") -> None:
        self.sheet_name = sheet_name
        message = f"Failed to read sheet '{sheet_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
