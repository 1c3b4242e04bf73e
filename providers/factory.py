from pathlib import Path

from providers.base import DocumentProvider
from providers.excel import ExcelProvider

# File extension → provider name.
_EXTENSIONS = {
    ".xlsx": "excel",
    ".xlsm": "excel",
    ".xltx": "excel",
    ".xltm": "excel",
    ".xls": "excel",
}


def get_provider(name: str) -> DocumentProvider:
    """Instantiate the DocumentProvider registered under *name*."""
    name = name.lower().strip()
    if name in ("excel", "xlsx", "xls"):
        return ExcelProvider()
    raise ValueError(f"Unknown document provider: {name!r}")


def provider_for_filename(filename: str) -> DocumentProvider:
    """
    Pick a provider from the file extension of *filename*.

    Supported extensions:
      - .xlsx / .xlsm / .xltx / .xltm / .xls  → ExcelProvider
    """
    suffix = Path(filename or "").suffix.lower()
    if suffix not in _EXTENSIONS:
        raise ValueError(f"No document provider for extension {suffix!r}")
    return get_provider(_EXTENSIONS[suffix])
