from providers.base import DocumentProvider
from providers.excel import ExcelProvider
from providers.factory import get_provider, provider_for_filename

__all__ = [
    "DocumentProvider",
    "ExcelProvider",
    "get_provider",
    "provider_for_filename",
]
