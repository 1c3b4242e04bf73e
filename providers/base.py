"""
Base class for document providers.

A provider turns the raw bytes of one source format into the shared
``Document`` model.  Providers are stateless: ``parse_buffer`` reads only
its argument and may be called concurrently.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from dto.document import Document


class DocumentProvider(ABC):
    """Interface that every format-specific provider must implement."""

    @abstractmethod
    def name(self) -> str:
        """Static identifier used for provider selection."""
        ...

    @abstractmethod
    def parse_buffer(self, data: bytes) -> Document:
        """
        Convert *data* into a ``Document``.

        Raises ``ConversionError`` (or a subclass) when the buffer cannot
        be converted at all.
        """
        ...
