"""Abstract object storage for uploaded product images."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileStorage(ABC):

    @abstractmethod
    def upload_file(self, data: bytes, filename: str, content_type: str) -> str:
        """Store the bytes and return a URL they can be fetched from."""
