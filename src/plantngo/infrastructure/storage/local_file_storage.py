"""Filesystem-backed FileStorage.

Uploads are written under a directory with a random prefix so two
files with the same name never collide; the returned URL is a
``file://`` URI.
"""

from __future__ import annotations

import uuid
from pathlib import Path

import structlog

from plantngo.domain.repository.file_storage import FileStorage

logger = structlog.get_logger(__name__)


class LocalFileStorage(FileStorage):

    def __init__(self, root: Path) -> None:
        self._root = root

    def upload_file(self, data: bytes, filename: str, content_type: str) -> str:
        self._root.mkdir(parents=True, exist_ok=True)
        safe_name = Path(filename).name or "upload"
        target = self._root / f"{uuid.uuid4().hex}-{safe_name}"
        target.write_bytes(data)
        logger.debug(
            "file_uploaded",
            path=str(target),
            size=len(data),
            content_type=content_type,
        )
        return target.resolve().as_uri()
