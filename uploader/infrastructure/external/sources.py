"""Upload sources: adapt transport-specific file objects to IUploadSource.

Each source can be copied exactly once; a second copy_to raises
RuntimeError instead of silently producing an empty payload.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from uploader.application.interfaces.sources import IByteSink
from uploader.core.constants import DEFAULT_CONTENT_TYPE

if TYPE_CHECKING:
    from fastapi import UploadFile

CHUNK_SIZE = 64 * 1024  # 64KB


class _CopyOnce:
    file_name: str
    _consumed: bool = False

    def _claim(self) -> None:
        if self._consumed:
            raise RuntimeError(f"Upload source already consumed: {self.file_name}")
        self._consumed = True


class InMemoryUploadSource(_CopyOnce):
    """Upload source over a bytes payload (scripts, tests, non-HTTP callers)."""

    def __init__(
        self,
        content: bytes,
        file_name: str,
        content_type: str = DEFAULT_CONTENT_TYPE,
        length: int | None = None,
    ) -> None:
        self._content = content
        self.file_name = file_name
        self.content_type = content_type
        self.length = len(content) if length is None else length

    async def copy_to(self, sink: IByteSink) -> int:
        self._claim()
        view = memoryview(self._content)
        for offset in range(0, len(view), CHUNK_SIZE):
            await sink.write(bytes(view[offset : offset + CHUNK_SIZE]))
        return len(self._content)


class UploadFileSource(_CopyOnce):
    """Upload source over a FastAPI/Starlette UploadFile."""

    def __init__(self, upload: "UploadFile") -> None:
        self._upload = upload
        self.file_name = upload.filename or ""
        self.content_type = upload.content_type or DEFAULT_CONTENT_TYPE
        self.length = upload.size if upload.size is not None else self._measure(upload)

    @staticmethod
    def _measure(upload: "UploadFile") -> int:
        """Size of the spooled file when the framework did not report it."""
        f = upload.file
        position = f.tell()
        f.seek(0, os.SEEK_END)
        size = f.tell()
        f.seek(position)
        return size

    async def copy_to(self, sink: IByteSink) -> int:
        self._claim()
        await self._upload.seek(0)
        total = 0
        while chunk := await self._upload.read(CHUNK_SIZE):
            await sink.write(chunk)
            total += len(chunk)
        return total
