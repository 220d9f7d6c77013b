"""Upload source protocols: the byte stream handed over by a transport adapter."""

from typing import Any, Protocol


class IByteSink(Protocol):
    """Destination for copied bytes (aiofiles handle, memory buffer, ...)."""

    async def write(self, data: bytes) -> Any:
        ...


class IUploadSource(Protocol):
    """One uploaded file.

    length is the declared byte size; copy_to streams the full contents into
    a sink and may be called only once.
    """

    @property
    def length(self) -> int:
        ...

    @property
    def file_name(self) -> str:
        ...

    @property
    def content_type(self) -> str:
        ...

    async def copy_to(self, sink: IByteSink) -> int:
        """Write all bytes to sink; return the number of bytes written."""
        ...
