import asyncio
from pathlib import Path
from typing import Protocol

from fastapi import UploadFile

FORMAT_TO_MEDIA_TYPE = {
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
}

GENERIC_MEDIA_TYPES = {"application/octet-stream", "binary/octet-stream"}


class FileSource(Protocol):
    """A file that can be read once, with a name and an optional MIME type."""

    name: str
    mime_type: str | None

    async def read(self) -> bytes | str | None: ...


def _detect_image_format(image_bytes: bytes) -> str | None:
    if image_bytes[:8] == b"\x89PNG\r\n\x1a\n":
        return "png"
    if image_bytes[:2] == b"\xff\xd8":
        return "jpeg"
    if image_bytes[:6] in (b"GIF87a", b"GIF89a"):
        return "gif"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "webp"
    return None


def sniff_mime_type(image_bytes: bytes) -> str | None:
    fmt = _detect_image_format(image_bytes)
    return FORMAT_TO_MEDIA_TYPE.get(fmt) if fmt else None


class BytesFileSource:
    def __init__(self, name: str, content: bytes | str | None, mime_type: str | None = None) -> None:
        self.name = name
        self.mime_type = mime_type
        self._content = content

    async def read(self) -> bytes | str | None:
        return self._content


class PathFileSource:
    """Reads a local file off the event loop. The MIME type is sniffed from the leading bytes."""

    def __init__(self, path: str | Path, mime_type: str | None = None) -> None:
        self.path = Path(path)
        self.name = self.path.name
        self.mime_type = mime_type

    async def read(self) -> bytes:
        data = await asyncio.to_thread(self.path.read_bytes)
        if not self.mime_type:
            self.mime_type = sniff_mime_type(data)
        return data


class UploadFileSource:
    """Wraps an uploaded file. Missing or generic content types are sniffed after the read."""

    def __init__(self, upload: UploadFile) -> None:
        self._upload = upload
        self.name = upload.filename or "upload"
        self.mime_type = upload.content_type

    async def read(self) -> bytes:
        data = await self._upload.read()
        if not self.mime_type or self.mime_type in GENERIC_MEDIA_TYPES:
            self.mime_type = sniff_mime_type(data)
        return data
