"""File handles: a name, a declared MIME type, and an awaitable read."""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable
from urllib.parse import unquote, urlsplit

import httpx

from .errors import ReadError

logger = logging.getLogger(__name__)

_DEFAULT_MAX_RETRIES = 3
_DEFAULT_TIMEOUT = 30.0
_DEFAULT_RETRY_DELAY = 1.0

_UNKNOWN_TYPE = "application/octet-stream"


@runtime_checkable
class FileHandle(Protocol):
    """Anything that can be selected and converted."""

    name: str
    mime_type: str

    async def read(self) -> bytes:
        """Return the full contents, raising :class:`ReadError` on failure."""
        ...


def guess_mime_type(name: str) -> str:
    """Guess a declared MIME type from a file name or URL path."""
    mime_type, _ = mimetypes.guess_type(name, strict=False)
    return mime_type or _UNKNOWN_TYPE


@dataclass
class MemoryFile:
    """A file whose contents are already in memory."""

    name: str
    data: bytes
    mime_type: str = "image/jpeg"

    async def read(self) -> bytes:
        return self.data


class LocalFile:
    """A file on the local filesystem.

    The MIME type is taken from the file extension unless given
    explicitly; the contents are not inspected.
    """

    def __init__(self, path: Path | str, mime_type: str | None = None) -> None:
        self.path = Path(path)
        self.name = self.path.name
        self.mime_type = mime_type or guess_mime_type(self.path.name)

    def __repr__(self) -> str:
        return f"LocalFile({str(self.path)!r}, mime_type={self.mime_type!r})"

    async def read(self) -> bytes:
        try:
            return await asyncio.to_thread(self.path.read_bytes)
        except OSError as exc:
            logger.error("File reading error: %s: %s", self.path, exc)
            raise ReadError(self.name, exc) from exc


class RemoteFile:
    """A file fetched over HTTP(S).

    Like a browser download, the declared MIME type comes from the URL
    path; the response ``Content-Type`` is not consulted.
    """

    def __init__(
        self,
        url: str,
        *,
        mime_type: str | None = None,
        client: httpx.AsyncClient | None = None,
        max_retries: int = _DEFAULT_MAX_RETRIES,
        timeout: float = _DEFAULT_TIMEOUT,
        retry_delay: float = _DEFAULT_RETRY_DELAY,
    ) -> None:
        path = unquote(urlsplit(url).path)
        self.url = url
        self.name = path.rsplit("/", 1)[-1] or url
        self.mime_type = mime_type or guess_mime_type(path)
        self._client = client
        self._max_retries = max(1, max_retries)
        self._timeout = timeout
        self._retry_delay = retry_delay

    def __repr__(self) -> str:
        return f"RemoteFile({self.url!r}, mime_type={self.mime_type!r})"

    async def _fetch(self, client: httpx.AsyncClient) -> bytes:
        for attempt in range(1, self._max_retries + 1):
            try:
                response = await client.get(self.url, timeout=self._timeout)
                response.raise_for_status()
                return response.content
            except httpx.HTTPError as exc:
                if attempt == self._max_retries:
                    logger.error("File reading error: %s: %s", self.url, exc)
                    raise ReadError(self.name, exc) from exc
                logger.debug(
                    "Retrying %s (attempt %d/%d): %s",
                    self.url, attempt, self._max_retries, exc,
                )
                await asyncio.sleep(self._retry_delay * attempt)

    async def read(self) -> bytes:
        if self._client is not None:
            return await self._fetch(self._client)
        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await self._fetch(client)


def open_handle(source: str | Path) -> FileHandle:
    """Build a handle for a local path or an ``http(s)://`` URL."""
    if isinstance(source, str) and source.lower().startswith(("http://", "https://")):
        return RemoteFile(source)
    return LocalFile(source)
