"""
Where the chunked dictionary files come from.

A source serves two kinds of JSON document: `index.json` and
`chunk-<N>.json`. The loader only talks to sources, so the dataset can
live on disk or behind any static file server.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import httpx

from wordbank.core.errors import FetchFailure, NotFound


logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.json"


def chunk_filename(n: int) -> str:
    return f"chunk-{n}.json"


@runtime_checkable
class ChunkSource(Protocol):
    async def fetch_index(self) -> list[dict]:
        ...

    async def fetch_chunk(self, n: int) -> list[dict]:
        ...


class DirectorySource:
    """Reads the dataset files from a local directory."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self, name: str):
        file_path = self.path / name
        if not file_path.exists():
            raise NotFound(f"{file_path} does not exist")
        try:
            with open(file_path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise FetchFailure(f"Failed to read {file_path}: {e}") from e

    async def fetch_index(self) -> list[dict]:
        return await asyncio.to_thread(self._read, INDEX_FILENAME)

    async def fetch_chunk(self, n: int) -> list[dict]:
        return await asyncio.to_thread(self._read, chunk_filename(n))

    def __repr__(self) -> str:
        return f"DirectorySource({str(self.path)!r})"


class HttpSource:
    """Fetches the dataset files from a static file server."""

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=30)

    async def _get(self, name: str):
        url = f"{self.base_url}/{name}"
        try:
            r = await self.client.get(url)
        except httpx.HTTPError as e:
            raise FetchFailure(f"GET {url} failed: {e}") from e
        if r.status_code == 404:
            raise NotFound(f"{url} not found")
        try:
            r.raise_for_status()
            return r.json()
        except (httpx.HTTPStatusError, ValueError) as e:
            raise FetchFailure(f"GET {url} failed: {e}") from e

    async def fetch_index(self) -> list[dict]:
        return await self._get(INDEX_FILENAME)

    async def fetch_chunk(self, n: int) -> list[dict]:
        return await self._get(chunk_filename(n))

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()

    def __repr__(self) -> str:
        return f"HttpSource({self.base_url!r})"


def source_from_location(location: str) -> ChunkSource:
    """Pick a source for a directory path or an http(s) base URL."""
    if location.startswith(("http://", "https://")):
        return HttpSource(location)
    return DirectorySource(location)
