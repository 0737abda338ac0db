"""
Shared plumbing for the read-only third-party APIs.
"""

import logging

import httpx

from wordbank.core.errors import FetchFailure, NotFound


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class ApiClient:
    """Thin wrapper around an httpx.AsyncClient that maps failures to our errors."""

    name = "api"

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=DEFAULT_TIMEOUT)

    async def get_json(self, url: str, params: dict | None = None):
        try:
            r = await self.client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning("%s request failed: %s", self.name, e)
            raise FetchFailure(f"{self.name} request failed: {e}") from e

        if r.status_code == 404:
            raise NotFound(f"{self.name}: {url} not found")

        try:
            r.raise_for_status()
            return r.json()
        except (httpx.HTTPStatusError, ValueError) as e:
            logger.warning("%s returned an error: %s", self.name, e)
            raise FetchFailure(f"{self.name} returned an error: {e}") from e

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()
