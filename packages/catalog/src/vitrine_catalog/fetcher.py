"""HTTP fetch of third-party manifest documents."""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx

from vitrine_common import ExternalManifestError, get_logger, get_settings

logger = get_logger(__name__)


class ManifestFetcher:
    """Async HTTP client returning parsed manifest JSON.

    Transport errors, non-2xx responses and bodies that are not JSON are
    all raised as :class:`ExternalManifestError` with the original
    exception attached as ``cause``.

    Example:
        >>> async with ManifestFetcher() as fetcher:
        ...     raw = await fetcher.fetch("https://example.org/manifest.json")
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds. Defaults to ``Settings.fetch_timeout``
            client: Pre-built client, mainly for tests. Not closed by ``close()``
        """
        self.timeout = timeout if timeout is not None else get_settings().fetch_timeout
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ManifestFetcher":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def fetch(self, url: str) -> Any:
        """GET ``url`` and parse the body as JSON.

        Raises:
            ExternalManifestError: On a malformed URL or any transport, status or
                decode failure
        """
        client = self._get_client()
        try:
            response = await client.get(url, headers={"Accept": "application/json"})
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ExternalManifestError(url, e) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ExternalManifestError(url, e) from e
