"""
HTTP transport for the admin API client.
"""

from typing import Any, Dict, Optional

import httpx

from shared.logging import get_logger


class HttpTransport:
    """Issues single HTTP requests against the admin API.

    Transport failures (``httpx.TransportError``) and status codes are passed
    back untouched; interpreting them is the caller's job.
    """

    def __init__(self, timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self.logger = get_logger("kong_admin.transport")
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def get(self, target: str, page_size: Optional[int] = None) -> httpx.Response:
        """GET a request target, passing the page size hint as ``size``."""
        params = {"size": page_size} if page_size is not None else None
        response = await self._get_client().get(target, params=params)
        self.logger.debug(
            "Admin API GET",
            target=target,
            page_size=page_size,
            status_code=response.status_code
        )
        return response

    async def request(
        self,
        target: str,
        method: str,
        headers: Optional[Dict[str, str]] = None,
        content: Optional[Any] = None
    ) -> httpx.Response:
        """Issue an arbitrary request, used by the mutation path."""
        response = await self._get_client().request(method, target, headers=headers, content=content)
        self.logger.debug(
            "Admin API request",
            target=target,
            method=method,
            status_code=response.status_code
        )
        return response

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
