"""
Shared fixtures for admin API client tests.
"""

import asyncio
from typing import Any, Dict
from unittest.mock import AsyncMock

import httpx
import pytest

from kong_admin.app.adapters.router import AdminApiRouter
from kong_admin.app.caching.cache_context import AdminApiCache
from kong_admin.app.client import AdminApi
from kong_admin.app.pagination.walker import PageWalker


ADMIN_ROOT = "http://kong:8001"


class FakeTransport:
    """In-memory transport serving canned bodies per request target.

    A route value may be a JSON body (served with 200), a ``(status, body)``
    tuple, a ready ``httpx.Response`` or an exception instance to raise.
    """

    def __init__(self, routes: Dict[str, Any]):
        self.routes = routes
        self.get = AsyncMock(side_effect=self._get)
        self.request = AsyncMock(side_effect=self._request)
        self.aclose = AsyncMock()

    async def _get(self, target: str, page_size=None) -> httpx.Response:
        # Yield once so concurrent callers genuinely interleave
        await asyncio.sleep(0)
        entry = self.routes[target]
        if isinstance(entry, Exception):
            raise entry
        if isinstance(entry, httpx.Response):
            return entry
        status, body = entry if isinstance(entry, tuple) else (200, entry)
        return httpx.Response(status_code=status, json=body, request=httpx.Request("GET", target))

    async def _request(self, target: str, method: str, headers=None, content=None) -> httpx.Response:
        await asyncio.sleep(0)
        return httpx.Response(status_code=201, json={"id": "created"}, request=httpx.Request(method, target))

    def targets(self):
        return [call.args[0] for call in self.get.await_args_list]


@pytest.fixture
def router():
    return AdminApiRouter("kong:8001")


@pytest.fixture
def make_api(router):
    """Build an AdminApi over a FakeTransport serving ``routes``."""

    def _make(routes: Dict[str, Any], *, cache: bool = True, page_size=3, ignore_consumers=False):
        transport = FakeTransport(routes)
        api = AdminApi(
            router,
            PageWalker(transport),
            AdminApiCache(enable_request_cache=cache),
            page_size=page_size,
            ignore_consumers=ignore_consumers,
        )
        return api, transport

    return _make
