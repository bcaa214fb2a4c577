"""
Resource API for the Kong admin API.

Each read operation is a route lookup followed by a (cached) page walk.
Writes go through ``request_endpoint``, which clears the request cache
before the call is issued.
"""

import asyncio
import json
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import httpx

from shared.config import AdminApiConfig
from shared.errors import ResponseShapeError
from shared.logging import get_logger
from .adapters.router import AdminApiRouter, Route
from .adapters.transport import HttpTransport
from .caching.cache_context import AdminApiCache
from .domain.envelopes import decode_plugin_list
from .domain.version import KongVersion, parse_version
from .pagination.walker import PageWalker


class AdminApi:
    """Named admin API operations over a shared cache context."""

    def __init__(
        self,
        router: AdminApiRouter,
        walker: PageWalker,
        cache: AdminApiCache,
        *,
        page_size: Optional[int] = None,
        ignore_consumers: bool = False,
    ):
        self.router = router
        self.walker = walker
        self.cache = cache
        self.page_size = page_size
        self.ignore_consumers = ignore_consumers
        self.logger = get_logger("kong_admin.api")

    async def __aenter__(self) -> "AdminApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.walker.transport.aclose()

    async def _get_paginated(self, name: str, params: Optional[Mapping[str, str]] = None) -> Any:
        target = self.router(Route(name, params or {}))
        return await self.cache.read(
            target,
            lambda: self.walker.resolve(target, self.page_size)
        )

    async def fetch_apis(self) -> List[Dict[str, Any]]:
        return await self._get_paginated("apis")

    async def fetch_global_plugins(self) -> List[Dict[str, Any]]:
        return await self._get_paginated("plugins")

    async def fetch_plugins(self, api_id: str) -> List[Dict[str, Any]]:
        return await self._get_paginated("api-plugins", {"apiId": api_id})

    async def fetch_consumers(self) -> List[Dict[str, Any]]:
        if self.ignore_consumers:
            return []
        return await self._get_paginated("consumers")

    async def fetch_consumer_credentials(self, consumer_id: str, plugin: str) -> List[Dict[str, Any]]:
        return await self._get_paginated(
            "consumer-credentials",
            {"consumerId": consumer_id, "plugin": plugin}
        )

    async def fetch_consumer_acls(self, consumer_id: str) -> List[Dict[str, Any]]:
        return await self._get_paginated("consumer-acls", {"consumerId": consumer_id})

    async def fetch_upstreams(self) -> List[Dict[str, Any]]:
        return await self._get_paginated("upstreams")

    async def fetch_targets(self, upstream_id: str) -> List[Dict[str, Any]]:
        return await self._get_paginated("upstream-targets-active", {"upstreamId": upstream_id})

    async def fetch_plugin_schemas(self) -> Dict[str, Any]:
        """Return ``{plugin name: schema fields}`` for every enabled plugin.

        The mapping is built once per client. Schemas are fetched
        concurrently and stored only when all of them succeeded.
        """
        if self.cache.plugin_schemas is not None:
            return self.cache.plugin_schemas

        enabled = await self._get_paginated("plugins-enabled")
        names = self._enabled_plugin_names(enabled)
        self.logger.info("Fetching plugin schemas", plugins=len(names))

        pairs = await asyncio.gather(*(self._fetch_plugin_schema(name) for name in names))
        return self.cache.store_plugin_schemas(dict(pairs))

    def _enabled_plugin_names(self, enabled: Any) -> List[str]:
        target = self.router(Route("plugins-enabled"))
        if not isinstance(enabled, dict) or "enabled_plugins" not in enabled:
            raise ResponseShapeError(target, "missing enabled_plugins")
        try:
            return decode_plugin_list(enabled["enabled_plugins"]).names
        except TypeError as exc:
            raise ResponseShapeError(target, str(exc)) from exc

    async def _fetch_plugin_schema(self, plugin: str) -> Tuple[str, Any]:
        schema = await self.walker.resolve(self.router(Route("plugins-scheme", {"plugin": plugin})), None)
        fields = schema.get("fields") if isinstance(schema, dict) else None
        return plugin, fields

    async def fetch_kong_version(self) -> KongVersion:
        """Return the parsed server version, fetched once per client."""
        if self.cache.version is not None:
            return self.cache.version

        info = await self._get_paginated("root")
        return self.cache.store_version(parse_version(info.get("version")))

    async def request_endpoint(
        self,
        endpoint: Union[Route, Mapping[str, Any]],
        method: str,
        body: Any = None
    ) -> httpx.Response:
        """Issue a mutating request and return the raw response.

        The request cache is cleared before the request goes out, so a
        failed mutation still invalidates earlier reads.
        """
        self.cache.invalidate_requests()
        target = self.router(endpoint)
        self.logger.info("Admin API mutation", method=method, target=target)
        return await self.walker.transport.request(target, **prepare_options(method, body))


def prepare_options(method: str, body: Any = None) -> Dict[str, Any]:
    """Build transport options for a mutating request."""
    headers = {"Accept": "application/json"}
    if body is None:
        return {"method": method, "headers": headers}

    headers["Content-Type"] = "application/json"
    return {"method": method, "headers": headers, "content": json.dumps(body)}


def create_admin_api(
    config: Optional[AdminApiConfig] = None,
    *,
    client: Optional[httpx.AsyncClient] = None
) -> AdminApi:
    """Wire router, transport, walker and cache from configuration."""
    config = config or AdminApiConfig()
    router = AdminApiRouter(config.host, config.https)
    transport = HttpTransport(timeout=config.timeout, client=client)
    return AdminApi(
        router,
        PageWalker(transport),
        AdminApiCache(enable_request_cache=config.cache),
        page_size=config.page_size,
        ignore_consumers=config.ignore_consumers,
    )
