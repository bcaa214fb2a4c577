"""
Cache context for the admin API client.

Three tiers with different lifetimes:

- plugin schemas: filled once, never reset
- server version: filled once, never reset
- request results: keyed by request target, cleared wholesale on any mutation
"""

from typing import Any, Awaitable, Callable, Dict, Optional

from shared.logging import get_logger
from ..domain.version import KongVersion
from .single_flight import SingleFlight


class AdminApiCache:
    """Cache state shared by every operation of one client."""

    def __init__(self, enable_request_cache: bool = True):
        self.enable_request_cache = enable_request_cache
        self.logger = get_logger("kong_admin.cache")
        self.plugin_schemas: Optional[Dict[str, Any]] = None
        self.version: Optional[KongVersion] = None
        self.requests = SingleFlight("requests")

    async def read(self, target: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
        """Serve a read through the request cache when it is enabled.

        Successful results stay cached until the next mutation. A failed
        read is not cached: every caller waiting on it gets the error and
        the next read fetches again.
        """
        if not self.enable_request_cache:
            return await fetch()
        return await self.requests.run(target, fetch)

    def invalidate_requests(self) -> None:
        """Drop every cached read result."""
        self.logger.debug("Invalidating request cache", entries=len(self.requests))
        self.requests.clear()

    def store_plugin_schemas(self, schemas: Dict[str, Any]) -> Dict[str, Any]:
        # Concurrent first loads may race here; the last one wins
        self.plugin_schemas = schemas
        self.logger.debug("Plugin schemas cached", plugins=len(schemas))
        return schemas

    def store_version(self, version: KongVersion) -> KongVersion:
        self.version = version
        self.logger.debug("Server version cached", version=str(version))
        return version
