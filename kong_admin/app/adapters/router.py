"""
Resource router for the Kong admin API.
"""

import string
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote

from shared.errors import RouteError


ROUTES: Dict[str, str] = {
    "root": "",
    "apis": "/apis",
    "api": "/apis/{name}",
    "api-plugins": "/apis/{apiId}/plugins",
    "api-plugin": "/apis/{apiId}/plugins/{pluginId}",
    "consumers": "/consumers",
    "consumer": "/consumers/{consumerId}",
    "consumer-credentials": "/consumers/{consumerId}/{plugin}",
    "consumer-credential": "/consumers/{consumerId}/{plugin}/{credentialId}",
    "consumer-acls": "/consumers/{consumerId}/acls",
    "consumer-acl": "/consumers/{consumerId}/acls/{aclId}",
    "plugins": "/plugins",
    "plugin": "/plugins/{pluginId}",
    "plugins-enabled": "/plugins/enabled",
    "plugins-scheme": "/plugins/schema/{plugin}",
    "upstreams": "/upstreams",
    "upstream": "/upstreams/{name}",
    "upstream-targets": "/upstreams/{upstreamId}/targets",
    "upstream-targets-active": "/upstreams/{upstreamId}/targets/active",
    "upstream-target": "/upstreams/{upstreamId}/targets/{targetId}",
}


@dataclass(frozen=True)
class Route:
    """Logical resource descriptor handed to the router."""
    name: str
    params: Mapping[str, str] = field(default_factory=dict)


class AdminApiRouter:
    """Maps a Route to an absolute admin API URL."""

    def __init__(self, host: str, https: bool = False):
        self.host = host
        self.https = https
        scheme = "https" if https else "http"
        self.admin_api_root = f"{scheme}://{host.rstrip('/')}"

    def __call__(self, route: Union[Route, Mapping[str, Any]]) -> str:
        if not isinstance(route, Route):
            route = Route(route["name"], route.get("params") or {})

        template = ROUTES.get(route.name)
        if template is None:
            raise RouteError(f'Unknown route "{route.name}"', details={"name": route.name})

        params = route.params or {}
        values = {}
        for _, placeholder, _, _ in string.Formatter().parse(template):
            if placeholder is None:
                continue
            if params.get(placeholder) is None:
                raise RouteError(
                    f'Route "{route.name}" requires parameter "{placeholder}"',
                    details={"name": route.name, "param": placeholder}
                )
            values[placeholder] = quote(str(params[placeholder]), safe="")

        return self.admin_api_root + template.format(**values)

    def url(self, name: str, params: Optional[Mapping[str, str]] = None) -> str:
        """Shortcut for ``router(Route(name, params))``."""
        return self(Route(name, params or {}))
