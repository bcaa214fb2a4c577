"""
Command line access to the Kong admin API.

Dumps the current admin API state as JSON, or prints the server version or
the enabled plugin schemas. Useful for inspecting a gateway from a developer
workstation or a CI job.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from shared.config import AdminApiConfig, get_config
from shared.errors import AdminApiException
from shared.logging import configure_logging
from .client import AdminApi, create_admin_api


async def dump(api: AdminApi) -> Dict[str, Any]:
    """Collect apis (with their plugins), global plugins, consumers and upstreams.

    Cached collections are shared with the client, so nested resources are
    attached to copies.
    """
    apis = [
        {**item, "plugins": await api.fetch_plugins(item["id"])}
        for item in await api.fetch_apis()
    ]
    consumers = [
        {**consumer, "acls": await api.fetch_consumer_acls(consumer["id"])}
        for consumer in await api.fetch_consumers()
    ]
    upstreams = [
        {**upstream, "targets": await api.fetch_targets(upstream["id"])}
        for upstream in await api.fetch_upstreams()
    ]

    return {
        "apis": apis,
        "plugins": await api.fetch_global_plugins(),
        "consumers": consumers,
        "upstreams": upstreams,
    }


async def run(command: str, config: AdminApiConfig) -> Any:
    """Execute one CLI command and return its JSON-serializable result."""
    async with create_admin_api(config) as api:
        if command == "dump":
            return await dump(api)
        if command == "version":
            return str(await api.fetch_kong_version())
        if command == "schemas":
            return await api.fetch_plugin_schemas()
    raise ValueError(f"Unknown command {command!r}")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="kong-admin", description="Read state from a Kong admin API.")
    parser.add_argument("command", choices=["dump", "version", "schemas"], help="What to fetch")
    parser.add_argument("--host", default=None, help="Admin API host[:port] (env KONG_ADMIN_HOST)")
    parser.add_argument("--https", action="store_true", default=None, help="Use https to reach the admin API")
    parser.add_argument("--ignore-consumers", action="store_true", default=None, help="Skip consumers when dumping")
    parser.add_argument("--no-cache", dest="cache", action="store_false", default=None, help="Disable the request cache")
    parser.add_argument("--page-size", type=int, default=None, help="Page size hint sent with list requests")
    parser.add_argument("--log-level", default=None, help="Log level (env KONG_ADMIN_LOG_LEVEL)")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write the JSON result")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    overrides = {
        key: value
        for key, value in (
            ("host", args.host),
            ("https", args.https),
            ("ignore_consumers", args.ignore_consumers),
            ("cache", args.cache),
            ("page_size", args.page_size),
            ("log_level", args.log_level),
        )
        if value is not None
    }

    try:
        config = get_config(**overrides)
        configure_logging("kong_admin", config.log_level)
        result = asyncio.run(run(args.command, config))
    except KeyboardInterrupt:
        return 130
    except AdminApiException as exc:
        print(f"[kong-admin] failed: {exc}", file=sys.stderr)
        print(exc.to_response().model_dump_json(), file=sys.stderr)
        return 1
    except (ValidationError, httpx.HTTPError, OSError, ValueError) as exc:
        print(f"[kong-admin] failed: {exc}", file=sys.stderr)
        return 1

    output = json.dumps(result, indent=2)
    print(output)

    if args.output:
        args.output.write_text(output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
