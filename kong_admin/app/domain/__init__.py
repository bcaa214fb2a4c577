"""
Domain types for the admin API client.

Response bodies are decoded into explicit tagged unions at the boundary so
the walker and the cache never branch on raw JSON shapes.
"""

from .envelopes import (
    Page,
    Scalar,
    PageEnvelope,
    PluginNames,
    PluginNameMap,
    PluginList,
    decode_page,
    decode_plugin_list,
)
from .version import KongVersion, parse_version

__all__ = [
    "Page",
    "Scalar",
    "PageEnvelope",
    "PluginNames",
    "PluginNameMap",
    "PluginList",
    "decode_page",
    "decode_plugin_list",
    "KongVersion",
    "parse_version",
]
