"""
Tagged unions for admin API response shapes.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Union


@dataclass(frozen=True)
class Page:
    """One page of a paginated collection."""
    items: List[Any]
    next: Optional[str] = None


@dataclass(frozen=True)
class Scalar:
    """A non-enveloped response body, returned verbatim."""
    value: Any


PageEnvelope = Union[Page, Scalar]


def decode_page(body: Any) -> PageEnvelope:
    """Classify a decoded JSON body as a Page or a Scalar.

    A body is a page when it is an object with a non-null ``data`` member.
    An empty ``data`` list still counts; a null or empty ``next`` is treated
    as absent.
    """
    if not isinstance(body, dict) or body.get("data") is None:
        return Scalar(body)

    return Page(items=list(body["data"]), next=body.get("next") or None)


@dataclass(frozen=True)
class PluginNames:
    """``enabled_plugins`` reported as an array of names."""
    names: List[str]


@dataclass(frozen=True)
class PluginNameMap:
    """``enabled_plugins`` reported as an object keyed by name."""
    names: List[str]


PluginList = Union[PluginNames, PluginNameMap]


def decode_plugin_list(enabled_plugins: Any) -> PluginList:
    """Normalize the ``enabled_plugins`` member of ``/plugins/enabled``."""
    if isinstance(enabled_plugins, dict):
        return PluginNameMap(names=list(enabled_plugins.keys()))
    if isinstance(enabled_plugins, list):
        return PluginNames(names=list(enabled_plugins))
    raise TypeError(
        f"enabled_plugins must be a list or an object, got {type(enabled_plugins).__name__}"
    )
