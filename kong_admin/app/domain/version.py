"""
Kong server version parsing.
"""

import re
from typing import Any, NamedTuple

from shared.errors import VersionParseError


_VERSION_RE = re.compile(r"^\s*v?(\d+)(?:\.(\d+))?(?:\.(\d+))?")


class KongVersion(NamedTuple):
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(version: Any) -> KongVersion:
    """Parse a server version string, dropping any release suffix.

    ``"0.11.0rc1"`` and ``"2.8.1.0-enterprise-edition"`` both parse to their
    leading ``major.minor.patch`` triple.
    """
    if not isinstance(version, str):
        raise VersionParseError(version)

    match = _VERSION_RE.match(version)
    if not match:
        raise VersionParseError(version)

    major, minor, patch = match.groups()
    return KongVersion(int(major), int(minor or 0), int(patch or 0))
