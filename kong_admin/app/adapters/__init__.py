"""
Adapters package for the admin API client.

Contains the two boundary collaborators of the client:

- AdminApiRouter: resource name + params to request target (URL)
- HttpTransport: one HTTP exchange over httpx

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .router import AdminApiRouter, Route
from .transport import HttpTransport

__all__ = [
    "AdminApiRouter",
    "Route",
    "HttpTransport",
]
