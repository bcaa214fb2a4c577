"""
Caching package for the admin API client.
"""

from .single_flight import SingleFlight
from .cache_context import AdminApiCache

__all__ = ["SingleFlight", "AdminApiCache"]
