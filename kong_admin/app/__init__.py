"""
Kong admin API client application package.
"""

from .client import AdminApi, create_admin_api

__all__ = ["AdminApi", "create_admin_api"]
