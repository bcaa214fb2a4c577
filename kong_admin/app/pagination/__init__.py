"""
Pagination package: walks linked admin API pages into full collections.
"""

from .walker import PageWalker

__all__ = ["PageWalker"]
