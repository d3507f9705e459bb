"""Storage components for the persistent network cache.

This package provides:
- NetworkCache: JSON file store with defensive reads and best-effort writes
"""

from logtui.storage.cache import NetworkCache

__all__ = [
    "NetworkCache",
]
