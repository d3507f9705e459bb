"""Network resolution with cache and default fallbacks.

This package provides:
- NetworkRegistry: process-owned network map with resolve/refresh
- resolve_network_map: the layered resolution policy
- create_registry: wiring for CLI / script usage
"""

from logtui.registry.networks import (
    NetworkRegistry,
    create_registry,
    is_richer_than_defaults,
    networks_from_catalog,
    resolve_network_map,
)

__all__ = [
    "NetworkRegistry",
    "create_registry",
    "is_richer_than_defaults",
    "networks_from_catalog",
    "resolve_network_map",
]
