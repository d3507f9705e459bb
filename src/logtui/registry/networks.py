"""Network registry: name → HyperSync endpoint, with layered fallback.

This module provides two layers:

1) `resolve_network_map(...)`:
   - Pure resolution policy over the injected catalog and cache.
   - Returns a `Resolution` tagged with the tier that produced it
     ("cache", "remote" or "default").
   - Never raises for infrastructure failures.

2) `NetworkRegistry`:
   - Owns the current NetworkMap for the lifetime of the process.
   - Lifecycle: construct with defaults → seed from cache → refresh.
   - `create_registry(config)` wires the concrete CatalogClient and
     NetworkCache and runs the startup seed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from logtui.clients.catalog import CatalogClient
from logtui.core.config import RegistryConfig
from logtui.core.constants import DEFAULT_NETWORKS, MAX_LISTED_NETWORKS
from logtui.core.errors import NotFoundError
from logtui.core.interfaces import INetworkCache, INetworkCatalog
from logtui.core.models import ChainRecord, NetworkMap, Resolution
from logtui.storage.cache import NetworkCache

logger = logging.getLogger(__name__)


def networks_from_catalog(chains: Iterable[ChainRecord], config: RegistryConfig) -> NetworkMap:
    """Keep chains of the configured ecosystem and derive their endpoint URLs."""
    return {c.name: config.endpoint_for(c.name) for c in chains if c.ecosystem == config.ecosystem}


def is_richer_than_defaults(networks: NetworkMap) -> bool:
    """Key-count heuristic for a cache worth trusting without a remote call."""
    return len(networks) > len(DEFAULT_NETWORKS)


async def _fallback(cache: INetworkCache) -> Resolution:
    cached = await cache.read()
    if cached:
        return Resolution(networks=cached, source="cache")
    return Resolution(networks=dict(DEFAULT_NETWORKS), source="default")


async def resolve_network_map(
    *,
    catalog: INetworkCatalog,
    cache: INetworkCache,
    config: RegistryConfig,
    force_refresh: bool = False,
) -> Resolution:
    """Resolve the current network map.

    Order of preference:
    1. Unless forced, a cache with more entries than the defaults.
    2. The remote catalog (persisted to the cache on success).
    3. Whatever the cache holds, regardless of size.
    4. The compiled-in defaults.
    """
    if not force_refresh:
        cached = await cache.load()
        if is_richer_than_defaults(cached):
            return Resolution(networks=cached, source="cache")

    try:
        chains = await catalog.active_chains()
    except Exception as e:
        logger.warning("Failed to fetch networks: %s", e)
        logger.warning("Using previously cached or default networks instead.")
        return await _fallback(cache)

    networks = networks_from_catalog(chains, config)
    saved = await cache.save(networks)
    if not saved.ok:
        logger.debug("Continuing with unsaved networks (%s)", saved.error)
    return Resolution(networks=networks, source="remote")


class NetworkRegistry:
    """Holds the process's NetworkMap and refreshes it on request.

    Parameters
    ----------
    catalog : INetworkCatalog
        Source of the live chain list.
    cache : INetworkCache
        Durable store for the last fetched map.
    config : RegistryConfig
        Ecosystem filter and URL template used for catalog entries.
    """

    def __init__(
        self,
        *,
        catalog: INetworkCatalog,
        cache: INetworkCache,
        config: RegistryConfig | None = None,
    ) -> None:
        self.catalog = catalog
        self.cache = cache
        self.config = config or RegistryConfig()
        self._networks: NetworkMap = dict(DEFAULT_NETWORKS)

    @property
    def networks(self) -> NetworkMap:
        """Copy of the currently loaded map."""
        return dict(self._networks)

    def names(self) -> list[str]:
        return sorted(self._networks)

    def has_network(self, name: str) -> bool:
        return name in self._networks

    def resolve(self, name: str) -> str:
        """Return the endpoint URL for `name`, or raise NotFoundError."""
        try:
            return self._networks[name]
        except KeyError:
            listed = ", ".join(list(self._networks)[:MAX_LISTED_NETWORKS])
            raise NotFoundError(
                f"Network '{name}' not supported. Available networks: {listed}... "
                "(Use 'logtui list-networks' to see all)"
            ) from None

    async def seed_from_cache(self) -> bool:
        """Adopt a non-empty cached map; keep the defaults on any failure."""
        try:
            cached = await self.cache.load()
        except Exception as e:
            logger.warning("Failed to load networks from cache: %s", e)
            return False
        if not cached:
            return False
        self._networks = dict(cached)
        return True

    async def refresh(self, force_refresh: bool = False) -> Resolution:
        """Re-resolve the map through the fallback chain and adopt the result."""
        resolution = await resolve_network_map(
            catalog=self.catalog,
            cache=self.cache,
            config=self.config,
            force_refresh=force_refresh,
        )
        self._networks = dict(resolution.networks)
        logger.debug("Adopted %d networks from %s", len(resolution), resolution.source)
        return resolution

    async def force_refresh(self) -> Resolution:
        return await self.refresh(force_refresh=True)


async def create_registry(config: RegistryConfig | None = None) -> NetworkRegistry:
    """Wire the HTTP catalog and file cache, then seed from the cache."""
    config = config or RegistryConfig()
    registry = NetworkRegistry(
        catalog=CatalogClient(config.catalog_url, timeout_s=config.timeout_s),
        cache=NetworkCache(config.cache_path),
        config=config,
    )
    await registry.seed_from_cache()
    return registry
