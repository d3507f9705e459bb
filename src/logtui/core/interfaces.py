from __future__ import annotations

from typing import Protocol, runtime_checkable

from logtui.core.models import ChainRecord, NetworkMap, SaveResult


# ---------------------------------------------------------------------------
# INetworkCatalog
# ---------------------------------------------------------------------------

@runtime_checkable
class INetworkCatalog(Protocol):
    """
    Abstract source of the live chain list.

    Domain expectations:
    - It returns ChainRecord objects for every chain the service knows,
      regardless of ecosystem. Filtering is the registry's job.
    - It raises CatalogError for any failure (status, transport, payload).
    """

    async def active_chains(self) -> list[ChainRecord]:
        """
        Return the current catalog.

        Implementations:
        - HTTP client for the hyperquery catalog (`CatalogClient`)
        - In-memory list for testing
        """
        ...


# ---------------------------------------------------------------------------
# INetworkCache
# ---------------------------------------------------------------------------

@runtime_checkable
class INetworkCache(Protocol):
    """
    Durable store for the last successfully fetched NetworkMap.

    Domain expectations:
    - Reads and writes never raise; failures degrade to a miss or an
      unsuccessful SaveResult.
    """

    async def read(self) -> NetworkMap | None:
        """Return the cached map, or None when there is no usable cache."""
        ...

    async def load(self) -> NetworkMap:
        """Return the cached map, or the compiled-in defaults on a miss."""
        ...

    async def save(self, networks: NetworkMap) -> SaveResult:
        """Persist `networks`, overwriting any previous content."""
        ...
