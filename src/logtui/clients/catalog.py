"""Async HTTP client for the remote chain catalog.

This module provides:
- `CatalogClient`: fetches and validates the list of active chains.

Every failure (non-2xx status, transport error, undecodable body, payload
that is not a list of records) surfaces as `CatalogError`.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from logtui.core.constants import NETWORKS_API_URL
from logtui.core.errors import CatalogError
from logtui.core.models import ChainRecord

logger = logging.getLogger(__name__)

_CATALOG = TypeAdapter(list[ChainRecord])


class CatalogClient:
    """Minimal async catalog client.

    Parameters
    ----------
    url : str
        Catalog endpoint URL.
    timeout_s : int
        Per-operation timeout in seconds (connect/read/write).
    transport : httpx.AsyncBaseTransport | None
        Optional transport override (e.g. ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        url: str = NETWORKS_API_URL,
        *,
        timeout_s: int = 20,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout_s = timeout_s
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=self.timeout_s,
                read=self.timeout_s,
                write=self.timeout_s,
                pool=self.timeout_s,
            ),
            transport=self._transport,
            http2=True,
        )

    async def active_chains(self) -> list[ChainRecord]:
        """Return every chain listed by the catalog, all ecosystems included."""
        logger.debug("Fetching networks from %s", self.url)
        try:
            async with self._client() as client:
                r = await client.get(self.url)
                r.raise_for_status()
                payload = r.json()
        except httpx.HTTPStatusError as e:
            raise CatalogError(f"API responded with status: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise CatalogError(f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise CatalogError(f"Catalog returned invalid JSON: {e}") from e

        try:
            return _CATALOG.validate_python(payload)
        except ValidationError as e:
            raise CatalogError(f"Unexpected catalog payload: {e.error_count()} validation error(s)") from e
