"""JSON file cache for the last successfully fetched network map.

Reads are defensive: a missing file, an I/O error, invalid JSON, or a JSON
value that is not an object of strings all count as a cache miss.
Writes are best-effort: failures are logged and reported in `SaveResult`,
never raised. The in-memory registry stays authoritative either way.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from logtui.core.constants import DEFAULT_CACHE_PATH, DEFAULT_NETWORKS
from logtui.core.models import NetworkMap, SaveResult

logger = logging.getLogger(__name__)

_NETWORK_MAP = TypeAdapter(dict[str, str])


class NetworkCache:
    """File-backed NetworkMap store.

    Args:
        path: Location of the JSON cache file.
    """

    def __init__(self, path: Path = DEFAULT_CACHE_PATH) -> None:
        self.path = Path(path)

    async def read(self) -> NetworkMap | None:
        """Return the cached map, or None if the file is absent or unusable."""
        return await asyncio.to_thread(self._read_file, self.path)

    async def load(self) -> NetworkMap:
        """Return the cached map, or a copy of the default networks on a miss."""
        cached = await self.read()
        if cached is None:
            return dict(DEFAULT_NETWORKS)
        return cached

    async def save(self, networks: NetworkMap) -> SaveResult:
        """Overwrite the cache file with `networks` (pretty-printed JSON)."""
        return await asyncio.to_thread(self._write_file, self.path, dict(networks))

    @staticmethod
    def _read_file(path: Path) -> NetworkMap | None:
        try:
            networks = _NETWORK_MAP.validate_json(path.read_bytes(), strict=True)
        except FileNotFoundError:
            logger.debug("No networks cache at %s", path)
            return None
        except (OSError, ValidationError) as e:
            logger.warning("Failed to load networks from cache: %s", e)
            return None
        logger.debug("Loaded %d networks from cache", len(networks))
        return networks

    @staticmethod
    def _write_file(path: Path, networks: NetworkMap) -> SaveResult:
        try:
            data = json.dumps(networks, indent=2)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(data, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Failed to save networks to cache: %s", e)
            return SaveResult(ok=False, path=path, error=f"{type(e).__name__}: {e}")
        logger.debug("Saved %d networks to cache", len(networks))
        return SaveResult(ok=True, path=path)
