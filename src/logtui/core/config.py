from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from logtui.core.constants import (
    DEFAULT_CACHE_PATH,
    EVM_ECOSYSTEM,
    HYPERSYNC_URL_TEMPLATE,
    NETWORKS_API_URL,
)


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration for the network registry (catalog + cache file)."""

    catalog_url: str = NETWORKS_API_URL
    cache_path: Path = DEFAULT_CACHE_PATH
    timeout_s: int = 20
    ecosystem: str = EVM_ECOSYSTEM  # only catalog records of this ecosystem are kept
    url_template: str = HYPERSYNC_URL_TEMPLATE

    def endpoint_for(self, name: str) -> str:
        """Derive the HyperSync endpoint URL for a network name."""
        return self.url_template.format(name=name)
