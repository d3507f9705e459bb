from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

# Remote catalog of active chains
NETWORKS_API_URL = "https://chains.hyperquery.xyz/active_chains"

EVM_ECOSYSTEM = "evm"
HYPERSYNC_URL_TEMPLATE = "http://{name}.hypersync.xyz"

# <site-packages>/logtui/.networks-cache.json
DEFAULT_CACHE_PATH = Path(__file__).resolve().parents[1] / ".networks-cache.json"

DEFAULT_NETWORKS: MappingProxyType[str, str] = MappingProxyType(
    {
        "eth": "http://eth.hypersync.xyz",
        "arbitrum": "http://arbitrum.hypersync.xyz",
        "optimism": "http://optimism.hypersync.xyz",
        "base": "http://base.hypersync.xyz",
        "polygon": "http://polygon.hypersync.xyz",
    }
)

# How many network names a "not supported" error lists before the hint
MAX_LISTED_NETWORKS = 10
