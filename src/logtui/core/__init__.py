"""Core data models, configuration, errors and constants.

This package provides:
- Data models (ChainRecord, Resolution, SaveResult, EventPreset, PresetInfo)
- Configuration (RegistryConfig)
- Errors (NotFoundError, CatalogError)
- Compiled-in default networks
"""

from logtui.core.config import RegistryConfig
from logtui.core.constants import DEFAULT_NETWORKS
from logtui.core.errors import CatalogError, NotFoundError
from logtui.core.models import (
    ChainRecord,
    EventPreset,
    NetworkMap,
    PresetInfo,
    Resolution,
    SaveResult,
)

__all__ = [
    "RegistryConfig",
    "DEFAULT_NETWORKS",
    "CatalogError",
    "NotFoundError",
    "ChainRecord",
    "EventPreset",
    "NetworkMap",
    "PresetInfo",
    "Resolution",
    "SaveResult",
]
