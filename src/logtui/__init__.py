from __future__ import annotations

from .core.config import RegistryConfig
from .core.constants import DEFAULT_NETWORKS
from .core.errors import NotFoundError
from .core.models import EventPreset, NetworkMap, PresetInfo, Resolution, SaveResult
from .presets import EVENT_PRESETS, get_preset, has_preset, list_presets, signatures_for, topic0s_for
from .registry.networks import NetworkRegistry, create_registry
from .storage.cache import NetworkCache

__all__ = [
    "RegistryConfig",
    "DEFAULT_NETWORKS",
    "NotFoundError",
    "EventPreset",
    "NetworkMap",
    "PresetInfo",
    "Resolution",
    "SaveResult",
    "EVENT_PRESETS",
    "get_preset",
    "has_preset",
    "list_presets",
    "signatures_for",
    "topic0s_for",
    "NetworkRegistry",
    "create_registry",
    "NetworkCache",
]
