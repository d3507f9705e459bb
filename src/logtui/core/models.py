"""Core data models for network resolution and event presets.

This module defines:
- `NetworkMap`: network identifier → endpoint URL.
- `ChainRecord`: one entry of the remote chain catalog.
- `Resolution`: a NetworkMap tagged with the tier that produced it.
- `SaveResult`: outcome of a best-effort cache write.
- `EventPreset` / `PresetInfo`: compiled-in event signature bundles.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

NetworkMap = dict[str, str]

Source = Literal["remote", "cache", "default"]


# === Catalog record ===


class ChainRecord(BaseModel):
    """One chain as listed by the remote catalog (extra fields ignored)."""

    ecosystem: str
    name: str


# === Resolution results ===


@dataclass(slots=True, frozen=True)
class Resolution:
    """A network map and the fallback tier it came from."""

    networks: NetworkMap
    source: Source

    def __len__(self) -> int:
        return len(self.networks)


@dataclass(slots=True, frozen=True)
class SaveResult:
    """Outcome of writing the cache file. Callers may ignore it."""

    ok: bool
    path: Path
    error: str | None = None


# === Event presets ===


@dataclass(slots=True, frozen=True)
class PresetInfo:
    id: str
    name: str
    description: str


@dataclass(slots=True, frozen=True)
class EventPreset:
    """A named, curated bundle of canonical event signatures."""

    id: str
    name: str
    description: str
    signatures: tuple[str, ...]

    def info(self) -> PresetInfo:
        return PresetInfo(id=self.id, name=self.name, description=self.description)
