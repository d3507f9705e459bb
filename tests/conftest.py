import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from logtui.core.models import ChainRecord


@pytest.fixture
def cache_path(tmp_path: Path) -> Path:
    return tmp_path / ".networks-cache.json"


@pytest.fixture
def write_cache(cache_path: Path):
    def _write(networks: dict[str, str]) -> Path:
        cache_path.write_text(json.dumps(networks, indent=2))
        return cache_path

    return _write


@pytest.fixture
def mock_catalog():
    catalog = AsyncMock()
    catalog.active_chains = AsyncMock(
        return_value=[
            ChainRecord(ecosystem="evm", name="foo"),
            ChainRecord(ecosystem="cosmos", name="bar"),
        ]
    )
    return catalog


@pytest.fixture
def hypersync_map():
    def _make(*names: str) -> dict[str, str]:
        return {n: f"http://{n}.hypersync.xyz" for n in names}

    return _make
