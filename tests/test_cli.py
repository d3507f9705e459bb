from pathlib import Path
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from logtui.cli import cli
from logtui.core.errors import CatalogError


def invoke(cache_path: Path, *args: str):
    return CliRunner().invoke(cli, ["--cache-file", str(cache_path), *args])


def test_network_url_default(cache_path: Path) -> None:
    result = invoke(cache_path, "network-url", "eth")

    assert result.exit_code == 0
    assert result.output.strip() == "http://eth.hypersync.xyz"


def test_network_url_from_cache(cache_path: Path, write_cache, hypersync_map) -> None:
    write_cache(hypersync_map("gnosis"))

    result = invoke(cache_path, "network-url", "gnosis")

    assert result.exit_code == 0
    assert result.output.strip() == "http://gnosis.hypersync.xyz"


def test_network_url_unknown(cache_path: Path) -> None:
    result = invoke(cache_path, "network-url", "doesnotexist")

    assert result.exit_code == 1
    assert "Network 'doesnotexist' not supported" in result.output
    assert "logtui list-networks" in result.output


def test_list_networks_from_rich_cache(cache_path: Path, write_cache, hypersync_map) -> None:
    write_cache(hypersync_map(*(f"chain{i}" for i in range(7))))

    with patch("logtui.registry.networks.CatalogClient.active_chains", AsyncMock()) as fetch:
        result = invoke(cache_path, "list-networks")

    assert result.exit_code == 0
    assert "source: cache" in result.output
    assert "chain6" in result.output
    fetch.assert_not_awaited()


def test_refresh_networks_offline_falls_back(cache_path: Path) -> None:
    with patch(
        "logtui.registry.networks.CatalogClient.active_chains",
        AsyncMock(side_effect=CatalogError("offline")),
    ):
        result = invoke(cache_path, "refresh-networks")

    assert result.exit_code == 0
    assert "source=default" in result.output


def test_list_presets() -> None:
    result = CliRunner().invoke(cli, ["list-presets"])

    assert result.exit_code == 0
    assert "erc20" in result.output


def test_preset_signatures() -> None:
    result = CliRunner().invoke(cli, ["preset", "erc20"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Transfer(address,address,uint256)",
        "Approval(address,address,uint256)",
    ]


def test_preset_with_topics() -> None:
    result = CliRunner().invoke(cli, ["preset", "erc20", "--topics"])

    assert result.exit_code == 0
    assert result.output.splitlines()[0] == (
        "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef  Transfer(address,address,uint256)"
    )


def test_unknown_preset() -> None:
    result = CliRunner().invoke(cli, ["preset", "nope"])

    assert result.exit_code == 1
    assert "Available presets: uniswap-v3" in result.output
