import httpx
import pytest

from logtui.clients.catalog import CatalogClient
from logtui.core.errors import CatalogError
from logtui.core.models import ChainRecord

URL = "https://catalog.test/active_chains"


def client_for(handler) -> CatalogClient:
    return CatalogClient(URL, timeout_s=5, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_active_chains_parses_records() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert str(request.url) == URL
        return httpx.Response(
            200,
            json=[
                {"ecosystem": "evm", "name": "eth", "chain_id": 1, "tier": "GOLD"},
                {"ecosystem": "fuel", "name": "fuel-mainnet"},
            ],
        )

    chains = await client_for(handler).active_chains()

    assert chains == [
        ChainRecord(ecosystem="evm", name="eth"),
        ChainRecord(ecosystem="fuel", name="fuel-mainnet"),
    ]


@pytest.mark.asyncio
async def test_non_2xx_status_raises_catalog_error() -> None:
    client = client_for(lambda request: httpx.Response(503, text="unavailable"))

    with pytest.raises(CatalogError, match="status: 503"):
        await client.active_chains()


@pytest.mark.asyncio
async def test_transport_error_raises_catalog_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CatalogError, match="ConnectError"):
        await client_for(handler).active_chains()


@pytest.mark.asyncio
async def test_invalid_json_raises_catalog_error() -> None:
    client = client_for(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(CatalogError, match="invalid JSON"):
        await client.active_chains()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"chains": []},
        [{"ecosystem": "evm"}],
        [{"name": "eth", "ecosystem": 7}],
    ],
)
async def test_unexpected_payload_raises_catalog_error(payload) -> None:
    client = client_for(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(CatalogError, match="Unexpected catalog payload"):
        await client.active_chains()
