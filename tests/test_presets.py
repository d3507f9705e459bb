import pytest

from logtui.core.errors import NotFoundError
from logtui.presets import (
    EVENT_PRESETS,
    get_preset,
    has_preset,
    list_presets,
    signature_topic0,
    signatures_for,
    topic0s_for,
)

TRANSFER_T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
APPROVAL_T0 = "0x8c5be1e5ebec7d5bd14f71427d1e84f3dd0314c0f7b2291e5b200ac8c7c3b925"


def test_erc20_signatures() -> None:
    assert signatures_for("erc20") == [
        "Transfer(address,address,uint256)",
        "Approval(address,address,uint256)",
    ]


def test_unknown_preset_lists_every_id() -> None:
    with pytest.raises(NotFoundError) as exc:
        signatures_for("nope")

    message = str(exc.value)
    assert message.startswith("Preset 'nope' not found. Available presets: ")
    assert message.split("Available presets: ")[1].split(", ") == list(EVENT_PRESETS)


def test_list_presets_in_declaration_order() -> None:
    presets = list_presets()

    assert len(presets) == 20
    assert [p.id for p in presets[:4]] == ["uniswap-v3", "uniswap-v4", "erc20", "erc721"]
    assert presets[-1].id == "universalRouter"
    assert presets[2].name == "ERC-20"
    assert presets[2].description == "Standard ERC-20 token events"


def test_has_preset() -> None:
    assert has_preset("weth")
    assert has_preset("ens")
    assert not has_preset("WETH")


def test_signatures_for_returns_a_fresh_list() -> None:
    sigs = signatures_for("weth")
    sigs.append("Bogus()")

    assert "Bogus()" not in get_preset("weth").signatures


def test_signature_topic0() -> None:
    assert signature_topic0("Transfer(address,address,uint256)") == TRANSFER_T0


def test_topic0s_for_preserves_order() -> None:
    assert topic0s_for("erc20") == [TRANSFER_T0, APPROVAL_T0]
    assert len(topic0s_for("across")) == len(signatures_for("across"))
