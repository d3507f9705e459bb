"""Compiled-in event signature presets.

Each preset bundles canonical event signatures for a protocol or token
standard, keyed by a short identifier (e.g. ``erc20``, ``uniswap-v3``).
Presets are read-only and listed in declaration order.

Example
-------
>>> from logtui.presets import signatures_for
>>> signatures_for("erc20")
['Transfer(address,address,uint256)', 'Approval(address,address,uint256)']
"""

from __future__ import annotations

from types import MappingProxyType

from eth_utils.abi import event_signature_to_log_topic

from logtui.core.errors import NotFoundError
from logtui.core.models import EventPreset, PresetInfo


def _preset(preset_id: str, name: str, description: str, *signatures: str) -> EventPreset:
    return EventPreset(id=preset_id, name=name, description=description, signatures=signatures)


_PRESETS: tuple[EventPreset, ...] = (
    # -------------------------
    # DEX / token standards
    # -------------------------
    _preset(
        "uniswap-v3",
        "Uniswap V3",
        "Uniswap V3 core events",
        "PoolCreated(address,address,uint24,int24,address)",
        "Burn(address,int24,int24,uint128,uint256,uint256)",
        "Initialize(uint160,int24)",
        "Mint(address,address,int24,int24,uint128,uint256,uint256)",
        "Swap(address,address,int256,int256,uint160,uint128,int24)",
    ),
    _preset(
        "uniswap-v4",
        "Uniswap V4",
        "Uniswap V4 PoolManager events",
        "Donate(bytes32,address,uint256,uint256)",
        "Initialize(bytes32,address,address,uint24,int24,address,uint160,int24)",
        "ModifyLiquidity(bytes32,address,int24,int24,int256,bytes32)",
        "Swap(bytes32,address,int128,int128,uint160,uint128,int24,uint24)",
        "Transfer(address,address,address,uint256,uint256)",
    ),
    _preset(
        "erc20",
        "ERC-20",
        "Standard ERC-20 token events",
        "Transfer(address,address,uint256)",
        "Approval(address,address,uint256)",
    ),
    _preset(
        "erc721",
        "ERC-721",
        "Standard ERC-721 NFT events",
        "Transfer(address,address,uint256)",
        "Approval(address,address,uint256)",
        "ApprovalForAll(address,address,bool)",
    ),
    # -------------------------
    # Oracles
    # -------------------------
    _preset(
        "chainlink-price-feeds",
        "Chainlink Price Feeds",
        "Chainlink price oracle events",
        "AnswerUpdated(int256,uint256,uint256)",
        "NewRound(uint256,address,uint256)",
        "ResponseReceived(int256,uint256,address)",
        "AggregatorConfigSet(address,address,address)",
        "RoundDetailsUpdated(uint128,uint32,int192,uint32)",
    ),
    _preset(
        "chainlink-vrf",
        "Chainlink VRF",
        "Chainlink Verifiable Random Function events",
        "RandomWordsRequested(bytes32,uint256,uint256,uint64,uint16,uint32,uint32,address)",
        "RandomWordsFulfilled(uint256,uint256,uint96,bool)",
        "ConfigSet(uint16,uint32,uint32,uint32,uint32)",
        "SubscriptionCreated(uint64,address)",
        "SubscriptionFunded(uint64,uint256,uint256)",
    ),
    _preset(
        "pyth",
        "Pyth Network",
        "Pyth Network oracle events",
        "BatchPriceFeedUpdate(bytes32[],bytes[])",
        "PriceFeedUpdate(bytes32,bytes)",
        "BatchPriceUpdate(bytes32[],int64[],uint64[],int32[],uint32[])",
        "PriceUpdate(bytes32,int64,uint64,int32,uint32)",
    ),
    _preset(
        "uma",
        "UMA Protocol",
        "UMA Oracle events",
        "PriceProposed(address,uint256,uint256,int256)",
        "PriceDisputed(address,uint256,uint256,int256)",
        "PriceSettled(address,uint256,int256,uint256)",
    ),
    # -------------------------
    # DeFi
    # -------------------------
    _preset(
        "aave",
        "Aave V3",
        "Aave V3 lending protocol events",
        "Supply(address,address,address,uint256,uint16)",
        "Withdraw(address,address,address,uint256)",
        "Borrow(address,address,address,uint256,uint256,uint16)",
        "Repay(address,address,address,uint256,bool)",
        "LiquidationCall(address,address,address,uint256,uint256,address,bool)",
    ),
    _preset(
        "curve",
        "Curve Finance",
        "Curve pool events",
        "TokenExchange(address,int128,uint256,int128,uint256)",
        "AddLiquidity(address,uint256[],uint256,uint256)",
        "RemoveLiquidity(address,uint256,uint256[])",
        "RemoveLiquidityOne(address,uint256,uint256)",
    ),
    # -------------------------
    # Cross-chain & bridges
    # -------------------------
    _preset(
        "layerzero",
        "LayerZero",
        "LayerZero cross-chain messaging events",
        "MessageSent(bytes,uint64,bytes32,bytes)",
        "PacketReceived(uint16,bytes,address,uint64,bytes32)",
        "RelayerAdded(address,uint16)",
        "RelayerRemoved(address,uint16)",
    ),
    _preset(
        "weth",
        "WETH",
        "Wrapped Ether events",
        "Deposit(address,uint256)",
        "Withdrawal(address,uint256)",
        "Transfer(address,address,uint256)",
        "Approval(address,address,uint256)",
    ),
    _preset(
        "across",
        "Across Protocol",
        "Across cross-chain bridge events",
        "FundsDeposited(bytes32,bytes32,uint256,uint256,uint256,uint256,uint32,uint32,uint32,bytes32,bytes32,bytes32,bytes)",
        "V3FundsDeposited(address,address,uint256,uint256,uint256,uint32,uint32,uint32,uint32,address,address,address,bytes)",
        "FilledRelay(bytes32,bytes32,uint256,uint256,uint256,uint256,uint256,uint32,uint32,bytes32,bytes32,bytes32,bytes32,bytes32,(bytes32,bytes32,uint256,uint8))",
        "FilledV3Relay(address,address,uint256,uint256,uint256,uint256,uint32,uint32,uint32,address,address,address,address,bytes,(address,bytes,uint256,uint8))",
    ),
    # -------------------------
    # L2 infrastructure
    # -------------------------
    _preset(
        "arbitrum",
        "Arbitrum",
        "Arbitrum sequencer and bridge events",
        "SequencerBatchDelivered(uint256,bytes32,address,uint256)",
        "MessageDelivered(uint256,bytes32,address,uint8,address,bytes32)",
        "BridgeCallTriggered(address,address,uint256,bytes)",
    ),
    # -------------------------
    # Gaming / NFTs
    # -------------------------
    _preset(
        "blur",
        "Blur",
        "Blur NFT marketplace events",
        "OrdersMatched(address,address,bytes32,bytes32)",
        "NonceIncremented(address,uint256)",
        "NewBlurExchange(address)",
        "NewExecutionDelegate(address)",
    ),
    _preset(
        "axie",
        "Axie Infinity",
        "Axie Infinity game events",
        "AxieSpawned(uint256,uint256,uint256,uint256,uint256)",
        "AxieBred(address,uint256,uint256,uint256)",
        "Transfer(address,address,uint256)",
        "BreedingApproval(address,uint256,address)",
    ),
    # -------------------------
    # Stablecoins
    # -------------------------
    _preset(
        "usdc",
        "USDC",
        "USD Coin stablecoin events",
        "Transfer(address,address,uint256)",
        "Approval(address,address,uint256)",
        "Mint(address,uint256)",
        "Burn(address,uint256)",
        "BlacklistAdded(address)",
        "BlacklistRemoved(address)",
    ),
    # -------------------------
    # Naming / governance
    # -------------------------
    _preset(
        "ens",
        "ENS",
        "Ethereum Name Service registry events",
        "NewOwner(bytes32,bytes32,address)",
        "Transfer(bytes32,address)",
        "NewResolver(bytes32,address)",
        "NewTTL(bytes32,uint64)",
        "NameRegistered(string,bytes32,address,uint256,uint256)",
    ),
    # -------------------------
    # Account abstraction / routers
    # -------------------------
    _preset(
        "erc4337",
        "ERC-4337",
        "Account Abstraction events",
        "UserOperationEvent(bytes32,address,address,uint256,bool,uint256,uint256)",
        "AccountDeployed(bytes32,address,address,address)",
    ),
    _preset(
        "universalRouter",
        "Uniswap Universal Router",
        "Uniswap's intent-based router events",
        "RewardsSent(address,uint256)",
        "ERC20Transferred(address,address,uint256)",
        "ERC721Transferred(address,address,address,uint256)",
        "ERC1155Transferred(address,address,address,uint256,uint256)",
    ),
)

EVENT_PRESETS: MappingProxyType[str, EventPreset] = MappingProxyType({p.id: p for p in _PRESETS})


def list_presets() -> list[PresetInfo]:
    """Return id/name/description for every preset, in declaration order."""
    return [p.info() for p in EVENT_PRESETS.values()]


def has_preset(preset_id: str) -> bool:
    return preset_id in EVENT_PRESETS


def get_preset(preset_id: str) -> EventPreset:
    """Return the preset, or raise NotFoundError listing every preset id."""
    try:
        return EVENT_PRESETS[preset_id]
    except KeyError:
        raise NotFoundError(
            f"Preset '{preset_id}' not found. Available presets: {', '.join(EVENT_PRESETS)}"
        ) from None


def signatures_for(preset_id: str) -> list[str]:
    return list(get_preset(preset_id).signatures)


def signature_topic0(signature: str) -> str:
    """Return the 0x-prefixed keccak topic0 of a canonical event signature."""
    return "0x" + event_signature_to_log_topic(signature).hex()


def topic0s_for(preset_id: str) -> list[str]:
    """Topic0 hashes for a preset's signatures, in the same order."""
    return [signature_topic0(s) for s in get_preset(preset_id).signatures]
