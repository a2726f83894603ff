from __future__ import annotations

from typing import Literal, TypedDict

from eth_utils import to_checksum_address

EthNetwork = Literal["mainnet", "holesky", "hoodi"]


class EthNetworkAddresses(TypedDict):
    accounting: str
    pool: str
    withdraw_treasury: str


# Everstake ETH pool deployments bundled with the SDK. Networks without an
# entry here (hoodi) are bound by passing ``addresses=`` to the adapter.
ETH_NETWORK_ADDRESSES: dict[str, EthNetworkAddresses] = {
    "mainnet": {
        "accounting": to_checksum_address(
            "0x7a7f0b3c23C23a31cFcb0c44709be70d4D545c6e"
        ),
        "pool": to_checksum_address("0xD523794C879D9eC028960a231F866758e405bE34"),
        "withdraw_treasury": to_checksum_address(
            "0x19449f0f696703Aa3b1485DfA2d855F33659397a"
        ),
    },
    "holesky": {
        "accounting": to_checksum_address(
            "0x624087DD1904ab122A32878Ce9e933C7071F53B9"
        ),
        "pool": to_checksum_address("0xAFA848357154a6a624686b348303EF9a13F63264"),
        "withdraw_treasury": to_checksum_address(
            "0x66cb3AeD024740164EBcF04e292dB09b5B63A2e1"
        ),
    },
}

# Default public RPC per network; only used when no URL, provider or client is given.
ETH_RPC_URLS: dict[str, str] = {
    "mainnet": "https://ethereum-rpc.publicnode.com",
    "holesky": "https://ethereum-holesky-rpc.publicnode.com",
    "hoodi": "https://ethereum-hoodi-rpc.publicnode.com",
}

ETH_MIN_AMOUNT = 100_000_000_000_000_000  # 0.1 ETH in wei
ETH_GAS_RESERVE = 100_000
