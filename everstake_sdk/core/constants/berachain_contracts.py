from __future__ import annotations

from typing import Literal

from eth_utils import to_checksum_address

BeraNetwork = Literal["mainnet", "testnet"]

MAINNET_BGT_CONTRACT_ADDRESS = to_checksum_address(
    "0x656b95E550C07a9ffe548bd4085c72418Ceb1dba"
)
TESTNET_BGT_CONTRACT_ADDRESS = to_checksum_address(
    "0xbDa130737BDd9618301681329bF2e46A016ff9Ad"
)

# Mainnet BGT keys boosts by the 48-byte validator pubkey; testnet by operator address.
VALIDATOR_PUBKEY_LENGTH = 48

BERA_RPC_URLS: dict[str, str] = {
    "mainnet": "https://rpc.berachain.com",
    "testnet": "https://bartio.rpc.berachain.com",
}

GAS_RESERVE = 50_000
