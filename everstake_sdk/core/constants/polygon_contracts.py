from __future__ import annotations

from eth_utils import to_checksum_address

# Polygon PoS staking lives on Ethereum L1.
POLYGON_RPC_URL = "https://ethereum-rpc.publicnode.com"

MATIC_TOKEN_ADDRESS = to_checksum_address("0x7D1AfA7B718fb893dB30A3aBc0Cfc608AaCfeBB0")
POL_TOKEN_ADDRESS = to_checksum_address("0x455e53CBB86018Ac2B8092FdCd39d8444aFFC3F6")
STAKE_MANAGER_ADDRESS = to_checksum_address(
    "0x5e3Ef299fDDf15eAa0432E6e66473ace8c13D908"
)
# Everstake ValidatorShare contract (buy/sell vouchers).
VALIDATOR_SHARE_ADDRESS = to_checksum_address(
    "0xF30Cf4ed712D3734161fDAab5B1DBb49Fd2D0E5c"
)

MIN_AMOUNT = 10**18  # 1 MATIC/POL in wei
WITHDRAW_EPOCH_DELAY = 80

# Fixed gas limits for calls whose cost is protocol-stable.
DELEGATE_BASE_GAS = 220_000
UNDELEGATE_BASE_GAS = 300_000
CLAIM_UNDELEGATE_BASE_GAS = 200_000
CLAIM_REWARDS_BASE_GAS = 180_000
RESTAKE_BASE_GAS = 220_000

STATS_CHAIN = "matic"
