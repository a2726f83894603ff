from everstake_sdk.core.clients.EverstakeClient import EverstakeClient
from everstake_sdk.core.clients.StakingApiClient import (
    STAKING_API_CLIENT,
    StakingApiClient,
    check_token,
    create_token,
    get_assets,
    get_eth_account_transactions,
    get_eth_validators_queue_stats,
    set_stats,
)

__all__ = [
    "EverstakeClient",
    "STAKING_API_CLIENT",
    "StakingApiClient",
    "check_token",
    "create_token",
    "get_assets",
    "get_eth_account_transactions",
    "get_eth_validators_queue_stats",
    "set_stats",
]
