__version__ = "0.1.0"

from everstake_sdk.adapters.berachain_adapter import Berachain
from everstake_sdk.adapters.ethereum_adapter import Ethereum
from everstake_sdk.adapters.polygon_adapter import Polygon
from everstake_sdk.core import ErrorMapper, StakingApiError, StakingError
from everstake_sdk.core.adapters.models import (
    BoostedQueue,
    TransactionLoadingStatus,
    UnbondInfo,
    UnsignedTransaction,
    ValidatorInfo,
    WithdrawRequest,
    WithdrawRequestQueueParams,
)
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
from everstake_sdk.core.config import set_api_url

__all__ = [
    "__version__",
    "Berachain",
    "BoostedQueue",
    "ErrorMapper",
    "Ethereum",
    "Polygon",
    "STAKING_API_CLIENT",
    "StakingApiClient",
    "StakingApiError",
    "StakingError",
    "TransactionLoadingStatus",
    "UnbondInfo",
    "UnsignedTransaction",
    "ValidatorInfo",
    "WithdrawRequest",
    "WithdrawRequestQueueParams",
    "check_token",
    "create_token",
    "get_assets",
    "get_eth_account_transactions",
    "get_eth_validators_queue_stats",
    "set_api_url",
    "set_stats",
]
