ETH_ERROR_MESSAGES: dict[str, str] = {
    # Validation
    "ADDRESS_FORMAT_ERROR": "Invalid address format",
    "WRONG_TYPE_MESSAGE": "Amount must be a string",
    "MIN_AMOUNT_ERROR": "Min Amount {} wei",
    "NETWORK_NOT_SUPPORTED": "Network {} is not supported",
    "NETWORK_ADDRESSES_REQUIRED": "Contract addresses for {} must be passed explicitly",
    "MAX_AMOUNT_FOR_UNSTAKE_ERROR": "Max Amount For Unstake {}",
    "ZERO_UNSTAKE_MESSAGE": "Zero pending balance",
    "AMOUNT_GREATER_THAN_PENDING_BALANCE_ERROR": "Amount greater than pending balance {}",
    "INSUFFICIENT_PENDING_BALANCE_ERROR": (
        "Pending balance after unstake must be zero or at least {} ETH"
    ),
    "ZERO_UNSTAKE_ERROR": "Nothing requested for withdrawal",
    "NOT_FILLED_UNSTAKE_MESSAGE": "Withdraw request is not filled yet",
    "NO_REWARDS_MESSAGE": "No rewards to autocompound",
    # Reads
    "BALANCE_ERROR": "An error occurred while getting the pool balance",
    "PENDING_BALANCE_ERROR": "An error occurred while getting the pending balance",
    "PENDING_DEPOSITED_BALANCE_ERROR": (
        "An error occurred while getting the pending deposited balance"
    ),
    "PENDING_RESTAKED_REWARDS_ERROR": (
        "An error occurred while getting the pending restaked rewards"
    ),
    "READY_FOR_AUTOCOMPOUND_REWARDS_AMOUNT_ERROR": (
        "An error occurred while getting the rewards ready for autocompound"
    ),
    "PENDING_BALANCE_OF_ERROR": (
        "An error occurred while getting the user's pending balance"
    ),
    "PENDING_DEPOSITED_BALANCE_OF_ERROR": (
        "An error occurred while getting the user's pending deposited balance"
    ),
    "DEPOSITED_BALANCE_OF_ERROR": (
        "An error occurred while getting the user's deposited balance"
    ),
    "PENDING_RESTAKED_REWARD_OF_ERROR": (
        "An error occurred while getting the user's pending restaked rewards"
    ),
    "RESTAKED_REWARD_OF_ERROR": (
        "An error occurred while getting the user's restaked rewards"
    ),
    "GET_POOL_FEE_ERROR": "An error occurred while getting the pool fee",
    "AUTOCOMPOUND_BALANCE_OF_ERROR": (
        "An error occurred while getting the user's autocompound balance"
    ),
    "WITHDRAW_REQUEST_QUEUE_PARAMS_ERROR": (
        "An error occurred while getting the withdraw request queue params"
    ),
    "WITHDRAW_REQUEST_ERROR": "An error occurred while getting the withdraw request",
    "POOL_BALANCES_ERROR": "An error occurred while getting the pool balances",
    "USER_BALANCES_ERROR": "An error occurred while getting the user balances",
    "CLOSE_VALIDATORS_STAT_ERROR": (
        "An error occurred while getting the closed validators count"
    ),
    "GET_PENDING_VALIDATOR_COUNT_ERROR": (
        "An error occurred while getting the pending validator count"
    ),
    "GET_PENDING_VALIDATOR_ERROR": "An error occurred while getting a pending validator",
    "GET_VALIDATOR_COUNT_ERROR": "An error occurred while getting the validator count",
    "GET_VALIDATOR_ERROR": "An error occurred while getting a validator",
    "MIN_STAKE_AMOUNT_ERROR": "An error occurred while getting the min stake amount",
    # Builders
    "STAKE_ERROR": "An error occurred while staking",
    "UNSTAKE_ERROR": "An error occurred while unstaking",
    "SIMULATE_UNSTAKE_ERROR": "An error occurred while simulating unstake",
    "UNSTAKE_PENDING_ERROR": "An error occurred while unstaking pending balance",
    "CLAIM_WITHDRAW_REQUEST_ERROR": "An error occurred while claiming withdraw request",
    "AUTOCOMPOUND_ERROR": "An error occurred while autocompounding",
    "ACTIVATE_STAKE_ERROR": "An error occurred while activating stake",
}

# Raw contract revert reasons mapped to display text.
ETH_REVERT_MESSAGES: dict[str, str] = {
    "InvalidParam:amount": "Invalid amount",
    "InvalidAmount:pending balance": "Amount greater than pending balance",
    "InvalidAmount:min stake": "Amount less than min stake amount",
    "WithdrawRequest:not filled": "Withdraw request is not filled yet",
    "insufficient funds for gas * price + value": (
        "Insufficient funds to cover amount and gas"
    ),
}
