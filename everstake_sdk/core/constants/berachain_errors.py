BERA_ERROR_MESSAGES: dict[str, str] = {
    "ADDRESS_FORMAT_ERROR": "Invalid address format",
    "NETWORK_ERROR": "Unsupported network",
    "VALIDATOR_FORMAT_ERROR": "Invalid validator format",
    "NOT_AVAILABLE_NETWORK": "Method is not available for this network",
    "BALANCE_ERROR": "An error occurred while getting the BGT balance",
    "ALLOWANCE_ERROR": "An error occurred while getting the allowance",
    "APPROVE_FOR_STAKE_ERROR": "An error occurred while approving BGT for stake",
    "BOOSTED_ERROR": "An error occurred while getting the stake",
    "BOOSTS_ERROR": "An error occurred while getting the stakes",
    "BOOST_QUEUE_ERROR": "An error occurred while getting the stake in queue",
    "BOOST_ERROR": "An error occurred while staking",
    "ACTIVATE_BOOST_ERROR": "An error occurred while activating stake",
    "CANCEL_BOOST_ERROR": "An error occurred while cancelling stake in queue",
    "DROP_BOOST_ERROR": "An error occurred while unstaking",
    "QUEUE_DROP_BOOST_ERROR": "An error occurred while queueing unstake",
    "CANCEL_DROP_BOOST_ERROR": "An error occurred while cancelling unstake",
}

BERA_REVERT_MESSAGES: dict[str, str] = {
    "NotEnoughBalance": "Not enough BGT balance",
    "NotEnoughBoostedBalance": "Not enough staked BGT",
    "NotEnoughTime": "Boost queue delay has not passed yet",
    "CannotRecoverStakingToken": "Invalid token",
}
