POLYGON_ERROR_MESSAGES: dict[str, str] = {
    "ADDRESS_FORMAT_ERROR": "Invalid address format",
    "MIN_AMOUNT_ERROR": "Min Amount {} matic",
    "ALLOWANCE_ERR": "Allowance less than amount",
    "DELEGATED_BALANCE_ERR": "Delegated balance less than requested amount",
    "NOTHING_TO_CLAIM_ERR": "Nothing to claim",
    "WITHDRAW_EPOCH_DELAY_ERR": "Current epoch less than withdraw delay",
    "TRANSACTION_LOADING_ERR": (
        "An error occurred while checking the transaction status"
    ),
    "APPROVE_ERR": "An error occurred while approving",
    "DELEGATE_ERR": "An error occurred while delegating",
    "UNDELEGATE_ERR": "An error occurred while undelegating",
    "CLAIM_UNDELEGATE_ERR": "An error occurred while claiming undelegated tokens",
    "REWARD_ERR": "An error occurred while claiming rewards",
    "RESTAKE_ERR": "An error occurred while restaking",
    "GET_REWARD_ERR": "An error occurred while getting the reward",
    "GET_ALLOWANCE_ERR": "An error occurred while getting the allowance",
    "GET_TOTAL_DELEGATE_ERR": "An error occurred while getting the delegated balance",
    "GET_UNBOND_ERR": "An error occurred while getting the unbond",
    "GET_UNBOND_NONCE_ERR": "An error occurred while getting the unbond nonce",
    "GET_CURRENT_EPOCH_ERR": "An error occurred while getting the current epoch",
}

POLYGON_REVERT_MESSAGES: dict[str, str] = {
    "Too much requested": "Requested amount exceeds delegated balance",
    "Incomplete withdrawal period": "Withdrawal period is not over yet",
    "ERC20: transfer amount exceeds allowance": "Allowance less than amount",
    "ERC20: transfer amount exceeds balance": "Insufficient token balance",
}
