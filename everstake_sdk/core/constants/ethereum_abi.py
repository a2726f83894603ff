from __future__ import annotations

from typing import Any

# Minimal ABIs for the Everstake Ethereum pool (Accounting / Pool).


def _view_uint256(name: str, *, account_arg: bool = False) -> dict[str, Any]:
    inputs = [{"name": "account", "type": "address"}] if account_arg else []
    return {
        "type": "function",
        "name": name,
        "stateMutability": "view",
        "inputs": inputs,
        "outputs": [{"type": "uint256"}],
    }


ACCOUNTING_ABI: list[dict[str, Any]] = [
    _view_uint256("balance"),
    _view_uint256("pendingBalance"),
    _view_uint256("pendingDepositedBalance"),
    _view_uint256("pendingRestakedRewards"),
    _view_uint256("readyforAutocompoundRewardsAmount"),
    _view_uint256("getPoolFee"),
    _view_uint256("closeValidatorsStat"),
    _view_uint256("pendingBalanceOf", account_arg=True),
    _view_uint256("pendingDepositedBalanceOf", account_arg=True),
    _view_uint256("depositedBalanceOf", account_arg=True),
    _view_uint256("pendingRestakedRewardOf", account_arg=True),
    _view_uint256("restakedRewardOf", account_arg=True),
    _view_uint256("autocompoundBalanceOf", account_arg=True),
    {
        "type": "function",
        "name": "withdrawRequestQueueParams",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [
            {"name": "withdrawRequested", "type": "uint256"},
            {"name": "interchangeAllowed", "type": "uint256"},
            {"name": "filled", "type": "uint256"},
            {"name": "claimed", "type": "uint256"},
        ],
    },
    {
        "type": "function",
        "name": "withdrawRequest",
        "stateMutability": "view",
        "inputs": [{"name": "staker", "type": "address"}],
        "outputs": [
            {"name": "requested", "type": "uint256"},
            {"name": "readyForClaim", "type": "uint256"},
        ],
    },
    {
        "type": "function",
        "name": "autocompound",
        "stateMutability": "nonpayable",
        "inputs": [],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "claimWithdrawRequest",
        "stateMutability": "nonpayable",
        "inputs": [],
        "outputs": [],
    },
]

POOL_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "stake",
        "stateMutability": "payable",
        "inputs": [{"name": "source", "type": "uint64"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "unstake",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "value", "type": "uint256"},
            {"name": "allowedInterchangeNum", "type": "uint16"},
            {"name": "source", "type": "uint256"},
        ],
        "outputs": [{"name": "unstakedAmount", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "unstakePending",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "amount", "type": "uint256"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "activateStake",
        "stateMutability": "nonpayable",
        "inputs": [],
        "outputs": [],
    },
    _view_uint256("getPendingValidatorCount"),
    _view_uint256("getValidatorCount"),
    _view_uint256("minStakeAmount"),
    {
        "type": "function",
        "name": "getPendingValidator",
        "stateMutability": "view",
        "inputs": [{"name": "index", "type": "uint256"}],
        "outputs": [{"name": "pubkey", "type": "bytes"}],
    },
    {
        "type": "function",
        "name": "getValidator",
        "stateMutability": "view",
        "inputs": [{"name": "index", "type": "uint256"}],
        "outputs": [
            {"name": "pubkey", "type": "bytes"},
            {"name": "status", "type": "uint8"},
        ],
    },
]
