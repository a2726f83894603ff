from __future__ import annotations

from typing import Any

# Minimal ABIs for Polygon staking (ERC20 token / ValidatorShare / StakeManager).

ERC20_APPROVE_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "approve",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"type": "bool"}],
    },
    {
        "type": "function",
        "name": "allowance",
        "stateMutability": "view",
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "spender", "type": "address"},
        ],
        "outputs": [{"type": "uint256"}],
    },
]


def _voucher(name: str, inputs: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "stateMutability": "nonpayable",
        "inputs": inputs,
        "outputs": [],
    }


_BUY_INPUTS = [
    {"name": "_amount", "type": "uint256"},
    {"name": "_minSharesToMint", "type": "uint256"},
]
_SELL_INPUTS = [
    {"name": "claimAmount", "type": "uint256"},
    {"name": "maximumSharesToBurn", "type": "uint256"},
]
_CLAIM_INPUTS = [{"name": "unbondNonce", "type": "uint256"}]

VALIDATOR_SHARE_ABI: list[dict[str, Any]] = [
    _voucher("buyVoucher", _BUY_INPUTS),
    _voucher("buyVoucherPOL", _BUY_INPUTS),
    _voucher("sellVoucher_new", _SELL_INPUTS),
    _voucher("sellVoucher_newPOL", _SELL_INPUTS),
    _voucher("unstakeClaimTokens_new", _CLAIM_INPUTS),
    _voucher("unstakeClaimTokens_newPOL", _CLAIM_INPUTS),
    _voucher("withdrawRewards", []),
    _voucher("withdrawRewardsPOL", []),
    _voucher("restake", []),
    _voucher("restakePOL", []),
    {
        "type": "function",
        "name": "getLiquidRewards",
        "stateMutability": "view",
        "inputs": [{"name": "user", "type": "address"}],
        "outputs": [{"type": "uint256"}],
    },
    {
        "type": "function",
        "name": "getTotalStake",
        "stateMutability": "view",
        "inputs": [{"name": "user", "type": "address"}],
        "outputs": [{"type": "uint256"}, {"type": "uint256"}],
    },
    {
        "type": "function",
        "name": "unbondNonces",
        "stateMutability": "view",
        "inputs": [{"name": "user", "type": "address"}],
        "outputs": [{"type": "uint256"}],
    },
    {
        "type": "function",
        "name": "unbonds_new",
        "stateMutability": "view",
        "inputs": [
            {"name": "user", "type": "address"},
            {"name": "unbondNonce", "type": "uint256"},
        ],
        "outputs": [
            {"name": "shares", "type": "uint256"},
            {"name": "withdrawEpoch", "type": "uint256"},
        ],
    },
]

STAKE_MANAGER_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "currentEpoch",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "uint256"}],
    },
]
