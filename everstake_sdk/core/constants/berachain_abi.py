from __future__ import annotations

from typing import Any

# Minimal BGT ABIs. Mainnet keys boosts by validator pubkey (bytes) and takes
# the account explicitly; the testnet contract keys them by validator address.


def _fn(
    name: str,
    inputs: list[tuple[str, str]],
    outputs: list[str] | None = None,
    *,
    mutability: str = "nonpayable",
) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "stateMutability": mutability,
        "inputs": [{"name": n, "type": t} for n, t in inputs],
        "outputs": [{"type": t} for t in (outputs or [])],
    }


_ERC20_PART: list[dict[str, Any]] = [
    _fn("balanceOf", [("account", "address")], ["uint256"], mutability="view"),
    _fn(
        "allowance",
        [("owner", "address"), ("spender", "address")],
        ["uint256"],
        mutability="view",
    ),
    _fn("approve", [("spender", "address"), ("amount", "uint256")], ["bool"]),
    _fn("boosts", [("account", "address")], ["uint128"], mutability="view"),
]

BGT_MAINNET_ABI: list[dict[str, Any]] = [
    *_ERC20_PART,
    _fn(
        "boosted",
        [("account", "address"), ("pubkey", "bytes")],
        ["uint128"],
        mutability="view",
    ),
    _fn(
        "boostedQueue",
        [("account", "address"), ("pubkey", "bytes")],
        ["uint32", "uint128"],
        mutability="view",
    ),
    _fn("queueBoost", [("pubkey", "bytes"), ("amount", "uint128")]),
    _fn("cancelBoost", [("pubkey", "bytes"), ("amount", "uint128")]),
    _fn("activateBoost", [("user", "address"), ("pubkey", "bytes")], ["bool"]),
    _fn("queueDropBoost", [("pubkey", "bytes"), ("amount", "uint128")]),
    _fn("cancelDropBoost", [("pubkey", "bytes"), ("amount", "uint128")]),
    _fn("dropBoost", [("user", "address"), ("pubkey", "bytes")], ["bool"]),
]

BGT_TESTNET_ABI: list[dict[str, Any]] = [
    *_ERC20_PART,
    _fn(
        "boosted",
        [("account", "address"), ("validator", "address")],
        ["uint128"],
        mutability="view",
    ),
    _fn(
        "boostedQueue",
        [("account", "address"), ("validator", "address")],
        ["uint32", "uint128"],
        mutability="view",
    ),
    _fn("queueBoost", [("validator", "address"), ("amount", "uint128")]),
    _fn("cancelBoost", [("validator", "address"), ("amount", "uint128")]),
    _fn("activateBoost", [("validator", "address")]),
    _fn("dropBoost", [("validator", "address"), ("amount", "uint128")]),
]
