from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from hexbytes import HexBytes

MULTICALL3_ABI = [
    {
        "inputs": [
            {
                "components": [
                    {"internalType": "address", "name": "target", "type": "address"},
                    {"internalType": "bytes", "name": "callData", "type": "bytes"},
                ],
                "internalType": "struct Multicall3.Call[]",
                "name": "calls",
                "type": "tuple[]",
            }
        ],
        "name": "aggregate",
        "outputs": [
            {"internalType": "uint256", "name": "blockNumber", "type": "uint256"},
            {"internalType": "bytes[]", "name": "returnData", "type": "bytes[]"},
        ],
        "stateMutability": "payable",
        "type": "function",
    },
]


@dataclass(frozen=True)
class MulticallCall:
    """One read-only contract call to be batched through Multicall3."""

    address: str
    abi: list[dict[str, Any]]
    fn_name: str
    args: Sequence[Any] = field(default_factory=tuple)


def function_abi(abi: list[dict[str, Any]], fn_name: str) -> dict[str, Any]:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == fn_name:
            return entry
    raise ValueError(f"Function {fn_name} not found in ABI")


def _collapse_type(param: dict[str, Any]) -> str:
    typ = param["type"]
    if typ.startswith("tuple"):
        inner = ",".join(_collapse_type(c) for c in param.get("components", []))
        return f"({inner}){typ[len('tuple'):]}"
    return typ


def output_types(abi: list[dict[str, Any]], fn_name: str) -> list[str]:
    return [_collapse_type(o) for o in function_abi(abi, fn_name).get("outputs", [])]


def normalize_call_data(data: bytes | str) -> bytes:
    if isinstance(data, HexBytes):
        return bytes(data)
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        if data.startswith("0x"):
            return bytes.fromhex(data[2:])
        return data.encode()
    raise TypeError("Unsupported calldata type")


def unwrap_single(values: Sequence[Any]) -> Any:
    """Single-output functions decode to that value, like ``contract.call()``."""
    return values[0] if len(values) == 1 else tuple(values)
