import pytest
from hexbytes import HexBytes

from everstake_sdk.core.constants.ethereum_abi import ACCOUNTING_ABI, POOL_ABI
from everstake_sdk.core.utils.multicall import (
    function_abi,
    normalize_call_data,
    output_types,
    unwrap_single,
)

TUPLE_ABI = [
    {
        "type": "function",
        "name": "positions",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [
            {
                "name": "items",
                "type": "tuple[]",
                "components": [
                    {"name": "id", "type": "uint256"},
                    {"name": "owner", "type": "address"},
                ],
            }
        ],
    }
]


def test_output_types():
    assert output_types(ACCOUNTING_ABI, "balance") == ["uint256"]
    assert output_types(POOL_ABI, "getValidator") == ["bytes", "uint8"]
    assert output_types(TUPLE_ABI, "positions") == ["(uint256,address)[]"]


def test_function_abi_missing():
    with pytest.raises(ValueError, match="nope"):
        function_abi(ACCOUNTING_ABI, "nope")


@pytest.mark.parametrize(
    "raw", ["0x0102", b"\x01\x02", HexBytes("0x0102")]
)
def test_normalize_call_data(raw):
    assert normalize_call_data(raw) == b"\x01\x02"


def test_normalize_call_data_rejects_other_types():
    with pytest.raises(TypeError):
        normalize_call_data(12)


def test_unwrap_single():
    assert unwrap_single([5]) == 5
    assert unwrap_single([1, 2]) == (1, 2)
