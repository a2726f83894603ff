from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_CEILING, Decimal, localcontext
from typing import TYPE_CHECKING, Any

from loguru import logger
from web3 import Web3
from web3.exceptions import Web3Exception

from everstake_sdk.core.adapters.models import UnsignedTransaction
from everstake_sdk.core.utils.units import DECIMAL_CONTEXT

if TYPE_CHECKING:
    from everstake_sdk.core.utils.web3 import ChainClient

# Provider-less instance; only used for ABI encoding.
_ENCODER = Web3()


def encode_call_data(
    abi: list[dict[str, Any]], fn_name: str, args: Sequence[Any] = ()
) -> str:
    try:
        contract = _ENCODER.eth.contract(abi=abi)
        return contract.encode_abi(fn_name, list(args))
    except (Web3Exception, ValueError, TypeError) as exc:
        raise ValueError(f"Failed to encode {fn_name}: {exc}") from exc


def calculate_gas_limit(gas_estimate: int, reserve: int | Decimal = 0) -> int:
    """Raw estimate plus a fixed reserve, rounded up to a whole gas unit."""
    with localcontext(DECIMAL_CONTEXT):
        total = Decimal(int(gas_estimate)) + Decimal(reserve)
        return int(total.to_integral_value(rounding=ROUND_CEILING))


async def build_transaction(
    client: ChainClient,
    *,
    data: str,
    from_address: str,
    to: str,
    value: int = 0,
    gas_reserve: int | Decimal = 0,
) -> UnsignedTransaction:
    estimate_params: dict[str, Any] = {"from": from_address, "to": to, "data": data}
    if value:
        estimate_params["value"] = int(value)

    gas_estimate = await client.estimate_gas(estimate_params)
    gas_limit = calculate_gas_limit(gas_estimate, gas_reserve)
    logger.debug(f"Gas estimate {gas_estimate} -> limit {gas_limit} for {to}")

    return UnsignedTransaction(
        **{
            "from": from_address,
            "to": to,
            "data": data,
            "gas_limit": gas_limit,
            "value": int(value),
        }
    )
