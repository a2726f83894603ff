from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from aiohttp import ClientError
from loguru import logger
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.providers.async_base import AsyncBaseProvider
from web3.providers.rpc.utils import ExceptionRetryConfiguration

from everstake_sdk.core.constants.base import (
    MULTICALL3_ADDRESS,
    RPC_RETRY_COUNT,
    RPC_RETRY_DELAY_S,
)
from everstake_sdk.core.utils.multicall import (
    MULTICALL3_ABI,
    MulticallCall,
    normalize_call_data,
    output_types,
    unwrap_single,
)

UrlOrProvider = str | AsyncBaseProvider


def make_web3(url_or_provider: UrlOrProvider) -> AsyncWeb3:
    """AsyncWeb3 over a URL (1 retry, 300ms backoff) or a pre-built provider."""
    if isinstance(url_or_provider, str):
        provider = AsyncHTTPProvider(
            url_or_provider,
            exception_retry_configuration=ExceptionRetryConfiguration(
                errors=(ClientError, asyncio.TimeoutError),
                retries=RPC_RETRY_COUNT,
                backoff_factor=RPC_RETRY_DELAY_S,
            ),
        )
    else:
        provider = url_or_provider
    return AsyncWeb3(provider)


class ChainClient:
    """Read/estimate/simulate capability the staking adapters are built on.

    Every call goes to the RPC endpoint; nothing is cached between calls.
    Only a provider built here from a URL is disconnected by ``close``.
    """

    def __init__(
        self,
        url_or_provider: UrlOrProvider,
        *,
        multicall_address: str = MULTICALL3_ADDRESS,
    ) -> None:
        self.web3 = make_web3(url_or_provider)
        self.owns_provider = isinstance(url_or_provider, str)
        self.multicall_address = self.web3.to_checksum_address(multicall_address)

    def _contract(self, address: str, abi: list[dict[str, Any]]):
        return self.web3.eth.contract(
            address=self.web3.to_checksum_address(address), abi=abi
        )

    async def read_contract(
        self,
        address: str,
        abi: list[dict[str, Any]],
        fn_name: str,
        args: Sequence[Any] = (),
    ) -> Any:
        contract = self._contract(address, abi)
        fn = getattr(contract.functions, fn_name)
        return await fn(*args).call()

    async def simulate_contract(
        self,
        address: str,
        abi: list[dict[str, Any]],
        fn_name: str,
        args: Sequence[Any] = (),
        *,
        account: str,
    ) -> Any:
        contract = self._contract(address, abi)
        fn = getattr(contract.functions, fn_name)
        return await fn(*args).call({"from": self.web3.to_checksum_address(account)})

    async def estimate_gas(self, transaction: dict[str, Any]) -> int:
        return int(await self.web3.eth.estimate_gas(transaction))

    async def multicall(self, calls: Sequence[MulticallCall]) -> list[Any]:
        """Batch reads through Multicall3 ``aggregate``; any failing call fails all."""
        if not calls:
            return []

        encoded: list[tuple[str, bytes]] = []
        for call in calls:
            contract = self._contract(call.address, call.abi)
            data = contract.encode_abi(call.fn_name, list(call.args))
            encoded.append((contract.address, normalize_call_data(data)))

        aggregator = self.web3.eth.contract(
            address=self.multicall_address, abi=MULTICALL3_ABI
        )
        _block_number, return_data = await aggregator.functions.aggregate(
            encoded
        ).call()

        results: list[Any] = []
        for call, raw in zip(calls, return_data, strict=True):
            types = output_types(call.abi, call.fn_name)
            decoded = self.web3.codec.decode(types, normalize_call_data(raw))
            results.append(unwrap_single(decoded))
        return results

    async def get_transaction_receipt(self, tx_hash: str) -> Any:
        """Raises web3's ``TransactionNotFound`` while the receipt is missing."""
        return await self.web3.eth.get_transaction_receipt(tx_hash)

    async def close(self) -> None:
        if not self.owns_provider:
            return
        logger.debug("Disconnecting RPC provider")
        await self.web3.provider.disconnect()
