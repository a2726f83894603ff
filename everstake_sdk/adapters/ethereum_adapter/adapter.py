from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal, localcontext
from typing import Any

from everstake_sdk.core.adapters.BaseAdapter import BaseAdapter, maps_errors
from everstake_sdk.core.adapters.models import (
    UnsignedTransaction,
    ValidatorInfo,
    WithdrawRequest,
    WithdrawRequestQueueParams,
)
from everstake_sdk.core.config import get_rpc_url
from everstake_sdk.core.constants.base import UINT16_MAX
from everstake_sdk.core.constants.ethereum_abi import ACCOUNTING_ABI, POOL_ABI
from everstake_sdk.core.constants.ethereum_contracts import (
    ETH_GAS_RESERVE,
    ETH_MIN_AMOUNT,
    ETH_NETWORK_ADDRESSES,
    ETH_RPC_URLS,
    EthNetwork,
    EthNetworkAddresses,
)
from everstake_sdk.core.constants.ethereum_errors import (
    ETH_ERROR_MESSAGES,
    ETH_REVERT_MESSAGES,
)
from everstake_sdk.core.utils.multicall import MulticallCall
from everstake_sdk.core.utils.transaction import build_transaction, encode_call_data
from everstake_sdk.core.utils.units import (
    DECIMAL_CONTEXT,
    format_amount,
    from_wei,
    to_decimal,
    to_wei,
)
from everstake_sdk.core.utils.web3 import ChainClient, UrlOrProvider

POOL_FEE_DENOMINATOR = 10_000

POOL_BALANCE_METHODS = (
    "balance",
    "pendingBalance",
    "pendingDepositedBalance",
    "pendingRestakedRewards",
    "readyforAutocompoundRewardsAmount",
)

USER_BALANCE_METHODS = (
    "pendingBalanceOf",
    "pendingDepositedBalanceOf",
    "pendingRestakedRewardOf",
    "autocompoundBalanceOf",
    "depositedBalanceOf",
)

VALIDATOR_STATUSES: dict[int, str] = {
    0: "unknown",
    1: "pending",
    2: "deposited",
}


class Ethereum(BaseAdapter):
    """Everstake ETH pool: accounting/pool reads and unsigned transaction builders.

    Amounts passed in are ether decimal strings; amounts returned are ether
    ``Decimal`` values. ``select_network`` rebinds contracts and the RPC client
    in place and must not run concurrently with other calls on the same
    instance. Networks without a bundled deployment (hoodi) need ``addresses``.
    """

    adapter_type = "ETHEREUM"
    ERROR_MESSAGES = ETH_ERROR_MESSAGES
    REVERT_MESSAGES = ETH_REVERT_MESSAGES

    def __init__(
        self,
        network: EthNetwork = "mainnet",
        url_or_provider: UrlOrProvider | None = None,
        *,
        client: ChainClient | None = None,
        addresses: EthNetworkAddresses | None = None,
    ) -> None:
        super().__init__("ethereum_adapter")
        self.min_amount = ETH_MIN_AMOUNT
        self._bind_network(network, url_or_provider, client, addresses)

    def _resolve_addresses(
        self, network: str, addresses: EthNetworkAddresses | None
    ) -> EthNetworkAddresses:
        if addresses is None:
            bundled = ETH_NETWORK_ADDRESSES.get(network)
            if bundled is None:
                self.throw_error("NETWORK_ADDRESSES_REQUIRED", network)
            return bundled
        return {
            "accounting": self.checked_address(addresses.get("accounting")),
            "pool": self.checked_address(addresses.get("pool")),
            "withdraw_treasury": self.checked_address(
                addresses.get("withdraw_treasury")
            ),
        }

    def _bind_network(
        self,
        network: str,
        url_or_provider: UrlOrProvider | None,
        client: ChainClient | None,
        addresses: EthNetworkAddresses | None,
    ) -> None:
        if network not in ETH_RPC_URLS:
            self.throw_error("NETWORK_NOT_SUPPORTED", network)
        resolved = self._resolve_addresses(network, addresses)

        self.use_client(
            client,
            url_or_provider
            or get_rpc_url("ethereum", network, ETH_RPC_URLS[network]),
        )
        self.network = network
        self.accounting_address = resolved["accounting"]
        self.pool_address = resolved["pool"]
        self.withdraw_treasury_address = resolved["withdraw_treasury"]
        self.logger.debug(f"Bound to {network} (pool {self.pool_address})")

    def select_network(
        self,
        network: EthNetwork,
        url_or_provider: UrlOrProvider | None = None,
        *,
        client: ChainClient | None = None,
        addresses: EthNetworkAddresses | None = None,
    ) -> Ethereum:
        """Rebind to ``network``; a failed call leaves the current binding untouched."""
        self._bind_network(network, url_or_provider, client, addresses)
        return self

    async def _read_accounting(self, fn_name: str, args: Sequence[Any] = ()) -> Any:
        return await self.client.read_contract(
            self.accounting_address, ACCOUNTING_ABI, fn_name, args
        )

    async def _read_pool(self, fn_name: str, args: Sequence[Any] = ()) -> Any:
        return await self.client.read_contract(
            self.pool_address, POOL_ABI, fn_name, args
        )

    async def _build(
        self, data: str, address: str, to: str, value: int = 0
    ) -> UnsignedTransaction:
        return await build_transaction(
            self.client,
            data=data,
            from_address=address,
            to=to,
            value=value,
            gas_reserve=ETH_GAS_RESERVE,
        )

    # Pool-wide reads

    @maps_errors("BALANCE_ERROR")
    async def balance(self) -> Decimal:
        return from_wei(await self._read_accounting("balance"))

    @maps_errors("PENDING_BALANCE_ERROR")
    async def pending_balance(self) -> Decimal:
        return from_wei(await self._read_accounting("pendingBalance"))

    @maps_errors("PENDING_DEPOSITED_BALANCE_ERROR")
    async def pending_deposited_balance(self) -> Decimal:
        return from_wei(await self._read_accounting("pendingDepositedBalance"))

    @maps_errors("PENDING_RESTAKED_REWARDS_ERROR")
    async def pending_restaked_rewards(self) -> Decimal:
        return from_wei(await self._read_accounting("pendingRestakedRewards"))

    @maps_errors("READY_FOR_AUTOCOMPOUND_REWARDS_AMOUNT_ERROR")
    async def readyfor_autocompound_rewards_amount(self) -> Decimal:
        return from_wei(
            await self._read_accounting("readyforAutocompoundRewardsAmount")
        )

    @maps_errors("GET_POOL_FEE_ERROR")
    async def get_pool_fee(self) -> Decimal:
        """Pool fee as a fraction (contract stores basis points)."""
        fee = await self._read_accounting("getPoolFee")
        with localcontext(DECIMAL_CONTEXT):
            return Decimal(int(fee)) / POOL_FEE_DENOMINATOR

    @maps_errors("WITHDRAW_REQUEST_QUEUE_PARAMS_ERROR")
    async def withdraw_request_queue_params(self) -> WithdrawRequestQueueParams:
        requested, interchange, filled, claimed = await self._read_accounting(
            "withdrawRequestQueueParams"
        )
        return WithdrawRequestQueueParams(
            withdraw_requested=from_wei(requested),
            interchange_allowed=from_wei(interchange),
            filled=from_wei(filled),
            claimed=from_wei(claimed),
        )

    @maps_errors("CLOSE_VALIDATORS_STAT_ERROR")
    async def close_validators_stat(self) -> int:
        return int(await self._read_accounting("closeValidatorsStat"))

    @maps_errors("POOL_BALANCES_ERROR")
    async def pool_balances(self) -> dict[str, str]:
        """All pool balances in one multicall round trip; fails as a whole."""
        calls = [
            MulticallCall(self.accounting_address, ACCOUNTING_ABI, method)
            for method in POOL_BALANCE_METHODS
        ]
        results = await self.client.multicall(calls)
        return {
            method: format_amount(from_wei(raw))
            for method, raw in zip(POOL_BALANCE_METHODS, results, strict=True)
        }

    # Per-user reads

    @maps_errors("PENDING_BALANCE_OF_ERROR")
    async def pending_balance_of(self, address: str) -> Decimal:
        address = self.checked_address(address)
        return from_wei(await self._read_accounting("pendingBalanceOf", [address]))

    @maps_errors("PENDING_DEPOSITED_BALANCE_OF_ERROR")
    async def pending_deposited_balance_of(self, address: str) -> Decimal:
        address = self.checked_address(address)
        return from_wei(
            await self._read_accounting("pendingDepositedBalanceOf", [address])
        )

    @maps_errors("DEPOSITED_BALANCE_OF_ERROR")
    async def deposited_balance_of(self, address: str) -> Decimal:
        address = self.checked_address(address)
        return from_wei(await self._read_accounting("depositedBalanceOf", [address]))

    @maps_errors("PENDING_RESTAKED_REWARD_OF_ERROR")
    async def pending_restaked_reward_of(self, address: str) -> Decimal:
        address = self.checked_address(address)
        return from_wei(
            await self._read_accounting("pendingRestakedRewardOf", [address])
        )

    @maps_errors("RESTAKED_REWARD_OF_ERROR")
    async def restaked_reward_of(self, address: str) -> Decimal:
        address = self.checked_address(address)
        return from_wei(await self._read_accounting("restakedRewardOf", [address]))

    @maps_errors("AUTOCOMPOUND_BALANCE_OF_ERROR")
    async def autocompound_balance_of(self, address: str) -> Decimal:
        address = self.checked_address(address)
        return from_wei(
            await self._read_accounting("autocompoundBalanceOf", [address])
        )

    @maps_errors("WITHDRAW_REQUEST_ERROR")
    async def withdraw_request(self, address: str) -> WithdrawRequest:
        address = self.checked_address(address)
        requested, ready_for_claim = await self._read_accounting(
            "withdrawRequest", [address]
        )
        return WithdrawRequest(
            requested=from_wei(requested),
            ready_for_claim=from_wei(ready_for_claim),
        )

    @maps_errors("USER_BALANCES_ERROR")
    async def user_balances(self, address: str) -> dict[str, str]:
        address = self.checked_address(address)
        calls = [
            MulticallCall(self.accounting_address, ACCOUNTING_ABI, method, (address,))
            for method in USER_BALANCE_METHODS
        ]
        results = await self.client.multicall(calls)
        return {
            method: format_amount(from_wei(raw))
            for method, raw in zip(USER_BALANCE_METHODS, results, strict=True)
        }

    # Validators

    @maps_errors("GET_PENDING_VALIDATOR_COUNT_ERROR")
    async def get_pending_validator_count(self) -> int:
        return int(await self._read_pool("getPendingValidatorCount"))

    @maps_errors("GET_PENDING_VALIDATOR_ERROR")
    async def get_pending_validator(self, index: int) -> str:
        pubkey = await self._read_pool("getPendingValidator", [int(index)])
        return "0x" + bytes(pubkey).hex()

    @maps_errors("GET_VALIDATOR_COUNT_ERROR")
    async def get_validator_count(self) -> int:
        return int(await self._read_pool("getValidatorCount"))

    @maps_errors("GET_VALIDATOR_ERROR")
    async def get_validator(self, index: int) -> ValidatorInfo:
        pubkey, status = await self._read_pool("getValidator", [int(index)])
        return ValidatorInfo(
            pubkey="0x" + bytes(pubkey).hex(),
            status=self.get_status_from_code(status),
        )

    @maps_errors("MIN_STAKE_AMOUNT_ERROR")
    async def min_stake_amount(self) -> Decimal:
        return from_wei(await self._read_pool("minStakeAmount"))

    def get_status_from_code(self, code: int) -> str:
        return VALIDATOR_STATUSES.get(int(code), "invalid status")

    # Transaction builders

    @maps_errors("STAKE_ERROR")
    async def stake(
        self, address: str, amount: str, source: str = "0"
    ) -> UnsignedTransaction:
        address = self.checked_address(address)
        if not isinstance(amount, str):
            self.throw_error("WRONG_TYPE_MESSAGE")

        amount_wei = to_wei(amount)
        if amount_wei < self.min_amount:
            self.throw_error("MIN_AMOUNT_ERROR", self.min_amount)

        data = encode_call_data(POOL_ABI, "stake", [int(source)])
        return await self._build(data, address, self.pool_address, value=amount_wei)

    async def _checked_unstake_args(
        self,
        address: str,
        amount: str,
        allowed_interchange_num: int,
        source: str,
    ) -> list[int]:
        balance = await self.autocompound_balance_of(address)
        # uint16 on-chain; larger requests saturate instead of failing.
        interchange = min(int(allowed_interchange_num), UINT16_MAX)

        if balance < to_decimal(amount):
            self.throw_error("MAX_AMOUNT_FOR_UNSTAKE_ERROR", format_amount(balance))

        return [to_wei(amount), interchange, int(source)]

    @maps_errors("UNSTAKE_ERROR")
    async def unstake(
        self,
        address: str,
        amount: str,
        allowed_interchange_num: int = 0,
        source: str = "0",
    ) -> UnsignedTransaction:
        """Unstake from the autocompound balance.

        The contract pays out instantly from pending deposits where it can and
        queues a withdraw request for the rest.
        """
        address = self.checked_address(address)
        if not isinstance(amount, str):
            self.throw_error("WRONG_TYPE_MESSAGE")

        args = await self._checked_unstake_args(
            address, amount, allowed_interchange_num, source
        )
        data = encode_call_data(POOL_ABI, "unstake", args)
        return await self._build(data, address, self.pool_address)

    @maps_errors("SIMULATE_UNSTAKE_ERROR")
    async def simulate_unstake(
        self,
        address: str,
        amount: str,
        allowed_interchange_num: int = 1,
        source: str = "0",
    ) -> Decimal:
        """Instantly unstakable amount for ``amount``, without building a transaction."""
        address = self.checked_address(address)
        if not isinstance(amount, str):
            self.throw_error("WRONG_TYPE_MESSAGE")

        args = await self._checked_unstake_args(
            address, amount, allowed_interchange_num, source
        )
        result = await self.client.simulate_contract(
            self.pool_address, POOL_ABI, "unstake", args, account=address
        )
        return from_wei(result)

    @maps_errors("UNSTAKE_PENDING_ERROR")
    async def unstake_pending(self, address: str, amount: str) -> UnsignedTransaction:
        address = self.checked_address(address)

        pending = await self.pending_balance_of(address)
        if pending == 0:
            self.throw_error("ZERO_UNSTAKE_MESSAGE")

        requested = to_decimal(amount)
        if requested > pending:
            self.throw_error(
                "AMOUNT_GREATER_THAN_PENDING_BALANCE_ERROR", format_amount(pending)
            )

        with localcontext(DECIMAL_CONTEXT):
            remainder = pending - requested
        # A non-zero leftover must still be a valid stake on its own.
        if remainder != 0:
            min_stake = await self.min_stake_amount()
            if remainder < min_stake:
                self.throw_error(
                    "INSUFFICIENT_PENDING_BALANCE_ERROR", format_amount(min_stake)
                )

        data = encode_call_data(POOL_ABI, "unstakePending", [to_wei(amount)])
        return await self._build(data, address, self.pool_address)

    @maps_errors("CLAIM_WITHDRAW_REQUEST_ERROR")
    async def claim_withdraw_request(self, address: str) -> UnsignedTransaction:
        address = self.checked_address(address)

        request = await self.withdraw_request(address)
        if request.requested == 0:
            self.throw_error("ZERO_UNSTAKE_ERROR")
        if request.ready_for_claim != request.requested:
            self.throw_error("NOT_FILLED_UNSTAKE_MESSAGE")

        data = encode_call_data(ACCOUNTING_ABI, "claimWithdrawRequest")
        return await self._build(data, address, self.accounting_address)

    @maps_errors("AUTOCOMPOUND_ERROR")
    async def autocompound(self, address: str) -> UnsignedTransaction:
        address = self.checked_address(address)

        rewards = await self.readyfor_autocompound_rewards_amount()
        if rewards == 0:
            self.throw_error("NO_REWARDS_MESSAGE")

        data = encode_call_data(ACCOUNTING_ABI, "autocompound")
        return await self._build(data, address, self.accounting_address)

    @maps_errors("ACTIVATE_STAKE_ERROR")
    async def activate_stake(self, address: str) -> UnsignedTransaction:
        address = self.checked_address(address)
        data = encode_call_data(POOL_ABI, "activateStake")
        return await self._build(data, address, self.pool_address)
