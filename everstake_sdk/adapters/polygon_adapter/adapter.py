from __future__ import annotations

from decimal import Decimal

from web3.exceptions import TransactionNotFound

from everstake_sdk.core.adapters.BaseAdapter import BaseAdapter, maps_errors
from everstake_sdk.core.adapters.models import (
    TransactionLoadingStatus,
    UnbondInfo,
    UnsignedTransaction,
)
from everstake_sdk.core.clients.StakingApiClient import (
    STAKING_API_CLIENT,
    StakingApiClient,
)
from everstake_sdk.core.config import get_rpc_url
from everstake_sdk.core.constants.polygon_abi import (
    ERC20_APPROVE_ABI,
    STAKE_MANAGER_ABI,
    VALIDATOR_SHARE_ABI,
)
from everstake_sdk.core.constants.polygon_contracts import (
    CLAIM_REWARDS_BASE_GAS,
    CLAIM_UNDELEGATE_BASE_GAS,
    DELEGATE_BASE_GAS,
    MATIC_TOKEN_ADDRESS,
    MIN_AMOUNT,
    POL_TOKEN_ADDRESS,
    POLYGON_RPC_URL,
    RESTAKE_BASE_GAS,
    STAKE_MANAGER_ADDRESS,
    STATS_CHAIN,
    UNDELEGATE_BASE_GAS,
    VALIDATOR_SHARE_ADDRESS,
    WITHDRAW_EPOCH_DELAY,
)
from everstake_sdk.core.constants.polygon_errors import (
    POLYGON_ERROR_MESSAGES,
    POLYGON_REVERT_MESSAGES,
)
from everstake_sdk.core.utils.transaction import build_transaction, encode_call_data
from everstake_sdk.core.utils.units import format_amount, from_wei, to_decimal, to_wei
from everstake_sdk.core.utils.web3 import ChainClient, UrlOrProvider


class Polygon(BaseAdapter):
    """Polygon PoS delegation through the Everstake ValidatorShare on Ethereum L1.

    ``is_pol`` switches between the legacy MATIC token and POL: it selects the
    token contract for approvals and the ``POL``-suffixed ValidatorShare
    functions. Delegate and undelegate require a valid Everstake API token.
    """

    adapter_type = "POLYGON"
    ERROR_MESSAGES = POLYGON_ERROR_MESSAGES
    REVERT_MESSAGES = POLYGON_REVERT_MESSAGES

    def __init__(
        self,
        url_or_provider: UrlOrProvider | None = None,
        *,
        client: ChainClient | None = None,
        api_client: StakingApiClient | None = None,
    ) -> None:
        super().__init__("polygon_adapter")
        self.use_client(
            client,
            url_or_provider or get_rpc_url("polygon", "mainnet", POLYGON_RPC_URL),
        )
        self.api_client = api_client or STAKING_API_CLIENT

    @staticmethod
    def _token_address(is_pol: bool) -> str:
        return POL_TOKEN_ADDRESS if is_pol else MATIC_TOKEN_ADDRESS

    @staticmethod
    def _fixed_gas_tx(data: str, address: str, gas_limit: int) -> UnsignedTransaction:
        return UnsignedTransaction(
            **{
                "from": address,
                "to": VALIDATOR_SHARE_ADDRESS,
                "data": data,
                "gas_limit": gas_limit,
            }
        )

    async def _require_token(self, token: str) -> None:
        if not await self.api_client.check_token(token):
            self.throw_error("TOKEN_ERROR")

    def _check_min_amount(self, amount_wei: int) -> None:
        if amount_wei < MIN_AMOUNT:
            self.throw_error("MIN_AMOUNT_ERROR", format_amount(from_wei(MIN_AMOUNT)))

    @maps_errors("TRANSACTION_LOADING_ERR")
    async def is_transaction_loading(self, tx_hash: str) -> TransactionLoadingStatus:
        try:
            await self.client.get_transaction_receipt(tx_hash)
        except TransactionNotFound:
            return TransactionLoadingStatus(result=True)
        return TransactionLoadingStatus(result=False)

    @maps_errors("APPROVE_ERR")
    async def approve(
        self, address: str, amount: str, is_pol: bool = False
    ) -> UnsignedTransaction:
        """Approve the StakeManager to pull ``amount`` MATIC (or POL)."""
        address = self.checked_address(address)
        amount_wei = to_wei(amount)
        self._check_min_amount(amount_wei)

        data = encode_call_data(
            ERC20_APPROVE_ABI, "approve", [STAKE_MANAGER_ADDRESS, amount_wei]
        )
        return await build_transaction(
            self.client,
            data=data,
            from_address=address,
            to=self._token_address(is_pol),
        )

    @maps_errors("DELEGATE_ERR")
    async def delegate(
        self, token: str, address: str, amount: str, is_pol: bool = False
    ) -> UnsignedTransaction:
        await self._require_token(token)
        address = self.checked_address(address)
        amount_wei = to_wei(amount)
        self._check_min_amount(amount_wei)

        allowance = await self.get_allowance(address, is_pol)
        if allowance < amount_wei:
            self.throw_error("ALLOWANCE_ERR")

        data = encode_call_data(
            VALIDATOR_SHARE_ABI,
            "buyVoucherPOL" if is_pol else "buyVoucher",
            [amount_wei, 0],
        )
        tx = self._fixed_gas_tx(data, address, DELEGATE_BASE_GAS)

        await self.api_client.set_stats(
            token=token,
            action="stake",
            amount=float(amount),
            address=address,
            chain=STATS_CHAIN,
        )
        return tx

    @maps_errors("UNDELEGATE_ERR")
    async def undelegate(
        self, token: str, address: str, amount: str, is_pol: bool = False
    ) -> UnsignedTransaction:
        await self._require_token(token)
        address = self.checked_address(address)
        amount_wei = to_wei(amount)

        delegated = await self.get_total_delegate(address)
        if delegated < to_decimal(amount):
            self.throw_error("DELEGATED_BALANCE_ERR")

        data = encode_call_data(
            VALIDATOR_SHARE_ABI,
            "sellVoucher_newPOL" if is_pol else "sellVoucher_new",
            [amount_wei, amount_wei],
        )
        tx = self._fixed_gas_tx(data, address, UNDELEGATE_BASE_GAS)

        await self.api_client.set_stats(
            token=token,
            action="unstake",
            amount=float(amount),
            address=address,
            chain=STATS_CHAIN,
        )
        return tx

    @maps_errors("CLAIM_UNDELEGATE_ERR")
    async def claim_undelegate(
        self, address: str, unbond_nonce: int = 0, is_pol: bool = False
    ) -> UnsignedTransaction:
        """Claim an unbonded position; nonce 0 means the most recent one."""
        address = self.checked_address(address)

        unbond = await self.get_unbond(address, unbond_nonce)
        if unbond.amount == 0:
            self.throw_error("NOTHING_TO_CLAIM_ERR")

        current_epoch = await self.get_current_epoch()
        if current_epoch < unbond.withdraw_epoch + WITHDRAW_EPOCH_DELAY:
            self.throw_error("WITHDRAW_EPOCH_DELAY_ERR")

        data = encode_call_data(
            VALIDATOR_SHARE_ABI,
            "unstakeClaimTokens_newPOL" if is_pol else "unstakeClaimTokens_new",
            [unbond.unbond_nonce],
        )
        return self._fixed_gas_tx(data, address, CLAIM_UNDELEGATE_BASE_GAS)

    @maps_errors("REWARD_ERR")
    async def reward(self, address: str, is_pol: bool = False) -> UnsignedTransaction:
        address = self.checked_address(address)
        data = encode_call_data(
            VALIDATOR_SHARE_ABI, "withdrawRewardsPOL" if is_pol else "withdrawRewards"
        )
        return self._fixed_gas_tx(data, address, CLAIM_REWARDS_BASE_GAS)

    @maps_errors("RESTAKE_ERR")
    async def restake(self, address: str, is_pol: bool = False) -> UnsignedTransaction:
        address = self.checked_address(address)
        data = encode_call_data(
            VALIDATOR_SHARE_ABI, "restakePOL" if is_pol else "restake"
        )
        return self._fixed_gas_tx(data, address, RESTAKE_BASE_GAS)

    @maps_errors("GET_REWARD_ERR")
    async def get_reward(self, address: str) -> Decimal:
        address = self.checked_address(address)
        rewards = await self.client.read_contract(
            VALIDATOR_SHARE_ADDRESS, VALIDATOR_SHARE_ABI, "getLiquidRewards", [address]
        )
        return from_wei(rewards)

    @maps_errors("GET_ALLOWANCE_ERR")
    async def get_allowance(
        self,
        owner: str,
        is_pol: bool = False,
        spender: str = STAKE_MANAGER_ADDRESS,
    ) -> int:
        """Raw allowance in wei."""
        owner = self.checked_address(owner)
        spender = self.checked_address(spender)
        allowance = await self.client.read_contract(
            self._token_address(is_pol), ERC20_APPROVE_ABI, "allowance", [owner, spender]
        )
        return int(allowance)

    @maps_errors("GET_TOTAL_DELEGATE_ERR")
    async def get_total_delegate(self, address: str) -> Decimal:
        address = self.checked_address(address)
        amount, _rate = await self.client.read_contract(
            VALIDATOR_SHARE_ADDRESS, VALIDATOR_SHARE_ABI, "getTotalStake", [address]
        )
        return from_wei(amount)

    @maps_errors("GET_UNBOND_ERR")
    async def get_unbond(self, address: str, unbond_nonce: int = 0) -> UnbondInfo:
        address = self.checked_address(address)
        nonce = int(unbond_nonce) or await self.get_unbond_nonces(address)

        shares, withdraw_epoch = await self.client.read_contract(
            VALIDATOR_SHARE_ADDRESS,
            VALIDATOR_SHARE_ABI,
            "unbonds_new",
            [address, nonce],
        )
        return UnbondInfo(
            amount=from_wei(shares),
            withdraw_epoch=int(withdraw_epoch),
            unbond_nonce=nonce,
        )

    @maps_errors("GET_UNBOND_NONCE_ERR")
    async def get_unbond_nonces(self, address: str) -> int:
        address = self.checked_address(address)
        nonce = await self.client.read_contract(
            VALIDATOR_SHARE_ADDRESS, VALIDATOR_SHARE_ABI, "unbondNonces", [address]
        )
        return int(nonce)

    @maps_errors("GET_CURRENT_EPOCH_ERR")
    async def get_current_epoch(self) -> int:
        epoch = await self.client.read_contract(
            STAKE_MANAGER_ADDRESS, STAKE_MANAGER_ABI, "currentEpoch"
        )
        return int(epoch)
