from __future__ import annotations

from typing import Any, NotRequired, TypedDict

from everstake_sdk.core.clients.EverstakeClient import EverstakeClient


class ValidatorsQueueStats(TypedDict):
    validator_activation_time: float
    validator_adding_delay: float
    validator_exit_time: float
    validator_withdraw_time: float


class EthAccountTransaction(TypedDict):
    hash: NotRequired[str]
    action: NotRequired[str]
    amount: NotRequired[str]
    status: NotRequired[str]
    timestamp: NotRequired[int]


class StakingApiClient(EverstakeClient):
    """Everstake wallet/dashboard endpoints used around the staking flows."""

    async def check_token(self, token: str) -> bool:
        data = await self._request(
            "GET",
            f"/everstake-wallet/token/check/{token}",
            error_prefix="Failed to check token",
        )
        return bool(data["result"])

    async def set_stats(
        self,
        *,
        token: str,
        action: str,
        amount: float,
        address: str,
        chain: str,
    ) -> None:
        await self._request(
            "POST",
            "/everstake-wallet/stats/set",
            error_prefix="Failed to set stats",
            json={
                "token": token,
                "action": action,
                "amount": amount,
                "address": address,
                "chain": chain,
            },
        )

    async def create_token(self, name: str, type_: str) -> Any:
        return await self._request(
            "POST",
            "/everstake-wallet/token/create",
            error_prefix="Failed to create token",
            json={"name": name, "type": type_},
        )

    async def get_assets(self, chain: str) -> Any:
        return await self._request(
            "GET",
            "/everstake-dashboard/chain",
            error_prefix="Failed to get assets",
            params={"name": chain.lower()},
        )

    async def get_eth_validators_queue_stats(self) -> ValidatorsQueueStats:
        return await self._request(
            "GET",
            "/everstake-eth-api/validators/queue",
            error_prefix="Failed to get ETH validators queue stats",
        )

    async def get_eth_account_transactions(
        self,
        account: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        action: str | None = None,
    ) -> list[EthAccountTransaction]:
        params: dict[str, str | int] = {}
        if limit is not None:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset
        if action:
            params["action"] = action
        return await self._request(
            "GET",
            f"/everstake-eth-api/transactions/{account}",
            error_prefix="Failed to get ETH account transactions",
            params=params,
        )


STAKING_API_CLIENT = StakingApiClient()

check_token = STAKING_API_CLIENT.check_token
set_stats = STAKING_API_CLIENT.set_stats
create_token = STAKING_API_CLIENT.create_token
get_assets = STAKING_API_CLIENT.get_assets
get_eth_validators_queue_stats = STAKING_API_CLIENT.get_eth_validators_queue_stats
get_eth_account_transactions = STAKING_API_CLIENT.get_eth_account_transactions
