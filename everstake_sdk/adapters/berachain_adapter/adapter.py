from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, assert_never

from eth_utils import is_address, to_checksum_address
from hexbytes import HexBytes

from everstake_sdk.core.adapters.BaseAdapter import BaseAdapter, maps_errors
from everstake_sdk.core.adapters.models import BoostedQueue, UnsignedTransaction
from everstake_sdk.core.config import get_rpc_url
from everstake_sdk.core.constants.berachain_abi import BGT_MAINNET_ABI, BGT_TESTNET_ABI
from everstake_sdk.core.constants.berachain_contracts import (
    BERA_RPC_URLS,
    GAS_RESERVE,
    MAINNET_BGT_CONTRACT_ADDRESS,
    TESTNET_BGT_CONTRACT_ADDRESS,
    VALIDATOR_PUBKEY_LENGTH,
    BeraNetwork,
)
from everstake_sdk.core.constants.berachain_errors import (
    BERA_ERROR_MESSAGES,
    BERA_REVERT_MESSAGES,
)
from everstake_sdk.core.utils.transaction import build_transaction, encode_call_data
from everstake_sdk.core.utils.units import to_wei
from everstake_sdk.core.utils.web3 import ChainClient, UrlOrProvider


@dataclass(frozen=True)
class MainnetBGT:
    """BGT on mainnet: boosts keyed by validator pubkey, account passed explicitly."""

    address: str
    validator: HexBytes
    abi: list[dict[str, Any]]
    network: Literal["mainnet"] = "mainnet"


@dataclass(frozen=True)
class TestnetBGT:
    """BGT on testnet: boosts keyed by validator operator address."""

    address: str
    validator: str
    abi: list[dict[str, Any]]
    network: Literal["testnet"] = "testnet"


BGTContract = MainnetBGT | TestnetBGT


class Berachain(BaseAdapter):
    """BGT boosts towards the validator given at construction.

    The network is fixed at construction; mainnet and testnet BGT contracts
    take different argument shapes for activate/drop.
    """

    adapter_type = "BERACHAIN"
    ERROR_MESSAGES = BERA_ERROR_MESSAGES
    REVERT_MESSAGES = BERA_REVERT_MESSAGES

    def __init__(
        self,
        network: BeraNetwork = "mainnet",
        url_or_provider: UrlOrProvider | None = None,
        *,
        validator: str,
        client: ChainClient | None = None,
    ) -> None:
        """``validator`` is the 48-byte pubkey (hex) on mainnet, the operator address on testnet."""
        super().__init__("berachain_adapter")

        bgt: BGTContract
        if network == "mainnet":
            bgt = MainnetBGT(
                address=MAINNET_BGT_CONTRACT_ADDRESS,
                validator=self._checked_pubkey(validator),
                abi=BGT_MAINNET_ABI,
            )
        elif network == "testnet":
            if not isinstance(validator, str) or not is_address(validator):
                self.throw_error("VALIDATOR_FORMAT_ERROR")
            bgt = TestnetBGT(
                address=TESTNET_BGT_CONTRACT_ADDRESS,
                validator=to_checksum_address(validator),
                abi=BGT_TESTNET_ABI,
            )
        else:
            self.throw_error("NETWORK_ERROR")

        self.use_client(
            client,
            url_or_provider
            or get_rpc_url("berachain", network, BERA_RPC_URLS[network]),
        )
        self.network = network
        self.bgt = bgt

    def _checked_pubkey(self, validator: str) -> HexBytes:
        try:
            pubkey = HexBytes(validator)
        except (TypeError, ValueError):
            self.throw_error("VALIDATOR_FORMAT_ERROR")
        if len(pubkey) != VALIDATOR_PUBKEY_LENGTH:
            self.throw_error("VALIDATOR_FORMAT_ERROR")
        return pubkey

    async def _read(self, fn_name: str, args: list[Any]) -> Any:
        return await self.client.read_contract(
            self.bgt.address, self.bgt.abi, fn_name, args
        )

    async def _build(self, data: str, address: str) -> UnsignedTransaction:
        return await build_transaction(
            self.client,
            data=data,
            from_address=address,
            to=self.bgt.address,
            gas_reserve=GAS_RESERVE,
        )

    def _encode(self, fn_name: str, args: list[Any]) -> str:
        return encode_call_data(self.bgt.abi, fn_name, args)

    def _require_mainnet(self) -> MainnetBGT:
        bgt = self.bgt
        if not isinstance(bgt, MainnetBGT):
            self.throw_error("NOT_AVAILABLE_NETWORK")
        return bgt

    # Reads

    @maps_errors("BALANCE_ERROR")
    async def balance_of(self, address: str) -> str:
        """BGT balance in wei, as a string."""
        address = self.checked_address(address)
        return str(await self._read("balanceOf", [address]))

    @maps_errors("ALLOWANCE_ERROR")
    async def stake_allowance(self, address: str) -> str:
        address = self.checked_address(address)
        return str(await self._read("allowance", [address, self.bgt.address]))

    @maps_errors("BOOSTED_ERROR")
    async def get_stake(self, address: str) -> str:
        address = self.checked_address(address)
        return str(await self._read("boosted", [address, self.bgt.validator]))

    @maps_errors("BOOSTS_ERROR")
    async def get_stakes(self, address: str) -> int:
        address = self.checked_address(address)
        return int(await self._read("boosts", [address]))

    @maps_errors("BOOST_QUEUE_ERROR")
    async def get_stake_in_queue(self, address: str) -> BoostedQueue:
        address = self.checked_address(address)
        last_block, balance = await self._read(
            "boostedQueue", [address, self.bgt.validator]
        )
        return BoostedQueue(
            last_block=int(last_block),
            balance=str(balance) if balance else "0",
        )

    # Transaction builders

    @maps_errors("APPROVE_FOR_STAKE_ERROR")
    async def approve_for_stake(self, address: str, amount: str) -> UnsignedTransaction:
        address = self.checked_address(address)
        data = self._encode("approve", [self.bgt.address, to_wei(amount)])
        return await self._build(data, address)

    @maps_errors("BOOST_ERROR")
    async def stake(self, address: str, amount: str) -> UnsignedTransaction:
        """Queue a boost; it becomes active after ``activate_stake``."""
        address = self.checked_address(address)
        data = self._encode("queueBoost", [self.bgt.validator, to_wei(amount)])
        return await self._build(data, address)

    @maps_errors("ACTIVATE_BOOST_ERROR")
    async def activate_stake(self, address: str) -> UnsignedTransaction:
        address = self.checked_address(address)

        bgt = self.bgt
        if isinstance(bgt, MainnetBGT):
            data = self._encode("activateBoost", [address, bgt.validator])
        elif isinstance(bgt, TestnetBGT):
            data = self._encode("activateBoost", [bgt.validator])
        else:
            assert_never(bgt)

        return await self._build(data, address)

    @maps_errors("CANCEL_BOOST_ERROR")
    async def cancel_stake_in_queue(
        self, address: str, amount: str
    ) -> UnsignedTransaction:
        address = self.checked_address(address)
        data = self._encode("cancelBoost", [self.bgt.validator, to_wei(amount)])
        return await self._build(data, address)

    @maps_errors("DROP_BOOST_ERROR")
    async def unstake(self, address: str, amount: str) -> UnsignedTransaction:
        """Drop an active boost.

        On mainnet the drop must have been queued first (``queue_unstake``) and
        ``amount`` is ignored by the contract call.
        """
        address = self.checked_address(address)

        bgt = self.bgt
        if isinstance(bgt, MainnetBGT):
            data = self._encode("dropBoost", [address, bgt.validator])
        elif isinstance(bgt, TestnetBGT):
            data = self._encode("dropBoost", [bgt.validator, to_wei(amount)])
        else:
            assert_never(bgt)

        return await self._build(data, address)

    @maps_errors("QUEUE_DROP_BOOST_ERROR")
    async def queue_unstake(self, address: str, amount: str) -> UnsignedTransaction:
        bgt = self._require_mainnet()
        address = self.checked_address(address)
        data = self._encode("queueDropBoost", [bgt.validator, to_wei(amount)])
        return await self._build(data, address)

    @maps_errors("CANCEL_DROP_BOOST_ERROR")
    async def cancel_unstake(self, address: str, amount: str) -> UnsignedTransaction:
        bgt = self._require_mainnet()
        address = self.checked_address(address)
        data = self._encode("cancelDropBoost", [bgt.validator, to_wei(amount)])
        return await self._build(data, address)
