from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from web3 import AsyncHTTPProvider, Web3

from everstake_sdk.core.constants.base import MULTICALL3_ADDRESS
from everstake_sdk.core.constants.ethereum_abi import ACCOUNTING_ABI
from everstake_sdk.core.utils.multicall import MULTICALL3_ABI, MulticallCall
from everstake_sdk.core.utils.web3 import ChainClient, make_web3

ACCOUNTING = "0x7a7f0b3c23C23a31cFcb0c44709be70d4D545c6e"
USER = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


def test_make_web3_from_url_retries_once():
    web3 = make_web3("http://localhost:8545")
    assert isinstance(web3.provider, AsyncHTTPProvider)
    assert web3.provider.exception_retry_configuration.retries == 1
    assert web3.provider.exception_retry_configuration.backoff_factor == 0.3


@pytest.mark.asyncio
class TestMulticall:
    @pytest.fixture
    def client(self):
        return ChainClient("http://localhost:8545")

    async def test_empty_calls_skip_rpc(self, client):
        assert await client.multicall([]) == []

    async def test_decodes_each_result(self, client):
        codec = Web3().codec
        return_data = [
            codec.encode(["uint256"], [5 * 10**18]),
            codec.encode(["uint256", "uint256"], [1, 2]),
        ]
        aggregator = MagicMock()
        aggregator.functions.aggregate.return_value.call = AsyncMock(
            return_value=(123, return_data)
        )
        real_contract = client.web3.eth.contract

        def contract(address=None, abi=None):
            if abi is MULTICALL3_ABI:
                assert address == MULTICALL3_ADDRESS
                return aggregator
            return real_contract(address=address, abi=abi)

        calls = [
            MulticallCall(ACCOUNTING, ACCOUNTING_ABI, "balance"),
            MulticallCall(ACCOUNTING, ACCOUNTING_ABI, "withdrawRequest", (USER,)),
        ]
        with patch.object(client.web3.eth, "contract", side_effect=contract):
            results = await client.multicall(calls)

        assert results == [5 * 10**18, (1, 2)]
        encoded = aggregator.functions.aggregate.call_args.args[0]
        assert [target for target, _ in encoded] == [ACCOUNTING, ACCOUNTING]
        assert all(isinstance(data, bytes) for _, data in encoded)

    async def test_failure_propagates(self, client):
        aggregator = MagicMock()
        aggregator.functions.aggregate.return_value.call = AsyncMock(
            side_effect=ValueError("Multicall3: call failed")
        )
        real_contract = client.web3.eth.contract

        def contract(address=None, abi=None):
            if abi is MULTICALL3_ABI:
                return aggregator
            return real_contract(address=address, abi=abi)

        with patch.object(client.web3.eth, "contract", side_effect=contract):
            with pytest.raises(ValueError, match="call failed"):
                await client.multicall(
                    [MulticallCall(ACCOUNTING, ACCOUNTING_ABI, "balance")]
                )


@pytest.mark.asyncio
class TestClose:
    async def test_disconnects_provider_built_from_url(self):
        client = ChainClient("http://localhost:8545")

        with patch.object(client.web3.provider, "disconnect", new=AsyncMock()) as disconnect:
            await client.close()

        disconnect.assert_awaited_once()

    async def test_leaves_caller_provider_connected(self):
        provider = AsyncHTTPProvider("http://localhost:8545")
        client = ChainClient(provider)

        with patch.object(provider, "disconnect", new=AsyncMock()) as disconnect:
            await client.close()

        disconnect.assert_not_awaited()
        assert client.web3.provider is provider
