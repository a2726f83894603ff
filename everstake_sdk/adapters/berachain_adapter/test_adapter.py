from unittest.mock import AsyncMock, MagicMock

import pytest
from hexbytes import HexBytes
from loguru import logger
from web3 import Web3

from everstake_sdk.adapters.berachain_adapter.adapter import Berachain, MainnetBGT
from everstake_sdk.core.constants.berachain_abi import BGT_MAINNET_ABI, BGT_TESTNET_ABI
from everstake_sdk.core.constants.berachain_contracts import (
    GAS_RESERVE,
    MAINNET_BGT_CONTRACT_ADDRESS,
    TESTNET_BGT_CONTRACT_ADDRESS,
)
from everstake_sdk.core.errors import StakingError

USER = "0x3333333333333333333333333333333333333333"
PUBKEY = "0x" + "ab" * 48
OPERATOR = "0x4444444444444444444444444444444444444444"


def _decode(abi, data):
    fn, params = Web3().eth.contract(abi=abi).decode_function_input(data)
    return fn.fn_name, params


@pytest.fixture
def client():
    mock = MagicMock()
    mock.read_contract = AsyncMock()
    mock.estimate_gas = AsyncMock(return_value=80_000)
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def mainnet(client):
    return Berachain("mainnet", validator=PUBKEY, client=client)


@pytest.fixture
def testnet(client):
    return Berachain("testnet", validator=OPERATOR, client=client)


def test_adapter_type(mainnet):
    assert mainnet.adapter_type == "BERACHAIN"


def test_network_binding(mainnet, testnet):
    assert isinstance(mainnet.bgt, MainnetBGT)
    assert mainnet.bgt.address == MAINNET_BGT_CONTRACT_ADDRESS
    assert mainnet.bgt.validator == HexBytes(PUBKEY)
    assert testnet.bgt.network == "testnet"
    assert testnet.bgt.address == TESTNET_BGT_CONTRACT_ADDRESS
    assert testnet.bgt.validator == OPERATOR


def test_unknown_network_rejected_at_construction(client):
    with pytest.raises(StakingError) as exc:
        Berachain("devnet", validator=PUBKEY, client=client)
    assert exc.value.code == "NETWORK_ERROR"


def test_validator_is_required(client):
    with pytest.raises(TypeError):
        Berachain("mainnet", client=client)


@pytest.mark.parametrize(
    "network,validator",
    [
        ("mainnet", "0x" + "ab" * 47),
        ("mainnet", "0xnot-hex"),
        ("mainnet", OPERATOR),
        ("testnet", PUBKEY),
        ("testnet", "not-an-address"),
    ],
)
def test_malformed_validator_rejected(client, network, validator):
    with pytest.raises(StakingError) as exc:
        Berachain(network, validator=validator, client=client)
    assert exc.value.code == "VALIDATOR_FORMAT_ERROR"


@pytest.mark.asyncio
async def test_builders_encode_the_configured_validator(client):
    other = "0x" + "cd" * 48
    adapter = Berachain("mainnet", validator=other, client=client)

    tx = await adapter.stake(USER, "1")

    _, params = _decode(BGT_MAINNET_ABI, tx.data)
    assert params["pubkey"] == bytes(HexBytes(other))


@pytest.mark.asyncio
async def test_stake_queues_boost_with_gas_reserve(mainnet, client):
    tx = await mainnet.stake(USER, "2")

    assert tx.to == MAINNET_BGT_CONTRACT_ADDRESS
    assert tx.gas_limit == 80_000 + GAS_RESERVE
    assert tx.value == 0
    fn_name, params = _decode(BGT_MAINNET_ABI, tx.data)
    assert fn_name == "queueBoost"
    assert params["pubkey"] == bytes(HexBytes(PUBKEY))
    assert params["amount"] == 2 * 10**18


@pytest.mark.asyncio
async def test_activate_stake_mainnet_shape(mainnet):
    tx = await mainnet.activate_stake(USER)

    fn_name, params = _decode(BGT_MAINNET_ABI, tx.data)
    assert fn_name == "activateBoost"
    assert params["user"] == USER
    assert params["pubkey"] == bytes(HexBytes(PUBKEY))


@pytest.mark.asyncio
async def test_activate_stake_testnet_shape(testnet):
    tx = await testnet.activate_stake(USER)

    assert tx.to == TESTNET_BGT_CONTRACT_ADDRESS
    fn_name, params = _decode(BGT_TESTNET_ABI, tx.data)
    assert fn_name == "activateBoost"
    assert params == {"validator": OPERATOR}


@pytest.mark.asyncio
async def test_unstake_mainnet_shape(mainnet):
    tx = await mainnet.unstake(USER, "1")

    fn_name, params = _decode(BGT_MAINNET_ABI, tx.data)
    assert fn_name == "dropBoost"
    assert params["user"] == USER


@pytest.mark.asyncio
async def test_unstake_testnet_shape(testnet):
    tx = await testnet.unstake(USER, "1.25")

    fn_name, params = _decode(BGT_TESTNET_ABI, tx.data)
    assert fn_name == "dropBoost"
    assert params["validator"] == OPERATOR
    assert params["amount"] == 125 * 10**16


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["queue_unstake", "cancel_unstake"])
async def test_mainnet_only_methods_rejected_on_testnet(testnet, client, method):
    with pytest.raises(StakingError) as exc:
        await getattr(testnet, method)(USER, "1")

    assert exc.value.code == "NOT_AVAILABLE_NETWORK"
    client.estimate_gas.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,fn", [("queue_unstake", "queueDropBoost"), ("cancel_unstake", "cancelDropBoost")]
)
async def test_mainnet_only_methods_on_mainnet(mainnet, method, fn):
    tx = await getattr(mainnet, method)(USER, "1")

    fn_name, params = _decode(BGT_MAINNET_ABI, tx.data)
    assert fn_name == fn
    assert params["amount"] == 10**18


@pytest.mark.asyncio
async def test_cancel_stake_in_queue(testnet):
    tx = await testnet.cancel_stake_in_queue(USER, "0.5")

    fn_name, params = _decode(BGT_TESTNET_ABI, tx.data)
    assert fn_name == "cancelBoost"
    assert params["amount"] == 5 * 10**17


@pytest.mark.asyncio
async def test_approve_for_stake_targets_bgt(mainnet):
    tx = await mainnet.approve_for_stake(USER, "3")

    fn_name, params = _decode(BGT_MAINNET_ABI, tx.data)
    assert fn_name == "approve"
    assert params["spender"] == MAINNET_BGT_CONTRACT_ADDRESS
    assert params["amount"] == 3 * 10**18


@pytest.mark.asyncio
async def test_builder_rejects_bad_address(mainnet, client):
    with pytest.raises(StakingError) as exc:
        await mainnet.stake("not-an-address", "1")
    assert exc.value.code == "ADDRESS_FORMAT_ERROR"
    client.estimate_gas.assert_not_awaited()


@pytest.mark.asyncio
async def test_estimate_failure_wrapped(mainnet, client):
    client.estimate_gas.side_effect = ValueError("execution reverted: NotEnoughBalance")

    with pytest.raises(StakingError) as exc:
        await mainnet.stake(USER, "1")

    assert exc.value.code == "BOOST_ERROR"
    assert exc.value.message == "Not enough BGT balance"


@pytest.mark.asyncio
async def test_reads(mainnet, client):
    client.read_contract.return_value = 7 * 10**18
    assert await mainnet.balance_of(USER) == str(7 * 10**18)

    client.read_contract.return_value = 3
    assert await mainnet.get_stakes(USER) == 3

    args = client.read_contract.await_args.args
    assert args[2] == "boosts"
    assert args[3] == [USER]


@pytest.mark.asyncio
async def test_stake_allowance_spender_is_bgt(testnet, client):
    client.read_contract.return_value = 0

    assert await testnet.stake_allowance(USER) == "0"
    assert client.read_contract.await_args.args[3] == [USER, TESTNET_BGT_CONTRACT_ADDRESS]


@pytest.mark.asyncio
async def test_get_stake_in_queue(mainnet, client):
    client.read_contract.return_value = (123, 4 * 10**18)

    queued = await mainnet.get_stake_in_queue(USER)

    assert queued.last_block == 123
    assert queued.balance == str(4 * 10**18)


@pytest.mark.asyncio
async def test_get_stake_in_queue_empty(mainnet, client):
    client.read_contract.return_value = (0, 0)

    queued = await mainnet.get_stake_in_queue(USER)

    assert queued.balance == "0"


@pytest.mark.asyncio
async def test_read_failure_wrapped(mainnet, client):
    client.read_contract.side_effect = ConnectionError("reset")

    with pytest.raises(StakingError) as exc:
        await mainnet.get_stake(USER)
    assert exc.value.code == "BOOSTED_ERROR"


@pytest.mark.asyncio
async def test_wrapped_failure_logged_with_adapter_context(mainnet, client):
    records = []
    handler_id = logger.add(lambda m: records.append(m.record), level="ERROR")
    client.read_contract.side_effect = ConnectionError("reset")

    try:
        with pytest.raises(StakingError):
            await mainnet.balance_of(USER)
    finally:
        logger.remove(handler_id)

    assert [r["message"] for r in records] == ["BALANCE_ERROR: reset"]
    assert records[0]["extra"]["adapter"] == "Berachain"


@pytest.mark.asyncio
async def test_close_leaves_injected_client_open(mainnet, client):
    await mainnet.close()
    client.close.assert_not_awaited()


@pytest.mark.asyncio
async def test_close_releases_client_built_from_url():
    adapter = Berachain("testnet", "http://localhost:8545", validator=OPERATOR)
    adapter.client.close = AsyncMock()

    await adapter.close()

    adapter.client.close.assert_awaited_once()
