from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

import everstake_sdk.core.config as config
from everstake_sdk.adapters.ethereum_adapter.adapter import Ethereum
from everstake_sdk.core.constants.ethereum_contracts import ETH_RPC_URLS

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def restore_global_config() -> None:
    original = copy.deepcopy(config.CONFIG)
    yield
    config.set_config(original)


def test_resolve_config_path_defaults_to_working_directory(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("EVERSTAKE_CONFIG_PATH", raising=False)
    assert config.resolve_config_path() == Path("config.json")


def test_resolve_config_path_prefers_explicit_path(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("EVERSTAKE_CONFIG_PATH", "ignored.json")
    assert config.resolve_config_path(tmp_path / "cfg.json") == tmp_path / "cfg.json"


def test_load_config_json_supports_env_override(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("EVERSTAKE_CONFIG_PATH", str(REPO_ROOT / "config.example.json"))
    monkeypatch.chdir(tmp_path)

    cfg = config.load_config_json()
    assert isinstance(cfg.get("system"), dict)
    assert isinstance(cfg.get("rpc_urls"), dict)


def test_load_config_json_missing_file(tmp_path: Path) -> None:
    assert config.load_config_json(tmp_path / "absent.json") == {}
    with pytest.raises(FileNotFoundError):
        config.load_config_json(tmp_path / "absent.json", require_exists=True)


def test_load_config_json_malformed_file_is_logged(
    tmp_path: Path, caplog_loguru: list[str]
) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    assert config.load_config_json(path) == {}
    assert any(m.startswith(f"Ignoring malformed config {path}") for m in caplog_loguru)


def test_load_config_from_working_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, restore_global_config: None
) -> None:
    monkeypatch.delenv("EVERSTAKE_CONFIG_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text(
        json.dumps({"system": {"api_base_url": "https://api.test/"}})
    )

    config.load_config()
    assert config.get_api_base_url() == "https://api.test"


def test_set_api_url(restore_global_config: None) -> None:
    config.set_config({})
    assert config.get_api_base_url() == ""

    config.set_api_url("https://wallet-sdk-api.everstake.one")
    assert config.get_api_base_url() == "https://wallet-sdk-api.everstake.one"


def test_get_rpc_url_override_and_default(restore_global_config: None) -> None:
    config.set_config({})
    assert config.get_rpc_url("ethereum", "holesky", "https://default") == "https://default"

    config.set_rpc_url("ethereum", "holesky", "https://my-node")
    assert config.get_rpc_url("ethereum", "holesky", "https://default") == "https://my-node"
    assert config.get_rpc_url("ethereum", "mainnet", "https://default") == "https://default"


def test_adapter_uses_configured_rpc(restore_global_config: None) -> None:
    config.set_config({})
    config.set_rpc_url("ethereum", "holesky", "https://my-holesky-node")

    adapter = Ethereum("holesky")
    assert adapter.client.web3.provider.endpoint_uri == "https://my-holesky-node"

    explicit = Ethereum("holesky", "https://explicit-node")
    assert explicit.client.web3.provider.endpoint_uri == "https://explicit-node"


def test_adapter_default_rpc(restore_global_config: None) -> None:
    config.set_config({})
    adapter = Ethereum()
    assert (
        adapter.client.web3.provider.endpoint_uri
        == ETH_RPC_URLS["mainnet"]
    )
