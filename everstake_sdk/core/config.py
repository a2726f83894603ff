import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

CONFIG_PATH_ENV = "EVERSTAKE_CONFIG_PATH"
DEFAULT_CONFIG_FILENAME = "config.json"


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Explicit ``path``, else ``$EVERSTAKE_CONFIG_PATH``, else ``./config.json``."""
    if path is None:
        path = os.getenv(CONFIG_PATH_ENV, "").strip() or DEFAULT_CONFIG_FILENAME
    return Path(path).expanduser()


def load_config_json(
    path: str | Path | None = None, *, require_exists: bool = False
) -> dict[str, Any]:
    cfg_path = resolve_config_path(path)
    if not cfg_path.exists():
        if require_exists:
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
        return {}
    try:
        return json.loads(cfg_path.read_text())
    except json.JSONDecodeError as exc:
        logger.warning(f"Ignoring malformed config {cfg_path}: {exc}")
        return {}


CONFIG: dict[str, Any] = load_config_json()


def set_config(config: dict[str, Any]) -> None:
    """Replace the global CONFIG dict in-place so earlier imports see the update."""
    CONFIG.clear()
    CONFIG.update(config)


def load_config(
    path: str | Path | None = None, *, require_exists: bool = False
) -> None:
    set_config(load_config_json(path, require_exists=require_exists))


def set_api_url(url: str) -> None:
    CONFIG.setdefault("system", {})["api_base_url"] = url


def get_api_base_url() -> str:
    api_url = CONFIG.get("system", {}).get("api_base_url")
    if api_url:
        return str(api_url).strip().rstrip("/")
    return ""


def set_rpc_url(chain: str, network: str, url: str) -> None:
    CONFIG.setdefault("rpc_urls", {}).setdefault(chain, {})[network] = url


def get_rpc_url(chain: str, network: str, default: str) -> str:
    """RPC override for ``chain``/``network`` from CONFIG, else ``default``."""
    urls = CONFIG.get("rpc_urls", {}).get(chain, {})
    if isinstance(urls, str):
        return urls
    url = urls.get(network)
    if url:
        return str(url).strip()
    return default
