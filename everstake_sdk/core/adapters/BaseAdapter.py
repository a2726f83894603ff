from __future__ import annotations

import functools
from abc import ABC
from collections.abc import Callable
from typing import Any, ClassVar, NoReturn

from eth_utils import is_address, to_checksum_address
from loguru import logger

from everstake_sdk.core.errors import ErrorMapper
from everstake_sdk.core.utils.web3 import ChainClient, UrlOrProvider


def maps_errors(code: str) -> Callable:
    """Route any failure of the wrapped coroutine through ``self.handle_error(code, ...)``."""

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        async def wrapper(self: BaseAdapter, *args: Any, **kwargs: Any) -> Any:
            try:
                return await fn(self, *args, **kwargs)
            except Exception as exc:
                self.handle_error(code, exc)

        return wrapper

    return decorator


class BaseAdapter(ABC):
    adapter_type: str | None = None
    ERROR_MESSAGES: ClassVar[dict[str, str]] = {}
    REVERT_MESSAGES: ClassVar[dict[str, str]] = {}
    client: ChainClient

    def __init__(self, name: str):
        self.name = name
        self.logger = logger.bind(adapter=self.__class__.__name__)
        self.errors = ErrorMapper(
            self.ERROR_MESSAGES, self.REVERT_MESSAGES, logger=self.logger
        )
        # Clients built here from a URL or provider; injected clients belong to the caller.
        self._owned_clients: list[ChainClient] = []

    def use_client(
        self, client: ChainClient | None, url_or_provider: UrlOrProvider
    ) -> ChainClient:
        """Bind ``client``, or build one over ``url_or_provider`` that ``close`` will release."""
        if client is None:
            client = ChainClient(url_or_provider)
            self._owned_clients.append(client)
        self.client = client
        return client

    def throw_error(self, code: str, *details: object) -> NoReturn:
        self.errors.throw_error(code, *details)

    def handle_error(self, code: str, exc: BaseException) -> NoReturn:
        self.errors.handle_error(code, exc)

    def checked_address(self, address: Any) -> str:
        if not isinstance(address, str) or not is_address(address):
            self.throw_error("ADDRESS_FORMAT_ERROR")
        return to_checksum_address(address)

    async def close(self) -> None:
        while self._owned_clients:
            await self._owned_clients.pop().close()
