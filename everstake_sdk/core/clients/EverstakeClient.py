from __future__ import annotations

import json
import time
from typing import Any

import httpx
from loguru import logger

from everstake_sdk.core.config import get_api_base_url
from everstake_sdk.core.constants.base import DEFAULT_HTTP_TIMEOUT
from everstake_sdk.core.errors import StakingApiError


class EverstakeClient:
    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/") if base_url else None
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(DEFAULT_HTTP_TIMEOUT), transport=transport
        )
        self.headers = {
            "Content-Type": "application/json",
        }

    @property
    def base_url(self) -> str:
        # Resolved per request so set_api_url() applies to shared clients.
        if self._base_url is not None:
            return self._base_url
        return get_api_base_url()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        error_prefix: str,
        **kwargs: Any,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"Making {method} request to {url}")
        start_time = time.time()

        try:
            resp = await self.client.request(
                method, url, headers=self.headers, **kwargs
            )

            elapsed = time.time() - start_time
            if resp.status_code >= 400:
                logger.warning(
                    f"HTTP {resp.status_code} response for {method} {url} after {elapsed:.2f}s"
                )
            else:
                logger.debug(
                    f"HTTP {resp.status_code} response for {method} {url} after {elapsed:.2f}s"
                )

            if not resp.is_success:
                raise StakingApiError(f"Error: {resp.reason_phrase}")
            return self._parse_body(resp.text)
        except Exception as exc:
            logger.error(f"{error_prefix}: {exc}")
            raise

    @staticmethod
    def _parse_body(raw: str) -> Any:
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return raw

    async def close(self) -> None:
        await self.client.aclose()
