from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn

from loguru import logger as default_logger

COMMON_ERROR_MESSAGES: dict[str, str] = {
    "TOKEN_ERROR": "Please create or use correct token",
}


class StakingError(Exception):
    """Structured failure raised by every adapter: ``code`` plus a display ``message``."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"StakingError(code={self.code!r}, message={self.message!r})"


class UnknownErrorCode(StakingError):
    """An adapter asked for a code missing from its own table (coding defect)."""

    def __init__(self, code: str):
        super().__init__("UNKNOWN_ERROR_CODE", f"Unknown error code: {code}")
        self.requested_code = code


class ErrorMapper:
    """Closed per-adapter error vocabulary.

    ``messages`` maps codes to message templates (``str.format`` positional
    placeholders). ``revert_messages`` maps raw contract revert reasons to
    friendlier text; when a wrapped failure mentions one of them, that text is
    used instead of the generic message for the wrapping code. Failures are
    logged through ``logger``, normally the owning adapter's bound logger.
    """

    def __init__(
        self,
        messages: Mapping[str, str],
        revert_messages: Mapping[str, str] | None = None,
        logger: Any = None,
    ):
        self.messages: dict[str, str] = {**COMMON_ERROR_MESSAGES, **messages}
        self.revert_messages: dict[str, str] = dict(revert_messages or {})
        self.logger = logger or default_logger

    def message(self, code: str, *details: object) -> str:
        template = self.messages.get(code)
        if template is None:
            raise UnknownErrorCode(code)
        return template.format(*details) if details else template

    def is_known(self, exc: BaseException) -> bool:
        return isinstance(exc, StakingError) and exc.code in self.messages

    def throw_error(self, code: str, *details: object) -> NoReturn:
        raise StakingError(code, self.message(code, *details))

    def handle_error(self, code: str, exc: BaseException) -> NoReturn:
        if isinstance(exc, UnknownErrorCode):
            raise exc
        if self.is_known(exc):
            self.logger.debug(f"Re-raising {exc.code}: {exc}")  # type: ignore[attr-defined]
            raise exc

        message = self.message(code)
        raw = str(exc)
        for reason, friendly in self.revert_messages.items():
            if reason in raw:
                message = friendly
                break

        self.logger.error(f"{code}: {raw}")
        raise StakingError(code, message) from exc


class StakingApiError(Exception):
    """Non-2xx response from the off-chain stats/token API."""
