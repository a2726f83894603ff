from everstake_sdk.core.constants.base import (
    DECIMALS,
    MULTICALL3_ADDRESS,
    UINT16_MAX,
)

__all__ = [
    "DECIMALS",
    "MULTICALL3_ADDRESS",
    "UINT16_MAX",
]
