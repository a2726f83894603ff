from everstake_sdk.core.adapters.BaseAdapter import BaseAdapter
from everstake_sdk.core.errors import (
    ErrorMapper,
    StakingApiError,
    StakingError,
    UnknownErrorCode,
)

__all__ = [
    "BaseAdapter",
    "ErrorMapper",
    "StakingApiError",
    "StakingError",
    "UnknownErrorCode",
]
