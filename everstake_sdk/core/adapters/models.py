from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UnsignedTransaction(BaseModel):
    """Unsigned transaction handed to the caller for external signing.

    ``value`` is in wei and is 0 for calls that do not carry native funds.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    data: str
    gas_limit: int
    value: int = 0

    def to_tx_params(self) -> dict[str, Any]:
        return {
            "from": self.from_,
            "to": self.to,
            "data": self.data,
            "gas": self.gas_limit,
            "value": self.value,
        }


class WithdrawRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    requested: Decimal
    ready_for_claim: Decimal


class WithdrawRequestQueueParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    # All-time requested withdraw amount.
    withdraw_requested: Decimal
    # Currently allowed for interchange with deposits.
    interchange_allowed: Decimal
    # All-time withdraw treasury filled amount.
    filled: Decimal
    # All-time claimed by users.
    claimed: Decimal


class ValidatorInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    pubkey: str
    status: str


class UnbondInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Decimal
    withdraw_epoch: int
    unbond_nonce: int


class BoostedQueue(BaseModel):
    model_config = ConfigDict(frozen=True)

    last_block: int
    balance: str


class TransactionLoadingStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: bool
