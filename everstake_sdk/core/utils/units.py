from __future__ import annotations

from decimal import ROUND_DOWN, Context, Decimal, InvalidOperation, localcontext

from everstake_sdk.core.constants.base import DECIMALS

# Wide enough for any uint256 at 18-decimal scale, so nothing is rounded.
DECIMAL_CONTEXT = Context(prec=100, rounding=ROUND_DOWN)


def to_decimal(value: str | int | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if not isinstance(value, str):
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        amount = Decimal(value.strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def from_wei(amount: int | str, decimals: int = DECIMALS) -> Decimal:
    """Base units (int or its string form) to a display-unit Decimal, exact."""
    with localcontext(DECIMAL_CONTEXT):
        return Decimal(int(amount)).scaleb(-decimals)


def to_wei(amount: str | int | Decimal, decimals: int = DECIMALS) -> int:
    """Display units to base units, truncating toward zero."""
    amt = to_decimal(amount)
    if amt < 0:
        raise ValueError("Amount must be non-negative")
    with localcontext(DECIMAL_CONTEXT):
        return int(amt.scaleb(decimals).to_integral_value(rounding=ROUND_DOWN))


def format_amount(amount: Decimal) -> str:
    """Plain decimal string without exponent or trailing zeros."""
    with localcontext(DECIMAL_CONTEXT):
        normalized = amount.normalize()
    return format(normalized, "f")
