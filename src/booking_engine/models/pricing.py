"""Pricing policy and result models.

Numeric fields accept numbers or numeric strings. Anything that does not
parse becomes 0 so a bad settings payload shows zero pricing instead of
failing the request.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import FeeAppliesTo, FeeKind, FeeType, PaymentType

MAX_AMOUNT = 1e15  # Larger magnitudes are treated as garbage


def coerce_amount(value: Any) -> float:
    """Coerce a price-like value to float; invalid input becomes 0.

    Args:
        value: Number, numeric string, or anything else

    Returns:
        Finite float within +/-MAX_AMOUNT, 0.0 when the value cannot be used
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0.0
    # NaN, infinities and absurd magnitudes are as unusable as garbage strings
    if number != number or abs(number) > MAX_AMOUNT:
        return 0.0
    return number


class FeePolicy(BaseModel):
    """Platform service charge or discount from site settings."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {"type": "service_charge", "kind": "percent", "value": 5, "applies_to": "guest"},
                {"type": "discount", "kind": "fixed", "value": 500},
            ]
        },
    )

    type: FeeType
    kind: FeeKind
    value: float = Field(default=0, description="Percent or fixed amount; <= 0 disables the fee")
    applies_to: FeeAppliesTo | None = Field(
        default=None,
        description="Only used by service_charge; host means deducted from payout",
    )

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> float:
        return coerce_amount(value)


class PartialPaymentPolicy(BaseModel):
    """Full or partial payment choice plus the configured limits."""

    model_config = ConfigDict(frozen=True)

    payment_type: PaymentType = PaymentType.FULL
    partial_percent: float = Field(default=25, description="Requested pay-now percent")
    partial_min_percent: float = Field(default=25, description="Lowest allowed pay-now percent")

    @field_validator("partial_percent", "partial_min_percent", mode="before")
    @classmethod
    def _coerce_percent(cls, value: Any) -> float:
        return coerce_amount(value)

    @property
    def is_partial(self) -> bool:
        return self.payment_type == PaymentType.PARTIAL


class PricingResult(BaseModel):
    """Price breakdown for a stay. Money is rounded to 2 decimals."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "subtotal": 2000.0,
                    "fee_amount": 100.0,
                    "fee_label": "Service fee (5%)",
                    "total": 2100.0,
                    "pay_now_amount": 2100.0,
                    "pay_now_percent": 105,
                }
            ]
        },
    )

    subtotal: float
    fee_amount: float = Field(..., description="Negative for discounts")
    fee_label: str = ""
    total: float = Field(..., ge=0)
    pay_now_amount: float = Field(..., ge=0)
    pay_now_percent: int | float = Field(
        ...,
        description="Pay-now share of the subtotal, whole number when derived",
    )
