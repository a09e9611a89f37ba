"""Shared API request/response models.

Domain models (Selection, PricingResult, etc.) live in booking_engine.models
and are imported from there. This module holds HTTP-layer concerns only.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from booking_engine.config import Settings
from booking_engine.models import PartialPaymentPolicy, PaymentType
from booking_engine.models.errors import ErrorCode, ToolError

__all__ = [
    "BlockedDatesMixin",
    "ErrorCode",
    "ToolError",
    "HealthResponse",
    "PaymentChoice",
    "normalize_blocked_dates",
]


class HealthResponse(BaseModel):
    """Liveness response."""

    model_config = ConfigDict(strict=True)

    status: str = "ok"
    timestamp: str
    service: str = "booking-engine-api"
    environment: str


class PaymentChoice(BaseModel):
    """Guest's payment choice; missing percents come from settings."""

    payment_type: PaymentType = PaymentType.FULL
    partial_percent: float | str | None = Field(
        default=None,
        description="Requested pay-now percent (defaults to DEFAULT_PARTIAL_PERCENT)",
    )
    partial_min_percent: float | str | None = Field(
        default=None,
        description="Lowest allowed percent (defaults to PARTIAL_MIN_PERCENT)",
    )

    def to_policy(self, settings: Settings) -> PartialPaymentPolicy:
        """Fill gaps from settings and build the engine policy."""
        return PartialPaymentPolicy(
            payment_type=self.payment_type,
            partial_percent=(
                settings.default_partial_percent
                if self.partial_percent is None
                else self.partial_percent
            ),
            partial_min_percent=(
                settings.partial_min_percent
                if self.partial_min_percent is None
                else self.partial_min_percent
            ),
        )


def normalize_blocked_dates(value: Any) -> list[str]:
    """Strip blanks and whitespace from a blocked-date list."""
    if not value:
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


class BlockedDatesMixin(BaseModel):
    """Adds a cleaned ``blocked_dates`` list to a request model."""

    blocked_dates: list[str] = Field(
        default_factory=list,
        description="Booked or host-blocked nights (YYYY-MM-DD)",
        examples=[["2026-02-12"]],
    )

    @field_validator("blocked_dates", mode="before")
    @classmethod
    def _clean_blocked(cls, value: Any) -> list[str]:
        return normalize_blocked_dates(value)
