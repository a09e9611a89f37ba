"""API models for pricing endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from booking_api.models.common import PaymentChoice
from booking_engine.models import FeePolicy, PricingResult


class QuoteRequest(BaseModel):
    """Inputs for a price quote.

    Either ``nights`` or both dates must be given; dates win when present.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "check_in": "2026-02-10",
                    "check_out": "2026-02-12",
                    "nightly_rate": "1000",
                    "booking_fee": {
                        "type": "service_charge",
                        "kind": "percent",
                        "value": 5,
                        "applies_to": "guest",
                    },
                    "payment": {"payment_type": "full"},
                }
            ]
        },
    )

    nights: int | None = Field(default=None, ge=0)
    check_in: str | None = None
    check_out: str | None = None
    nightly_rate: float | str | None = Field(
        default=0,
        description="Price per night; unparseable values price as 0",
    )
    booking_fee: FeePolicy | None = None
    payment: PaymentChoice = Field(default_factory=PaymentChoice)


class QuoteResponse(PricingResult):
    """PricingResult plus the inputs the guest needs to see."""

    nights: int = Field(..., ge=0)
    effective_partial_percent: float | None = Field(
        default=None,
        description="Clamped pay-now percent when paying partially",
    )
