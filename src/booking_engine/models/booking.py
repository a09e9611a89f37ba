"""Booking draft, quote and outbound request payload models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .calendar import Selection, SelectionCheck
from .enums import PaymentType
from .pricing import FeePolicy, PartialPaymentPolicy, PricingResult


class BookingDraft(BaseModel):
    """Everything the booking widget holds before submission."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "listing_id": 42,
                    "check_in": "2026-02-10",
                    "check_out": "2026-02-13",
                    "guests": 2,
                    "max_guests": 4,
                    "nightly_rate": "2500",
                    "booking_fee": None,
                    "payment": {"payment_type": "full"},
                }
            ]
        },
    )

    listing_id: int | str
    check_in: str = ""
    check_out: str = ""
    guests: int = Field(default=1, description="Clamped to 1..max_guests")
    max_guests: int | None = Field(default=None, ge=1)
    message: str | None = None
    nightly_rate: float | str = Field(
        default=0,
        description="Listing price per night; unparseable values price as 0",
    )
    booking_fee: FeePolicy | None = None
    payment: PartialPaymentPolicy = Field(default_factory=PartialPaymentPolicy)

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def _blank_dates(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("nightly_rate", mode="before")
    @classmethod
    def _missing_rate(cls, value: Any) -> Any:
        if value is None or isinstance(value, bool):
            return 0
        return value

    @property
    def selection(self) -> Selection:
        return Selection(check_in=self.check_in, check_out=self.check_out)


class PriceLine(BaseModel):
    """A labelled row of the price summary."""

    model_config = ConfigDict(frozen=True)

    label: str
    amount: str = Field(..., description="Formatted amount, empty for note rows")


class BookingRequest(BaseModel):
    """Body of the booking-creation call made by the caller."""

    model_config = ConfigDict(frozen=True)

    listing_id: int | str
    check_in: str
    check_out: str
    guests: int = Field(..., ge=1)
    message: str | None = None


class PaymentInitiationRequest(BookingRequest):
    """Booking request plus the amount handed to the payment step."""

    payment_type: PaymentType
    pay_now_amount: float = Field(..., ge=0)
    pay_now_percent: int | float


class BookingQuote(BaseModel):
    """Everything the widget displays for the current draft."""

    model_config = ConfigDict(frozen=True)

    selection: Selection
    check: SelectionCheck
    guests: int
    pricing: PricingResult
    lines: list[PriceLine] = Field(default_factory=list)
    submit_label: str
    request: BookingRequest | None = Field(
        default=None,
        description="Present only when the selection is submittable",
    )
