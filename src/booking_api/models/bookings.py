"""API models for booking quote and request endpoints."""

from pydantic import ConfigDict, Field

from booking_api.models.common import BlockedDatesMixin, PaymentChoice
from booking_engine.config import Settings
from booking_engine.models import BookingDraft, FeePolicy


class BookingDraftRequest(BlockedDatesMixin):
    """Booking widget state sent by the client."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "listing_id": 42,
                    "check_in": "2026-02-10",
                    "check_out": "2026-02-14",
                    "guests": 2,
                    "max_guests": 4,
                    "nightly_rate": "3000",
                    "booking_fee": {"type": "discount", "kind": "fixed", "value": 500},
                    "payment": {"payment_type": "partial", "partial_percent": 40},
                    "blocked_dates": ["2026-02-20"],
                    "currency": "NPR",
                }
            ]
        },
    )

    listing_id: int | str
    check_in: str | None = None
    check_out: str | None = None
    guests: int = 1
    max_guests: int | None = Field(default=None, ge=1)
    message: str | None = None
    nightly_rate: float | str | None = 0
    booking_fee: FeePolicy | None = None
    payment: PaymentChoice = Field(default_factory=PaymentChoice)
    currency: str | None = Field(default=None, description="Display currency code")

    def to_draft(self, settings: Settings) -> BookingDraft:
        return BookingDraft(
            listing_id=self.listing_id,
            check_in=self.check_in,
            check_out=self.check_out,
            guests=self.guests,
            max_guests=self.max_guests,
            message=self.message,
            nightly_rate=self.nightly_rate,
            booking_fee=self.booking_fee,
            payment=self.payment.to_policy(settings),
        )
