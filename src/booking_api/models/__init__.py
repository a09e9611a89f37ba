"""Request/response models for the booking API."""

from booking_api.models.availability import (
    CalendarRequest,
    CheckRequest,
    NavigateResponse,
    SelectRequest,
    SelectResponse,
)
from booking_api.models.bookings import BookingDraftRequest
from booking_api.models.common import HealthResponse, PaymentChoice
from booking_api.models.pricing import QuoteRequest, QuoteResponse

__all__ = [
    "BookingDraftRequest",
    "CalendarRequest",
    "CheckRequest",
    "HealthResponse",
    "NavigateResponse",
    "PaymentChoice",
    "QuoteRequest",
    "QuoteResponse",
    "SelectRequest",
    "SelectResponse",
]
