"""Booking endpoints.

Provides REST endpoints for:
- Quoting the booking widget state (gate, pricing, summary lines)
- Building the booking-creation request body
- Building the payment-initiation request body

Creating the booking and redirecting to the payment gateway are done by
the caller with the returned bodies.
"""

from fastapi import APIRouter, Depends

from booking_api.dependencies import get_booking_service
from booking_api.models.bookings import BookingDraftRequest
from booking_engine.config import Settings, get_settings
from booking_engine.models import BookingQuote, BookingRequest, PaymentInitiationRequest
from booking_engine.services.booking import BookingService

router = APIRouter(tags=["bookings"])


@router.post(
    "/bookings/quote",
    summary="Quote the booking widget",
    description="""
Evaluate the current widget state.

Returns the submission gate, price breakdown, formatted summary lines and
button label. `request` holds the booking body only when the selection is
submittable.

**Notes:**
- Guests are clamped to 1..max_guests for display
- `check.warning` is set when a blocked night lies inside the selection
""",
    response_model=BookingQuote,
)
async def quote_booking(
    request: BookingDraftRequest,
    service: BookingService = Depends(get_booking_service),
    settings: Settings = Depends(get_settings),
) -> BookingQuote:
    return service.quote(
        request.to_draft(settings),
        request.blocked_dates,
        request.currency,
    )


@router.post(
    "/bookings/request",
    summary="Build a booking request",
    description="""
Validate the widget state and return the booking-creation body
`{listing_id, check_in, check_out, guests, message?}`.
""",
    response_model=BookingRequest,
    response_model_exclude_none=True,
    responses={
        400: {
            "description": "Dates missing, invalid, unavailable, or too many guests",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "error_code": "ERR_001",
                        "message": "Some dates in your selection are unavailable",
                        "recovery": "Pick a range that does not include blocked nights",
                        "details": {"unavailable_dates": "2026-02-12"},
                    }
                }
            },
        },
    },
)
async def build_booking_request(
    request: BookingDraftRequest,
    service: BookingService = Depends(get_booking_service),
    settings: Settings = Depends(get_settings),
) -> BookingRequest:
    return service.build_booking_request(request.to_draft(settings), request.blocked_dates)


@router.post(
    "/bookings/payment-request",
    summary="Build a payment request",
    description="""
Validate the widget state and return the payment-initiation body: the
booking fields plus `payment_type`, `pay_now_amount` and `pay_now_percent`.
""",
    response_model=PaymentInitiationRequest,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Dates missing, invalid, unavailable, or too many guests"},
    },
)
async def build_payment_request(
    request: BookingDraftRequest,
    service: BookingService = Depends(get_booking_service),
    settings: Settings = Depends(get_settings),
) -> PaymentInitiationRequest:
    return service.build_payment_request(request.to_draft(settings), request.blocked_dates)
