"""Pydantic models for the homestay booking engine."""

from .booking import (
    BookingDraft,
    BookingQuote,
    BookingRequest,
    PaymentInitiationRequest,
    PriceLine,
)
from .calendar import (
    CalendarCell,
    CalendarDay,
    ClickResult,
    MonthView,
    Selection,
    SelectionCheck,
)
from .enums import (
    CurrencyCode,
    FeeAppliesTo,
    FeeKind,
    FeeType,
    PaymentType,
    SelectionState,
)
from .errors import (
    BookingError,
    ErrorCode,
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    ToolError,
)
from .pricing import (
    FeePolicy,
    PartialPaymentPolicy,
    PricingResult,
    coerce_amount,
)

__all__ = [
    # Enums
    "CurrencyCode",
    "FeeAppliesTo",
    "FeeKind",
    "FeeType",
    "PaymentType",
    "SelectionState",
    # Calendar
    "CalendarCell",
    "CalendarDay",
    "ClickResult",
    "MonthView",
    "Selection",
    "SelectionCheck",
    # Pricing
    "FeePolicy",
    "PartialPaymentPolicy",
    "PricingResult",
    "coerce_amount",
    # Booking
    "BookingDraft",
    "BookingQuote",
    "BookingRequest",
    "PaymentInitiationRequest",
    "PriceLine",
    # Errors
    "BookingError",
    "ErrorCode",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "ToolError",
]
