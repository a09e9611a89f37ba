"""Enumeration types for booking engine data models."""

from enum import Enum


class FeeType(str, Enum):
    """Kind of platform adjustment applied to a stay."""

    SERVICE_CHARGE = "service_charge"
    DISCOUNT = "discount"


class FeeKind(str, Enum):
    """How a fee value is interpreted."""

    PERCENT = "percent"
    FIXED = "fixed"


class FeeAppliesTo(str, Enum):
    """Who pays a service charge."""

    GUEST = "guest"
    HOST = "host"  # Deducted from host payout, never shown to the guest


class PaymentType(str, Enum):
    """How much of the total the guest pays at reservation time."""

    FULL = "full"
    PARTIAL = "partial"


class SelectionState(str, Enum):
    """Progress of the two-click date range selection."""

    NO_SELECTION = "no_selection"
    CHECK_IN_ONLY = "check_in_only"
    FULL_RANGE = "full_range"


class CurrencyCode(str, Enum):
    """Display currencies. Listing prices are stored in NPR."""

    NPR = "NPR"
    USD = "USD"
    INR = "INR"
    GBP = "GBP"
    EUR = "EUR"
    AUD = "AUD"
