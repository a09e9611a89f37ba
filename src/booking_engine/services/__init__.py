"""Booking engine services."""

from .booking import BookingService, check_selection, clamp_guests
from .calendar import AvailabilityCalendar, month_label
from .currency import CurrencyService, parse_currency
from .pricing import PricingCalculator, round_money, round_percent

__all__ = [
    "AvailabilityCalendar",
    "BookingService",
    "CurrencyService",
    "PricingCalculator",
    "check_selection",
    "clamp_guests",
    "month_label",
    "parse_currency",
    "round_money",
    "round_percent",
]
