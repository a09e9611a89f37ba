"""FastAPI dependency injection providers for engine services.

Services are stateless, so one cached instance per process is enough.

Usage in routes:
    from booking_api.dependencies import get_pricing_calculator

    @router.post("/pricing/quote")
    async def quote(
        calculator: PricingCalculator = Depends(get_pricing_calculator),
    ):
        ...

Service Dependency Graph:
    Settings (get_settings)
        └── CurrencyService
    PricingCalculator
    AvailabilityCalendar
    BookingService(PricingCalculator, CurrencyService)

Testing:
    Use reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from booking_engine.config import get_settings, reset_settings
from booking_engine.services import (
    AvailabilityCalendar,
    BookingService,
    CurrencyService,
    PricingCalculator,
)


@lru_cache
def get_pricing_calculator() -> PricingCalculator:
    return PricingCalculator()


@lru_cache
def get_availability_calendar() -> AvailabilityCalendar:
    return AvailabilityCalendar()


@lru_cache
def get_currency_service() -> CurrencyService:
    """Get cached CurrencyService using the configured default currency."""
    return CurrencyService(default_currency=get_settings().default_currency)


@lru_cache
def get_booking_service() -> BookingService:
    """Get cached BookingService wired to the shared calculator and currency."""
    return BookingService(
        pricing=get_pricing_calculator(),
        currency=get_currency_service(),
    )


def reset_services() -> None:
    """Clear all cached service instances and settings."""
    get_pricing_calculator.cache_clear()
    get_availability_calendar.cache_clear()
    get_currency_service.cache_clear()
    get_booking_service.cache_clear()
    reset_settings()
