"""API routes package.

Routers are organized by domain:

- health: Health check endpoint
- availability: Calendar month view, navigation, selection and gate
- pricing: Stay price quotes
- bookings: Widget quote and outbound request bodies
- currency: Price display formatting

All routers are registered in main.py with /api prefix.
"""

from booking_api.routes.availability import router as availability_router
from booking_api.routes.bookings import router as bookings_router
from booking_api.routes.currency import router as currency_router
from booking_api.routes.health import router as health_router
from booking_api.routes.pricing import router as pricing_router

__all__ = [
    "availability_router",
    "bookings_router",
    "currency_router",
    "health_router",
    "pricing_router",
]
