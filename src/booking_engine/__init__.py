"""Pricing and availability engine for homestay bookings."""

__version__ = "0.1.0"
