"""Pytest configuration and fixtures for booking engine tests.

This module provides reusable fixtures for testing:
- Environment defaults for settings
- Service singleton reset between tests
- Sample data fixtures (blocked dates, selections, fee policies)
"""

import datetime as dt
import os
from typing import Generator

import pytest

# === Environment Setup ===

# Set environment variables for testing before imports
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")


# === Service Fixtures ===


@pytest.fixture(autouse=True)
def reset_service_singletons() -> Generator[None, None, None]:
    """Reset cached services and settings before and after each test.

    Tests that change environment variables get a fresh Settings and
    services built from it instead of a cached copy from an earlier test.
    """
    from booking_api.dependencies import reset_services

    reset_services()
    yield
    reset_services()


# === Sample Data Fixtures ===


@pytest.fixture
def today() -> dt.date:
    """Fixed 'today' so February 2026 dates are in the future."""
    return dt.date(2026, 2, 1)


@pytest.fixture
def blocked_dates() -> list[str]:
    """A single blocked night in February 2026."""
    return ["2026-02-12"]


@pytest.fixture
def guest_service_charge() -> dict:
    """5% service charge paid by the guest."""
    return {"type": "service_charge", "kind": "percent", "value": 5, "applies_to": "guest"}


@pytest.fixture
def host_service_charge() -> dict:
    """5% service charge deducted from the host payout."""
    return {"type": "service_charge", "kind": "percent", "value": 5, "applies_to": "host"}


@pytest.fixture
def fixed_discount() -> dict:
    """Flat 500 discount."""
    return {"type": "discount", "kind": "fixed", "value": 500}
