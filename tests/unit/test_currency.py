"""Unit tests for CurrencyService conversion and formatting."""

import pytest

from booking_engine.models import CurrencyCode
from booking_engine.services.currency import CurrencyService, parse_currency


@pytest.fixture
def service() -> CurrencyService:
    return CurrencyService()


class TestParseCurrency:
    """Tests for currency code parsing."""

    def test_known_code_any_case(self) -> None:
        assert parse_currency("usd") == CurrencyCode.USD

    def test_enum_passes_through(self) -> None:
        assert parse_currency(CurrencyCode.GBP) == CurrencyCode.GBP

    def test_unknown_code_falls_back(self) -> None:
        assert parse_currency("XYZ") == CurrencyCode.NPR
        assert parse_currency("XYZ", CurrencyCode.EUR) == CurrencyCode.EUR


class TestConvert:
    """Tests for NPR conversion."""

    def test_npr_unchanged(self, service: CurrencyService) -> None:
        assert service.convert(2500, "NPR") == 2500

    def test_usd_uses_fallback_rate(self, service: CurrencyService) -> None:
        assert service.convert(1000, "USD") == pytest.approx(7.5)

    def test_garbage_amount_is_zero(self, service: CurrencyService) -> None:
        assert service.convert("abc", "USD") == 0

    def test_custom_rates(self) -> None:
        service = CurrencyService(rates={"USD": 0.01, "BOGUS": 3})
        assert service.convert(1000, "USD") == pytest.approx(10)

    def test_currency_without_rate_returns_npr_amount(self) -> None:
        service = CurrencyService(rates={"USD": 0.01})
        assert service.convert(1000, "EUR") == 1000


class TestFormat:
    """Tests for display formatting."""

    def test_npr_whole_rupees_with_separators(self, service: CurrencyService) -> None:
        assert service.format(12500) == "रू 12,500"

    def test_npr_rounds_half_up(self, service: CurrencyService) -> None:
        assert service.format(2499.5) == "रू 2,500"

    def test_other_currency_two_decimals(self, service: CurrencyService) -> None:
        assert service.format(2500, "USD") == "$ 18.75"
        assert service.format(1000, "INR") == "₹ 620.00"

    def test_default_currency_used_when_none(self) -> None:
        service = CurrencyService(default_currency="EUR")
        assert service.format(1000) == "€ 6.90"

    def test_symbol(self, service: CurrencyService) -> None:
        assert service.symbol("AUD") == "A$"

    def test_amount_beyond_limit_formats_as_zero(self, service: CurrencyService) -> None:
        assert service.format("1e30") == "रू 0"
        assert service.format(1e30, "USD") == "$ 0.00"
