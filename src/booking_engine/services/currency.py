"""Price conversion and display formatting.

Listing prices are stored in NPR. Other currencies are shown by applying a
rate table; when no live table is supplied the fallback rates are used.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from booking_engine.models import CurrencyCode, coerce_amount

BASE_CURRENCY = CurrencyCode.NPR

FALLBACK_RATES: dict[CurrencyCode, float] = {
    CurrencyCode.USD: 0.0075,
    CurrencyCode.INR: 0.62,
    CurrencyCode.GBP: 0.0059,
    CurrencyCode.EUR: 0.0069,
    CurrencyCode.AUD: 0.0115,
}

CURRENCY_SYMBOLS: dict[CurrencyCode, str] = {
    CurrencyCode.NPR: "रू",
    CurrencyCode.USD: "$",
    CurrencyCode.INR: "₹",
    CurrencyCode.GBP: "£",
    CurrencyCode.EUR: "€",
    CurrencyCode.AUD: "A$",
}


def parse_currency(code: Any, default: CurrencyCode = BASE_CURRENCY) -> CurrencyCode:
    """Parse a currency code, falling back to ``default`` when unknown."""
    if isinstance(code, CurrencyCode):
        return code
    try:
        return CurrencyCode(str(code).strip().upper())
    except ValueError:
        return default


class CurrencyService:
    """Converts NPR amounts and formats them for display."""

    def __init__(
        self,
        rates: dict[str, float] | None = None,
        default_currency: CurrencyCode | str = BASE_CURRENCY,
    ) -> None:
        """Initialize currency service.

        Args:
            rates: NPR-to-currency rates keyed by code; fallback rates if None
            default_currency: Currency used when none is requested
        """
        if rates is None:
            self.rates = dict(FALLBACK_RATES)
        else:
            self.rates = {}
            for code, rate in rates.items():
                currency = parse_currency(code, default=BASE_CURRENCY)
                if currency == BASE_CURRENCY:
                    # Unknown codes and the base itself carry no rate
                    continue
                self.rates[currency] = coerce_amount(rate)
        self.default_currency = parse_currency(default_currency)

    def convert(self, amount_npr: Any, currency: CurrencyCode | str | None = None) -> float:
        """Convert an NPR amount to ``currency``.

        Unparseable amounts convert to 0. A currency without a known rate
        returns the NPR amount unchanged.
        """
        amount = coerce_amount(amount_npr)
        target = parse_currency(currency, self.default_currency) if currency else self.default_currency
        if target == BASE_CURRENCY:
            return amount
        rate = self.rates.get(target)
        if rate is None:
            return amount
        return amount * rate

    def format(self, amount_npr: Any, currency: CurrencyCode | str | None = None) -> str:
        """Format an NPR amount in ``currency`` with its symbol.

        NPR shows whole rupees with thousands separators; other currencies
        show two decimals. Amounts beyond MAX_AMOUNT format as 0.
        """
        target = parse_currency(currency, self.default_currency) if currency else self.default_currency
        amount = self.convert(amount_npr, target)
        symbol = CURRENCY_SYMBOLS[target]
        if target == BASE_CURRENCY:
            whole = int(Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
            return f"{symbol} {whole:,}"
        return f"{symbol} {amount:.2f}"

    def symbol(self, currency: CurrencyCode | str) -> str:
        return CURRENCY_SYMBOLS[parse_currency(currency)]
