"""Currency display endpoint."""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict

from booking_api.dependencies import get_currency_service
from booking_engine.services.currency import CurrencyService, parse_currency

router = APIRouter(tags=["currency"])


class FormattedPrice(BaseModel):
    model_config = ConfigDict(strict=True)

    currency: str
    amount: float
    formatted: str


@router.get(
    "/currency/format",
    summary="Format a price",
    description="""
Convert an NPR amount and format it for display.

**Notes:**
- NPR is shown in whole rupees with thousands separators
- Other currencies use two decimals
- Unknown currency codes fall back to the configured default
- Unparseable amounts format as 0
""",
    response_model=FormattedPrice,
)
async def format_price(
    amount: str = Query(..., description="Amount in NPR", examples=["2500"]),
    currency: str | None = Query(default=None, description="Target currency code"),
    service: CurrencyService = Depends(get_currency_service),
) -> FormattedPrice:
    target = parse_currency(currency, service.default_currency) if currency else service.default_currency
    return FormattedPrice(
        currency=target.value,
        amount=service.convert(amount, target),
        formatted=service.format(amount, target),
    )
