"""Pricing endpoints.

Provides REST endpoints for:
- Price quotes for a stay (nights x rate, fee/discount, pay-now amount)

Amounts are in the listing's base currency with 2 decimals.
"""

from fastapi import APIRouter, Depends

from booking_api.dependencies import get_pricing_calculator
from booking_api.models.pricing import QuoteRequest, QuoteResponse
from booking_engine.config import Settings, get_settings
from booking_engine.services.dates import count_nights
from booking_engine.services.pricing import PricingCalculator
from booking_engine.utils.logging import get_logger, log_pricing_operation

logger = get_logger(__name__)

router = APIRouter(tags=["pricing"])


@router.post(
    "/pricing/quote",
    summary="Quote a stay",
    description="""
Calculate the price breakdown for a stay.

Returns subtotal, service fee or discount, total, and the amount payable
now. In partial payment mode no discount or service fee is applied and the
pay-now percent is clamped between the configured minimum and 99%.

**Notes:**
- Send either `nights` or `check_in` + `check_out`; dates win when both are sent
- A reversed or equal date range counts as 0 nights
- An unparseable `nightly_rate` prices as 0 instead of failing
""",
    response_description="Price breakdown",
    response_model=QuoteResponse,
    responses={
        200: {
            "description": "Quote calculated",
            "content": {
                "application/json": {
                    "example": {
                        "nights": 2,
                        "subtotal": 2000.0,
                        "fee_amount": 100.0,
                        "fee_label": "Service fee (5%)",
                        "total": 2100.0,
                        "pay_now_amount": 2100.0,
                        "pay_now_percent": 105,
                        "effective_partial_percent": None,
                    }
                }
            },
        },
    },
)
async def quote_stay(
    request: QuoteRequest,
    calculator: PricingCalculator = Depends(get_pricing_calculator),
    settings: Settings = Depends(get_settings),
) -> QuoteResponse:
    """Quote a stay from nights or a date range."""
    if request.check_in or request.check_out:
        nights = count_nights(request.check_in or "", request.check_out or "")
    else:
        nights = request.nights or 0

    policy = request.payment.to_policy(settings)
    result = calculator.compute_pricing(
        nights,
        request.nightly_rate,
        request.booking_fee,
        policy,
    )

    log_pricing_operation(
        logger,
        "quote_stay",
        nights=nights,
        total=result.total,
        pay_now_amount=result.pay_now_amount,
        payment_type=policy.payment_type.value,
    )

    return QuoteResponse(
        **result.model_dump(),
        nights=nights,
        effective_partial_percent=(
            calculator.effective_partial_percent(policy) if policy.is_partial else None
        ),
    )
