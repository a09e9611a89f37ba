"""Pricing calculator for a stay.

Turns nights, nightly rate, an optional service charge/discount policy and
the guest's payment choice into the figures shown in the booking widget.

Business rules:
- Discounts and service charges are skipped entirely in partial payment mode.
- A host-paid service charge never reaches the guest total.
- Partial pay-now percent is clamped to [partial_min_percent, 99].
- Money is rounded half-up to 2 decimals; percents to whole numbers.

Computation runs on Decimal so that half-up rounding is exact for the
decimal amounts the guest sees. Inputs are capped at MAX_AMOUNT by
coerce_amount, and a stay whose subtotal or total would exceed it (or that
Decimal cannot represent) prices as zero.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from booking_engine.models import (
    FeeAppliesTo,
    FeeKind,
    FeePolicy,
    FeeType,
    PartialPaymentPolicy,
    PricingResult,
    coerce_amount,
)
from booking_engine.models.pricing import MAX_AMOUNT
from booking_engine.utils.logging import get_logger, log_pricing_operation

logger = get_logger(__name__)

MAX_PARTIAL_PERCENT = 99  # 100% would just be full payment

_CENTS = Decimal("0.01")
_WHOLE = Decimal("1")
_HUNDRED = Decimal(100)
_MAX_AMOUNT = Decimal(str(MAX_AMOUNT))

# Enough digits for MAX_AMOUNT nights x MAX_AMOUNT rate plus a percent fee
DECIMAL_PRECISION = 60


def _to_decimal(value: Any) -> Decimal:
    return Decimal(str(coerce_amount(value)))


def round_money(value: Decimal | float) -> Decimal:
    """Round half-up to 2 decimal places."""
    if not isinstance(value, Decimal):
        value = _to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def round_percent(value: Decimal | float) -> int:
    """Round half-up to a whole percent."""
    if not isinstance(value, Decimal):
        value = _to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return int(value.quantize(_WHOLE, rounding=ROUND_HALF_UP))


def format_percent(value: int | float) -> str:
    """Render a percent value without a trailing ``.0``."""
    return str(int(value)) if float(value).is_integer() else str(value)


class PricingCalculator:
    """Stateless stay price calculation."""

    def effective_partial_percent(self, policy: PartialPaymentPolicy) -> float:
        """Requested pay-now percent clamped to [minimum, 99]."""
        percent = min(
            float(MAX_PARTIAL_PERCENT),
            max(policy.partial_min_percent, policy.partial_percent),
        )
        return max(0.0, percent)

    def fee_adjustment(
        self,
        subtotal: Decimal,
        fee_policy: FeePolicy | None,
        partial_policy: PartialPaymentPolicy,
    ) -> tuple[Decimal, str]:
        """Guest-facing fee amount and label for a subtotal.

        Returns:
            Tuple of (amount, label). Discounts are negative; (0, "") when no
            adjustment is shown to the guest.
        """
        if partial_policy.is_partial or fee_policy is None or fee_policy.value <= 0:
            return Decimal(0), ""

        value = _to_decimal(fee_policy.value)
        is_percent = fee_policy.kind == FeeKind.PERCENT
        raw = subtotal * value / _HUNDRED if is_percent else value
        raw_rounded = round_money(raw)
        suffix = f" ({format_percent(fee_policy.value)}%)" if is_percent else ""

        if fee_policy.type == FeeType.DISCOUNT:
            return -raw_rounded, f"Discount{suffix}"
        if fee_policy.applies_to == FeeAppliesTo.HOST:
            # Comes out of the host payout downstream
            return Decimal(0), ""
        return raw_rounded, f"Service fee{suffix}"

    def compute_pricing(
        self,
        nights: int,
        nightly_rate: float | str,
        fee_policy: FeePolicy | None = None,
        partial_policy: PartialPaymentPolicy | None = None,
    ) -> PricingResult:
        """Compute the price breakdown for a stay.

        Args:
            nights: Number of nights (negative values count as 0)
            nightly_rate: Price per night; strings are parsed, garbage is 0
            fee_policy: Optional service charge or discount
            partial_policy: Payment choice; None means full payment

        Returns:
            PricingResult with money rounded to 2 decimals; all zeros when
            the subtotal or total would exceed MAX_AMOUNT
        """
        policy = partial_policy or PartialPaymentPolicy()
        try:
            with localcontext() as ctx:
                ctx.prec = DECIMAL_PRECISION
                return self._compute(nights, nightly_rate, fee_policy, policy)
        except InvalidOperation:
            log_pricing_operation(
                logger,
                "compute_pricing",
                nights=nights,
                error="amount out of range",
            )
            return PricingResult(
                subtotal=0.0,
                fee_amount=0.0,
                total=0.0,
                pay_now_amount=0.0,
                pay_now_percent=policy.partial_percent,
            )

    def _compute(
        self,
        nights: int,
        nightly_rate: float | str,
        fee_policy: FeePolicy | None,
        policy: PartialPaymentPolicy,
    ) -> PricingResult:
        nights = max(0, int(coerce_amount(nights)))
        rate = max(Decimal(0), _to_decimal(nightly_rate))

        subtotal = Decimal(nights) * rate
        fee_amount, fee_label = self.fee_adjustment(subtotal, fee_policy, policy)
        total = max(Decimal(0), round_money(subtotal + fee_amount))
        if subtotal > _MAX_AMOUNT or total > _MAX_AMOUNT:
            raise InvalidOperation("amount out of range")

        if policy.is_partial:
            percent = _to_decimal(self.effective_partial_percent(policy))
            pay_now_amount = round_money(subtotal * percent / _HUNDRED)
        else:
            pay_now_amount = total

        if nights > 0 and subtotal > 0:
            # Derived from the rounded amount so percent and amount always agree
            pay_now_percent: int | float = round_percent(pay_now_amount / subtotal * _HUNDRED)
        else:
            pay_now_percent = policy.partial_percent

        return PricingResult(
            subtotal=float(round_money(subtotal)),
            fee_amount=float(fee_amount) or 0.0,
            fee_label=fee_label,
            total=float(total),
            pay_now_amount=float(pay_now_amount),
            pay_now_percent=pay_now_percent,
        )
