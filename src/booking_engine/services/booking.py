"""Booking service: submission gate, quotes and outbound request payloads.

Combines the calendar selection with the pricing calculator. The gate is
re-evaluated on every call, so dates typed straight into the inputs (which
skip the calendar's blocked-range scan) are still checked before anything
is submitted.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from booking_engine.models import (
    BookingDraft,
    BookingError,
    BookingQuote,
    BookingRequest,
    ErrorCode,
    PaymentInitiationRequest,
    PriceLine,
    PricingResult,
    Selection,
    SelectionCheck,
)
from booking_engine.models.errors import ERROR_MESSAGES
from booking_engine.utils.logging import get_logger, log_pricing_operation

from .dates import blocked_in_range, count_nights, parse_date_key
from .pricing import format_percent

if TYPE_CHECKING:
    from .currency import CurrencyService
    from .pricing import PricingCalculator

logger = get_logger(__name__)

UNAVAILABLE_WARNING = ERROR_MESSAGES[ErrorCode.DATES_UNAVAILABLE]


def check_selection(selection: Selection, blocked: Iterable[str]) -> SelectionCheck:
    """Evaluate whether a selection may be submitted.

    Args:
        selection: Current check-in/check-out
        blocked: Blocked DateKeys for the listing

    Returns:
        SelectionCheck; submittable only with both dates, at least one
        night and no blocked night in [check_in, check_out).
    """
    nights = count_nights(selection.check_in, selection.check_out)
    unavailable = (
        blocked_in_range(selection.check_in, selection.check_out, frozenset(blocked))
        if nights > 0
        else []
    )
    has_unavailable = len(unavailable) > 0
    return SelectionCheck(
        nights=nights,
        has_unavailable_in_range=has_unavailable,
        unavailable_dates=unavailable,
        is_submittable=(
            not has_unavailable
            and bool(selection.check_in)
            and bool(selection.check_out)
            and nights > 0
        ),
        warning=UNAVAILABLE_WARNING if has_unavailable else None,
    )


def clamp_guests(guests: int, max_guests: int | None = None) -> int:
    """Keep the guest count within 1..max_guests."""
    if max_guests is not None:
        guests = min(max_guests, guests)
    return max(1, guests)


class BookingService:
    """Quotes a booking draft and builds the requests sent on submit."""

    def __init__(
        self,
        pricing: "PricingCalculator",
        currency: "CurrencyService",
    ) -> None:
        """Initialize booking service.

        Args:
            pricing: Pricing calculator instance
            currency: Currency service used for display lines
        """
        self.pricing = pricing
        self.currency = currency

    def apply_typed_dates(self, check_in: str | None, check_out: str | None) -> Selection:
        """Selection from dates typed into the inputs.

        No blocked-date scan happens here; check_selection catches it.
        """
        return Selection(check_in=check_in or "", check_out=check_out or "")

    def price(self, draft: BookingDraft, nights: int | None = None) -> PricingResult:
        """Price a draft. Nights default to the draft's date range."""
        if nights is None:
            nights = count_nights(draft.check_in, draft.check_out)
        return self.pricing.compute_pricing(
            nights,
            draft.nightly_rate,
            draft.booking_fee,
            draft.payment,
        )

    def price_lines(
        self,
        draft: BookingDraft,
        result: PricingResult,
        nights: int,
        currency: str | None = None,
    ) -> list[PriceLine]:
        """Summary rows shown under the booking button."""
        fmt = self.currency.format
        plural = "s" if nights > 1 else ""
        lines = [
            PriceLine(
                label=f"{fmt(draft.nightly_rate, currency)} × {nights} night{plural}",
                amount=fmt(result.subtotal, currency),
            )
        ]

        if result.fee_amount != 0:
            amount = (
                fmt(result.fee_amount, currency)
                if result.fee_amount > 0
                else f"-{fmt(abs(result.fee_amount), currency)}"
            )
            lines.append(PriceLine(label=result.fee_label, amount=amount))

        if draft.payment.is_partial:
            lines.append(PriceLine(label="No discount (partial payment)", amount="—"))

        lines.append(PriceLine(label="Total", amount=fmt(result.total, currency)))

        if draft.payment.is_partial and result.total > result.pay_now_amount:
            lines.append(
                PriceLine(
                    label=f"Pay now ({format_percent(result.pay_now_percent)}%)",
                    amount=fmt(result.pay_now_amount, currency),
                )
            )
        return lines

    def submit_label(
        self,
        draft: BookingDraft,
        result: PricingResult,
        currency: str | None = None,
    ) -> str:
        if draft.payment.is_partial:
            amount = self.currency.format(result.pay_now_amount, currency)
            return f"Pay {amount} now ({format_percent(result.pay_now_percent)}%)"
        return "Reserve Now"

    def quote(
        self,
        draft: BookingDraft,
        blocked: Iterable[str],
        currency: str | None = None,
    ) -> BookingQuote:
        """Everything the booking widget shows for a draft.

        Args:
            draft: Current widget state
            blocked: Blocked DateKeys for the listing
            currency: Display currency (service default if None)

        Returns:
            BookingQuote; ``request`` is set only when submittable.
        """
        selection = draft.selection
        check = check_selection(selection, blocked)
        guests = clamp_guests(draft.guests, draft.max_guests)
        result = self.price(draft, check.nights)

        show_breakdown = check.nights > 0 and not check.has_unavailable_in_range
        lines = self.price_lines(draft, result, check.nights, currency) if show_breakdown else []

        request = None
        if check.is_submittable:
            request = self._request(draft, guests)

        log_pricing_operation(
            logger,
            "quote",
            listing_id=draft.listing_id,
            nights=check.nights,
            total=result.total,
            pay_now_amount=result.pay_now_amount,
            payment_type=draft.payment.payment_type.value,
            submittable=check.is_submittable,
        )

        return BookingQuote(
            selection=selection,
            check=check,
            guests=guests,
            pricing=result,
            lines=lines,
            submit_label=self.submit_label(draft, result, currency),
            request=request,
        )

    def build_booking_request(
        self,
        draft: BookingDraft,
        blocked: Iterable[str],
    ) -> BookingRequest:
        """Validate a draft and build the booking-creation body.

        Raises:
            BookingError: DATES_REQUIRED, INVALID_DATE_RANGE,
                DATES_UNAVAILABLE or MAX_GUESTS_EXCEEDED
        """
        check = self._validate(draft, blocked, "build_booking_request")
        request = self._request(draft, clamp_guests(draft.guests))
        log_pricing_operation(
            logger,
            "build_booking_request",
            listing_id=draft.listing_id,
            nights=check.nights,
        )
        return request

    def build_payment_request(
        self,
        draft: BookingDraft,
        blocked: Iterable[str],
    ) -> PaymentInitiationRequest:
        """Validate a draft and build the payment-initiation body.

        The pay-now amount is the full total, or the clamped partial share
        of the subtotal in partial mode.

        Raises:
            BookingError: same codes as build_booking_request
        """
        check = self._validate(draft, blocked, "build_payment_request")
        result = self.price(draft, check.nights)
        base = self._request(draft, clamp_guests(draft.guests))

        log_pricing_operation(
            logger,
            "build_payment_request",
            listing_id=draft.listing_id,
            nights=check.nights,
            total=result.total,
            pay_now_amount=result.pay_now_amount,
            payment_type=draft.payment.payment_type.value,
        )

        return PaymentInitiationRequest(
            **base.model_dump(),
            payment_type=draft.payment.payment_type,
            pay_now_amount=result.pay_now_amount,
            pay_now_percent=result.pay_now_percent,
        )

    def _validate(
        self,
        draft: BookingDraft,
        blocked: Iterable[str],
        operation: str,
    ) -> SelectionCheck:
        selection = draft.selection
        check = check_selection(selection, blocked)

        error: BookingError | None = None
        if not selection.check_in or not selection.check_out:
            error = BookingError(ErrorCode.DATES_REQUIRED)
        elif (
            parse_date_key(selection.check_in) is None
            or parse_date_key(selection.check_out) is None
            or check.nights <= 0
        ):
            error = BookingError(
                ErrorCode.INVALID_DATE_RANGE,
                details={"check_in": selection.check_in, "check_out": selection.check_out},
            )
        elif check.has_unavailable_in_range:
            error = BookingError(
                ErrorCode.DATES_UNAVAILABLE,
                details={"unavailable_dates": ",".join(check.unavailable_dates)},
            )
        elif draft.max_guests is not None and draft.guests > draft.max_guests:
            error = BookingError(
                ErrorCode.MAX_GUESTS_EXCEEDED,
                details={"guests": str(draft.guests), "max_guests": str(draft.max_guests)},
            )

        if error is not None:
            log_pricing_operation(
                logger,
                operation,
                listing_id=draft.listing_id,
                nights=check.nights,
                error=error.code.value,
            )
            raise error
        return check

    def _request(self, draft: BookingDraft, guests: int) -> BookingRequest:
        return BookingRequest(
            listing_id=draft.listing_id,
            check_in=draft.check_in,
            check_out=draft.check_out,
            guests=guests,
            message=draft.message or None,
        )
