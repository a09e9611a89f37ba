"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management for request tracing
- Structured logging formatter for consistent log output
- Helper functions for pricing and date-selection logging

Usage:
    from booking_engine.utils.logging import get_logger, set_correlation_id

    # In middleware/request handler:
    set_correlation_id(request.headers.get("X-Correlation-ID"))

    # In service code:
    logger = get_logger(__name__)
    logger.info("Quoting stay", extra={"listing_id": 42})
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

# Context variable for correlation ID - thread-safe and async-safe
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        UUID-based correlation ID string
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current request context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the current correlation ID, or None if not set."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "no-correlation-id"
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter for structured log output with correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a correlation ID prefix.

        Args:
            record: Log record to format

        Returns:
            Formatted log string
        """
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "no-correlation-id"

        base = super().format(record)

        # Prefix keeps grep/filtering by request simple
        return f"[{record.correlation_id}] {base}"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with correlation ID support.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())

    return logger


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install the structured formatter on the root logger.

    Safe to call more than once; existing handlers get the formatter
    instead of new handlers being stacked.

    Args:
        level: Log level name or number
    """
    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)

    if not root.handlers:
        root.addHandler(logging.StreamHandler())

    for handler in root.handlers:
        handler.setFormatter(StructuredFormatter(DEFAULT_FORMAT))


def log_pricing_operation(
    logger: logging.Logger,
    operation: str,
    *,
    listing_id: int | str | None = None,
    nights: int | None = None,
    total: float | None = None,
    pay_now_amount: float | None = None,
    payment_type: str | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log a pricing operation with structured context.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "quote", "build_payment_request")
        listing_id: Listing ID if available
        nights: Number of nights priced
        total: Guest-facing total
        pay_now_amount: Amount payable now
        payment_type: "full" or "partial"
        error: Error message if the operation was refused
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"operation": operation}

    if listing_id is not None:
        context["listing_id"] = listing_id
    if nights is not None:
        context["nights"] = nights
    if total is not None:
        context["total"] = total
    if pay_now_amount is not None:
        context["pay_now_amount"] = pay_now_amount
    if payment_type:
        context["payment_type"] = payment_type
    if error:
        context["error"] = error

    context.update(extra)

    msg_parts = [f"Pricing operation: {operation}"]
    for key, value in context.items():
        if key != "operation":
            msg_parts.append(f"{key}={value}")

    message = " | ".join(msg_parts)

    if error:
        logger.warning(message, extra=context)
    else:
        logger.info(message, extra=context)


def log_selection_event(
    logger: logging.Logger,
    clicked: str,
    *,
    result: str,
    check_in: str = "",
    check_out: str = "",
    reason: str | None = None,
) -> None:
    """Log a calendar click and how the selection responded.

    Args:
        logger: Logger instance
        clicked: DateKey that was clicked
        result: "check_in", "check_out", "restart" or "rejected"
        check_in: Check-in after the click
        check_out: Check-out after the click
        reason: Why a click was rejected (past, blocked, blocked_in_range)
    """
    context: dict[str, Any] = {
        "clicked": clicked,
        "result": result,
        "check_in": check_in,
        "check_out": check_out,
    }
    if reason:
        context["reason"] = reason

    msg_parts = [f"Calendar click: {clicked}", f"result={result}"]
    if reason:
        msg_parts.append(f"reason={reason}")

    # Rejections are routine UI noise, not warnings
    logger.debug(" | ".join(msg_parts), extra=context)
