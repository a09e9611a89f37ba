"""Standard error codes for booking submission.

The pricing and calendar engine never raises; these errors belong to the
outer layer that turns a selection into a booking or payment request.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard booking error codes."""

    DATES_UNAVAILABLE = "ERR_001"
    DATES_REQUIRED = "ERR_002"
    INVALID_DATE_RANGE = "ERR_003"
    MAX_GUESTS_EXCEEDED = "ERR_004"
    INVALID_MONTH = "ERR_005"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DATES_UNAVAILABLE: "Some dates in your selection are unavailable",
    ErrorCode.DATES_REQUIRED: "Please select check-in and check-out dates.",
    ErrorCode.INVALID_DATE_RANGE: "Check-out must be after check-in",
    ErrorCode.MAX_GUESTS_EXCEEDED: "Number of guests exceeds the listing maximum",
    ErrorCode.INVALID_MONTH: "Month must be in YYYY-MM format",
}

# Recovery suggestions for the client
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.DATES_UNAVAILABLE: "Pick a range that does not include blocked nights",
    ErrorCode.DATES_REQUIRED: "Select both dates on the calendar",
    ErrorCode.INVALID_DATE_RANGE: "Choose a check-out date later than check-in",
    ErrorCode.MAX_GUESTS_EXCEEDED: "Reduce the number of guests",
    ErrorCode.INVALID_MONTH: "Send the month as YYYY-MM, e.g. 2026-02",
}


class ToolError(BaseModel):
    """Standard error response body."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ToolError":
        """Create a ToolError from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            A ToolError with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class BookingError(Exception):
    """Exception raised when a booking request cannot be built."""

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    def to_tool_error(self) -> ToolError:
        """Convert this exception to a ToolError response body."""
        return ToolError.from_code(self.code, self.details)
