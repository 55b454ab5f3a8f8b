"""
Structured error types for convkit.

Parsing helpers signal failure by returning ``None``. The exceptions below are
reserved for precondition violations and for network failures reported by the
image loader.
"""

from enum import Enum
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from dataclasses import dataclass


class ErrorCode(Enum):
    """Structured error codes for convkit operations."""

    # Date parsing errors
    DATE_STRING_TOO_SHORT = "date_string_too_short"

    # Color errors
    COLOR_OUT_OF_RANGE = "color_out_of_range"

    # Network/Communication errors
    NETWORK_ERROR = "network_error"
    HTTP_ERROR = "http_error"
    TIMEOUT = "timeout"
    PAYLOAD_TOO_LARGE = "payload_too_large"

    # Configuration errors
    INVALID_CONFIG = "invalid_config"


@dataclass
class ErrorContext:
    """Additional context for errors."""

    timestamp: datetime = None
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc)
        if self.metadata is None:
            self.metadata = {}


class ConvKitError(ValueError):
    """
    Base exception class for all convkit errors.

    Carries an error code, a human readable message, optional context
    metadata and the underlying cause, if any.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None
    ):
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.cause = cause

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "error": self.code.value,
            "error_description": self.message,
            "timestamp": self.context.timestamp.isoformat(),
        }

        if self.context.metadata:
            result["metadata"] = self.context.metadata

        if self.cause:
            result["caused_by"] = str(self.cause)

        return result

    def is_retryable(self) -> bool:
        """Check if this error might be resolved by retrying."""
        return self.code in [
            ErrorCode.NETWORK_ERROR,
            ErrorCode.TIMEOUT,
        ]


class DateStringTooShortError(ConvKitError):
    """Raised when a full-date string is shorter than the fixed format."""

    def __init__(self, value: str, required_length: int, **kwargs):
        context = kwargs.pop("context", ErrorContext())
        context.metadata["value"] = value
        context.metadata["required_length"] = required_length

        super().__init__(
            code=ErrorCode.DATE_STRING_TOO_SHORT,
            message=(f"Date string {value!r} has {len(value)} characters, "
                     f"at least {required_length} required"),
            context=context,
            **kwargs
        )


class ColorValueError(ConvKitError):
    """Raised when a color component falls outside its allowed range."""

    def __init__(self, component: str, value: float, low: float, high: float, **kwargs):
        context = kwargs.pop("context", ErrorContext())
        context.metadata["component"] = component
        context.metadata["value"] = value

        super().__init__(
            code=ErrorCode.COLOR_OUT_OF_RANGE,
            message=f"Color component {component}={value} must be within [{low}, {high}]",
            context=context,
            **kwargs
        )


class ImageLoadError(ConvKitError):
    """Errors raised while fetching an image over the network."""

    def __init__(self, code: ErrorCode, message: str, url: Optional[str] = None,
                 status: Optional[int] = None, **kwargs):
        context = kwargs.pop("context", ErrorContext())
        if url:
            context.metadata["url"] = url
        if status is not None:
            context.metadata["status"] = status

        self.url = url
        self.status = status

        super().__init__(
            code=code,
            message=message,
            context=context,
            **kwargs
        )
