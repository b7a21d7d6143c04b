"""
Price source ports and error types.

This module defines the protocol for price history adapters
and the error types raised across the fetch boundary.
"""

from datetime import timedelta
from enum import Enum
from typing import Protocol, runtime_checkable, Any

from domain import PriceHistory


# ============================================================================
# Error Codes
# ============================================================================

class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # Network errors (1xx)
    NETWORK_TIMEOUT = "E101"
    NETWORK_CONNECTION = "E102"
    NETWORK_DNS = "E103"
    NETWORK_SSL = "E104"

    # HTTP errors (2xx)
    HTTP_CLIENT_ERROR = "E201"
    HTTP_SERVER_ERROR = "E202"
    HTTP_RATE_LIMITED = "E203"
    HTTP_NOT_FOUND = "E206"

    # Parse errors (3xx)
    PARSE_CSV = "E303"
    PARSE_FRAME = "E305"

    # Data errors (4xx)
    DATA_INVALID = "E402"
    DATA_EMPTY = "E404"
    DATA_INSUFFICIENT = "E405"

    # Validation errors (5xx)
    VALIDATION_TICKER = "E501"

    # Refresh errors (6xx)
    REFRESH_FAILED = "E601"

    UNKNOWN = "E999"


# ============================================================================
# Error Classes
# ============================================================================

class AdapterError(Exception):
    """
    Base exception for fetch-boundary failures.

    Carries a code and the originating source so a batch can report
    why each symbol went missing.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        source: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.code = code
        self.source = source
        self.context = context or {}
        self.cause = cause
        self.message = message

        prefix = f"[{code.value}]"
        if source:
            prefix += f" [{source}]"
        super().__init__(f"{prefix} {message}")


class RateLimitError(AdapterError):
    """Raised when the upstream source rejects a request for rate reasons."""

    def __init__(
        self,
        retry_after: timedelta | None = None,
        source: str | None = None,
    ):
        self.retry_after = retry_after

        msg = "Rate limit exceeded"
        if retry_after:
            msg += f", retry after {retry_after.total_seconds():.0f}s"

        super().__init__(msg, code=ErrorCode.HTTP_RATE_LIMITED, source=source)


class FetchError(AdapterError):
    """Raised when a request to the source fails."""

    def __init__(
        self,
        source: str,
        reason: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.url = url
        self.status_code = status_code

        context = {}
        if url:
            context["url"] = url
        if status_code:
            context["status_code"] = status_code

        super().__init__(reason, code=code, source=source, context=context, cause=cause)

    @classmethod
    def from_http_error(
        cls,
        source: str,
        status_code: int,
        url: str | None = None,
        response_body: str | None = None,
    ) -> "FetchError":
        """Create FetchError from an HTTP error status (429 raises RateLimitError)."""
        if status_code == 429:
            raise RateLimitError(source=source)

        if status_code == 404:
            code = ErrorCode.HTTP_NOT_FOUND
        elif 400 <= status_code < 500:
            code = ErrorCode.HTTP_CLIENT_ERROR
        else:
            code = ErrorCode.HTTP_SERVER_ERROR

        reason = f"HTTP {status_code}"
        if response_body:
            reason += f": {response_body[:100]}"

        return cls(source, reason, code=code, url=url, status_code=status_code)

    @classmethod
    def from_network_error(
        cls,
        source: str,
        error: Exception,
        url: str | None = None,
    ) -> "FetchError":
        """Classify a network exception by its message."""
        error_str = str(error).lower()

        if isinstance(error, TimeoutError) or "timeout" in error_str or "timed out" in error_str:
            code, reason = ErrorCode.NETWORK_TIMEOUT, "Request timed out"
        elif "ssl" in error_str or "certificate" in error_str:
            code, reason = ErrorCode.NETWORK_SSL, "SSL/TLS error"
        elif "dns" in error_str or "name resolution" in error_str:
            code, reason = ErrorCode.NETWORK_DNS, "DNS resolution failed"
        else:
            code, reason = ErrorCode.NETWORK_CONNECTION, f"Connection error: {error}"

        return cls(source, reason, code=code, url=url, cause=error)


class ParseError(AdapterError):
    """Raised when a payload (CSV body, price frame) cannot be read."""

    _CODES = {
        "csv": ErrorCode.PARSE_CSV,
        "frame": ErrorCode.PARSE_FRAME,
    }

    def __init__(
        self,
        source: str,
        format_type: str,
        reason: str,
        raw_content: str | None = None,
        cause: Exception | None = None,
    ):
        context = {"format": format_type}
        if raw_content:
            context["raw_preview"] = raw_content[:200]

        super().__init__(
            f"Failed to parse {format_type}: {reason}",
            code=self._CODES.get(format_type, ErrorCode.UNKNOWN),
            source=source,
            context=context,
            cause=cause,
        )


class DataError(AdapterError):
    """Raised when a payload parses but holds no usable history."""

    def __init__(
        self,
        source: str,
        reason: str,
        code: ErrorCode = ErrorCode.DATA_INVALID,
        expected: Any = None,
        actual: Any = None,
    ):
        context = {}
        if expected is not None:
            context["expected"] = str(expected)
        if actual is not None:
            context["actual"] = str(actual)

        super().__init__(reason, code=code, source=source, context=context)

    @classmethod
    def empty(cls, source: str, description: str = "No data") -> "DataError":
        """Create error for empty result set."""
        return cls(source, description, code=ErrorCode.DATA_EMPTY)

    @classmethod
    def insufficient(cls, source: str, symbol: str, count: int, required: int) -> "DataError":
        """Create error for a history too short to use."""
        return cls(
            source,
            f"Insufficient history for {symbol} ({count} bars)",
            code=ErrorCode.DATA_INSUFFICIENT,
            expected=f">={required}",
            actual=count,
        )


class ValidationError(AdapterError):
    """Raised when a request parameter is malformed."""

    @classmethod
    def invalid_ticker(cls, ticker: str, reason: str = "Invalid format") -> "ValidationError":
        """Create error for invalid ticker symbol."""
        return cls(
            f"Invalid ticker '{ticker}': {reason}",
            code=ErrorCode.VALIDATION_TICKER,
            context={"value": str(ticker)[:50]},
        )


class RefreshError(AdapterError):
    """Raised when a whole refresh fails (no symbol could be fetched)."""

    def __init__(self, reason: str, failed_symbols: list[str] | None = None):
        self.failed_symbols = failed_symbols or []
        super().__init__(
            reason,
            code=ErrorCode.REFRESH_FAILED,
            context={"failed": len(self.failed_symbols)},
        )


# ============================================================================
# Protocol
# ============================================================================

@runtime_checkable
class PriceHistorySource(Protocol):
    """
    Protocol for daily price history adapters.

    Implementations must:
    - Return bars oldest first, without duplicate dates
    - Fail explicitly with an AdapterError subclass, no silent fallbacks
    """

    @property
    def source_name(self) -> str:
        """Unique identifier for this data source."""
        ...

    def fetch_history(self, symbol: str) -> PriceHistory:
        """
        Fetch daily history for one symbol.

        Raises:
            RateLimitError: If the source rate-limits the request
            FetchError: If the fetch fails for any other reason
            ParseError: If the payload cannot be read
            DataError: If the payload is empty or too short
        """
        ...
