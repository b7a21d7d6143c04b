from .sources import (
    PriceHistorySource,
    AdapterError,
    RateLimitError,
    FetchError,
    ParseError,
    DataError,
    ValidationError,
    RefreshError,
    ErrorCode,
)

__all__ = [
    "PriceHistorySource",
    "AdapterError",
    "RateLimitError",
    "FetchError",
    "ParseError",
    "DataError",
    "ValidationError",
    "RefreshError",
    "ErrorCode",
]
