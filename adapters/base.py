"""
Shared plumbing for price and rate adapters.

Subclasses get a FetchConfig, a urllib GET that maps failures onto the
ports error types, and ticker validation.
"""

from abc import ABC, abstractmethod
import re
import time
import logging
import http.client
import urllib.request
import urllib.error

from ports import FetchError, ValidationError
from config import FetchConfig

logger = logging.getLogger(__name__)

# Yahoo tickers: exchange suffixes (.L), share classes (-B), indices (^FTSE)
TICKER_PATTERN = re.compile(r"^[A-Z0-9.\-^]{1,12}$")


class BaseAdapter(ABC):
    """Base class for data source adapters."""

    def __init__(self, config: FetchConfig | None = None):
        self._config = config or FetchConfig()

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Unique identifier for this data source."""
        ...

    def _log_boundary(self, level: int, message: str, url: str, started: float, **fields) -> None:
        elapsed_ms = int((time.monotonic() - started) * 1000)
        logger.log(
            level,
            f"{message} ({elapsed_ms}ms)",
            extra={"source": self.source_name, "url": url, "elapsed_ms": elapsed_ms, **fields},
        )

    def _http_get(self, url: str, headers: dict[str, str] | None = None) -> bytes:
        """
        GET a URL with the configured timeout and User-Agent.

        Raises:
            RateLimitError: On a 429 response
            FetchError: On any other HTTP status or network failure
        """
        request = urllib.request.Request(
            url, headers={"User-Agent": self._config.user_agent, **(headers or {})}
        )
        logger.debug(f"HTTP GET {url}", extra={"source": self.source_name, "url": url})
        started = time.monotonic()

        try:
            with urllib.request.urlopen(request, timeout=self._config.timeout_seconds) as resp:
                body = resp.read()
        except urllib.error.HTTPError as e:
            self._log_boundary(logging.WARNING, f"HTTP {e.code} from {url}", url, started, status=e.code)
            raise FetchError.from_http_error(
                self.source_name, e.code, url=url, response_body=e.reason
            ) from e
        except urllib.error.URLError as e:
            self._log_boundary(logging.WARNING, f"Network error for {url}: {e.reason}", url, started)
            raise FetchError.from_network_error(self.source_name, e, url=url) from e
        except (http.client.HTTPException, OSError) as e:
            # Failures while reading the body: TimeoutError, IncompleteRead, RemoteDisconnected
            self._log_boundary(logging.WARNING, f"Read error for {url}: {e!r}", url, started)
            raise FetchError.from_network_error(self.source_name, e, url=url) from e

        self._log_boundary(logging.DEBUG, f"HTTP 200 ({len(body)} bytes)", url, started, size=len(body))
        return body

    def _http_get_text(self, url: str, encoding: str = "utf-8") -> str:
        return self._http_get(url).decode(encoding)

    def _validate_ticker(self, ticker: str) -> str:
        """Upper-case and check a ticker, raising ValidationError if malformed."""
        ticker = (ticker or "").strip().upper()
        if not ticker:
            raise ValidationError.invalid_ticker(ticker, "Ticker cannot be empty")
        if not TICKER_PATTERN.match(ticker):
            raise ValidationError.invalid_ticker(
                ticker, "Must be 1-12 letters, digits, dots, dashes or carets"
            )
        return ticker
