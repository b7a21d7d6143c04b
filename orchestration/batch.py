"""
Sequential batch fetch across a universe.

Each symbol is fetched independently. A failure for one symbol is
caught, logged and recorded; it never aborts the batch. Whatever subset
succeeded is returned together with the failure report.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from domain import PriceHistory
from ports import AdapterError, PriceHistorySource, RateLimitError, RefreshError

from .pacing import NoPacing, Pacer

logger = logging.getLogger(__name__)


class SymbolStatus(str, Enum):
    """Outcome of one symbol's fetch."""
    OK = "ok"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class SymbolResult:
    """Result from fetching a single symbol."""
    symbol: str
    status: SymbolStatus
    bars: int = 0
    error: str | None = None
    error_code: str | None = None


@dataclass
class BatchResult:
    """Aggregate outcome of one batch pass."""
    histories: dict[str, PriceHistory] = field(default_factory=dict)
    results: dict[str, SymbolResult] = field(default_factory=dict)
    cancelled: bool = False

    @property
    def attempted(self) -> int:
        return sum(1 for r in self.results.values() if r.status != SymbolStatus.SKIPPED)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results.values() if r.status == SymbolStatus.OK)

    @property
    def failed(self) -> int:
        return len(self.failed_symbols)

    @property
    def failed_symbols(self) -> list[str]:
        return [s for s, r in self.results.items() if r.status == SymbolStatus.FAILED]

    def raise_if_empty(self) -> None:
        """
        Raise when every attempted symbol failed.

        Raises:
            RefreshError: No history was fetched at all
        """
        if self.attempted and not self.succeeded:
            raise RefreshError(
                f"All {self.attempted} symbol fetches failed",
                failed_symbols=self.failed_symbols,
            )


class BatchFetchOrchestrator:
    """
    Fetch price histories one symbol at a time.

    Requests are strictly sequential with a pacing gate between them.
    """

    def __init__(self, source: PriceHistorySource, pacer: Pacer | None = None):
        self.source = source
        self.pacer = pacer or NoPacing()
        self._cancelled = False

    def cancel(self) -> None:
        """Stop issuing new requests once the in-flight one returns."""
        self._cancelled = True

    def fetch_all(self, symbols: list[str]) -> BatchResult:
        """
        Fetch every symbol, recording failures instead of raising.

        Args:
            symbols: Source tickers, fetched in order

        Returns:
            BatchResult with histories for the symbols that succeeded
        """
        self._cancelled = False
        batch = BatchResult()

        for idx, symbol in enumerate(symbols):
            if self._cancelled:
                batch.cancelled = True
                for remaining in symbols[idx:]:
                    batch.results.setdefault(
                        remaining, SymbolResult(remaining, SymbolStatus.SKIPPED)
                    )
                logger.info(f"Batch cancelled, {len(symbols) - idx} symbol(s) skipped")
                break

            self.pacer.wait()

            batch.results[symbol] = self._fetch_symbol(symbol, batch)

        logger.info(
            f"Fetched {batch.succeeded}/{batch.attempted} symbols from "
            f"{self.source.source_name} ({batch.failed} failed)"
        )
        if batch.failed_symbols:
            logger.warning(f"Failed symbols: {', '.join(batch.failed_symbols)}")
        return batch

    def _fetch_symbol(self, symbol: str, batch: BatchResult) -> SymbolResult:
        """Fetch one symbol with error handling."""
        try:
            history = self.source.fetch_history(symbol)

        except RateLimitError as e:
            logger.warning(f"{symbol}: Rate limited - {e}")
            return SymbolResult(
                symbol, SymbolStatus.FAILED, error=str(e), error_code=e.code.value
            )

        except AdapterError as e:
            logger.warning(
                f"{symbol}: Fetch failed - {e}",
                extra={"symbol": symbol, "error_code": e.code.value, "source": e.source},
            )
            return SymbolResult(
                symbol, SymbolStatus.FAILED, error=str(e), error_code=e.code.value
            )

        except Exception as e:
            logger.warning(f"{symbol}: Unexpected error - {e}")
            return SymbolResult(symbol, SymbolStatus.FAILED, error=str(e))

        batch.histories[symbol] = history
        logger.debug(f"  {symbol}: {len(history)} bars")
        return SymbolResult(symbol, SymbolStatus.OK, bars=len(history))
