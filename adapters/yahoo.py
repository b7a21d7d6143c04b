"""
Yahoo Finance price history adapter.

Daily adjusted closes and volumes via yfinance. London listings keep
their ".L" suffix here; stripping it is a presentation concern.
"""

import logging
import time
from datetime import date, timedelta

import pandas as pd
import yfinance as yf

from domain import PriceBar, PriceHistory
from ports import AdapterError, DataError, FetchError, ParseError, RateLimitError

from .base import BaseAdapter

logger = logging.getLogger(__name__)


class YahooHistoryAdapter(BaseAdapter):
    """
    Yahoo Finance daily history adapter.

    No API key required. One request per symbol; pacing between
    symbols is the caller's job.
    """

    @property
    def source_name(self) -> str:
        return "yahoo"

    def fetch_history(self, symbol: str, today: date | None = None) -> PriceHistory:
        """
        Fetch roughly `lookback_days` calendar days of daily bars.

        Raises:
            ValidationError: If the symbol is malformed
            RateLimitError: If Yahoo throttles the request
            FetchError: If yfinance fails for any other reason
            ParseError: If the returned frame lacks a Close column
            DataError: If the history is empty or shorter than min_history
        """
        symbol = self._validate_ticker(symbol)
        end = (today or date.today()) + timedelta(days=1)
        start = end - timedelta(days=self._config.lookback_days)

        start_time = time.monotonic()
        try:
            frame = yf.Ticker(symbol).history(
                start=start.isoformat(),
                end=end.isoformat(),
                interval="1d",
                auto_adjust=True,
            )
        except AdapterError:
            raise
        except Exception as e:
            message = str(e).lower()
            if "too many requests" in message or "rate limit" in message:
                raise RateLimitError(source=self.source_name) from e
            raise FetchError(
                self.source_name,
                f"yfinance error for {symbol}: {e}",
                cause=e,
            ) from e

        elapsed = time.monotonic() - start_time
        history = self._frame_to_history(symbol, frame)
        logger.debug(
            f"{symbol}: {len(history)} bars ({elapsed:.2f}s)",
            extra={
                "source": self.source_name,
                "symbol": symbol,
                "bars": len(history),
                "elapsed_ms": int(elapsed * 1000),
            },
        )

        if len(history) < self._config.min_history:
            raise DataError.insufficient(
                self.source_name, symbol, len(history), self._config.min_history
            )
        return history

    def _frame_to_history(self, symbol: str, frame: pd.DataFrame | None) -> PriceHistory:
        """Convert a yfinance history frame into date-ascending bars."""
        if frame is None or frame.empty:
            raise DataError.empty(self.source_name, f"No price data for {symbol}")
        if "Close" not in frame.columns:
            raise ParseError(
                self.source_name,
                "frame",
                f"missing Close column for {symbol}",
                raw_content=", ".join(str(c) for c in frame.columns),
            )

        try:
            dates = pd.DatetimeIndex(frame.index).date
        except (TypeError, ValueError) as e:
            raise ParseError(
                self.source_name, "frame", f"non-date index for {symbol}", cause=e
            ) from e

        closes = pd.to_numeric(frame["Close"], errors="coerce").to_numpy()
        if "Volume" in frame.columns:
            volumes = pd.to_numeric(frame["Volume"], errors="coerce").to_numpy()
        else:
            volumes = [float("nan")] * len(frame)

        table = pd.DataFrame({"close": closes, "volume": volumes}, index=dates)
        table = table[table["close"].notna() & (table["close"] > 0)]
        # Yahoo occasionally repeats the latest session with an intraday bar
        table = table[~table.index.duplicated(keep="last")].sort_index()

        if table.empty:
            raise DataError.empty(self.source_name, f"No valid closes for {symbol}")

        bars = tuple(
            PriceBar(
                date=row.Index,
                close=float(row.close),
                volume=None if pd.isna(row.volume) or row.volume < 0 else float(row.volume),
            )
            for row in table.itertuples()
        )
        return PriceHistory(symbol=symbol, bars=bars)
