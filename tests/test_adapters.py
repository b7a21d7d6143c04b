"""
Tests for the Yahoo and FRED adapters.

External calls are mocked: yfinance.Ticker for Yahoo, urlopen for FRED.
"""

import http.client
import urllib.error
from datetime import date
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest

from adapters import FredAdapter, YahooHistoryAdapter
from config import FetchConfig
from ports import (
    DataError,
    ErrorCode,
    FetchError,
    ParseError,
    PriceHistorySource,
    RateLimitError,
    ValidationError,
)


# ============================================================================
# Fixtures
# ============================================================================


def _frame(n: int, start: str = "2024-01-01", closes=None, volumes=None) -> pd.DataFrame:
    index = pd.date_range(start, periods=n, freq="D", tz="Europe/London")
    return pd.DataFrame(
        {
            "Open": [100.0 + i for i in range(n)],
            "Close": closes if closes is not None else [100.0 + i for i in range(n)],
            "Volume": volumes if volumes is not None else [50_000.0] * n,
        },
        index=index,
    )


@pytest.fixture
def mock_ticker():
    """Patch yfinance.Ticker and yield the instance mock."""
    with patch("adapters.yahoo.yf.Ticker") as ticker_cls:
        yield ticker_cls


@pytest.fixture
def mock_urlopen():
    """Patch urlopen used by BaseAdapter._http_get."""
    with patch("adapters.base.urllib.request.urlopen") as urlopen:
        yield urlopen


def _respond(mock_urlopen, body: bytes) -> None:
    response = MagicMock()
    response.read.return_value = body
    mock_urlopen.return_value.__enter__.return_value = response


# ============================================================================
# Yahoo
# ============================================================================


class TestYahooHistoryAdapter:
    """yfinance frame -> PriceHistory."""

    def test_implements_protocol(self):
        assert isinstance(YahooHistoryAdapter(), PriceHistorySource)

    def test_converts_frame(self, mock_ticker):
        mock_ticker.return_value.history.return_value = _frame(40)
        history = YahooHistoryAdapter().fetch_history("csp1.l")

        assert history.symbol == "CSP1.L"
        assert len(history) == 40
        assert history.bars[0].date == date(2024, 1, 1)
        assert history.closes[-1] == 139.0
        assert history.bars[-1].volume == 50_000.0
        mock_ticker.assert_called_once_with("CSP1.L")

    def test_requests_lookback_window(self, mock_ticker):
        mock_ticker.return_value.history.return_value = _frame(40)
        adapter = YahooHistoryAdapter(FetchConfig(lookback_days=100))
        adapter.fetch_history("CSP1.L", today=date(2024, 6, 30))

        kwargs = mock_ticker.return_value.history.call_args.kwargs
        assert kwargs["end"] == "2024-07-01"
        assert kwargs["start"] == "2024-03-23"
        assert kwargs["interval"] == "1d"
        assert kwargs["auto_adjust"] is True

    def test_drops_missing_closes_and_duplicates(self, mock_ticker):
        frame = _frame(40)
        frame.iloc[5, frame.columns.get_loc("Close")] = float("nan")
        # Same session reported twice, the later row wins
        duplicate = frame.iloc[[-1]].copy()
        duplicate["Close"] = 999.0
        frame = pd.concat([frame, duplicate])
        mock_ticker.return_value.history.return_value = frame

        history = YahooHistoryAdapter().fetch_history("CSP1.L")

        assert len(history) == 39
        assert history.closes[-1] == 999.0
        dates = [bar.date for bar in history.bars]
        assert dates == sorted(set(dates))

    def test_missing_volume_is_none(self, mock_ticker):
        volumes = [50_000.0] * 40
        volumes[-1] = float("nan")
        mock_ticker.return_value.history.return_value = _frame(40, volumes=volumes)

        history = YahooHistoryAdapter().fetch_history("CSP1.L")
        assert history.bars[-1].volume is None
        assert history.volumes[-1] == 0.0

    def test_empty_frame(self, mock_ticker):
        mock_ticker.return_value.history.return_value = pd.DataFrame()
        with pytest.raises(DataError) as exc_info:
            YahooHistoryAdapter().fetch_history("CSP1.L")
        assert exc_info.value.code == ErrorCode.DATA_EMPTY

    def test_missing_close_column(self, mock_ticker):
        mock_ticker.return_value.history.return_value = _frame(40).drop(columns=["Close"])
        with pytest.raises(ParseError) as exc_info:
            YahooHistoryAdapter().fetch_history("CSP1.L")
        assert exc_info.value.code == ErrorCode.PARSE_FRAME

    def test_short_history(self, mock_ticker):
        mock_ticker.return_value.history.return_value = _frame(10)
        with pytest.raises(DataError) as exc_info:
            YahooHistoryAdapter().fetch_history("CSP1.L")
        assert exc_info.value.code == ErrorCode.DATA_INSUFFICIENT

    def test_library_error_wrapped(self, mock_ticker):
        mock_ticker.return_value.history.side_effect = KeyError("chart")
        with pytest.raises(FetchError) as exc_info:
            YahooHistoryAdapter().fetch_history("CSP1.L")
        assert exc_info.value.source == "yahoo"

    def test_rate_limit_detected(self, mock_ticker):
        mock_ticker.return_value.history.side_effect = Exception("Too Many Requests. Rate limited.")
        with pytest.raises(RateLimitError):
            YahooHistoryAdapter().fetch_history("CSP1.L")

    @pytest.mark.parametrize("symbol", ["", "BAD TICKER", "WAYTOOLONGSYMBOL"])
    def test_invalid_ticker(self, mock_ticker, symbol):
        with pytest.raises(ValidationError):
            YahooHistoryAdapter().fetch_history(symbol)
        mock_ticker.assert_not_called()


# ============================================================================
# FRED
# ============================================================================


class TestFredAdapter:
    """CSV endpoint parsing."""

    def test_latest_value(self, mock_urlopen):
        _respond(
            mock_urlopen,
            b"observation_date,IUDSOIA\n2024-01-01,5.19\n2024-01-02,5.20\n2024-01-03,.\n",
        )
        assert FredAdapter().latest_value("IUDSOIA") == 5.20

        request = mock_urlopen.call_args.args[0]
        assert request.full_url.endswith("fredgraph.csv?id=IUDSOIA")

    def test_uses_configured_timeout(self, mock_urlopen):
        _respond(mock_urlopen, b"date,X\n2024-01-01,1.0\n")
        FredAdapter(FetchConfig(timeout_seconds=3.0)).latest_value("X")
        assert mock_urlopen.call_args.kwargs["timeout"] == 3.0

    def test_no_observations(self, mock_urlopen):
        _respond(mock_urlopen, b"observation_date,IUDSOIA\n2024-01-01,.\n")
        with pytest.raises(DataError):
            FredAdapter().latest_value("IUDSOIA")

    def test_non_numeric_value(self, mock_urlopen):
        _respond(mock_urlopen, b"observation_date,IUDSOIA\n2024-01-01,n/a\n")
        with pytest.raises(ParseError) as exc_info:
            FredAdapter().latest_value("IUDSOIA")
        assert exc_info.value.code == ErrorCode.PARSE_CSV

    def test_http_error(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.HTTPError(
            "https://fred.example", 500, "Server Error", None, None
        )
        with pytest.raises(FetchError) as exc_info:
            FredAdapter().latest_value("IUDSOIA")
        assert exc_info.value.code == ErrorCode.HTTP_SERVER_ERROR

    def test_http_429(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.HTTPError(
            "https://fred.example", 429, "Too Many Requests", None, None
        )
        with pytest.raises(RateLimitError):
            FredAdapter().latest_value("IUDSOIA")

    def test_network_error(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.URLError("timed out")
        with pytest.raises(FetchError) as exc_info:
            FredAdapter().latest_value("IUDSOIA")
        assert exc_info.value.code == ErrorCode.NETWORK_TIMEOUT

    def test_read_timeout(self, mock_urlopen):
        response = MagicMock()
        response.read.side_effect = TimeoutError("The read operation timed out")
        mock_urlopen.return_value.__enter__.return_value = response
        with pytest.raises(FetchError) as exc_info:
            FredAdapter().latest_value("IUDSOIA")
        assert exc_info.value.code == ErrorCode.NETWORK_TIMEOUT

    @pytest.mark.parametrize("error", [
        http.client.IncompleteRead(b"2024-01-01,5."),
        http.client.RemoteDisconnected("Remote end closed connection without response"),
        ConnectionResetError("Connection reset by peer"),
    ])
    def test_broken_connection_wrapped(self, mock_urlopen, error):
        response = MagicMock()
        response.read.side_effect = error
        mock_urlopen.return_value.__enter__.return_value = response
        with pytest.raises(FetchError) as exc_info:
            FredAdapter().latest_value("IUDSOIA")
        assert exc_info.value.source == "fred"
        assert exc_info.value.cause is error
