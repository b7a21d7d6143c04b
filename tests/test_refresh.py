"""
Tests for a full refresh cycle and risk-free rate resolution.

Uses an in-memory price source to avoid external API calls.
"""

import pytest
from unittest.mock import MagicMock, Mock, patch

from adapters import FredAdapter

from config import RiskFreeConfig, ScoringConfig, ScreenerConfig
from domain import ScoringMode, TrendLabel
from ports import DataError, FetchError, RefreshError
from orchestration import (
    NoPacing,
    RefreshContext,
    rescore,
    resolve_risk_free_rate,
    risk_free_rate_from_history,
    run_refresh,
)


# ============================================================================
# Fixtures
# ============================================================================


class FakeSource:
    """In-memory price source; values that are exceptions get raised."""

    source_name = "fake"

    def __init__(self, responses):
        self.responses = responses

    def fetch_history(self, symbol):
        response = self.responses[symbol]
        if isinstance(response, Exception):
            raise response
        return response


def _trend(n: int, daily: float, start: float = 100.0) -> list[float]:
    prices = [start]
    for _ in range(n - 1):
        prices.append(prices[-1] * (1 + daily))
    return prices


@pytest.fixture
def universe(make_metadata):
    return [
        make_metadata("FAST.L"),
        make_metadata("SLOW.L"),
        make_metadata("PENCE.L"),
        make_metadata("BROKEN.L"),
        make_metadata("NEW.L"),
    ]


@pytest.fixture
def responses(make_history):
    pence = _trend(300, 0.0005)
    pence = [p * 100 for p in pence[:150]] + pence[150:]
    return {
        "FAST.L": make_history("FAST.L", _trend(300, 0.002)),
        "SLOW.L": make_history("SLOW.L", _trend(300, -0.001)),
        "PENCE.L": make_history("PENCE.L", pence),
        "BROKEN.L": FetchError("fake", "HTTP 404"),
        "NEW.L": make_history("NEW.L", _trend(20, 0.001)),
    }


@pytest.fixture
def context():
    return RefreshContext(
        config=ScreenerConfig(),
        risk_free_rate=4.5,
        risk_free_source="test",
    )


# ============================================================================
# Refresh
# ============================================================================


class TestRunRefresh:
    """Fetch, build, score and label in one pass."""

    def test_records_keyed_by_clean_symbol(self, universe, responses, context):
        result = run_refresh(universe, FakeSource(responses), context, NoPacing())
        assert set(result.records) == {"FAST", "SLOW", "PENCE"}

    def test_ranked_by_score(self, universe, responses, context):
        result = run_refresh(universe, FakeSource(responses), context, NoPacing())
        symbols = [r.symbol for r in result.ranked]
        assert symbols == ["FAST.L", "PENCE.L", "SLOW.L"]
        assert result.ranked[0].score == 100.0

    def test_absent_instruments(self, universe, responses, context):
        result = run_refresh(universe, FakeSource(responses), context, NoPacing())

        assert [m.symbol for m in result.absent] == ["BROKEN.L", "NEW.L"]
        assert result.batch.failed_symbols == ["BROKEN.L"]
        assert all(not r.has_market_data for r in result.placeholders)

    def test_currency_adjustment_reported(self, universe, responses, context):
        result = run_refresh(universe, FakeSource(responses), context, NoPacing())
        assert result.adjusted_symbols == ("PENCE.L",)
        assert result.records["PENCE"].currency_normalized is True

    def test_risk_free_rate_feeds_sharpe(self, universe, responses, context):
        result = run_refresh(universe, FakeSource(responses), context, NoPacing())
        assert result.risk_free_rate == 4.5
        assert result.records["FAST"].sharpe_ratios.twelve_month is not None

    def test_labels_attached(self, universe, responses, context):
        result = run_refresh(universe, FakeSource(responses), context, NoPacing())
        assert result.records["FAST"].label == TrendLabel.LEADER
        assert result.records["SLOW"].label == TrendLabel.LAGGARD
        assert result.records["PENCE"].label is None

    def test_all_failed_raises(self, universe, context):
        source = FakeSource({m.symbol: FetchError("fake", "down") for m in universe})
        with pytest.raises(RefreshError):
            run_refresh(universe, source, context, NoPacing())

    def test_scoring_config_applied(self, universe, responses):
        config = ScreenerConfig(scoring=ScoringConfig(
            weight_3m=100.0, weight_6m=0.0, weight_12m=0.0,
            mode=ScoringMode.RISK_ADJUSTED,
        ))
        result = run_refresh(
            universe, FakeSource(responses), RefreshContext(config=config), NoPacing()
        )
        assert len(result.records) == 3
        assert result.risk_free_rate is None
        assert result.records["FAST"].sharpe_ratios.twelve_month is None


class TestRescore:
    """Same generation, new settings."""

    def test_rescore_returns_new_generation(self, universe, responses, context):
        result = run_refresh(universe, FakeSource(responses), context, NoPacing())
        rescored = rescore(result, mode=ScoringMode.RISK_ADJUSTED)

        assert rescored is not result
        assert set(rescored.records) == set(result.records)
        assert rescored.batch is result.batch
        assert result.records["FAST"].score == 100.0


# ============================================================================
# Risk-free rate
# ============================================================================


class TestRiskFreeRate:
    """FRED, then proxy instrument, then fallback."""

    def test_from_history(self):
        closes = [100.0] * 21 + [100.4]
        assert risk_free_rate_from_history(closes) == 4.91

    def test_from_short_history(self):
        assert risk_free_rate_from_history([100.0] * 10) is None

    def test_fred_first(self):
        fred = Mock()
        fred.latest_value.return_value = 4.95
        source = Mock()

        rate, origin = resolve_risk_free_rate(fred, source, RiskFreeConfig())

        assert rate == 4.95
        assert origin == "fred:IUDSOIA"
        fred.latest_value.assert_called_once_with("IUDSOIA")
        source.fetch_history.assert_not_called()

    def test_proxy_when_fred_fails(self, make_history):
        fred = Mock()
        fred.latest_value.side_effect = FetchError("fred", "HTTP 500")
        source = FakeSource({"CSH2.L": make_history("CSH2.L", [100.0] * 21 + [100.4])})

        rate, origin = resolve_risk_free_rate(fred, source, RiskFreeConfig())

        assert rate == 4.91
        assert origin == "proxy:CSH2.L"

    def test_fallback_when_both_fail(self):
        fred = Mock()
        fred.latest_value.side_effect = DataError.empty("fred")
        source = FakeSource({"CSH2.L": FetchError("fake", "down")})

        rate, origin = resolve_risk_free_rate(fred, source, RiskFreeConfig(fallback_rate=3.5))

        assert rate == 3.5
        assert origin == "fallback"

    def test_fred_read_timeout_falls_back(self):
        response = MagicMock()
        response.read.side_effect = TimeoutError("The read operation timed out")
        source = FakeSource({"CSH2.L": FetchError("fake", "down")})

        with patch("adapters.base.urllib.request.urlopen") as urlopen:
            urlopen.return_value.__enter__.return_value = response
            rate, origin = resolve_risk_free_rate(FredAdapter(), source, RiskFreeConfig())

        assert (rate, origin) == (4.75, "fallback")

    def test_fallback_without_proxy(self):
        fred = Mock()
        fred.latest_value.side_effect = FetchError("fred", "HTTP 500")
        config = RiskFreeConfig(proxy_symbol=None)

        assert resolve_risk_free_rate(fred, None, config) == (4.75, "fallback")
