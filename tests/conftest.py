"""Shared fixtures for screener tests."""

from datetime import date, timedelta

import pytest

from domain import (
    InstrumentMetadata,
    InstrumentRecord,
    PeriodReturns,
    PeriodVolatility,
    PriceBar,
    PriceHistory,
)


def _make_history(
    symbol: str,
    closes: list[float],
    volumes: list[float] | None = None,
    start: date = date(2024, 1, 1),
) -> PriceHistory:
    volumes = volumes if volumes is not None else [1_000_000.0] * len(closes)
    bars = tuple(
        PriceBar(date=start + timedelta(days=i), close=close, volume=volume)
        for i, (close, volume) in enumerate(zip(closes, volumes))
    )
    return PriceHistory(symbol=symbol, bars=bars)


def _make_metadata(symbol: str, **overrides) -> InstrumentMetadata:
    fields = {
        "symbol": symbol,
        "short_name": symbol.split(".")[0],
        "full_name": f"{symbol} Test ETF",
        "category": "Countries",
        "expense_ratio": 0.1,
    }
    fields.update(overrides)
    return InstrumentMetadata(**fields)


def _make_record(
    symbol: str,
    r1: float | None = None,
    r3: float | None = None,
    r6: float | None = None,
    r12: float | None = None,
    vol: float | None = None,
    alternate: PeriodReturns | None = None,
) -> InstrumentRecord:
    return InstrumentRecord(
        metadata=_make_metadata(symbol),
        price=100.0,
        returns=PeriodReturns(one_month=r1, three_month=r3, six_month=r6, twelve_month=r12),
        alternate_returns=alternate or PeriodReturns(),
        volatility=PeriodVolatility(three_month=vol, six_month=vol, twelve_month=vol),
    )


@pytest.fixture
def make_history():
    """Factory for date-ascending histories on consecutive days."""
    return _make_history


@pytest.fixture
def make_metadata():
    """Factory for instrument metadata with sensible defaults."""
    return _make_metadata


@pytest.fixture
def make_record():
    """Factory for unscored records with given returns and a flat volatility."""
    return _make_record


@pytest.fixture
def rising_closes():
    """300 steadily rising closes, enough for every period and the 200-day MA."""
    return [100.0 + i * 0.5 for i in range(300)]
