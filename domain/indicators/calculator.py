"""
Per-instrument indicator calculation.

Takes a normalized close series (oldest first) plus optional volumes and
produces every indicator an InstrumentRecord carries. Missing history
never raises; each indicator is None when its window is incomplete.
"""

from dataclasses import dataclass

from domain.models import PeriodReturns, PeriodVolatility, SharpeRatios
from domain.indicators.moving_averages import above_moving_average
from domain.indicators.returns import compute_alternate_returns, compute_returns
from domain.indicators.rsi import latest_rsi
from domain.indicators.volatility import (
    compute_alternate_volatility,
    compute_sharpe_ratios,
    compute_volatility,
)
from domain.indicators.volume import average_volume

RSI_PERIOD = 14
LONG_MA_PERIOD = 200
LIQUIDITY_PERIOD = 30


@dataclass(frozen=True)
class Indicators:
    """Indicators for one instrument at one point in time."""
    price: float | None
    returns: PeriodReturns
    alternate_returns: PeriodReturns
    volatility: PeriodVolatility
    alternate_volatility: PeriodVolatility
    sharpe_ratios: SharpeRatios
    rsi: int | None
    above_long_ma: bool | None
    average_volume: float | None


def compute_indicators(
    closes: list[float],
    volumes: list[float] | None = None,
    risk_free_rate: float | None = None,
) -> Indicators:
    """
    Compute all indicators from a cleaned close series.

    Args:
        closes: Normalized closes, oldest first
        volumes: Daily volumes aligned with closes (optional)
        risk_free_rate: Annual risk-free rate in % for Sharpe ratios;
            Sharpe ratios are left empty when None

    Returns:
        Indicators with None for every value lacking history
    """
    returns = compute_returns(closes)
    volatility = compute_volatility(closes)

    if risk_free_rate is None:
        sharpe = SharpeRatios()
    else:
        sharpe = compute_sharpe_ratios(returns, volatility, risk_free_rate)

    return Indicators(
        price=round(closes[-1], 2) if closes else None,
        returns=returns,
        alternate_returns=compute_alternate_returns(closes),
        volatility=volatility,
        alternate_volatility=compute_alternate_volatility(closes),
        sharpe_ratios=sharpe,
        rsi=latest_rsi(closes, RSI_PERIOD),
        above_long_ma=above_moving_average(closes, LONG_MA_PERIOD),
        average_volume=average_volume(volumes, LIQUIDITY_PERIOD) if volumes else None,
    )
