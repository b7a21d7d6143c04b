"""Realized volatility and Sharpe ratios."""

import math
import statistics

from domain.enums import Period, SCORED_PERIODS
from domain.models import PeriodReturns, PeriodVolatility, SharpeRatios
from domain.indicators.returns import SKIP_OFFSET

TRADING_DAYS_PER_YEAR = 252


def simple_returns(prices: list[float]) -> list[float]:
    """Simple returns between consecutive prices, skipping zero denominators."""
    return [
        (cur - prev) / prev
        for prev, cur in zip(prices, prices[1:])
        if prev != 0
    ]


def annualized_volatility(prices: list[float]) -> float | None:
    """
    Annualized volatility of a price window in percent.

    Sample standard deviation of simple returns, scaled by sqrt(252).

    Example:
        >>> annualized_volatility([100.0, 100.0, 100.0])
        0.0
        >>> annualized_volatility([100.0]) is None
        True
    """
    daily_returns = simple_returns(prices)
    if len(daily_returns) < 2:
        return None
    daily_vol = statistics.stdev(daily_returns)
    return daily_vol * math.sqrt(TRADING_DAYS_PER_YEAR) * 100.0


def window_volatility(prices: list[float], period: Period, skip: int = 0) -> float | None:
    """Volatility over the `period` window ending `skip` samples before the latest.

    Requires the full window; a partial window returns None.
    """
    window = period.trading_days
    if len(prices) < window + skip:
        return None
    end = len(prices) - skip
    return annualized_volatility(prices[end - window:end])


def compute_volatility(prices: list[float]) -> PeriodVolatility:
    return PeriodVolatility(
        three_month=window_volatility(prices, Period.THREE_MONTH),
        six_month=window_volatility(prices, Period.SIX_MONTH),
        twelve_month=window_volatility(prices, Period.TWELVE_MONTH),
    )


def compute_alternate_volatility(prices: list[float]) -> PeriodVolatility:
    """Volatility over windows that end one month before the latest price."""
    return PeriodVolatility(
        three_month=window_volatility(prices, Period.THREE_MONTH, skip=SKIP_OFFSET),
        six_month=window_volatility(prices, Period.SIX_MONTH, skip=SKIP_OFFSET),
        twelve_month=window_volatility(prices, Period.TWELVE_MONTH, skip=SKIP_OFFSET),
    )


def sharpe_ratio(
    period_return: float | None,
    volatility: float | None,
    risk_free_rate: float,
    year_fraction: float,
) -> float | None:
    """
    Sharpe ratio for one period.

    The annual risk-free rate is scaled to the period and the annualized
    volatility is de-annualized with sqrt(year_fraction), so both sides
    match the period return.
    """
    if period_return is None or not volatility:
        return None
    period_vol = volatility * math.sqrt(year_fraction)
    return (period_return - risk_free_rate * year_fraction) / period_vol


def compute_sharpe_ratios(
    returns: PeriodReturns,
    volatility: PeriodVolatility,
    risk_free_rate: float,
) -> SharpeRatios:
    """Sharpe ratios for 3M/6M/12M given an annual risk-free rate in percent."""
    values = {
        period: sharpe_ratio(
            returns.get(period),
            volatility.get(period),
            risk_free_rate,
            period.year_fraction,
        )
        for period in SCORED_PERIODS
    }
    return SharpeRatios(
        three_month=values[Period.THREE_MONTH],
        six_month=values[Period.SIX_MONTH],
        twelve_month=values[Period.TWELVE_MONTH],
    )
