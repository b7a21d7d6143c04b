"""Technical indicators for momentum screening.

Pure Python implementations operating on date-ascending price lists.

Indicators:
    - Returns: period and "remove latest month" returns at trading-day offsets
    - Volatility: annualized realized volatility and Sharpe ratios
    - RSI: Relative Strength Index using Wilder's smoothing
    - Moving Averages: SMA and the long moving-average trend flag
    - Volume: volume SMA and trailing average volume (liquidity)

Example:
    >>> from domain.indicators import compute_indicators
    >>>
    >>> closes = [100.0 + i * 0.5 for i in range(300)]
    >>> indicators = compute_indicators(closes, volumes=[1e6] * 300)
    >>> indicators.above_long_ma
    True
"""

from domain.indicators.calculator import Indicators, compute_indicators
from domain.indicators.moving_averages import above_moving_average, sma
from domain.indicators.returns import (
    compute_alternate_returns,
    compute_returns,
    percent_return,
    period_return,
    price_at_offset,
)
from domain.indicators.rsi import latest_rsi, rsi
from domain.indicators.volatility import (
    annualized_volatility,
    compute_alternate_volatility,
    compute_sharpe_ratios,
    compute_volatility,
    sharpe_ratio,
    window_volatility,
)
from domain.indicators.volume import average_volume

__all__ = [
    # Calculator
    "Indicators",
    "compute_indicators",
    # Returns
    "price_at_offset",
    "percent_return",
    "period_return",
    "compute_returns",
    "compute_alternate_returns",
    # Volatility
    "annualized_volatility",
    "window_volatility",
    "compute_volatility",
    "compute_alternate_volatility",
    "sharpe_ratio",
    "compute_sharpe_ratios",
    # Oscillators
    "rsi",
    "latest_rsi",
    # Moving averages
    "sma",
    "above_moving_average",
    # Volume
    "average_volume",
]
