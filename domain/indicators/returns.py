"""Period returns measured at fixed trading-day offsets."""

from domain.enums import Period
from domain.models import PeriodReturns

# Trading days excluded by "remove latest month" mode
SKIP_OFFSET = Period.ONE_MONTH.trading_days


def price_at_offset(prices: list[float], offset: int) -> float | None:
    """Price `offset` samples before the latest one, None when out of range.

    Example:
        >>> price_at_offset([1.0, 2.0, 3.0], 2)
        1.0
        >>> price_at_offset([1.0, 2.0, 3.0], 3) is None
        True
    """
    idx = len(prices) - 1 - offset
    if offset < 0 or idx < 0:
        return None
    return prices[idx]


def percent_return(current: float | None, past: float | None) -> float | None:
    """Percentage change from past to current; None if either is missing or zero."""
    if not current or not past:
        return None
    return (current - past) / past * 100.0


def period_return(prices: list[float], period: Period, skip: int = 0) -> float | None:
    """Return over `period` ending `skip` samples before the latest price."""
    anchor = price_at_offset(prices, skip)
    reference = price_at_offset(prices, period.trading_days + skip)
    return percent_return(anchor, reference)


def compute_returns(prices: list[float]) -> PeriodReturns:
    """Standard returns for 1M/3M/6M/12M."""
    return PeriodReturns(
        one_month=period_return(prices, Period.ONE_MONTH),
        three_month=period_return(prices, Period.THREE_MONTH),
        six_month=period_return(prices, Period.SIX_MONTH),
        twelve_month=period_return(prices, Period.TWELVE_MONTH),
    )


def compute_alternate_returns(prices: list[float]) -> PeriodReturns:
    """
    Returns with the most recent month excluded.

    Each period is measured from the price one month ago back to the
    price (period + 1 month) ago. The 1M value is always None since no
    period remains once the latest month is removed.
    """
    return PeriodReturns(
        one_month=None,
        three_month=period_return(prices, Period.THREE_MONTH, skip=SKIP_OFFSET),
        six_month=period_return(prices, Period.SIX_MONTH, skip=SKIP_OFFSET),
        twelve_month=period_return(prices, Period.TWELVE_MONTH, skip=SKIP_OFFSET),
    )
