"""Relative Strength Index (RSI) indicator."""


def rsi(closes: list[float], period: int = 14) -> list[float | None]:
    """Calculate RSI using Wilder's smoothing method.

    Returns values on 0-100 scale. Uses Wilder's smoothing (RMA) rather
    than a simple moving average.

    Args:
        closes: List of closing prices, oldest first
        period: RSI period (default: 14)

    Returns:
        List of RSI values (0-100), with None for insufficient data points

    Example:
        >>> prices = [44, 44.34, 44.09, 43.61, 44.33, 44.83, 45.10, 45.42,
        ...           45.84, 46.08, 45.89, 46.03, 45.61, 46.28, 46.28, 46.00]
        >>> result = rsi(prices, 14)
        >>> result[13] is None and 50 < result[-1] < 100
        True

    Notes:
        - Wilder's smoothing: New avg = (prev_avg * (period-1) + current) / period
        - First RSI value appears at index (period), not (period-1)
        - Returns None for first (period) values
    """
    if not closes or period <= 0 or len(closes) <= period:
        return [None] * len(closes) if closes else []

    result: list[float | None] = [None] * period

    # WHY: First averages are simple means over the first period of changes
    gains = []
    losses = []

    for i in range(1, period + 1):
        change = closes[i] - closes[i - 1]
        gains.append(max(change, 0))
        losses.append(max(-change, 0))

    avg_gain = sum(gains) / period
    avg_loss = sum(losses) / period
    result.append(_rsi_value(avg_gain, avg_loss))

    # WHY: Use Wilder's smoothing for subsequent values
    for i in range(period + 1, len(closes)):
        change = closes[i] - closes[i - 1]
        gain = max(change, 0)
        loss = max(-change, 0)

        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period
        result.append(_rsi_value(avg_gain, avg_loss))

    return result


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def latest_rsi(closes: list[float], period: int = 14) -> int | None:
    """Most recent RSI rounded to the nearest integer, None below period + 1 samples."""
    if len(closes) < period + 1:
        return None
    value = rsi(closes, period)[-1]
    if value is None:
        return None
    # Half-up rounding; RSI is never negative
    return int(value + 0.5)
