"""Moving average indicators."""


def sma(values: list[float], period: int) -> list[float | None]:
    """Calculate Simple Moving Average.

    Args:
        values: List of values to calculate SMA over
        period: Number of periods for the moving average

    Returns:
        List of SMA values, with None for insufficient data points

    Example:
        >>> prices = [10, 11, 12, 13, 14, 15]
        >>> sma(prices, 3)
        [None, None, 11.0, 12.0, 13.0, 14.0]
    """
    if not values or period <= 0 or len(values) < period:
        return [None] * len(values) if values else []

    result: list[float | None] = [None] * (period - 1)

    for i in range(period - 1, len(values)):
        window = values[i - period + 1:i + 1]
        # WHY: Filter out None values before summing
        valid_values = [v for v in window if v is not None]
        if len(valid_values) < period:
            result.append(None)
        else:
            result.append(sum(valid_values) / period)

    return result


def above_moving_average(closes: list[float], period: int = 200) -> bool | None:
    """Whether the latest close is above its trailing SMA.

    Returns None unless a full window of `period` samples exists; a
    partial window is never used.
    """
    if len(closes) < period:
        return None
    average = sma(closes[-period:], period)[-1]
    if average is None:
        return None
    return closes[-1] > average
