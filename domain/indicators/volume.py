"""Volume-based indicators."""


def average_volume(volumes: list[float], period: int = 30) -> float | None:
    """Mean of the trailing `period` volumes, the liquidity measure.

    Example:
        >>> average_volume([1000.0] * 10 + [2000.0] * 30, period=30)
        2000.0
    """
    if period < 1 or len(volumes) < period:
        return None
    return sum(volumes[-period:]) / period
