"""Display helpers for computed values. Absent values render as "N/A"."""

NO_DATA = "N/A"


def format_percent(value: float | None) -> str:
    """Signed percentage with one decimal, e.g. "+12.3%"."""
    if value is None:
        return NO_DATA
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.1f}%"


def format_sharpe(value: float | None) -> str:
    """Signed ratio with two decimals, e.g. "-0.42"."""
    if value is None:
        return NO_DATA
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}"


def format_liquidity(value: float | None) -> str:
    """Magnitude-suffixed volume, e.g. 1.5M or 820K.

    Example:
        >>> format_liquidity(2_340_000)
        '2.3M'
        >>> format_liquidity(None)
        'N/A'
    """
    if not value:
        return NO_DATA
    if value >= 1e9:
        return f"{value / 1e9:.1f}B"
    if value >= 1e6:
        return f"{value / 1e6:.1f}M"
    if value >= 1e3:
        return f"{value / 1e3:.0f}K"
    return str(round(value))


def parse_liquidity(value: str | float | None) -> float:
    """Inverse of format_liquidity, used for sorting display strings."""
    if value is None or value == NO_DATA:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)

    text = value.strip().upper()
    multiplier = 1.0
    if text.endswith("B"):
        multiplier, text = 1e9, text[:-1]
    elif text.endswith("M"):
        multiplier, text = 1e6, text[:-1]
    elif text.endswith("K"):
        multiplier, text = 1e3, text[:-1]

    try:
        return float(text) * multiplier
    except ValueError:
        return 0.0
