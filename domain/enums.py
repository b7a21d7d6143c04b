from enum import Enum


class Period(str, Enum):
    """Lookback period for returns and volatility."""
    ONE_MONTH = "1M"
    THREE_MONTH = "3M"
    SIX_MONTH = "6M"
    TWELVE_MONTH = "12M"

    @property
    def trading_days(self) -> int:
        """Approximate number of trading samples in the period."""
        return _TRADING_DAYS[self]

    @property
    def year_fraction(self) -> float:
        return _MONTHS[self] / 12


_TRADING_DAYS = {
    Period.ONE_MONTH: 21,
    Period.THREE_MONTH: 63,
    Period.SIX_MONTH: 126,
    Period.TWELVE_MONTH: 252,
}

_MONTHS = {
    Period.ONE_MONTH: 1,
    Period.THREE_MONTH: 3,
    Period.SIX_MONTH: 6,
    Period.TWELVE_MONTH: 12,
}

# Periods that carry volatility and feed the composite score
SCORED_PERIODS = (Period.THREE_MONTH, Period.SIX_MONTH, Period.TWELVE_MONTH)


class ScoringMode(str, Enum):
    """How per-period values are ranked."""
    STANDARD = "standard"            # raw returns
    RISK_ADJUSTED = "risk-adjusted"  # return / volatility


class TrendLabel(str, Enum):
    """Discrete momentum classification."""
    LEADER = "LEADER"
    EMERGING = "EMERGING"
    RECOVERING = "RECOVERING"
    FADING = "FADING"
    LAGGARD = "LAGGARD"


class Universe(str, Enum):
    """Instrument universe selection."""
    CORE = "core"
    EXTENDED = "extended"
