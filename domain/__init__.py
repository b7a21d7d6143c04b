from .enums import Period, ScoringMode, TrendLabel, Universe, SCORED_PERIODS
from .formatting import (
    NO_DATA,
    format_percent,
    format_sharpe,
    format_liquidity,
    parse_liquidity,
)
from .models import (
    InstrumentMetadata,
    PriceBar,
    PriceHistory,
    PeriodReturns,
    PeriodVolatility,
    SharpeRatios,
    InstrumentRecord,
)
from .normalizer import NormalizationResult, normalize_currency_unit
from .indicators import Indicators, compute_indicators
from .record_builder import MIN_HISTORY, build_record, empty_record
from .labels import TREND_RULES, TrendRule, classify_trend
from .scoring import (
    ScoringWeights,
    percentile_rank,
    risk_adjusted_ratio,
    period_metric,
    compute_scores,
    score_universe,
    rank_records,
)
from .universe import clean_symbol, select_instruments

__all__ = [
    # Enums
    "Period",
    "ScoringMode",
    "TrendLabel",
    "Universe",
    "SCORED_PERIODS",
    # Models
    "InstrumentMetadata",
    "PriceBar",
    "PriceHistory",
    "PeriodReturns",
    "PeriodVolatility",
    "SharpeRatios",
    "InstrumentRecord",
    # Normalization
    "NormalizationResult",
    "normalize_currency_unit",
    # Indicators
    "Indicators",
    "compute_indicators",
    # Records
    "MIN_HISTORY",
    "build_record",
    "empty_record",
    # Labels
    "TREND_RULES",
    "TrendRule",
    "classify_trend",
    # Scoring
    "ScoringWeights",
    "percentile_rank",
    "risk_adjusted_ratio",
    "period_metric",
    "compute_scores",
    "score_universe",
    "rank_records",
    # Universe
    "clean_symbol",
    "select_instruments",
    # Formatting
    "NO_DATA",
    "format_percent",
    "format_sharpe",
    "format_liquidity",
    "parse_liquidity",
]
