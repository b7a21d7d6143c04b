"""
Cross-sectional momentum scoring.

Pure functions that rank every instrument of one universe against the
others. No I/O - this is domain layer logic only.

The algorithm works in stages:
1. Period metric: raw return (standard) or return / volatility (risk-adjusted)
2. Percentile: share of the population with a value <= the instrument's value
3. Composite: weighted average of the 3M/6M/12M percentiles (weights in %)

Scoring is a whole-population operation. A single instrument's score is
only meaningful relative to the universe it was scored with, so any
change to membership, weights or mode means rescoring everyone.
"""

from dataclasses import dataclass
from typing import Iterable

from .enums import Period, ScoringMode
from .labels import classify_trend
from .models import InstrumentRecord


# ============================================================================
# Configuration Types (passed in, not imported)
# ============================================================================


@dataclass(frozen=True)
class ScoringWeights:
    """
    Period weights in percent.

    Callers are expected to supply weights summing to 100. The scorer
    does not renormalize; it computes with whatever it is given.
    """

    three_month: float = 40.0
    six_month: float = 30.0
    twelve_month: float = 30.0

    @property
    def total(self) -> float:
        return self.three_month + self.six_month + self.twelve_month

    def items(self) -> list[tuple[Period, float]]:
        return [
            (Period.THREE_MONTH, self.three_month),
            (Period.SIX_MONTH, self.six_month),
            (Period.TWELVE_MONTH, self.twelve_month),
        ]


# ============================================================================
# Percentile
# ============================================================================


def percentile_rank(value: float | None, population: Iterable[float | None]) -> float:
    """
    Percentile rank of value within population, 0-100.

    Rank counts the population members <= value, so the largest of N
    distinct values scores 100 and the smallest scores 100 / N.
    Missing values are excluded from the population; a missing subject
    value, or an empty population, scores 0.

    Example:
        >>> percentile_rank(3.0, [1.0, 2.0, 3.0, 4.0])
        75.0
        >>> percentile_rank(None, [1.0, 2.0])
        0.0
    """
    if value is None:
        return 0.0

    valid = [v for v in population if v is not None]
    if not valid:
        return 0.0

    rank = sum(1 for v in valid if v <= value)
    return rank / len(valid) * 100.0


# ============================================================================
# Period metrics
# ============================================================================


def risk_adjusted_ratio(period_return: float | None, volatility: float | None) -> float | None:
    """Return per unit of volatility; None if either is missing or volatility is zero."""
    if period_return is None or volatility is None or volatility == 0:
        return None
    return period_return / volatility


def period_metric(
    record: InstrumentRecord,
    period: Period,
    mode: ScoringMode,
    use_alternate: bool = False,
) -> float | None:
    """The value ranked for one record and period under the given mode."""
    period_return = record.returns_for(use_alternate).get(period)

    match mode:
        case ScoringMode.STANDARD:
            return period_return
        case ScoringMode.RISK_ADJUSTED:
            volatility = record.volatility_for(use_alternate).get(period)
            return risk_adjusted_ratio(period_return, volatility)
        case _:
            raise ValueError(f"Unknown scoring mode: {mode!r}")


# ============================================================================
# Composite score
# ============================================================================


def compute_scores(
    records: list[InstrumentRecord],
    weights: ScoringWeights | None = None,
    mode: ScoringMode = ScoringMode.STANDARD,
    use_alternate: bool = False,
) -> dict[str, float]:
    """
    Composite score for every record in the universe.

    Args:
        records: The full universe for this scoring pass
        weights: Period weights in percent (default 40/30/30)
        mode: STANDARD ranks returns, RISK_ADJUSTED ranks return / volatility
        use_alternate: Use the "remove latest month" returns and volatility

    Returns:
        Mapping of symbol -> score on a 0-100 scale
    """
    weights = weights or ScoringWeights()

    metrics: dict[Period, list[float | None]] = {
        period: [period_metric(r, period, mode, use_alternate) for r in records]
        for period, _ in weights.items()
    }

    scores: dict[str, float] = {}
    for idx, record in enumerate(records):
        weighted = sum(
            percentile_rank(metrics[period][idx], metrics[period]) * weight
            for period, weight in weights.items()
        )
        scores[record.symbol] = weighted / 100.0

    return scores


def score_universe(
    records: list[InstrumentRecord],
    weights: ScoringWeights | None = None,
    mode: ScoringMode = ScoringMode.STANDARD,
    use_alternate: bool = False,
) -> list[InstrumentRecord]:
    """
    Attach score and trend label to every record.

    Input records are left untouched; a new generation is returned,
    sorted by score (highest first).
    """
    scores = compute_scores(records, weights, mode, use_alternate)

    scored = [
        record.model_copy(update={
            "score": scores[record.symbol],
            "label": classify_trend(
                record.returns.one_month,
                record.returns.three_month,
                record.returns.twelve_month,
            ),
        })
        for record in records
    ]
    return rank_records(scored)


def rank_records(records: list[InstrumentRecord]) -> list[InstrumentRecord]:
    """Sort by score descending; unscored records go last, ties by symbol."""
    return sorted(
        records,
        key=lambda r: (r.score is None, -(r.score or 0.0), r.symbol),
    )
