"""
Trend label classification.

A fixed rule table over 1M, 3M and 12M returns (in %). Rules are
checked in priority order and the first match wins. Most pairs of rules
are disjoint; EMERGING and RECOVERING overlap when 12M < -10, 3M > 4
and 1M > 3, and priority order resolves that case to EMERGING.
"""

import operator
from dataclasses import dataclass
from typing import Callable

from .enums import TrendLabel


@dataclass(frozen=True)
class Bound:
    """Strict comparison against a threshold."""
    compare: Callable[[float, float], bool]
    threshold: float

    def holds(self, value: float) -> bool:
        return self.compare(value, self.threshold)


def above(threshold: float) -> Bound:
    return Bound(operator.gt, threshold)


def below(threshold: float) -> Bound:
    return Bound(operator.lt, threshold)


@dataclass(frozen=True)
class TrendRule:
    label: TrendLabel
    twelve_month: Bound
    three_month: Bound
    one_month: Bound

    def matches(self, r1: float, r3: float, r12: float) -> bool:
        return (
            self.twelve_month.holds(r12)
            and self.three_month.holds(r3)
            and self.one_month.holds(r1)
        )


TREND_RULES: tuple[TrendRule, ...] = (
    TrendRule(TrendLabel.LEADER, above(15), above(5), above(1)),
    TrendRule(TrendLabel.FADING, above(10), below(2), below(-2)),
    TrendRule(TrendLabel.EMERGING, below(5), above(4), above(3)),
    TrendRule(TrendLabel.LAGGARD, below(-5), below(-3), below(-1)),
    TrendRule(TrendLabel.RECOVERING, below(-10), above(-1), above(2)),
)


def classify_trend(
    r1: float | None,
    r3: float | None,
    r12: float | None,
    rules: tuple[TrendRule, ...] = TREND_RULES,
) -> TrendLabel | None:
    """
    Assign a trend label from 1M/3M/12M returns.

    Returns None if any input is missing or no rule matches.

    Example:
        >>> classify_trend(2.0, 8.0, 20.0)
        <TrendLabel.LEADER: 'LEADER'>
    """
    if r1 is None or r3 is None or r12 is None:
        return None

    for rule in rules:
        if rule.matches(r1, r3, r12):
            return rule.label
    return None
