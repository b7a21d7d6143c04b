"""
Currency unit normalization for price series.

Some upstream sources switch a listing between minor and major currency
units (e.g. GBX pence and GBP pounds) without restating history. The
result is a single x100 or /100 step that corrupts every return and
volatility computed across it.

The detector is a heuristic: any adjacent ratio above 50x or below
0.02x is treated as a unit change. A genuine extreme move (or an
unadjusted split) would be "corrected" as well, so the adjustment flag
must always be surfaced to consumers as a data-quality warning.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Adjacent-price ratios outside this band are treated as unit changes
JUMP_UP_RATIO = 50.0
JUMP_DOWN_RATIO = 0.02
UNIT_FACTOR = 100.0


@dataclass(frozen=True)
class NormalizationResult:
    """Output of normalize_currency_unit."""
    prices: list[float]
    was_adjusted: bool
    jump_indices: tuple[int, ...] = ()


def normalize_currency_unit(
    prices: list[float],
    symbol: str | None = None,
) -> NormalizationResult:
    """
    Detect and undo x100 / /100 unit jumps in a date-ascending series.

    Scans from the most recent pair back to the oldest. At index i the
    ratio prices[i] / prices[i-1] is taken from the working copy, so
    several jumps compose:

    - ratio < 0.02: the older block [0, i) is in the minor unit, divide it by 100
    - ratio > 50:   the newer block [i, end) is in the minor unit, divide it by 100

    Scanning continues after a correction so every jump is handled.

    Args:
        prices: Close prices, oldest first
        symbol: Used only for log messages

    Returns:
        NormalizationResult with the corrected copy and the jump indices

    Example:
        >>> normalize_currency_unit([5000.0, 5050.0, 51.0, 52.0]).prices
        [50.0, 50.5, 51.0, 52.0]
    """
    if len(prices) < 2:
        return NormalizationResult(prices=list(prices), was_adjusted=False)

    label = symbol or "series"
    normalized = list(prices)
    jumps: list[int] = []

    for i in range(len(normalized) - 1, 0, -1):
        previous = normalized[i - 1]
        if previous == 0:
            continue
        ratio = normalized[i] / previous

        if ratio < JUMP_DOWN_RATIO:
            logger.warning(
                f"{label}: unit change at index {i} "
                f"({previous:.2f} -> {normalized[i]:.2f}, {ratio:.3f}x), "
                f"dividing older prices by {UNIT_FACTOR:.0f}"
            )
            for j in range(0, i):
                normalized[j] /= UNIT_FACTOR
            jumps.append(i)

        elif ratio > JUMP_UP_RATIO:
            logger.warning(
                f"{label}: unit change at index {i} "
                f"({previous:.2f} -> {normalized[i]:.2f}, {ratio:.3f}x), "
                f"dividing newer prices by {UNIT_FACTOR:.0f}"
            )
            for j in range(i, len(normalized)):
                normalized[j] /= UNIT_FACTOR
            jumps.append(i)

    if jumps:
        logger.warning(
            f"{label}: normalized {len(jumps)} unit change(s), "
            f"range now {normalized[0]:.2f} .. {normalized[-1]:.2f}"
        )

    return NormalizationResult(
        prices=normalized,
        was_adjusted=bool(jumps),
        jump_indices=tuple(jumps),
    )
