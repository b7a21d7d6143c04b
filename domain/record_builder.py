"""
Instrument record construction.

Combines static metadata with indicators computed from a raw price
history. Histories too short for any period calculation are rejected
and the instrument is treated as absent for the refresh.
"""

import logging

from .indicators import compute_indicators
from .models import InstrumentMetadata, InstrumentRecord, PriceHistory
from .normalizer import normalize_currency_unit

logger = logging.getLogger(__name__)

MIN_HISTORY = 30


def build_record(
    metadata: InstrumentMetadata,
    history: PriceHistory,
    risk_free_rate: float | None = None,
    min_history: int = MIN_HISTORY,
) -> InstrumentRecord | None:
    """
    Build an unscored record from metadata and raw history.

    Args:
        metadata: Static instrument description
        history: Raw date-ascending bars
        risk_free_rate: Annual rate in % for Sharpe ratios (optional)
        min_history: Minimum number of bars to accept

    Returns:
        InstrumentRecord, or None when the history is too short
    """
    if len(history) < min_history:
        logger.warning(
            f"{metadata.symbol}: insufficient history "
            f"({len(history)} bars, need {min_history})"
        )
        return None

    normalization = normalize_currency_unit(history.closes, metadata.symbol)
    indicators = compute_indicators(
        normalization.prices,
        volumes=history.volumes,
        risk_free_rate=risk_free_rate,
    )

    return InstrumentRecord(
        metadata=metadata,
        price=indicators.price,
        returns=indicators.returns,
        alternate_returns=indicators.alternate_returns,
        rsi=indicators.rsi,
        average_volume=indicators.average_volume,
        above_long_ma=indicators.above_long_ma,
        volatility=indicators.volatility,
        alternate_volatility=indicators.alternate_volatility,
        sharpe_ratios=indicators.sharpe_ratios,
        currency_normalized=normalization.was_adjusted,
    )


def empty_record(metadata: InstrumentMetadata) -> InstrumentRecord:
    """Record with every market field absent, for instruments without data."""
    return InstrumentRecord(metadata=metadata)
