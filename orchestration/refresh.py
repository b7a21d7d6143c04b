"""
One refresh cycle: fetch, build, score, label.

Each call produces a new immutable generation of records. All per-cycle
state lives in a RefreshContext owned by the caller and dropped when
the cycle ends; nothing is cached at module level.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime

from domain import (
    InstrumentMetadata,
    InstrumentRecord,
    Period,
    ScoringMode,
    ScoringWeights,
    build_record,
    clean_symbol,
    empty_record,
    score_universe,
)
from domain.indicators import period_return
from ports import AdapterError, PriceHistorySource
from config import RiskFreeConfig, ScreenerConfig

from .batch import BatchFetchOrchestrator, BatchResult
from .pacing import IntervalPacer, Pacer

logger = logging.getLogger(__name__)


# ============================================================================
# Context and result
# ============================================================================

@dataclass
class RefreshContext:
    """Explicit state for a single refresh cycle."""
    config: ScreenerConfig = field(default_factory=ScreenerConfig)
    risk_free_rate: float | None = None
    risk_free_source: str | None = None
    generated_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class RefreshResult:
    """A scored generation of records plus its data-quality report."""
    records: dict[str, InstrumentRecord]
    batch: BatchResult
    absent: tuple[InstrumentMetadata, ...] = ()
    adjusted_symbols: tuple[str, ...] = ()
    risk_free_rate: float | None = None
    risk_free_source: str | None = None
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def ranked(self) -> list[InstrumentRecord]:
        return list(self.records.values())

    @property
    def placeholders(self) -> list[InstrumentRecord]:
        """Empty records for instruments without usable data this cycle."""
        return [empty_record(meta) for meta in self.absent]


# ============================================================================
# Risk-free rate
# ============================================================================

def risk_free_rate_from_history(closes: list[float]) -> float | None:
    """Annualize a money-market instrument's latest 1M return (in %)."""
    monthly = period_return(closes, Period.ONE_MONTH)
    if monthly is None:
        return None
    return round(((1 + monthly / 100.0) ** 12 - 1) * 100.0, 2)


def resolve_risk_free_rate(
    fred,
    history_source: PriceHistorySource | None,
    config: RiskFreeConfig,
) -> tuple[float, str]:
    """
    Annual risk-free rate in % and where it came from.

    Tries the FRED series first, then the proxy instrument, then the
    configured fallback rate.
    """
    try:
        return fred.latest_value(config.fred_series), f"fred:{config.fred_series}"
    except AdapterError as e:
        logger.warning(f"Risk-free rate from FRED unavailable: {e}")

    if history_source is not None and config.proxy_symbol:
        try:
            history = history_source.fetch_history(config.proxy_symbol)
        except AdapterError as e:
            logger.warning(f"Risk-free proxy {config.proxy_symbol} unavailable: {e}")
        else:
            rate = risk_free_rate_from_history(history.closes)
            if rate is not None:
                return rate, f"proxy:{config.proxy_symbol}"
            logger.warning(f"Risk-free proxy {config.proxy_symbol}: history too short")

    logger.warning(f"Using fallback risk-free rate {config.fallback_rate}%")
    return config.fallback_rate, "fallback"


# ============================================================================
# Refresh
# ============================================================================

def _key(records: list[InstrumentRecord]) -> dict[str, InstrumentRecord]:
    return {clean_symbol(r.symbol): r for r in records}


def run_refresh(
    instruments: list[InstrumentMetadata],
    source: PriceHistorySource,
    context: RefreshContext | None = None,
    pacer: Pacer | None = None,
) -> RefreshResult:
    """
    Run one full refresh over a universe.

    Args:
        instruments: The universe to refresh
        source: Price history source
        context: Per-cycle state (defaults to default config, no risk-free rate)
        pacer: Request pacing (defaults to the configured interval)

    Returns:
        RefreshResult with records ranked by score

    Raises:
        RefreshError: If no symbol could be fetched
    """
    context = context or RefreshContext()
    config = context.config
    pacer = pacer or IntervalPacer(config.fetch.pacing_seconds)

    orchestrator = BatchFetchOrchestrator(source, pacer)
    batch = orchestrator.fetch_all([inst.symbol for inst in instruments])
    batch.raise_if_empty()

    built: list[InstrumentRecord] = []
    absent: list[InstrumentMetadata] = []
    for inst in instruments:
        history = batch.histories.get(inst.symbol)
        record = None
        if history is not None:
            record = build_record(
                inst,
                history,
                risk_free_rate=context.risk_free_rate,
                min_history=config.fetch.min_history,
            )
        if record is None:
            absent.append(inst)
        else:
            built.append(record)

    scored = score_universe(
        built,
        weights=config.scoring.weights,
        mode=config.scoring.mode,
        use_alternate=config.scoring.remove_latest_month,
    )
    adjusted = tuple(r.symbol for r in scored if r.currency_normalized)
    if adjusted:
        logger.warning(f"Currency unit corrected for: {', '.join(adjusted)}")

    logger.info(f"Refresh complete: {len(scored)} scored, {len(absent)} absent")
    return RefreshResult(
        records=_key(scored),
        batch=batch,
        absent=tuple(absent),
        adjusted_symbols=adjusted,
        risk_free_rate=context.risk_free_rate,
        risk_free_source=context.risk_free_source,
        generated_at=context.generated_at,
    )


def rescore(
    result: RefreshResult,
    weights: ScoringWeights | None = None,
    mode: ScoringMode = ScoringMode.STANDARD,
    use_alternate: bool = False,
) -> RefreshResult:
    """Score the same generation again with different settings."""
    scored = score_universe(result.ranked, weights, mode, use_alternate)
    return replace(result, records=_key(scored))
