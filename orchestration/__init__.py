from .pacing import Pacer, IntervalPacer, NoPacing
from .batch import BatchFetchOrchestrator, BatchResult, SymbolResult, SymbolStatus
from .refresh import (
    RefreshContext,
    RefreshResult,
    run_refresh,
    rescore,
    resolve_risk_free_rate,
    risk_free_rate_from_history,
)

__all__ = [
    "Pacer",
    "IntervalPacer",
    "NoPacing",
    "BatchFetchOrchestrator",
    "BatchResult",
    "SymbolResult",
    "SymbolStatus",
    "RefreshContext",
    "RefreshResult",
    "run_refresh",
    "rescore",
    "resolve_risk_free_rate",
    "risk_free_rate_from_history",
]
