"""
Domain models - pure data structures with validation.

These are immutable data carriers with no business logic.
All models are JSON-serializable and self-validating.
"""

import datetime
from typing import Annotated

from pydantic import BaseModel, Field, model_validator
from pydantic.functional_validators import AfterValidator

from .enums import Period, TrendLabel, Universe
from .formatting import format_liquidity


# ============================================================================
# Custom validators
# ============================================================================

def _validate_symbol(v: str) -> str:
    """Validate instrument symbol format."""
    v = v.upper().strip()
    if not v:
        raise ValueError("symbol cannot be empty")
    if len(v) > 12:
        raise ValueError("symbol too long (max 12 chars)")
    if not v.replace("-", "").replace(".", "").replace("^", "").isalnum():
        raise ValueError("symbol must be alphanumeric (with -, . or ^)")
    return v


Symbol = Annotated[str, AfterValidator(_validate_symbol)]


# ============================================================================
# Inputs
# ============================================================================

class InstrumentMetadata(BaseModel):
    """
    Static description of one instrument in the universe.

    Loaded once per universe definition and never mutated.
    """
    model_config = {"frozen": True, "extra": "forbid"}

    symbol: Symbol = Field(description="Source ticker (e.g., CSP1.L)")
    short_name: str = Field(min_length=1, max_length=60)
    full_name: str = Field(min_length=1, max_length=200)
    category: str = Field(min_length=1, max_length=50)
    expense_ratio: float = Field(ge=0.0, description="Annual expense ratio in %")
    tier: Universe = Field(
        default=Universe.CORE,
        description="CORE appears in both views, EXTENDED only in the extended view",
    )
    currency_note: str | None = None


class PriceBar(BaseModel):
    """One daily bar from the upstream price source."""
    model_config = {"frozen": True}

    date: datetime.date
    close: float = Field(description="Adjusted close when available")
    volume: float | None = Field(default=None, ge=0.0)


class PriceHistory(BaseModel):
    """Date-ascending daily bars for a single symbol."""
    model_config = {"frozen": True}

    symbol: str
    bars: tuple[PriceBar, ...]

    @model_validator(mode="after")
    def check_ordering(self) -> "PriceHistory":
        for prev, cur in zip(self.bars, self.bars[1:]):
            if cur.date <= prev.date:
                raise ValueError(
                    f"{self.symbol}: bars must be strictly date-ascending "
                    f"({prev.date} then {cur.date})"
                )
        return self

    def __len__(self) -> int:
        return len(self.bars)

    @property
    def closes(self) -> list[float]:
        return [bar.close for bar in self.bars]

    @property
    def volumes(self) -> list[float]:
        return [bar.volume or 0.0 for bar in self.bars]


# ============================================================================
# Computed values
# ============================================================================

class PeriodReturns(BaseModel):
    """Percentage returns per lookback period; None means insufficient history."""
    model_config = {"frozen": True}

    one_month: float | None = None
    three_month: float | None = None
    six_month: float | None = None
    twelve_month: float | None = None

    def get(self, period: Period) -> float | None:
        match period:
            case Period.ONE_MONTH:
                return self.one_month
            case Period.THREE_MONTH:
                return self.three_month
            case Period.SIX_MONTH:
                return self.six_month
            case Period.TWELVE_MONTH:
                return self.twelve_month


class PeriodVolatility(BaseModel):
    """Annualized volatility in % per scored period."""
    model_config = {"frozen": True}

    three_month: float | None = None
    six_month: float | None = None
    twelve_month: float | None = None

    def get(self, period: Period) -> float | None:
        match period:
            case Period.ONE_MONTH:
                return None
            case Period.THREE_MONTH:
                return self.three_month
            case Period.SIX_MONTH:
                return self.six_month
            case Period.TWELVE_MONTH:
                return self.twelve_month


class SharpeRatios(PeriodVolatility):
    """Excess return over the risk-free rate per unit of period volatility."""


class InstrumentRecord(BaseModel):
    """
    Metadata plus computed indicators for one instrument.

    Created once per refresh. Score and label are attached in a second
    pass over the whole universe, producing a new record instance.
    """
    model_config = {"frozen": True}

    metadata: InstrumentMetadata
    price: float | None = None
    returns: PeriodReturns = Field(default_factory=PeriodReturns)
    alternate_returns: PeriodReturns = Field(default_factory=PeriodReturns)
    rsi: int | None = Field(default=None, ge=0, le=100)
    average_volume: float | None = None
    above_long_ma: bool | None = None
    volatility: PeriodVolatility = Field(default_factory=PeriodVolatility)
    alternate_volatility: PeriodVolatility = Field(default_factory=PeriodVolatility)
    sharpe_ratios: SharpeRatios = Field(default_factory=SharpeRatios)
    currency_normalized: bool = False
    score: float | None = None
    label: TrendLabel | None = None

    @property
    def symbol(self) -> str:
        return self.metadata.symbol

    @property
    def liquidity(self) -> str:
        """Display string for average volume (K/M/B suffix)."""
        return format_liquidity(self.average_volume)

    @property
    def has_market_data(self) -> bool:
        return self.price is not None

    def returns_for(self, use_alternate: bool) -> PeriodReturns:
        return self.alternate_returns if use_alternate else self.returns

    def volatility_for(self, use_alternate: bool) -> PeriodVolatility:
        return self.alternate_volatility if use_alternate else self.volatility
