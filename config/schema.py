"""
Configuration schema with validation.

All configuration is validated at load time using Pydantic.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from domain import InstrumentMetadata, ScoringMode, ScoringWeights, Universe, clean_symbol

from .instruments import RISK_FREE_PROXY, default_instruments


class ScoringConfig(BaseModel):
    """Composite score settings. Weights are percentages."""

    weight_3m: float = Field(default=40.0, ge=0.0, le=100.0)
    weight_6m: float = Field(default=30.0, ge=0.0, le=100.0)
    weight_12m: float = Field(default=30.0, ge=0.0, le=100.0)
    mode: ScoringMode = ScoringMode.STANDARD
    remove_latest_month: bool = Field(
        default=False,
        description="Score on returns/volatility that exclude the latest month",
    )

    @model_validator(mode="after")
    def weights_sum_to_hundred(self) -> "ScoringConfig":
        total = self.weights.total
        if abs(total - 100.0) > 0.01:
            raise ValueError(f"Scoring weights must sum to 100, got {total}")
        return self

    @property
    def weights(self) -> ScoringWeights:
        return ScoringWeights(
            three_month=self.weight_3m,
            six_month=self.weight_6m,
            twelve_month=self.weight_12m,
        )


class FetchConfig(BaseModel):
    """Price source and batch pacing configuration."""

    pacing_seconds: float = Field(default=0.2, ge=0.0, le=10.0)
    lookback_days: int = Field(default=450, ge=60, le=3650)
    min_history: int = Field(default=30, ge=2, le=300)
    timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    user_agent: str = Field(default="MomentumScreener/1.0", min_length=1)


class RiskFreeConfig(BaseModel):
    """Risk-free rate used for Sharpe ratios (annual %)."""

    fred_series: str = Field(default="IUDSOIA", min_length=1)
    proxy_symbol: str | None = Field(
        default=RISK_FREE_PROXY,
        description="Money-market instrument used when FRED is unavailable",
    )
    fallback_rate: float = Field(default=4.75, ge=-5.0, le=25.0)


class ScreenerConfig(BaseModel):
    """
    Root configuration model.

    All settings are validated on load.
    """

    universe: Universe = Universe.CORE
    instruments: list[InstrumentMetadata] = Field(default_factory=default_instruments)

    # Subsections
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    risk_free: RiskFreeConfig = Field(default_factory=RiskFreeConfig)

    @field_validator("instruments")
    @classmethod
    def validate_unique_symbols(cls, v: list[InstrumentMetadata]) -> list[InstrumentMetadata]:
        # Records are keyed by the display symbol, so EWK and EWK.L collide
        seen: dict[str, str] = {}
        for inst in v:
            key = clean_symbol(inst.symbol)
            if key in seen:
                raise ValueError(
                    f"Duplicate instrument symbol: {inst.symbol} (clashes with {seen[key]})"
                )
            seen[key] = inst.symbol
        if not v:
            raise ValueError("At least one instrument is required")
        return v
