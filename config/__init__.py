from .loader import load_config, ConfigError
from .schema import ScreenerConfig, ScoringConfig, FetchConfig, RiskFreeConfig

__all__ = [
    "load_config",
    "ConfigError",
    "ScreenerConfig",
    "ScoringConfig",
    "FetchConfig",
    "RiskFreeConfig",
]
