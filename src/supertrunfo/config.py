"""Configuration with defaults for Super Trunfo."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Default config: input caps and fallbacks, metric scale, and report formatting."""

    # Input caps and fallbacks
    default_region: str = "A"
    code_max_len: int = 4
    default_code: str = "A01"
    name_max_len: int = 49

    # GDP is entered in billions; per-capita figures use absolute units
    gdp_scale: float = 1e9

    # Report formatting
    value_decimals: int = 2
    score_decimals: int = 4
    tie_label: str = "Tie!"

    # Per-attribute breakdown: margins within eps count as a tie
    breakdown_eps: float = 1e-9


# Singleton default config; override via explicit args in APIs
DEFAULT_CONFIG = Config()
