"""City card: raw fields entered by the player plus two derived metrics."""

from dataclasses import dataclass


@dataclass
class Card:
    """
    One player's city. Raw fields come from input; density and gdp_per_capita
    stay 0.0 until compute_metrics runs.
    """

    region_letter: str
    code: str
    name: str
    population: int
    area_km2: float
    gdp_billions: float
    landmark_count: int
    # Derived (compute_metrics):
    density: float = 0.0
    gdp_per_capita: float = 0.0
