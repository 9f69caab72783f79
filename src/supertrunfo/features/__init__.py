"""Card data and derived metrics."""

from supertrunfo.features.card import Card
from supertrunfo.features.metrics import compute_metrics, gdp_per_capita, population_density

__all__ = ["Card", "compute_metrics", "gdp_per_capita", "population_density"]
