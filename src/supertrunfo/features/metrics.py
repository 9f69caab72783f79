"""
Derived card metrics: population density and GDP per capita.

All functions are deterministic and never raise on zero or negative divisors;
a non-positive area or an empty population yields 0.0.
"""

import logging
from typing import Optional

from supertrunfo.config import Config, DEFAULT_CONFIG
from supertrunfo.features.card import Card
from supertrunfo.utils.math import safe_div

logger = logging.getLogger(__name__)


def population_density(population: int, area_km2: float) -> float:
    """Inhabitants per km²; 0.0 when area_km2 <= 0."""
    return safe_div(float(population), area_km2)


def gdp_per_capita(gdp_billions: float, population: int, *, scale: float = DEFAULT_CONFIG.gdp_scale) -> float:
    """GDP (given in billions) per inhabitant in absolute units; 0.0 when population is 0."""
    return safe_div(gdp_billions * scale, float(population))


def compute_metrics(card: Card, config: Optional[Config] = None) -> Card:
    """Fill card.density and card.gdp_per_capita from the raw fields. Idempotent."""
    cfg = config or DEFAULT_CONFIG
    card.density = population_density(card.population, card.area_km2)
    card.gdp_per_capita = gdp_per_capita(card.gdp_billions, card.population, scale=cfg.gdp_scale)
    logger.debug(
        "Metrics for %s: density=%.4f gdp_per_capita=%.4f",
        card.name, card.density, card.gdp_per_capita,
    )
    return card
