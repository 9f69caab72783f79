"""
Two-card comparison. Enforces an explicit TIE when totals are equal.

compare() sums the score values of the two chosen attributes per card; the
higher total wins. compare_values() decides a single attribute and backs the
per-attribute breakdown.
"""

import logging
from dataclasses import dataclass
from typing import Union

from supertrunfo.core.attributes import Attribute, score_value
from supertrunfo.features.card import Card

logger = logging.getLogger(__name__)

TIE = "TIE"


@dataclass(frozen=True)
class Comparison:
    """Result of a two-attribute match: total scores and the winning card (or TIE)."""

    score_a: float
    score_b: float
    winner: Union[Card, str]  # card_a, card_b, or TIE

    @property
    def is_tie(self) -> bool:
        return isinstance(self.winner, str) and self.winner == TIE


@dataclass(frozen=True)
class AttributeComparison:
    """Result of comparing one attribute between two cards."""

    winner: str  # name_a, name_b, or TIE
    margin: float  # a - b (raw)
    abs_margin: float


def compare(card_a: Card, card_b: Card, attr1: Attribute, attr2: Attribute) -> Comparison:
    """
    Total score per card = score_value(attr1) + score_value(attr2).
    Strictly higher total wins; equal totals are a TIE. Inputs are trusted:
    attr1 != attr2 is the caller's job.
    """
    score_a = score_value(card_a, attr1) + score_value(card_a, attr2)
    score_b = score_value(card_b, attr1) + score_value(card_b, attr2)
    if score_a > score_b:
        winner: Union[Card, str] = card_a
    elif score_b > score_a:
        winner = card_b
    else:
        winner = TIE
    logger.debug(
        "compare %s vs %s on %s+%s: %.6f vs %.6f",
        card_a.name, card_b.name, attr1.name, attr2.name, score_a, score_b,
    )
    return Comparison(score_a=score_a, score_b=score_b, winner=winner)


def compare_values(
    a: float,
    b: float,
    name_a: str,
    name_b: str,
    *,
    higher_is_better: bool = True,
    eps: float = 1e-9,
) -> AttributeComparison:
    """
    Returns winner = name_a / name_b / TIE using eps.
    margin is always a - b (raw). If higher_is_better=False, lower wins.
    """
    margin = a - b
    abs_margin = abs(margin)
    if abs_margin <= eps:
        return AttributeComparison(winner=TIE, margin=margin, abs_margin=abs_margin)
    if higher_is_better:
        winner = name_a if a > b else name_b
    else:
        winner = name_a if a < b else name_b
    return AttributeComparison(winner=winner, margin=margin, abs_margin=abs_margin)
