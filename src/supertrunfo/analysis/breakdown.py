"""
Per-attribute breakdown of two cards over all six attributes.

One row per attribute with base values, score values and the attribute
winner. Winners agree with compare() on every row: lower-is-better
attributes are decided on base values (lower wins), except that a
non-positive value scores 0.0 and so loses to any positive one.
"""

from typing import Dict, List, Optional, Tuple

import pandas as pd

from supertrunfo.config import Config, DEFAULT_CONFIG
from supertrunfo.core.attributes import ATTRIBUTES, Attribute, base_value, score_value
from supertrunfo.core.compare import AttributeComparison, compare_values
from supertrunfo.features.card import Card

BREAKDOWN_COLUMNS = ["attribute", "value_a", "value_b", "score_a", "score_b", "winner"]


def _labels(card_a: Card, card_b: Card) -> Tuple[str, str]:
    """City names, or slot labels when the names are missing or identical."""
    if card_a.name and card_b.name and card_a.name != card_b.name:
        return card_a.name, card_b.name
    return "Card 1", "Card 2"


def _decide(
    attr: Attribute,
    v_a: float,
    v_b: float,
    s_a: float,
    s_b: float,
    label_a: str,
    label_b: str,
    eps: float,
) -> AttributeComparison:
    lower_is_better = ATTRIBUTES[attr].lower_is_better
    if lower_is_better and (v_a <= 0 or v_b <= 0):
        # 0.0 scores: positive beats non-positive, two non-positives tie
        return compare_values(s_a, s_b, label_a, label_b, higher_is_better=True, eps=0.0)
    return compare_values(v_a, v_b, label_a, label_b, higher_is_better=not lower_is_better, eps=eps)


def breakdown_frame(card_a: Card, card_b: Card, config: Optional[Config] = None) -> pd.DataFrame:
    """DataFrame with BREAKDOWN_COLUMNS, one row per Attribute in menu order."""
    cfg = config or DEFAULT_CONFIG
    label_a, label_b = _labels(card_a, card_b)
    rows: List[Dict[str, object]] = []
    for attr in Attribute:
        v_a = base_value(card_a, attr)
        v_b = base_value(card_b, attr)
        s_a = score_value(card_a, attr)
        s_b = score_value(card_b, attr)
        comp = _decide(attr, v_a, v_b, s_a, s_b, label_a, label_b, cfg.breakdown_eps)
        rows.append({
            "attribute": ATTRIBUTES[attr].name,
            "value_a": v_a,
            "value_b": v_b,
            "score_a": s_a,
            "score_b": s_b,
            "winner": comp.winner,
        })
    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)
