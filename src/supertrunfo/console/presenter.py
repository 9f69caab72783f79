"""Text formatting for the game transcript: headers, menu, values, result."""

from typing import List, Optional

import pandas as pd

from supertrunfo.config import Config, DEFAULT_CONFIG
from supertrunfo.core.attributes import Attribute, base_value, display_name, menu_lines
from supertrunfo.core.compare import Comparison
from supertrunfo.features.card import Card


def format_header(title: str) -> str:
    return f"=== {title} ==="


def format_menu() -> str:
    return "\n".join(["Available attributes:"] + menu_lines())


def format_attribute_block(
    index: int,
    attr: Attribute,
    card_a: Card,
    card_b: Card,
    config: Optional[Config] = None,
) -> str:
    """Attribute heading plus each card's base value with config.value_decimals places."""
    cfg = config or DEFAULT_CONFIG
    d = cfg.value_decimals
    lines = [
        f"Attribute {index}: {display_name(attr)}",
        f"  {card_a.name}: {base_value(card_a, attr):.{d}f}",
        f"  {card_b.name}: {base_value(card_b, attr):.{d}f}",
    ]
    return "\n".join(lines)


def winner_label(comparison: Comparison, config: Optional[Config] = None) -> str:
    cfg = config or DEFAULT_CONFIG
    if comparison.is_tie:
        return cfg.tie_label
    return comparison.winner.name


def format_result(
    card_a: Card,
    card_b: Card,
    comparison: Comparison,
    config: Optional[Config] = None,
) -> str:
    """Final scores with config.score_decimals places and the winner line."""
    cfg = config or DEFAULT_CONFIG
    d = cfg.score_decimals
    lines = [
        "Final result (after attribute rules):",
        f"{card_a.name}: {comparison.score_a:.{d}f}",
        f"{card_b.name}: {comparison.score_b:.{d}f}",
        f"Winner: {winner_label(comparison, cfg)}",
    ]
    return "\n".join(lines)


def format_report(
    card_a: Card,
    card_b: Card,
    attr1: Attribute,
    attr2: Attribute,
    comparison: Comparison,
    config: Optional[Config] = None,
) -> str:
    """Full post-selection report: both attribute blocks, then the result."""
    parts: List[str] = [
        f"Comparing {card_a.name} and {card_b.name}",
        format_attribute_block(1, attr1, card_a, card_b, config),
        format_attribute_block(2, attr2, card_a, card_b, config),
        "",
        format_result(card_a, card_b, comparison, config),
    ]
    return "\n".join(parts)


def format_breakdown(frame: pd.DataFrame, config: Optional[Config] = None) -> str:
    """All-attribute breakdown table as aligned text."""
    cfg = config or DEFAULT_CONFIG
    d = cfg.score_decimals
    return frame.to_string(index=False, float_format=lambda x: f"{x:.{d}f}")
