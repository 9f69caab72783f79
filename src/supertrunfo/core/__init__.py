"""Core logic: attribute catalog, scoring, comparison and tie handling."""

from supertrunfo.core.attributes import (
    ATTRIBUTES,
    Attribute,
    base_value,
    display_name,
    menu_lines,
    parse_attribute,
    score_value,
)
from supertrunfo.core.compare import TIE, AttributeComparison, Comparison, compare, compare_values

__all__ = [
    "ATTRIBUTES",
    "Attribute",
    "AttributeComparison",
    "Comparison",
    "TIE",
    "base_value",
    "compare",
    "compare_values",
    "display_name",
    "menu_lines",
    "parse_attribute",
    "score_value",
]
