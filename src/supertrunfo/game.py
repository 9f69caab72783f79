"""
One full match: two cards, two distinct attributes, one result.

The sequence is fixed: register card 1, register card 2, show the menu,
choose two attributes, compare, print the report.
"""

import logging
from typing import Optional

from supertrunfo.analysis.breakdown import breakdown_frame
from supertrunfo.config import Config
from supertrunfo.console.builder import build_card, choose_attribute
from supertrunfo.console.presenter import format_breakdown, format_menu, format_report
from supertrunfo.console.reader import InputReader
from supertrunfo.core.compare import Comparison, compare

logger = logging.getLogger(__name__)


def play(reader: InputReader, config: Optional[Config] = None, breakdown: bool = False) -> Comparison:
    """Run the match on reader's input/output and return the comparison."""
    cfg = config or reader.config
    card_a = build_card(reader, "Card 1 Registration", cfg)
    card_b = build_card(reader, "Card 2 Registration", cfg)

    reader.write("\n" + format_menu() + "\n")
    attr1 = choose_attribute(reader, "Choose the first attribute to compare: ")
    attr2 = choose_attribute(reader, "Choose the second attribute (different from the first): ", attr1)
    logger.info("Comparing on %s and %s", attr1.name, attr2.name)

    result = compare(card_a, card_b, attr1, attr2)
    reader.write("\n" + format_report(card_a, card_b, attr1, attr2, result, cfg) + "\n")
    if breakdown:
        frame = breakdown_frame(card_a, card_b, cfg)
        reader.write("\nAll attributes:\n" + format_breakdown(frame, cfg) + "\n")
    return result
