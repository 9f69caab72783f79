"""Card entry and attribute selection on top of InputReader."""

import logging
from typing import Optional

from supertrunfo.config import Config
from supertrunfo.console.presenter import format_header
from supertrunfo.console.reader import InputReader
from supertrunfo.core.attributes import Attribute, parse_attribute
from supertrunfo.features.card import Card
from supertrunfo.features.metrics import compute_metrics

logger = logging.getLogger(__name__)

OUT_OF_RANGE_MESSAGE = "Invalid attribute. Choose between 1 and 6."
ALREADY_CHOSEN_MESSAGE = "Attribute already chosen. Select another."


def build_card(reader: InputReader, title: str, config: Optional[Config] = None) -> Card:
    """
    Print a section header, read the raw fields in entry order, and return the
    card with its derived metrics already computed.

    Order: region letter, code, city name, population, area, GDP, tourist attractions.
    """
    cfg = config or reader.config
    reader.write("\n" + format_header(title) + "\n")
    region = reader.read_char("State (A-H): ")
    code = reader.read_token("Card code (e.g. A01): ", cfg.code_max_len, cfg.default_code)
    name = reader.read_line("City name: ", cfg.name_max_len)
    population = reader.read_unsigned("Population: ")
    area = reader.read_float("Area (km²): ")
    gdp = reader.read_float("GDP (in billions): ")
    landmarks = reader.read_int("Number of tourist attractions: ")
    card = Card(
        region_letter=region,
        code=code,
        name=name,
        population=population,
        area_km2=area,
        gdp_billions=gdp,
        landmark_count=landmarks,
    )
    compute_metrics(card, cfg)
    logger.info("Registered card %s (%s)", card.code, card.name)
    return card


def choose_attribute(reader: InputReader, prompt: str, different_from: Optional[Attribute] = None) -> Attribute:
    """Read a menu number until it is within 1-6 and differs from different_from."""
    while True:
        value = reader.read_int(prompt)
        try:
            attr = parse_attribute(value)
        except ValueError:
            reader.write(OUT_OF_RANGE_MESSAGE + "\n")
            continue
        if attr == different_from:
            reader.write(ALREADY_CHOSEN_MESSAGE + "\n")
            continue
        return attr
