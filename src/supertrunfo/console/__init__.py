"""Console layer: input reading, card building and report formatting."""

from supertrunfo.console.builder import build_card, choose_attribute
from supertrunfo.console.reader import INVALID_VALUE_MESSAGE, InputReader

__all__ = ["INVALID_VALUE_MESSAGE", "InputReader", "build_card", "choose_attribute"]
