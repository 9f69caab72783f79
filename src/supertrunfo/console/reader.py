"""
Prompted scalar input with retry-until-valid semantics.

Input is consumed one line at a time. Numeric reads parse the first
whitespace-delimited token of a line, which must parse completely ("12xy" is
rejected); the rest of the line is discarded. Blank lines are skipped without
a message. Each malformed token prints INVALID_VALUE_MESSAGE exactly once and
the read continues with the next line.
"""

import logging
import sys
from typing import Callable, Iterator, Optional, TextIO, TypeVar

from supertrunfo.config import Config, DEFAULT_CONFIG
from supertrunfo.errors import InputExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVALID_VALUE_MESSAGE = "Invalid value. Try again: "

# Accepted ranges: unsigned long for counts of people, int for small counts
UNSIGNED_MAX = 2**64 - 1
INT_MIN, INT_MAX = -(2**31), 2**31 - 1


def parse_unsigned(token: str) -> int:
    """Non-negative base-10 integer up to UNSIGNED_MAX; ValueError otherwise."""
    if not token.isdigit():
        raise ValueError(f"not an unsigned integer: {token!r}")
    value = int(token)
    if value > UNSIGNED_MAX:
        raise ValueError(f"unsigned integer out of range: {token!r}")
    return value


def parse_int(token: str) -> int:
    sign, digits = (token[0], token[1:]) if token[:1] in ("+", "-") else ("", token)
    if not digits.isdigit():
        raise ValueError(f"not an integer: {token!r}")
    value = int(sign + digits)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {token!r}")
    return value


def parse_float(token: str) -> float:
    if "_" in token:
        raise ValueError(f"not a number: {token!r}")
    return float(token)


class InputReader:
    """Reads prompted values from a text stream, writing prompts to out."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        out: Optional[TextIO] = None,
        config: Optional[Config] = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self.out = out if out is not None else sys.stdout
        self.config = config or DEFAULT_CONFIG

    def write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _next_line(self) -> Optional[str]:
        """Next raw line without its newline, or None at end of input."""
        line = self.stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _tokens(self) -> Iterator[str]:
        """First token of each non-blank line until end of input."""
        while True:
            line = self._next_line()
            if line is None:
                return
            parts = line.split()
            if parts:
                yield parts[0]

    def read_line(self, prompt: str, max_len: Optional[int] = None) -> str:
        """Whole line (trailing newline stripped, cut to max_len); "" at end of input."""
        self.write(prompt)
        line = self._next_line()
        if line is None:
            logger.debug("End of input at %r; using empty text", prompt)
            return ""
        return line if max_len is None else line[:max_len]

    def read_token(self, prompt: str, max_len: int, default: str) -> str:
        """First token, cut to max_len characters; default at end of input."""
        self.write(prompt)
        token = next(self._tokens(), None)
        if token is None:
            logger.debug("End of input at %r; using default %r", prompt, default)
            return default
        return token[:max_len]

    def read_char(self, prompt: str) -> str:
        """First non-whitespace character; config.default_region at end of input."""
        return self.read_token(prompt, 1, self.config.default_region)

    def parse_or_retry(self, prompt: str, parse: Callable[[str], T]) -> T:
        """
        Print prompt, then parse tokens until one succeeds. parse raises ValueError
        for a malformed token. Raises InputExhaustedError if input ends first.
        """
        self.write(prompt)
        for token in self._tokens():
            try:
                return parse(token)
            except ValueError:
                logger.debug("Rejected %r for %r", token, prompt)
                self.write(INVALID_VALUE_MESSAGE)
        logger.warning("Input ended while reading %r", prompt)
        raise InputExhaustedError(f"input ended while reading {prompt.strip()!r}", prompt=prompt)

    def read_unsigned(self, prompt: str) -> int:
        return self.parse_or_retry(prompt, parse_unsigned)

    def read_float(self, prompt: str) -> float:
        return self.parse_or_retry(prompt, parse_float)

    def read_int(self, prompt: str) -> int:
        return self.parse_or_retry(prompt, parse_int)
