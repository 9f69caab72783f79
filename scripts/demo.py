"""
Run one scripted match and print the transcript.
Usage:
  python scripts/demo.py
  python scripts/demo.py --breakdown
"""

import argparse
import io
import logging

from supertrunfo.console.reader import InputReader
from supertrunfo.game import play

DEMO_INPUT = [
    "A", "A01", "São Paulo", "12325000", "1521.11", "699.28", "50",
    "B", "B02", "Rio de Janeiro", "6748000", "1200.25", "300.50", "30",
    "5", "6",
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Super Trunfo scripted demo")
    parser.add_argument("--breakdown", action="store_true", help="Print the all-attribute table")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")

    reader = InputReader(io.StringIO("\n".join(DEMO_INPUT) + "\n"))
    play(reader, breakdown=args.breakdown)


if __name__ == "__main__":
    main()
